"""
どこで: `engine.core` サブパッケージ。
何を: Path（描画コマンド列）・Rect・AffineTransform・平坦化済み Geometry を提供。
なぜ: 形状生成（shapes）と出力（export）が共有する最小の幾何基盤を分離するため。
"""

from .affine import AffineTransform
from .geometry import Geometry
from .path import ArcTo, ClosePath, CurveTo, LineTo, MoveTo, Path, PathBuilder
from .rect import Rect

__all__ = [
    "AffineTransform",
    "Geometry",
    "Path",
    "PathBuilder",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "ArcTo",
    "ClosePath",
    "Rect",
]
