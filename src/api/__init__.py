"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状 `G`・`generate`・装飾子 `shape`・`Path`/`Rect` などを再輸出。
なぜ: 利用者が単一名前空間から形状生成→書き出しまで完結できるようにするため。

Usage:
    from api import G, Rect, generate

    path = G.spirograph(Rect(300, 300), inner_radius=125, outer_radius=75, distance=25, amount=1.0)
    same = generate("spirograph", {"inner_radius": 125, "outer_radius": 75,
                                   "distance": 25, "amount": 1.0}, Rect(300, 300))
    assert path == same
"""

from engine.core.path import Path
from engine.core.rect import Rect
from shapes.registry import shape as shape  # ユーザー拡張用デコレータ

from .shapes import G, ShapesAPI, generate

__all__ = [
    "G",
    "generate",
    "shape",
    "ShapesAPI",
    "Path",
    "Rect",
]

__version__ = "2026.10"
