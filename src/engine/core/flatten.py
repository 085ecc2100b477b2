"""
どこで: `engine.core.flatten`。
何を: `Path`（曲線・円弧を含むコマンド列）を直線だけの `Geometry` へ平坦化し、外接矩形を求める。
なぜ: ポリラインしか扱えない描画系や、数値検証（半径・外接矩形）で同一のサンプリング規則を使うため。

サンプリング規則:
- CurveTo: `settings.CURVE_SEGMENTS` 等分（パラメータ t 一様）。
- ArcTo: `ceil(|sweep| / 2π * settings.ARC_SEGMENTS_PER_TURN)` 等分（最低 1）。
- ClosePath: サブパスの始点を末尾へ追加して閉じる。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from common import settings
from common.types import Bounds
from engine.core.geometry import Geometry
from engine.core.path import TAU, ArcTo, ClosePath, CurveTo, LineTo, MoveTo, Path

logger = logging.getLogger(__name__)


def _sample_cubic(p0: np.ndarray, cmd: CurveTo, segments: int) -> np.ndarray:
    """始点 `p0` からの 3 次 Bézier を `segments` 分割し、始点を除いた点列を返す。"""
    t = np.linspace(0.0, 1.0, segments + 1)[1:, np.newaxis]
    p1 = np.array([cmd.c1x, cmd.c1y])
    p2 = np.array([cmd.c2x, cmd.c2y])
    p3 = np.array([cmd.x, cmd.y])
    mt = 1.0 - t
    return mt**3 * p0 + 3.0 * mt**2 * t * p1 + 3.0 * mt * t**2 * p2 + t**3 * p3


def _sample_arc(cmd: ArcTo, segments_per_turn: int) -> np.ndarray:
    """円弧を始点込みで `(K+1, 2)` にサンプリングする。"""
    sweep = cmd.sweep
    n = max(1, int(math.ceil(abs(sweep) / TAU * segments_per_turn)))
    angles = cmd.start_angle + sweep * np.linspace(0.0, 1.0, n + 1)
    return np.stack(
        [cmd.center_x + cmd.radius * np.cos(angles), cmd.center_y + cmd.radius * np.sin(angles)],
        axis=1,
    )


def flatten(path: Path) -> Geometry:
    """`Path` を `Geometry` へ平坦化する（純関数）。

    Parameters
    ----------
    path : Path
        入力コマンド列。

    Returns
    -------
    Geometry
        サブパスごとに 1 本のポリライン。閉じたサブパスは始点と終点が一致する。
    """
    cfg = settings.get()
    lines: list[np.ndarray] = []
    current: list[np.ndarray] = []
    start: np.ndarray | None = None

    def _flush() -> None:
        if current:
            lines.append(np.vstack(current))
            current.clear()

    for cmd in path:
        if isinstance(cmd, MoveTo):
            _flush()
            start = np.array([[cmd.x, cmd.y]], dtype=np.float64)
            current.append(start)
        elif isinstance(cmd, LineTo):
            current.append(np.array([[cmd.x, cmd.y]], dtype=np.float64))
        elif isinstance(cmd, CurveTo):
            p0 = current[-1][-1] if current else np.array([cmd.c1x, cmd.c1y])
            current.append(_sample_cubic(p0, cmd, cfg.CURVE_SEGMENTS))
        elif isinstance(cmd, ArcTo):
            pts = _sample_arc(cmd, cfg.ARC_SEGMENTS_PER_TURN)
            if not current:
                start = pts[:1]
                current.append(pts)
            else:
                # 始点は PathBuilder が既に到達済み
                current.append(pts[1:])
        elif isinstance(cmd, ClosePath):
            if current and start is not None:
                current.append(start.copy())
                _flush()
    _flush()

    g = Geometry.from_lines(lines)
    logger.debug("flatten: %d commands -> %d vertices / %d lines", len(path), g.n_vertices, len(g))
    return g


def bounds(path: Path) -> Bounds:
    """平坦化した頂点の外接矩形 `(min_x, min_y, max_x, max_y)`。

    Raises
    ------
    ValueError
        空の Path の場合。
    """
    g = flatten(path)
    if g.is_empty:
        raise ValueError("空の Path には外接矩形がありません")
    mn = g.coords.min(axis=0)
    mx = g.coords.max(axis=0)
    return (float(mn[0]), float(mn[1]), float(mx[0]), float(mx[1]))


__all__ = ["flatten", "bounds"]
