"""
spirograph シェイプ（内転/外転トロコイド）

- 半径 `inner_radius`/`outer_radius` と描画点までの距離 `distance` から曲線を生成する。
- 周期は `ceil(2π * outer / gcd(inner, outer))`、これに `amount` を掛けた角度まで描く。
- 角度の刻みは 0.01 rad 固定（滑らかさはこの刻みで決まる）。

主なパラメータ:
- inner_radius / outer_radius: 正の整数（実数は 0 方向へ切り捨て）。
- distance: 0 以上の整数。
- amount: 描画割合（0 以上、1 で 1 周期）。

特性/注意:
- inner == outer のとき差が 0 となり、全点が中心から `distance` だけ右の 1 点に重なる（退化、例外ではない）。
- 点列計算は Numba 版と NumPy 版を持ち、`settings.USE_NUMBA` で切り替える。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from numba import njit

from common import settings
from common.param_utils import ensure_non_negative, ensure_point_budget, truncate_count
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape

logger = logging.getLogger(__name__)

THETA_STEP = 0.01


def gcd(a: int, b: int) -> int:
    """ユークリッドの互除法（剰余の入れ替えを余りが 0 になるまで繰り返す）。"""
    while b != 0:
        a, b = b, a % b
    return a


@njit(fastmath=False, cache=True)
def _spirograph_points_numba(
    difference: float, outer: float, distance: float, count: int, cx: float, cy: float
) -> np.ndarray:
    out = np.empty((count, 2), dtype=np.float64)
    ratio = difference / outer
    for i in range(count):
        theta = i * THETA_STEP
        out[i, 0] = difference * np.cos(theta) + distance * np.cos(ratio * theta) + cx
        out[i, 1] = difference * np.sin(theta) - distance * np.sin(ratio * theta) + cy
    return out


def _spirograph_points_numpy(
    difference: float, outer: float, distance: float, count: int, cx: float, cy: float
) -> np.ndarray:
    theta = np.arange(count, dtype=np.float64) * THETA_STEP
    ratio = difference / outer
    x = difference * np.cos(theta) + distance * np.cos(ratio * theta) + cx
    y = difference * np.sin(theta) - distance * np.sin(ratio * theta) + cy
    return np.stack([x, y], axis=1)


@dataclass(frozen=True)
class Spirograph:
    inner_radius: float = 125
    outer_radius: float = 75
    distance: float = 25
    amount: float = 1.0

    def point_count(self) -> int:
        """生成される点数（theta = 0, 0.01, ... , end_point）。"""
        inner = truncate_count("inner_radius", self.inner_radius)
        outer = truncate_count("outer_radius", self.outer_radius)
        amount = ensure_non_negative("amount", self.amount)
        divisor = gcd(inner, outer)
        end_point = math.ceil(2.0 * math.pi * outer / divisor) * amount
        steps = end_point / THETA_STEP
        # 巨大な amount では steps が inf になるので整数化の前に上限を確認する
        ensure_point_budget("amount", self.amount, steps + 1.0)
        # 浮動小数の誤差で終端を取りこぼさないよう微小量を足す
        return int(math.floor(steps + 1e-9)) + 1

    def points(self, rect: Rect) -> np.ndarray:
        """曲線上の点列 `(N, 2)`（rect 中心へ平行移動済み）。"""
        inner = truncate_count("inner_radius", self.inner_radius)
        outer = truncate_count("outer_radius", self.outer_radius)
        distance = truncate_count("distance", self.distance, min_value=0)
        count = self.point_count()
        cfg = settings.get()

        difference = float(inner) - float(outer)
        if difference == 0.0:
            logger.debug("spirograph: inner == outer (%d); degenerate single-point path", inner)

        kernel = _spirograph_points_numba if cfg.USE_NUMBA else _spirograph_points_numpy
        return kernel(difference, float(outer), float(distance), count, rect.mid_x, rect.mid_y)

    def path(self, rect: Rect) -> Path:
        pts = self.points(rect)
        b = PathBuilder()
        b.move_to(pts[0, 0], pts[0, 1])
        for x, y in pts[1:].tolist():
            b.line_to(x, y)
        logger.debug("spirograph: %d points", pts.shape[0])
        return b.build()


@shape("spirograph")
def generate_spirograph(
    inner_radius: int, outer_radius: int, distance: int, amount: float, rect: Rect
) -> Path:
    """スピログラフ曲線の Path を生成します。

    Parameters
    ----------
    inner_radius : int
        固定円の半径。UI の目安 [10, 150]。
    outer_radius : int
        転がる円の半径。UI の目安 [10, 150]。
    distance : int
        転がる円の中心から描画点までの距離。UI の目安 [1, 150]。
    amount : float
        1 周期に対する描画割合。UI の目安 [0, 1]（1 超も可）。
    rect : Rect
        配置先の枠。曲線は rect 中心を原点に描かれる。

    Raises
    ------
    InvalidParameterError
        半径が正の整数に切り捨てられない、`distance`/`amount` が負、または点数が上限を超える場合。
    """
    return Spirograph(inner_radius, outer_radius, distance, amount).path(rect)


generate_spirograph.__param_meta__ = {
    "inner_radius": {"type": "integer", "min": 10, "max": 150, "step": 1},
    "outer_radius": {"type": "integer", "min": 10, "max": 150, "step": 1},
    "distance": {"type": "integer", "min": 1, "max": 150, "step": 1},
    "amount": {"type": "number", "min": 0.0, "max": 1.0},
}
