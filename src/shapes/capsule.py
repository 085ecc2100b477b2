from __future__ import annotations

import math
from dataclasses import dataclass, replace

from common.errors import InvalidParameterError
from common.param_utils import ensure_finite, ensure_non_negative
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape

HALF_PI = math.pi * 0.5


@dataclass(frozen=True)
class Capsule:
    """角の半径を短辺の半分とした角丸矩形（インセット可能）。"""

    inset_amount: float = 0.0

    def inset(self, amount: float) -> "Capsule":
        return replace(self, inset_amount=self.inset_amount + ensure_finite("amount", amount))

    def path(self, rect: Rect) -> Path:
        inset = ensure_non_negative("inset_amount", self.inset_amount)
        if inset > min(rect.width, rect.height) * 0.5:
            raise InvalidParameterError("inset_amount", self.inset_amount, "exceeds half of the shorter side")
        r_ = rect.inset(inset)
        r = min(r_.width, r_.height) * 0.5

        # 上辺左から時計回り（y 下向きで角度増加方向）に 4 隅の 1/4 円弧をつなぐ
        b = PathBuilder()
        b.move_to(r_.min_x + r, r_.min_y)
        b.add_arc(r_.max_x - r, r_.min_y + r, r, -HALF_PI, 0.0, False)
        b.add_arc(r_.max_x - r, r_.max_y - r, r, 0.0, HALF_PI, False)
        b.add_arc(r_.min_x + r, r_.max_y - r, r, HALF_PI, math.pi, False)
        b.add_arc(r_.min_x + r, r_.min_y + r, r, math.pi, 3.0 * HALF_PI, False)
        return b.close().build()


@shape("capsule")
def generate_capsule(inset_amount: float, rect: Rect) -> Path:
    """カプセル形（両端が半円の角丸矩形）を生成します。"""
    return Capsule(inset_amount).path(rect)


generate_capsule.__param_meta__ = {
    "inset_amount": {"type": "number", "min": 0.0, "max": 100.0},
}
