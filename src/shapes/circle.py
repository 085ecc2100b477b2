"""
circle / rings シェイプ

- circle: rect（インセット後）に内接する円。インセット可能。
- rings: 1 ずつインセットした円を `steps` 本重ねた同心円群（色相を周回させるリング表示の幾何部分）。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from common.errors import InvalidParameterError
from common import settings
from common.param_utils import ensure_finite, ensure_non_negative, ensure_point_budget, truncate_count
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle:
    inset_amount: float = 0.0

    def inset(self, amount: float) -> "Circle":
        return replace(self, inset_amount=self.inset_amount + ensure_finite("amount", amount))

    def path(self, rect: Rect) -> Path:
        inset = ensure_non_negative("inset_amount", self.inset_amount)
        outer = min(rect.width, rect.height) * 0.5
        if inset > outer:
            raise InvalidParameterError("inset_amount", self.inset_amount, f"exceeds radius ({outer:g})")
        r = outer - inset
        b = PathBuilder()
        b.add_arc(rect.mid_x, rect.mid_y, r, 0.0, 2.0 * math.pi, False)
        return b.close().build()


@dataclass(frozen=True)
class Rings:
    steps: float = 100

    def path(self, rect: Rect) -> Path:
        steps = truncate_count("steps", self.steps)
        outer = min(rect.width, rect.height) * 0.5
        if steps - 1 > outer:
            raise InvalidParameterError("steps", self.steps, f"innermost ring would pass the center (radius {outer:g})")
        # 円 1 本は平坦化後 ARC_SEGMENTS_PER_TURN + 2 頂点
        ensure_point_budget("steps", self.steps, float(steps) * (settings.get().ARC_SEGMENTS_PER_TURN + 2))
        b = PathBuilder()
        for value in range(steps):
            b.add_path(Circle(inset_amount=float(value)).path(rect))
        logger.debug("rings: %d circles", steps)
        return b.build()


@shape("circle")
def generate_circle(inset_amount: float, rect: Rect) -> Path:
    """rect に内接する円（`inset_amount` だけ半径を縮める）を生成します。"""
    return Circle(inset_amount).path(rect)


@shape("rings")
def generate_rings(steps: int, rect: Rect) -> Path:
    """同心円を `steps` 本生成します（i 本目は半径を i だけ縮めた円）。"""
    return Rings(steps).path(rect)


generate_circle.__param_meta__ = {
    "inset_amount": {"type": "number", "min": 0.0, "max": 150.0},
}
generate_rings.__param_meta__ = {
    "steps": {"type": "integer", "min": 1, "max": 150, "step": 1},
}
