from __future__ import annotations

from dataclasses import dataclass

from common.param_utils import ensure_finite, ensure_range
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape


@dataclass(frozen=True)
class Trapezoid:
    """下辺が rect 幅いっぱい、上辺の両端を `inset_amount` だけ内側へ寄せた台形。

    `inset_amount` は補間可能（台形の傾きを滑らかに変化させる）。
    """

    inset_amount: float = 50.0

    @property
    def animatable_data(self) -> float:
        return float(self.inset_amount)

    def with_animatable_data(self, value: float) -> "Trapezoid":
        return Trapezoid(inset_amount=ensure_finite("inset_amount", value))

    def path(self, rect: Rect) -> Path:
        inset = ensure_range("inset_amount", self.inset_amount, 0.0, rect.width * 0.5)
        b = PathBuilder()
        b.move_to(rect.min_x, rect.max_y)
        b.line_to(rect.min_x + inset, rect.min_y)
        b.line_to(rect.max_x - inset, rect.min_y)
        b.line_to(rect.max_x, rect.max_y)
        b.line_to(rect.min_x, rect.max_y)
        return b.close().build()


@shape("trapezoid")
def generate_trapezoid(inset_amount: float, rect: Rect) -> Path:
    """台形を生成します。

    引数:
        inset_amount: 上辺の内側オフセット（`[0, rect.width / 2]`）。
        rect: 配置先の枠。
    """
    return Trapezoid(inset_amount).path(rect)


generate_trapezoid.__param_meta__ = {
    "inset_amount": {"type": "number", "min": 0.0, "max": 100.0},
}
