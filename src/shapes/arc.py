from __future__ import annotations

from dataclasses import dataclass, replace

from common.errors import InvalidParameterError
from common.param_utils import ensure_finite, ensure_non_negative
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape


@dataclass(frozen=True)
class Arc:
    """rect 中心を中心とする円弧（インセット可能）。

    半径は `rect.width / 2 - inset_amount`。インセットは中心を動かさず半径だけを縮める。
    """

    start_angle: float
    end_angle: float
    clockwise: bool
    inset_amount: float = 0.0

    def inset(self, amount: float) -> "Arc":
        """インセット量を加算したコピーを返す。"""
        return replace(self, inset_amount=self.inset_amount + ensure_finite("amount", amount))

    def radius(self, rect: Rect) -> float:
        inset = ensure_non_negative("inset_amount", self.inset_amount)
        r = rect.width * 0.5 - inset
        if r < 0.0:
            raise InvalidParameterError(
                "inset_amount", self.inset_amount, f"exceeds half of rect width ({rect.width * 0.5:g})"
            )
        return r

    def path(self, rect: Rect) -> Path:
        start = ensure_finite("start_angle", self.start_angle)
        end = ensure_finite("end_angle", self.end_angle)
        b = PathBuilder()
        b.add_arc(rect.mid_x, rect.mid_y, self.radius(rect), start, end, bool(self.clockwise))
        return b.build()


@shape("arc")
def generate_arc(
    start_angle: float, end_angle: float, clockwise: bool, inset_amount: float, rect: Rect
) -> Path:
    """円弧を生成します。

    Parameters
    ----------
    start_angle, end_angle : float
        開始/終了角（ラジアン、+x から +y 方向が正）。
    clockwise : bool
        True で角度減少方向、False で角度増加方向に掃引。
    inset_amount : float
        半径の縮小量（0 以上、`rect.width / 2` 以下）。
    rect : Rect
        配置先の枠。
    """
    return Arc(start_angle, end_angle, clockwise, inset_amount).path(rect)


generate_arc.__param_meta__ = {
    "start_angle": {"type": "number", "min": -6.283185307179586, "max": 6.283185307179586},
    "end_angle": {"type": "number", "min": -6.283185307179586, "max": 6.283185307179586},
    "clockwise": {"type": "bool"},
    "inset_amount": {"type": "number", "min": 0.0, "max": 100.0},
}
