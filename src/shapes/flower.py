from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from common.param_utils import ensure_finite, ensure_non_negative
from engine.core.affine import AffineTransform
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape

PETAL_COUNT = 16


@dataclass(frozen=True)
class Flower:
    """楕円の花弁を π/8 ずつ回転させて 16 枚重ねた花。

    重なり部分を抜くには描画側で even-odd 塗りが必要（`generate_flower.__render_hints__`）。
    """

    petal_offset: float = -20.0
    petal_width: float = 100.0

    def path(self, rect: Rect) -> Path:
        offset = ensure_finite("petal_offset", self.petal_offset)
        width = ensure_non_negative("petal_width", self.petal_width)

        petal = PathBuilder().add_ellipse(offset, 0.0, width, rect.width * 0.5).build()
        to_center = AffineTransform.translation(rect.mid_x, rect.mid_y)

        b = PathBuilder()
        # 0 から 2π 未満まで π/8 刻み（浮動小数の累積誤差を避けて整数で数える）
        for angle in np.arange(PETAL_COUNT) * (math.pi / 8.0):
            position = AffineTransform.rotation(float(angle)).concatenating(to_center)
            b.add_path(petal.transformed(position))
        return b.build()


@shape("flower")
def generate_flower(petal_offset: float, petal_width: float, rect: Rect) -> Path:
    """16 枚の楕円花弁からなる花を生成します。

    Parameters
    ----------
    petal_offset : float
        花弁楕円の x 方向オフセット。UI の目安 [-40, 40]。
    petal_width : float
        花弁楕円の幅。0 以上、UI の目安 [0, 100]。
    rect : Rect
        配置先の枠。花弁の長さは `rect.width * 0.5`。
    """
    return Flower(petal_offset, petal_width).path(rect)


generate_flower.__param_meta__ = {
    "petal_offset": {"type": "number", "min": -40.0, "max": 40.0},
    "petal_width": {"type": "number", "min": 0.0, "max": 100.0},
}
generate_flower.__render_hints__ = {"fill_rule": "evenodd"}
