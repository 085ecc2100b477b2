"""
どこで: `engine.core.rect`。
何を: 形状を配置する枠（BoundingRect）`Rect`。
なぜ: 全 shape が中心/角を基準に正規化するため、min/mid/max の取り出しを一箇所に集約する。

座標系は y 下向き（画面座標）。`min_y` が上辺、`max_y` が下辺。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.errors import InvalidParameterError
from common.param_utils import ensure_finite, ensure_non_negative
from common.types import Vec2


@dataclass(frozen=True)
class Rect:
    """原点 `(x, y)` とサイズ `(width, height)` を持つ不変の矩形。

    生成時に値を検証する（幅/高さは有限かつ 0 以上、原点は有限）。
    """

    width: float
    height: float
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", ensure_non_negative("rect.width", self.width))
        object.__setattr__(self, "height", ensure_non_negative("rect.height", self.height))
        object.__setattr__(self, "x", ensure_finite("rect.x", self.x))
        object.__setattr__(self, "y", ensure_finite("rect.y", self.y))

    @classmethod
    def coerce(cls, value: object) -> "Rect":
        """`Rect`、`(width, height)`、`(x, y, width, height)` のいずれかから `Rect` を得る。

        Raises
        ------
        InvalidParameterError
            いずれの形式にも当てはまらない場合。
        """
        if isinstance(value, Rect):
            return value
        if isinstance(value, (tuple, list)):
            if len(value) == 2:
                return cls(value[0], value[1])
            if len(value) == 4:
                return cls(value[2], value[3], value[0], value[1])
        raise InvalidParameterError(
            "rect", value, "expected Rect, (width, height) or (x, y, width, height)"
        )

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height * 0.5

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return (self.mid_x, self.mid_y)

    def inset(self, amount: float) -> "Rect":
        """四辺を `amount` だけ内側へ寄せた矩形を返す。

        サイズは 0 未満にならない（潰れた場合は中心に集まる）。負値は外側へ広げる。
        """
        d = ensure_finite("amount", amount)
        w = max(0.0, self.width - 2.0 * d)
        h = max(0.0, self.height - 2.0 * d)
        return Rect(w, h, self.mid_x - w * 0.5, self.mid_y - h * 0.5)


__all__ = ["Rect"]
