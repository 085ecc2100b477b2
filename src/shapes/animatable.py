"""
どこで: `shapes.animatable`。
何を: アニメーション可能パラメータの線形補間（`lerp` / `AnimatablePair` / `interpolate`）。
なぜ: 補間ドライバ（時間管理は外部）が、形状の種類を知らずに 2 状態間の中間形状を得られるようにするため。
"""

from __future__ import annotations

from typing import Any, NamedTuple, TypeVar

from common import param_utils

from .base import AnimatableShape

S = TypeVar("S", bound=AnimatableShape)


class AnimatablePair(NamedTuple):
    """2 成分の補間値（例: checkerboard の `(rows, columns)`）。"""

    first: float
    second: float

    def __add__(self, other: object) -> "AnimatablePair":  # type: ignore[override]
        if not isinstance(other, AnimatablePair):
            return NotImplemented
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other: "AnimatablePair") -> "AnimatablePair":
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def __mul__(self, k: object) -> "AnimatablePair":  # type: ignore[override]
        if not isinstance(k, (int, float)):
            return NotImplemented
        return AnimatablePair(self.first * k, self.second * k)

    __rmul__ = __mul__


def lerp(a: Any, b: Any, t: float) -> Any:
    """実数または `AnimatablePair` の線形補間。"""
    t = param_utils.ensure_finite("t", t)
    if isinstance(a, AnimatablePair) and isinstance(b, AnimatablePair):
        return AnimatablePair(
            param_utils.lerp(a.first, b.first, t), param_utils.lerp(a.second, b.second, t)
        )
    return param_utils.lerp(float(a), float(b), t)


def interpolate(a: S, b: S, t: float) -> S:
    """同種シェイプ `a`→`b` の `t` における中間シェイプを返す（`t=0` で a、`t=1` で b の値）。

    例外:
        TypeError: 種類が異なる、またはアニメーション不可のシェイプの場合。
    """
    if type(a) is not type(b):
        raise TypeError(f"異なる種類のシェイプは補間できません: {type(a).__name__} / {type(b).__name__}")
    if not isinstance(a, AnimatableShape):
        raise TypeError(f"{type(a).__name__} はアニメーション可能ではありません")
    return a.with_animatable_data(lerp(a.animatable_data, b.animatable_data, t))  # type: ignore[return-value]


__all__ = ["AnimatablePair", "lerp", "interpolate"]
