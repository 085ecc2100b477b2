"""
シェイプの共通インタフェース

概要:
- 各シェイプは「パラメータを保持する frozen dataclass」で、`path(rect) -> Path` を実装する。
- 継承は使わず、`typing.Protocol` による構造的部分型で多相性を表す。

設計意図:
- 生成は純関数（副作用なし）。同一パラメータ・同一 rect からは要素単位で等しい Path が得られる。
- パラメータの状態は呼び出し側（UI など）が保持し、値が変わるたびに `path(rect)` を呼び直す。
- 「インセット可能」「アニメーション可能」は追加のプロトコルとして表す。

公開 API:
- `Shape.path(rect) -> Path`
- `InsettableShape.inset(amount) -> InsettableShape`（インセット量を加算したコピー）
- `AnimatableShape.animatable_data` / `with_animatable_data(value)`
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from engine.core.path import Path
from engine.core.rect import Rect


@runtime_checkable
class Shape(Protocol):
    def path(self, rect: Rect) -> Path: ...


@runtime_checkable
class InsettableShape(Shape, Protocol):
    """境界線を内側へ寄せられるシェイプ（strokeBorder などで使う）。"""

    def inset(self, amount: float) -> "InsettableShape": ...


@runtime_checkable
class AnimatableShape(Shape, Protocol):
    """線形補間可能なパラメータを持つシェイプ。

    `animatable_data` は実数、または `shapes.animatable.AnimatablePair`。
    整数として扱うパラメータも実数のまま保持し、生成時にだけ切り捨てる。
    """

    @property
    def animatable_data(self) -> Any: ...

    def with_animatable_data(self, value: Any) -> "AnimatableShape": ...


__all__ = ["Shape", "InsettableShape", "AnimatableShape"]
