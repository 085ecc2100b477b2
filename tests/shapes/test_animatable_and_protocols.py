from __future__ import annotations

import math

import pytest

from common.errors import InvalidParameterError
from engine.core.rect import Rect
from shapes import (
    AnimatablePair,
    AnimatableShape,
    Arc,
    Capsule,
    Checkerboard,
    Circle,
    Flower,
    InsettableShape,
    Shape,
    Spirograph,
    Trapezoid,
    Triangle,
    interpolate,
    lerp,
)


def test_pair_arithmetic() -> None:
    a = AnimatablePair(1.0, 2.0)
    b = AnimatablePair(3.0, 5.0)
    assert a + b == AnimatablePair(4.0, 7.0)
    assert b - a == AnimatablePair(2.0, 3.0)
    assert a * 2 == AnimatablePair(2.0, 4.0)
    assert 0.5 * b == AnimatablePair(1.5, 2.5)


def test_lerp_scalars_and_pairs() -> None:
    assert lerp(0.0, 10.0, 0.3) == pytest.approx(3.0)
    mid = lerp(AnimatablePair(4.0, 4.0), AnimatablePair(8.0, 16.0), 0.5)
    assert mid == AnimatablePair(6.0, 10.0)
    with pytest.raises(InvalidParameterError):
        lerp(0.0, 1.0, math.nan)


def test_checkerboard_interpolation_truncates_when_drawn(rect300: Rect) -> None:
    a = Checkerboard(4, 4)
    b = Checkerboard(8, 4)
    mid = interpolate(a, b, 0.425)
    assert mid.rows == pytest.approx(5.7)
    # 5.7 行は 5 行として描かれる
    assert mid.path(rect300) == Checkerboard(5, 4).path(rect300)
    assert interpolate(a, b, 0.0) == Checkerboard(4.0, 4.0)
    assert interpolate(a, b, 1.0) == Checkerboard(8.0, 4.0)


def test_trapezoid_interpolation(rect300: Rect) -> None:
    mid = interpolate(Trapezoid(0.0), Trapezoid(100.0), 0.25)
    assert mid == Trapezoid(25.0)
    assert mid.path(rect300)[1].x == 25.0


def test_interpolate_rejects_mismatched_or_static_shapes() -> None:
    with pytest.raises(TypeError):
        interpolate(Checkerboard(), Trapezoid(), 0.5)  # type: ignore[type-var]
    with pytest.raises(TypeError):
        interpolate(Circle(), Circle(), 0.5)  # type: ignore[type-var]


@pytest.mark.parametrize(
    "obj,insettable,animatable",
    [
        (Spirograph(), False, False),
        (Flower(), False, False),
        (Checkerboard(), False, True),
        (Triangle(), False, False),
        (Arc(0.0, 1.0, False), True, False),
        (Trapezoid(), False, True),
        (Circle(), True, False),
        (Capsule(), True, False),
    ],
)
def test_protocol_conformance(obj: object, insettable: bool, animatable: bool) -> None:
    assert isinstance(obj, Shape)
    assert isinstance(obj, InsettableShape) is insettable
    assert isinstance(obj, AnimatableShape) is animatable


def test_shapes_are_immutable_values() -> None:
    c = Circle(5.0)
    with pytest.raises(AttributeError):
        c.inset_amount = 1.0  # type: ignore[misc]
    assert c.inset(1.0) == Circle(6.0)
    assert c == Circle(5.0)
