from __future__ import annotations

import math

import numpy as np
import pytest

from common.errors import InvalidParameterError
from engine.core.affine import AffineTransform
from engine.core.rect import Rect


def test_rotation_then_translation_order() -> None:
    t = AffineTransform.rotation(math.pi / 2).concatenating(AffineTransform.translation(10, 0))
    x, y = t.apply(1.0, 0.0)
    # (1,0) を 90° 回して (0,1)、その後 x に +10
    assert math.isclose(x, 10.0, abs_tol=1e-12)
    assert math.isclose(y, 1.0, abs_tol=1e-12)


def test_apply_points_matches_apply() -> None:
    t = AffineTransform.rotation(0.3).concatenating(AffineTransform.scaling(2.0))
    pts = np.array([[1.0, 2.0], [-3.0, 0.5]])
    out = t.apply_points(pts)
    for (x, y), row in zip(pts, out):
        np.testing.assert_allclose(t.apply(x, y), row, atol=1e-12)
    assert t.apply_points(np.empty((0, 2))).shape == (0, 2)


def test_similarity_properties() -> None:
    t = AffineTransform.rotation(0.7).concatenating(AffineTransform.scaling(3.0))
    assert t.is_similarity
    assert math.isclose(t.rotation_angle, 0.7)
    assert math.isclose(t.scale_factor, 3.0)
    assert not AffineTransform.scaling(1.0, 2.0).is_similarity
    assert not AffineTransform.scaling(-1.0, 1.0).is_similarity
    assert AffineTransform.identity().apply(4, 5) == (4.0, 5.0)


def test_rect_accessors(rect_offset: Rect) -> None:
    r = rect_offset
    assert (r.min_x, r.mid_x, r.max_x) == (10.0, 110.0, 210.0)
    assert (r.min_y, r.mid_y, r.max_y) == (20.0, 70.0, 120.0)
    assert r.center == (110.0, 70.0)


def test_rect_inset_keeps_center() -> None:
    r = Rect(100, 60).inset(10)
    assert (r.width, r.height) == (80.0, 40.0)
    assert r.center == (50.0, 30.0)
    collapsed = Rect(10, 10).inset(20)
    assert (collapsed.width, collapsed.height) == (0.0, 0.0)
    assert collapsed.center == (5.0, 5.0)


@pytest.mark.parametrize("w,h", [(-1, 10), (10, float("nan")), (float("inf"), 1)])
def test_rect_rejects_invalid_size(w: float, h: float) -> None:
    with pytest.raises(InvalidParameterError):
        Rect(w, h)


def test_rect_coerce() -> None:
    assert Rect.coerce((300, 200)) == Rect(300, 200)
    assert Rect.coerce([1, 2, 30, 40]) == Rect(30, 40, 1, 2)
    r = Rect(5, 5)
    assert Rect.coerce(r) is r
    with pytest.raises(InvalidParameterError):
        Rect.coerce(None)
    with pytest.raises(InvalidParameterError):
        Rect.coerce((1, 2, 3))
