import math

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from engine.core.affine import AffineTransform
from engine.core.flatten import flatten
from engine.core.path import ArcTo, PathBuilder
from engine.core.rect import Rect
from shapes.checkerboard import generate_checkerboard
from shapes.spirograph import Spirograph, gcd

angles = st.floats(-4 * math.pi, 4 * math.pi, allow_nan=False)


@given(start=angles, end=angles, clockwise=st.booleans())
def test_arc_sweep_sign_and_bound(start, end, clockwise):
    sweep = ArcTo(0.0, 0.0, 1.0, start, end, clockwise).sweep
    assert abs(sweep) <= 2 * math.pi
    if clockwise:
        assert sweep <= 0.0
    else:
        assert sweep >= 0.0


@given(
    rows=st.floats(1, 12, allow_nan=False),
    columns=st.floats(1, 12, allow_nan=False),
)
def test_checkerboard_cell_count_formula(rows, columns):
    r, c = int(rows), int(columns)
    p = generate_checkerboard(rows, columns, Rect(120, 120))
    assert p.n_subpaths == (r * c + 1) // 2


@given(inner=st.integers(1, 150), outer=st.integers(1, 150))
def test_gcd_divides_both(inner, outer):
    g = gcd(inner, outer)
    assert inner % g == 0 and outer % g == 0
    assert g == math.gcd(inner, outer)


@settings(max_examples=25, deadline=None)
@given(
    inner=st.integers(10, 150),
    outer=st.integers(10, 150),
    distance=st.integers(0, 150),
)
def test_spirograph_stays_within_reach(inner, outer, distance):
    rect = Rect(300, 300)
    pts = Spirograph(inner, outer, distance, 0.25).points(rect)
    r = np.linalg.norm(pts - np.array(rect.center), axis=1)
    assert r.max() <= abs(inner - outer) + distance + 1e-9


@given(
    dx1=st.floats(-10, 10), dy1=st.floats(-10, 10),
    dx2=st.floats(-10, 10), dy2=st.floats(-10, 10),
)
def test_translate_composition(dx1, dy1, dx2, dy2):
    p = PathBuilder().add_rect(0, 0, 3, 2).build()
    left = flatten(p.translate(dx1, dy1).translate(dx2, dy2))
    right = flatten(p.translate(dx1 + dx2, dy1 + dy2))
    np.testing.assert_allclose(left.coords, right.coords, rtol=1e-9, atol=1e-9)
    np.testing.assert_array_equal(left.offsets, right.offsets)


@given(angle=angles, scale=st.floats(0.1, 10), tx=st.floats(-50, 50), ty=st.floats(-50, 50))
def test_similarity_transform_preserves_arc_radius_ratio(angle, scale, tx, ty):
    t = (
        AffineTransform.rotation(angle)
        .concatenating(AffineTransform.scaling(scale))
        .concatenating(AffineTransform.translation(tx, ty))
    )
    p = PathBuilder().add_arc(1.0, 2.0, 3.0, 0.0, math.pi, False).build()
    q = p.transformed(t)
    arc = q[1]
    assert math.isclose(arc.radius, 3.0 * scale, rel_tol=1e-9)
    # 変換後の始点が MoveTo と一致
    np.testing.assert_allclose(arc.start_point, (q[0].x, q[0].y), atol=1e-7)
