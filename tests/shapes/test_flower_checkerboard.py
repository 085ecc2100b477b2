from __future__ import annotations

import math

import numpy as np
import pytest

from common import settings
from common.errors import InvalidParameterError
from engine.core.flatten import flatten
from engine.core.path import ClosePath, CurveTo, MoveTo
from engine.core.rect import Rect
from shapes.checkerboard import Checkerboard, generate_checkerboard
from shapes.flower import PETAL_COUNT, generate_flower
from shapes.registry import render_hints


@pytest.mark.smoke
def test_flower_has_sixteen_closed_ellipse_petals(rect300: Rect) -> None:
    p = generate_flower(-20.0, 100.0, rect300)
    subs = p.subpaths()
    assert len(subs) == PETAL_COUNT == 16
    for sub in subs:
        assert isinstance(sub[0], MoveTo)
        assert sub.count(CurveTo) == 4
        assert isinstance(sub[-1], ClosePath)
    assert p.is_closed


def test_flower_petal_placement(rect300: Rect) -> None:
    p = generate_flower(-20.0, 100.0, rect300)
    subs = p.subpaths()
    # 花弁 0: 楕円 (x=-20, w=100, h=150) の右中央 (80, 75) を中心 (150, 150) へ
    first = subs[0][0]
    assert (first.x, first.y) == (230.0, 225.0)
    # 花弁 4: π/2 回転で (80, 75) -> (-75, 80)
    fifth = subs[4][0]
    assert math.isclose(fifth.x, 75.0, abs_tol=1e-9)
    assert math.isclose(fifth.y, 230.0, abs_tol=1e-9)


def test_flower_petal_length_follows_rect_width() -> None:
    # 花弁楕円の高さは rect.width / 2 なので、花全体は中心から概ね rect.width/2 以内に収まる
    rect = Rect(400.0, 1000.0)
    g = flatten(generate_flower(0.0, 100.0, rect))
    r = np.linalg.norm(g.coords - np.array(rect.center), axis=1)
    assert r.max() <= math.hypot(100.0, 200.0) + 1e-6


def test_flower_requests_even_odd_fill() -> None:
    assert render_hints("flower") == {"fill_rule": "evenodd"}
    assert render_hints("triangle") == {}


def test_flower_rejects_negative_width(rect300: Rect) -> None:
    with pytest.raises(InvalidParameterError):
        generate_flower(0.0, -1.0, rect300)
    with pytest.raises(InvalidParameterError):
        generate_flower(math.inf, 10.0, rect300)


@pytest.mark.parametrize(
    "rows,columns,expected",
    [(4, 4, 8), (8, 16, 64), (1, 1, 1), (3, 3, 5), (5.7, 4, 10)],
)
def test_checkerboard_cell_count(rows: float, columns: float, expected: int, rect300: Rect) -> None:
    p = generate_checkerboard(rows, columns, rect300)
    assert p.n_subpaths == expected
    assert p.is_closed


def test_checkerboard_cells_are_laid_out_from_rect_origin(rect_offset: Rect) -> None:
    p = generate_checkerboard(4, 4, rect_offset)
    subs = p.subpaths()
    # セル寸法 50 x 25、先頭は (row=0, col=0)
    assert subs[0][0] == MoveTo(10.0, 20.0)
    assert subs[1][0] == MoveTo(110.0, 20.0)
    # 行 1 は列 1 から始まる
    assert subs[2][0] == MoveTo(60.0, 45.0)
    g = flatten(p)
    assert g.coords[:, 0].min() == 10.0 and g.coords[:, 0].max() == 210.0


def test_checkerboard_fractional_rows_truncate(rect300: Rect) -> None:
    assert generate_checkerboard(5.7, 4.2, rect300) == generate_checkerboard(5, 4, rect300)


@pytest.mark.parametrize("rows,columns", [(0, 4), (0.99, 4), (4, -2), (math.nan, 4)])
def test_checkerboard_invalid_counts(rows: float, columns: float, rect300: Rect) -> None:
    with pytest.raises(InvalidParameterError):
        generate_checkerboard(rows, columns, rect300)


def test_checkerboard_animatable_data_roundtrip() -> None:
    c = Checkerboard(4, 8)
    assert tuple(c.animatable_data) == (4.0, 8.0)
    assert c.with_animatable_data(c.animatable_data) == Checkerboard(4.0, 8.0)


def test_checkerboard_point_limit_guard(reload_settings: pytest.MonkeyPatch, rect300: Rect) -> None:
    with pytest.raises(InvalidParameterError) as ei:
        generate_checkerboard(1e300, 1e300, rect300)
    assert ei.value.name == "rows"
    reload_settings.setenv("SPX_MAX_PATH_POINTS", "1000")
    settings.reload_from_env()
    with pytest.raises(InvalidParameterError):
        generate_checkerboard(30, 30, rect300)
    assert generate_checkerboard(10, 10, rect300).n_subpaths == 50
