from __future__ import annotations

import math

import pytest

from common.errors import InvalidParameterError, ShapeError
from common.param_utils import (
    ensure_finite,
    ensure_non_negative,
    ensure_range,
    lerp,
    truncate_count,
)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "abc", None])
def test_ensure_finite_rejects_non_finite(bad: object) -> None:
    with pytest.raises(InvalidParameterError) as ei:
        ensure_finite("x", bad)  # type: ignore[arg-type]
    assert ei.value.name == "x"


def test_invalid_parameter_is_value_error_and_shape_error() -> None:
    err = InvalidParameterError("rows", 0, "must be >= 1")
    assert isinstance(err, ShapeError)
    assert isinstance(err, ValueError)
    assert "rows" in str(err) and "must be >= 1" in str(err)


def test_ensure_non_negative_and_range() -> None:
    assert ensure_non_negative("w", 0) == 0.0
    with pytest.raises(InvalidParameterError):
        ensure_non_negative("w", -0.5)
    assert ensure_range("i", 10, 0, 10) == 10.0
    with pytest.raises(InvalidParameterError):
        ensure_range("i", 10.5, 0, 10)


def test_truncate_count_truncates_toward_zero() -> None:
    assert truncate_count("rows", 5.7) == 5
    assert truncate_count("rows", 8) == 8
    assert truncate_count("distance", 0.9, min_value=0) == 0
    with pytest.raises(InvalidParameterError):
        truncate_count("rows", 0.99)
    with pytest.raises(InvalidParameterError):
        truncate_count("rows", -3)


def test_lerp_endpoints_and_midpoint() -> None:
    assert lerp(4.0, 8.0, 0.0) == 4.0
    assert lerp(4.0, 8.0, 1.0) == 8.0
    assert lerp(4.0, 8.0, 0.25) == 5.0
