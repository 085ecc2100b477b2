"""
どこで: `common` のパラメータ検証ユーティリティ。
何を: 有限性/範囲チェック、整数パラメータの切り捨て、線形補間。
なぜ: 全 shape で同一の検証ポリシー（不正入力は例外、NaN/Inf を出力に流さない）を適用するため。

方針:
- 不正値はすべて `InvalidParameterError` を送出する（クランプはしない）。
- 「静止時は整数」のパラメータ（行数・半径など）は実数で受け取り、生成時に 0 方向へ切り捨てる。
"""

from __future__ import annotations

import math

from . import settings
from .errors import InvalidParameterError


def ensure_finite(name: str, value: float) -> float:
    """`value` を float 化し、NaN/Inf なら例外。"""
    try:
        f = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(name, value, "a real number is required") from e
    if not math.isfinite(f):
        raise InvalidParameterError(name, value, "must be finite")
    return f


def ensure_non_negative(name: str, value: float) -> float:
    f = ensure_finite(name, value)
    if f < 0.0:
        raise InvalidParameterError(name, value, "must be >= 0")
    return f


def ensure_range(name: str, value: float, lo: float, hi: float) -> float:
    """`lo <= value <= hi` を要求する（両端を含む）。"""
    f = ensure_finite(name, value)
    if f < lo or f > hi:
        raise InvalidParameterError(name, value, f"must be within [{lo:g}, {hi:g}]")
    return f


def truncate_count(name: str, value: float, *, min_value: int = 1) -> int:
    """実数を 0 方向へ切り捨てて整数化し、下限を検証する。

    アニメーション中の 5.7 行は 5 行として扱う。
    """
    f = ensure_finite(name, value)
    n = int(f)
    if n < min_value:
        raise InvalidParameterError(name, value, f"must truncate to an integer >= {min_value}")
    return n


def ensure_point_budget(name: str, value: object, count: float) -> None:
    """生成される頂点数 `count` が `settings.MAX_PATH_POINTS` 以内であることを要求する。

    `count` は整数化する前の見積もり（実数）でよい。非有限値も上限超過として扱う。
    """
    limit = settings.get().MAX_PATH_POINTS
    if not math.isfinite(count) or count > limit:
        raise InvalidParameterError(name, value, f"would produce {count:g} points (limit {limit})")


def lerp(a: float, b: float, t: float) -> float:
    """線形補間 `a + (b - a) * t`（t は外挿も許容）。"""
    return a + (b - a) * t


__all__ = [
    "ensure_finite",
    "ensure_non_negative",
    "ensure_range",
    "truncate_count",
    "ensure_point_budget",
    "lerp",
]
