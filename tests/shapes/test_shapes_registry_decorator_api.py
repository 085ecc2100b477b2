from __future__ import annotations

import pytest

from engine.core.path import Path
from shapes.registry import (
    get_registry,
    get_shape,
    is_shape_registered,
    list_shapes,
    param_meta,
    shape,
    unregister,
)

BUILTIN = [
    "arc",
    "capsule",
    "checkerboard",
    "circle",
    "flower",
    "rings",
    "spirograph",
    "trapezoid",
    "triangle",
]


def test_builtin_shapes_are_registered() -> None:
    names = list_shapes()
    for name in BUILTIN:
        assert name in names
    assert names == sorted(names)


def test_lookup_is_name_normalized() -> None:
    assert get_shape("Spirograph") is get_shape("spirograph")
    assert is_shape_registered("CheckerBoard") is False
    with pytest.raises(KeyError) as ei:
        get_shape("hexagon")
    assert "spirograph" in str(ei.value)


def test_param_meta_matches_signature() -> None:
    meta = param_meta("spirograph")
    assert set(meta) == {"inner_radius", "outer_radius", "distance", "amount"}
    assert meta["inner_radius"]["type"] == "integer"
    assert param_meta("triangle") == {}


def test_shape_decorator_supports_name_keyword() -> None:
    # 明示名をキーワードで指定して登録
    @shape(name="custom_test_shape")
    def custom_test_shape(rect: object) -> Path:
        return Path()

    assert is_shape_registered("custom_test_shape")
    unregister("custom_test_shape")
    assert not is_shape_registered("custom_test_shape")


def test_shape_decorator_supports_bare_form() -> None:
    @shape
    def bare_test_shape(rect: object) -> Path:
        return Path()

    assert is_shape_registered("bare_test_shape")
    unregister("bare_test_shape")


def test_shape_decorator_rejects_non_function_with_message() -> None:
    # 非関数を登録しようとすると TypeError。
    class NotFunc:  # noqa: N801 (テスト用の簡易クラス)
        pass

    deco = shape(name="bad")
    with pytest.raises(TypeError) as ei:
        deco(NotFunc)
    assert "got" in str(ei.value)


def test_duplicate_registration_is_rejected() -> None:
    with pytest.raises(ValueError):

        @shape("spirograph")
        def another_spirograph(rect: object) -> Path:
            return Path()


def test_get_registry_returns_copy() -> None:
    snap = get_registry()
    assert isinstance(snap, dict)
    snap["bogus"] = object()
    assert not is_shape_registered("bogus")
