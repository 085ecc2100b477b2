from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def MyThing():  # noqa: N802 (テスト用)
        return 1

    assert reg.is_registered("my_thing")
    assert reg.get("MyThing") is MyThing
    assert "my_thing" in reg.list_all()


def test_duplicate_and_unregister() -> None:
    reg = BaseRegistry(kind="shape")

    @reg.register(None)
    def sample():  # noqa: ANN001 - テスト用
        return 1

    with pytest.raises(ValueError) as ei:
        reg.register("sample")(lambda: 2)
    assert "shape 'sample'" in str(ei.value)

    # 同一オブジェクトの再登録は許容
    reg.register("sample")(sample)

    reg.unregister("Sample")
    assert not reg.is_registered("sample")
    reg.unregister("nonexistent")  # 例外にならない


def test_get_unknown_lists_known_names() -> None:
    reg = BaseRegistry(kind="shape")
    reg.register("alpha")(lambda: 0)
    with pytest.raises(KeyError) as ei:
        reg.get("beta")
    assert "alpha" in str(ei.value)


def test_key_normalization_hyphen_and_camel() -> None:
    reg = BaseRegistry()

    @reg.register("petal-ring")
    def fn():  # noqa: ANN001 - テスト用
        return 0

    assert reg.get("petal_ring") is fn
    assert BaseRegistry.normalize_key("CheckerBoard") == "checker_board"
    with pytest.raises(ValueError):
        BaseRegistry.normalize_key("")
    with pytest.raises(TypeError):
        BaseRegistry.normalize_key(3)  # type: ignore[arg-type]


def test_iteration_is_sorted_and_registry_is_copy() -> None:
    reg = BaseRegistry()
    reg.register("b")(lambda: 0)
    reg.register("a")(lambda: 0)
    assert list(reg) == ["a", "b"]
    assert len(reg) == 2
    snap = reg.registry
    snap["zzz"] = object()
    assert not reg.is_registered("zzz")
    reg.clear()
    assert len(reg) == 0
