"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@shape` デコレータで生成関数を登録し、取得/一覧/検査を提供。
なぜ: 形状の種類名（"spirograph" など）から生成関数を一貫 API で解決するため（`api.generate`/`G`）。

概要:
- 登録対象は「関数」のみ（`Path` を返す純関数）。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示名指定をサポート。
- 生成関数は任意で `__param_meta__`（パラメータ範囲）と `__render_hints__`（描画側への指示）を持つ。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

ShapeFn = Callable[..., Any]

_shape_registry = BaseRegistry(kind="shape")


def shape(arg: Any | None = None, /, name: str | None = None):
    """生成関数をレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                      → 関数名から自動推論。
    - `@shape("custom")` / `@shape(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@shape は関数のみ登録可能です: got {obj!r}")
        return _shape_registry.register(resolved_name)(obj)

    # 直付け (@shape)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@shape("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_shape(name: str) -> ShapeFn:
    """登録された生成関数を取得。

    例外:
        KeyError: 未登録の場合
    """
    return _shape_registry.get(name)


def list_shapes() -> list[str]:
    """登録されている形状名の一覧（ソート済み）。"""
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    return _shape_registry.is_registered(name)


def param_meta(name: str) -> dict[str, Mapping[str, Any]]:
    """生成関数の `__param_meta__`（無ければ空辞書）。"""
    return dict(getattr(get_shape(name), "__param_meta__", {}) or {})


def render_hints(name: str) -> dict[str, Any]:
    """生成関数の `__render_hints__`（例: `{"fill_rule": "evenodd"}`、無ければ空辞書）。"""
    return dict(getattr(get_shape(name), "__render_hints__", {}) or {})


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _shape_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """レジストリ辞書のコピーを返す。"""
    return _shape_registry.registry


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "param_meta",
    "render_hints",
    "unregister",
    "get_registry",
]
