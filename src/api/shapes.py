"""
どこで: `api.shapes`（形状生成の高レベル API）。
何を: 登録済み shape 関数を名前で解決して `Path` を返す `generate()` と、薄いファサード `G`。
なぜ: 呼び出し側（UI・CLI・補間ドライバ）が形状の種類を文字列で選び、同じ入口から生成できるようにするため。

Notes
-----
- `generate(kind, params, rect)` は引数名を生成関数のシグネチャと照合し、
  未知/不足のパラメータを `InvalidParameterError` として返す。
- `G.<kind>(rect, **params)` は `generate` の糖衣。
- 生成結果はキャッシュしない。各 shape は純関数であり、値が変わるたびに呼び直す前提。
- 例外方針: 未登録名は `generate` では KeyError、`G` では AttributeError。

Examples
--------
    from api import G, generate
    from engine.core.rect import Rect

    p1 = generate("checkerboard", {"rows": 4, "columns": 4}, Rect(300, 300))
    p2 = G.flower(Rect(400, 1000), petal_offset=-20, petal_width=100)
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Mapping

import shapes  # noqa: F401  (登録目的の副作用)
from common.errors import InvalidParameterError, ShapeError
from engine.core.path import Path
from engine.core.rect import Rect
from shapes.registry import get_shape, is_shape_registered
from shapes.registry import list_shapes as list_registered_shapes

logger = logging.getLogger(__name__)


def shape_parameters(kind: str) -> list[str]:
    """生成関数が受け取るパラメータ名（`rect` を除く、宣言順）。"""
    fn = get_shape(kind)
    return [name for name in inspect.signature(fn).parameters if name != "rect"]


def generate(kind: str, params: Mapping[str, Any] | None = None, rect: Any = None) -> Path:
    """形状の種類名・パラメータ・枠から `Path` を生成する。

    Parameters
    ----------
    kind : str
        形状名（"spirograph", "flower" など。キャメルケース/ハイフンも可）。
    params : Mapping[str, Any] | None
        生成関数のパラメータ。すべて必須。
    rect : Rect | tuple
        配置先の枠。`(width, height)` / `(x, y, width, height)` も受け付ける。

    Returns
    -------
    Path
        生成された描画コマンド列。

    Raises
    ------
    KeyError
        未登録の形状名。
    InvalidParameterError
        未知/不足のパラメータ、または値が定義域外。
    """
    fn = get_shape(kind)
    bounding = Rect.coerce(rect)
    values = dict(params or {})

    expected = shape_parameters(kind)
    unknown = sorted(set(values) - set(expected))
    if unknown:
        raise InvalidParameterError(unknown[0], values[unknown[0]], f"unknown parameter for '{kind}'")
    missing = [name for name in expected if name not in values]
    if missing:
        raise InvalidParameterError(missing[0], None, f"required by '{kind}'")

    path = fn(**values, rect=bounding)
    if not path.is_finite:
        # 検証済みの入力からは起こらない想定
        raise ShapeError(f"'{kind}' produced non-finite coordinates for {values!r}")
    logger.debug("generate %s: %d commands", kind, len(path))
    return path


class ShapesAPI:
    """形状生成ファサード（`G` の実体）。

    責務:
    - 形状名→生成関数の動的ディスパッチ（インスタンス属性で遅延解決）

    使い方:
        from api import G
        p = G.checkerboard(Rect(300, 300), rows=4, columns=4)
    """

    def _build_shape_method(self, name: str) -> Callable[..., Path]:
        """レジストリ名から `G.<name>(rect, **params)` を構築する。

        登録が外れた場合は `AttributeError` を送出する。
        """
        fn = get_shape(name)

        def _shape_method(rect: Any = None, **params: Any) -> Path:
            if not is_shape_registered(name):
                # 登録解除と整合を取るため、キャッシュ済みの属性を破棄
                self.__dict__.pop(name, None)
                raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
            return generate(name, params, rect)

        _shape_method.__name__ = name
        _shape_method.__qualname__ = f"{self.__class__.__name__}.{name}"
        _shape_method.__doc__ = fn.__doc__
        return _shape_method

    def __getattr__(self, name: str) -> Callable[..., Path]:
        """レジストリに基づき `G.<name>` を遅延生成する。

        Raises
        ------
        AttributeError
            未登録名を指定した場合。
        """
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        method = self._build_shape_method(name)
        self.__dict__[name] = method
        return method

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_registered_shapes()))

    @classmethod
    def list_shapes(cls) -> list[str]:
        """利用可能な形状名の一覧を返す。"""
        return list_registered_shapes()


G = ShapesAPI()

__all__ = ["G", "ShapesAPI", "generate", "shape_parameters"]
