"""
どこで: `common.errors`。
何を: 形状生成で送出する例外の型階層。
なぜ: 入力検証の失敗を NaN/Inf の混入ではなく、呼び出し単位の明示的な例外として返すため。
"""

from __future__ import annotations


class ShapeError(ValueError):
    """形状生成に関する例外の基底。"""


class InvalidParameterError(ShapeError):
    """パラメータが定義域外（非有限値・負の半径・0 行など）。

    属性:
        name: 問題のあったパラメータ名。
        value: 受け取った値。
    """

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"invalid parameter '{name}'={value!r}: {reason}")


__all__ = ["ShapeError", "InvalidParameterError"]
