"""
共通レジストリ基底クラス
`shapes.registry` が使用する名前→関数の対応表
"""

import re
from typing import Any, Callable, Iterator


class BaseRegistry:
    """名前付き登録表。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフン→アンダースコア）。
    - デコレータは名前省略可。省略時は関数名から自動推論します。
    - 登録はモジュール import 時のみを想定し、生成処理中は読み取りのみ。
    """

    def __init__(self, kind: str = "entry"):
        self._kind = kind
        self._registry: dict[str, Any] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "CheckerBoard" -> "checker_board"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        name = name.replace("-", "_")
        # 大文字を含む場合のみキャメル→スネーク変換
        return cls._camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()

    def register(self, name: str | None = None) -> Callable:
        """関数をレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = self.normalize_key(name) if name else self.normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"{self._kind} '{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録された関数を取得。未登録なら KeyError（候補一覧付き）。"""
        key = self.normalize_key(name)
        if key not in self._registry:
            known = ", ".join(sorted(self._registry)) or "<none>"
            raise KeyError(f"{self._kind} '{name}' は登録されていません (known: {known})")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        return self.normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        self._registry.pop(self.normalize_key(name), None)

    def clear(self) -> None:
        self._registry.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._registry))

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリの読み取り専用アクセス（コピー）"""
        return self._registry.copy()
