"""
どこで: `common` パッケージ。
何を: shapes/engine/api で使う軽量ユーティリティ（BaseRegistry・例外・設定）。
なぜ: 共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .errors import InvalidParameterError, ShapeError

__all__ = [
    "BaseRegistry",
    "ShapeError",
    "InvalidParameterError",
]
