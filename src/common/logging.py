"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側（shapes/engine）は `logging.getLogger(__name__)` でロガーを取得するだけで、
  ハンドラは設定しない。
- CLI 側で設定が無い場合に限り、最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: int | str) -> int:
    """レベル名/数値を `logging` の数値レベルへ変換する（未知の名前は INFO）。"""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば、レベルだけを合わせて終了する
    - `api.cli` から呼び出す想定
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        root.setLevel(lvl)
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "LEVEL_NAMES", "resolve_level", "setup_default_logging"]
