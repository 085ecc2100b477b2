"""共通フィクスチャ。

- 標準的な枠（Rect）
- 設定の環境変数をテストごとに元へ戻す
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.rect import Rect


@pytest.fixture()
def rect300() -> Rect:
    return Rect(300.0, 300.0)


@pytest.fixture()
def rect_offset() -> Rect:
    """原点がずれた横長の枠。"""
    return Rect(200.0, 100.0, x=10.0, y=20.0)


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を設定して `settings.reload_from_env()` するテスト用。終了時に既定へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
