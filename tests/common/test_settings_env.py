from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_float, env_int
from common.logging import resolve_level, setup_default_logging


def test_env_helpers_defaults_and_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPX_TEST_VALUE", raising=False)
    assert env_int("SPX_TEST_VALUE", 7) == 7
    assert env_bool("SPX_TEST_VALUE", True) is True
    assert env_float("SPX_TEST_VALUE", 1.5) == 1.5

    monkeypatch.setenv("SPX_TEST_VALUE", "-4")
    assert env_int("SPX_TEST_VALUE", 7) == -4
    assert env_int("SPX_TEST_VALUE", 7, min_value=0) == 0

    monkeypatch.setenv("SPX_TEST_VALUE", "off")
    assert env_bool("SPX_TEST_VALUE", True) is False
    assert env_int("SPX_TEST_VALUE", 7) == 7

    monkeypatch.setenv("SPX_TEST_VALUE", "nan")
    assert env_float("SPX_TEST_VALUE", 2.0) == 2.0


def test_reload_from_env_applies_overrides(reload_settings: pytest.MonkeyPatch) -> None:
    reload_settings.setenv("SPX_CURVE_SEGMENTS", "4")
    reload_settings.setenv("SPX_USE_NUMBA", "0")
    reload_settings.setenv("SPX_MAX_PATH_POINTS", "-10")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.CURVE_SEGMENTS == 4
    assert cfg.USE_NUMBA is False
    assert cfg.MAX_PATH_POINTS == 1


def test_resolve_level_and_setup_is_noop_with_handlers() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(30) == logging.WARNING

    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    before = list(root.handlers)
    old_level = root.level
    try:
        setup_default_logging("ERROR")
        assert root.handlers == before
        assert root.level == logging.ERROR
    finally:
        root.removeHandler(handler)
        root.setLevel(old_level)
