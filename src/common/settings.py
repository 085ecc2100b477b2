"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int


@dataclass
class _Settings:
    # 平坦化（曲線/円弧のサンプリング密度）
    CURVE_SEGMENTS: int = 16
    ARC_SEGMENTS_PER_TURN: int = 64

    # 生成上限（spirograph などの点数ガード）
    MAX_PATH_POINTS: int = 1_000_000

    # SVG 出力
    SVG_DECIMALS: int = 3

    # Misc
    USE_NUMBA: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - 分割数は 1 以上、桁数は 0 以上に丸める。
    """
    _settings.CURVE_SEGMENTS = env_int("SPX_CURVE_SEGMENTS", 16, min_value=1) or 16
    _settings.ARC_SEGMENTS_PER_TURN = (
        env_int("SPX_ARC_SEGMENTS_PER_TURN", 64, min_value=4) or 64
    )
    _settings.MAX_PATH_POINTS = env_int("SPX_MAX_PATH_POINTS", 1_000_000, min_value=1) or 1
    _settings.SVG_DECIMALS = env_int("SPX_SVG_DECIMALS", 3, min_value=0) or 0

    # Misc
    _settings.USE_NUMBA = env_bool("SPX_USE_NUMBA", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
