"""
どこで: `util.utils`。
何を: YAML 構成ファイルの読み込み（フェイルソフト）とプロジェクトルート推定。
なぜ: CLI の既定値（キャンバス寸法・SVG スタイル・各 shape の既定パラメータ）をコード外で調整できるようにするため。
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config %s を読み込めません: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - トップレベルの各セクション（dict 同士）は 1 段だけマージする。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    for path in (project_root / "configs" / "default.yaml", project_root / "config.yaml"):
        if not path.exists():
            continue
        for key, value in _safe_load_yaml(path).items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                merged = dict(base[key])
                merged.update(value)
                base[key] = merged
            else:
                base[key] = value
    return base


def shape_defaults(kind: str, config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """`shapes.<kind>` セクション（既定パラメータ）を返す。無ければ空辞書。"""
    cfg = load_config() if config is None else config
    shapes = cfg.get("shapes")
    if not isinstance(shapes, dict):
        return {}
    section = shapes.get(kind)
    return dict(section) if isinstance(section, dict) else {}
