"""
どこで: `util.paths`。
何を: SVG 保存先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: CLI から出力先を省略したとき、決まった場所へ保存できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_svg_dir(root: Path | None = None) -> Path:
    """SVG 出力先 `data/svg/` を作成して返す。

    - プロジェクトルート直下（`root` 指定時はその直下）に作成する。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "svg"
    out.mkdir(parents=True, exist_ok=True)
    return out
