"""
どこで: `api.cli`（コンソールスクリプト `shapepath`）。
何を: 形状名とパラメータを受け取り、生成した Path を SVG として書き出す／登録 shape を一覧する。
なぜ: 描画 UI を持たない環境で、各 shape の出力を手早く確認するため。

使用例:
    shapepath spirograph --param inner_radius=100 --param amount=0.5 --out spiro.svg
    shapepath flower --width 400 --height 1000 --fill red
    shapepath --list --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path as FsPath
from typing import Any, Mapping, Sequence

import yaml

from common.base_registry import BaseRegistry
from common.errors import InvalidParameterError
from common.logging import LEVEL_NAMES, setup_default_logging
from engine.core.rect import Rect
from engine.export.svg import SVGParams, SVGWriter
from shapes.registry import list_shapes, param_meta, render_hints
from util.paths import ensure_svg_dir
from util.utils import load_config, shape_defaults

from .shapes import generate, shape_parameters

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def _parse_param(text: str) -> tuple[str, Any]:
    """`key=value` を分解する。値は YAML スカラとして解釈（`true`→bool, `1.5`→float）。"""
    key, sep, raw = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"cannot parse value for {key!r}: {raw!r}") from e
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapepath", description="Generate a parametric shape and write it as SVG."
    )
    parser.add_argument("shape", nargs="?", help="shape kind (see --list)")
    parser.add_argument(
        "--param",
        "-p",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        metavar="KEY=VALUE",
        help="shape parameter (repeatable); overrides configs/default.yaml",
    )
    parser.add_argument("--width", type=float, default=None, help="bounding rect width")
    parser.add_argument("--height", type=float, default=None, help="bounding rect height")
    parser.add_argument("--out", "-o", default=None, help="output file ('-' for stdout)")
    parser.add_argument("--save", action="store_true", help="save under data/svg/ with a timestamped name")
    parser.add_argument("--fill-rule", choices=("nonzero", "evenodd"), default=None)
    parser.add_argument("--stroke", default=None, help="stroke color")
    parser.add_argument("--fill", default=None, help="fill color")
    parser.add_argument("--stroke-width", type=float, default=None)
    parser.add_argument("--log-level", choices=LEVEL_NAMES, default="WARNING")
    parser.add_argument("--list", action="store_true", help="list registered shapes and exit")
    parser.add_argument("--json", action="store_true", help="with --list, emit JSON")
    return parser


def _collect_shapes() -> dict[str, dict[str, Any]]:
    entries: dict[str, dict[str, Any]] = {}
    for name in list_shapes():
        entries[name] = {
            "parameters": shape_parameters(name),
            "meta": param_meta(name),
            "hints": render_hints(name),
        }
    return entries


def _print_listing(entries: Mapping[str, Mapping[str, Any]], as_json: bool) -> None:
    if as_json:
        print(json.dumps(entries, indent=2, ensure_ascii=False))
        return
    for name, entry in entries.items():
        params = ", ".join(entry["parameters"]) or "<none>"
        hints = entry["hints"]
        suffix = f"  [{', '.join(f'{k}={v}' for k, v in hints.items())}]" if hints else ""
        print(f"{name}: {params}{suffix}")


def _svg_params(args: argparse.Namespace, config: Mapping[str, Any], kind: str, rect: Rect) -> SVGParams:
    style = config.get("svg") if isinstance(config.get("svg"), dict) else {}
    fill_rule = args.fill_rule or render_hints(kind).get("fill_rule", "nonzero")
    return SVGParams(
        width=rect.width,
        height=rect.height,
        stroke=args.stroke or str(style.get("stroke", "black")),
        fill=args.fill or str(style.get("fill", "none")),
        stroke_width=(
            args.stroke_width
            if args.stroke_width is not None
            else float(style.get("stroke_width", 1.0))
        ),
        fill_rule=fill_rule,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    if args.list:
        _print_listing(_collect_shapes(), args.json)
        return EXIT_OK
    if not args.shape:
        parser.error("a shape kind is required (or use --list)")

    config = load_config()
    canvas = config.get("canvas") if isinstance(config.get("canvas"), dict) else {}
    width = args.width if args.width is not None else float(canvas.get("width", 300))
    height = args.height if args.height is not None else float(canvas.get("height", 300))

    # 設定の既定値もレジストリと同じ正規化済みキーで引く
    kind = BaseRegistry.normalize_key(args.shape)
    params = shape_defaults(kind, config)
    params.update(dict(args.params))

    try:
        rect = Rect(width, height)
        path = generate(kind, params, rect)
    except KeyError as e:
        logger.error("unknown shape: %s", e)
        return EXIT_INVALID
    except InvalidParameterError as e:
        logger.error("%s", e)
        return EXIT_INVALID

    svg = _svg_params(args, config, kind, rect)
    writer = SVGWriter()
    if args.save:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        out: str | None = str(ensure_svg_dir() / f"{stamp}_{kind}.svg")
    else:
        out = args.out

    if out is None or out == "-":
        writer.write(path, svg, sys.stdout)
    else:
        with FsPath(out).open("w", encoding="utf-8") as fp:
            writer.write(path, svg, fp)
        logger.info("wrote %s (%d commands)", out, len(path))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
