"""
どこで: `engine.export.svg`。
何を: `Path` を SVG パスデータ（`d` 属性）および SVG 文書として書き出す。
なぜ: 描画バックエンドを持たない環境でも、生成結果をブラウザ等でそのまま確認できるようにするため。

変換規則:
- MoveTo → `M x y`、LineTo → `L x y`、CurveTo → `C c1 c2 p`、ClosePath → `Z`。
- ArcTo → 端点形式の `A r r 0 large sweep x y`。1 周の円弧は半周ずつ 2 つに分割する
  （SVG は始点=終点の円弧を描かないため）。
- sweep フラグは角度増加方向（`clockwise=False`）で 1。SVG も y 下向きなので向きはそのまま一致する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO
from xml.sax.saxutils import quoteattr

from common import settings
from engine.core.path import ArcTo, ClosePath, CurveTo, LineTo, MoveTo, Path


@dataclass(frozen=True)
class SVGParams:
    """SVG 出力パラメータ。

    属性:
        width: 文書幅（viewBox 幅）。
        height: 文書高さ（viewBox 高さ）。
        stroke: 線色（SVG の色指定文字列、"none" で線なし）。
        fill: 塗り色（"none" で塗りなし）。
        stroke_width: 線幅。
        fill_rule: "nonzero" または "evenodd"。flower は "evenodd" が前提。
        decimals: 座標の小数点以下桁数。None で `settings.SVG_DECIMALS`。
    """

    width: float = 300.0
    height: float = 300.0
    stroke: str = "black"
    fill: str = "none"
    stroke_width: float = 1.0
    fill_rule: str = "nonzero"
    decimals: int | None = None

    def __post_init__(self) -> None:
        if self.fill_rule not in ("nonzero", "evenodd"):
            raise ValueError(f"fill_rule は 'nonzero' か 'evenodd' です: {self.fill_rule!r}")


def _fmt(value: float, decimals: int) -> str:
    text = f"{round(float(value), decimals):.{decimals}f}" if decimals > 0 else f"{round(value)}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _arc_segments(cmd: ArcTo, decimals: int) -> list[str]:
    sweep = cmd.sweep
    if sweep == 0.0 or cmd.radius == 0.0:
        ex, ey = cmd.end_point
        return [f"L {_fmt(ex, decimals)} {_fmt(ey, decimals)}"]
    pieces = 2 if abs(sweep) >= math.pi * 2 - 1e-12 else 1
    step = sweep / pieces
    flag = 1 if sweep > 0 else 0
    r = _fmt(cmd.radius, decimals)
    out: list[str] = []
    for i in range(1, pieces + 1):
        ex, ey = cmd.point_at(cmd.start_angle + step * i)
        large = 1 if abs(step) > math.pi else 0
        out.append(f"A {r} {r} 0 {large} {flag} {_fmt(ex, decimals)} {_fmt(ey, decimals)}")
    return out


def path_to_svg_d(path: Path, decimals: int | None = None) -> str:
    """Path を SVG の `d` 属性文字列へ変換する。"""
    if decimals is None:
        decimals = settings.get().SVG_DECIMALS
    parts: list[str] = []
    for cmd in path:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_fmt(cmd.x, decimals)} {_fmt(cmd.y, decimals)}")
        elif isinstance(cmd, LineTo):
            parts.append(f"L {_fmt(cmd.x, decimals)} {_fmt(cmd.y, decimals)}")
        elif isinstance(cmd, CurveTo):
            coords = (cmd.c1x, cmd.c1y, cmd.c2x, cmd.c2y, cmd.x, cmd.y)
            parts.append("C " + " ".join(_fmt(v, decimals) for v in coords))
        elif isinstance(cmd, ArcTo):
            parts.extend(_arc_segments(cmd, decimals))
        elif isinstance(cmd, ClosePath):
            parts.append("Z")
    return " ".join(parts)


class SVGWriter:
    """SVG 文書の書き出しクラス。

    `Path` 1 本を `<path>` 要素 1 つとして `fp` へテキスト出力する。
    """

    def write(self, path: Path, params: SVGParams, fp: IO[str]) -> None:
        """与えられた Path を SVG 文書として `fp` に書き出す。

        引数:
            path: 出力する描画コマンド列。
            params: SVG 出力パラメータ。
            fp: テキスト書き出し先（開かれたファイルオブジェクト）。
        """
        decimals = params.decimals if params.decimals is not None else settings.get().SVG_DECIMALS
        w = _fmt(params.width, decimals)
        h = _fmt(params.height, decimals)
        d = path_to_svg_d(path, decimals)
        fp.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        fp.write(
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">\n'
        )
        fp.write(
            f'  <path d="{d}" fill={quoteattr(params.fill)} fill-rule={quoteattr(params.fill_rule)} '
            f'stroke={quoteattr(params.stroke)} stroke-width="{_fmt(params.stroke_width, decimals)}"/>\n'
        )
        fp.write("</svg>\n")


__all__ = ["SVGParams", "SVGWriter", "path_to_svg_d"]
