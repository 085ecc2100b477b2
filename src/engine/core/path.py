"""
統合 Path 型（描画コマンド列）

本モジュールは、全 shape の共通出力である `Path`（PathCommandSequence）と、
その構成要素である描画コマンド、および生成用の `PathBuilder` を提供する。

データモデル（不変条件）:
- コマンドは `MoveTo / LineTo / CurveTo / ArcTo / ClosePath` の 5 種（frozen dataclass）。
- `Path.commands` はコマンドの tuple。順序が描画順を表す。
- `MoveTo` がサブパスの開始を表し、`ClosePath` はサブパスを始点へ閉じる。
- `ArcTo` は「中心・半径・開始角・終了角・回転方向」で円弧を表す。
  角度はラジアン、+x から +y 方向（y 下向き座標では画面上で時計回り）を正とする。
  `clockwise=False` は角度増加方向、`clockwise=True` は角度減少方向へ掃引し、
  掃引量は 1 周（2π）を上限とする。

API 方針:
- `Path` は不変。変換（`transformed`）や連結（`+`）は新しいインスタンスを返す純関数。
- 要素ごとの等価性（`==`）とハッシュを持ち、同一入力からの再生成結果を比較できる。

直感図:

    # 例: 閉じた三角形 1 つ
    # commands = (MoveTo(50, 0), LineTo(0, 100), LineTo(100, 100), LineTo(50, 0), ClosePath())
    # subpaths() -> [Path(5 commands)]
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

import numpy as np

from common.types import Vec2
from engine.core.affine import AffineTransform

TAU = 2.0 * math.pi

# Bézier 近似で円/楕円を 4 分割するときの制御点係数
ELLIPSE_KAPPA = 0.5522847498307936


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CurveTo:
    """3 次 Bézier。`(c1x, c1y)`, `(c2x, c2y)` が制御点、`(x, y)` が終点。"""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    center_x: float
    center_y: float
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool

    @property
    def sweep(self) -> float:
        """符号付き掃引角（反時計=正、clockwise=負）。絶対値は 2π 以下。"""
        if self.clockwise:
            delta = self.start_angle - self.end_angle
            if delta < 0.0:
                delta %= TAU
            return -min(delta, TAU)
        delta = self.end_angle - self.start_angle
        if delta < 0.0:
            delta %= TAU
        return min(delta, TAU)

    def point_at(self, angle: float) -> Vec2:
        return (
            self.center_x + self.radius * math.cos(angle),
            self.center_y + self.radius * math.sin(angle),
        )

    @property
    def start_point(self) -> Vec2:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Vec2:
        return self.point_at(self.start_angle + self.sweep)


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CurveTo, ArcTo, ClosePath]
_COMMAND_TYPES = (MoveTo, LineTo, CurveTo, ArcTo, ClosePath)


def _command_values(cmd: PathCommand) -> tuple[float, ...]:
    if isinstance(cmd, (MoveTo, LineTo)):
        return (cmd.x, cmd.y)
    if isinstance(cmd, CurveTo):
        return (cmd.c1x, cmd.c1y, cmd.c2x, cmd.c2y, cmd.x, cmd.y)
    if isinstance(cmd, ArcTo):
        return (cmd.center_x, cmd.center_y, cmd.radius, cmd.start_angle, cmd.end_angle)
    return ()


def _transform_command(cmd: PathCommand, t: AffineTransform) -> PathCommand:
    if isinstance(cmd, MoveTo):
        return MoveTo(*t.apply(cmd.x, cmd.y))
    if isinstance(cmd, LineTo):
        return LineTo(*t.apply(cmd.x, cmd.y))
    if isinstance(cmd, CurveTo):
        c1 = t.apply(cmd.c1x, cmd.c1y)
        c2 = t.apply(cmd.c2x, cmd.c2y)
        end = t.apply(cmd.x, cmd.y)
        return CurveTo(c1[0], c1[1], c2[0], c2[1], end[0], end[1])
    if isinstance(cmd, ArcTo):
        if not t.is_similarity:
            raise ValueError("円弧を含む Path には相似変換（回転/等方スケール/平行移動）のみ適用できます")
        cx, cy = t.apply(cmd.center_x, cmd.center_y)
        rot = t.rotation_angle
        return ArcTo(
            cx,
            cy,
            cmd.radius * t.scale_factor,
            cmd.start_angle + rot,
            cmd.end_angle + rot,
            cmd.clockwise,
        )
    return cmd


class Path:
    """描画コマンドの不変シーケンス。

    フィールド:
    - `commands`: `PathCommand` の tuple。

    設計意図:
    - shape 生成の唯一の出力表現。描画バックエンド（SVG/ポリライン化など）はこれだけを受け取る。
    - 生成時にコマンド型を検証し、以後は変更不可。
    """

    __slots__ = ("commands",)

    commands: tuple[PathCommand, ...]

    def __init__(self, commands: Iterable[PathCommand] = ()) -> None:
        cmds = tuple(commands)
        for cmd in cmds:
            if not isinstance(cmd, _COMMAND_TYPES):
                raise TypeError(f"Path に格納できないコマンドです: {cmd!r}")
        object.__setattr__(self, "commands", cmds)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Path は不変です")

    # ── シーケンスとしての振る舞い ──────
    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> PathCommand:
        return self.commands[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.commands == other.commands

    def __hash__(self) -> int:
        return hash(self.commands)

    def __add__(self, other: "Path") -> "Path":
        """糖衣: 連結（サブパスはそのまま並ぶ）。"""
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.commands + other.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    # ── 解析ヘルパ ───────────────────
    def count(self, kind: type) -> int:
        """指定コマンド型の個数（例: `path.count(LineTo)`）。"""
        return sum(1 for cmd in self.commands if isinstance(cmd, kind))

    def subpaths(self) -> list["Path"]:
        """`MoveTo` ごとに分割したサブパスのリスト。"""
        groups: list[list[PathCommand]] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo) or not groups:
                groups.append([])
            groups[-1].append(cmd)
        return [Path(g) for g in groups]

    @property
    def n_subpaths(self) -> int:
        return len(self.subpaths())

    @property
    def is_closed(self) -> bool:
        """すべてのサブパスが `ClosePath` で終わっていれば True（空は False）。"""
        subs = self.subpaths()
        return bool(subs) and all(isinstance(s.commands[-1], ClosePath) for s in subs)

    def anchor_points(self) -> np.ndarray:
        """各コマンドの到達点（MoveTo/LineTo/CurveTo の終点、ArcTo の始点と終点）を `(N, 2)` で返す。"""
        pts: list[Vec2] = []
        for cmd in self.commands:
            if isinstance(cmd, (MoveTo, LineTo, CurveTo)):
                pts.append((cmd.x, cmd.y))
            elif isinstance(cmd, ArcTo):
                pts.append(cmd.start_point)
                pts.append(cmd.end_point)
        if not pts:
            return np.empty((0, 2), dtype=np.float64)
        return np.asarray(pts, dtype=np.float64)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for cmd in self.commands for v in _command_values(cmd))

    @property
    def is_degenerate(self) -> bool:
        """視覚的に自明な形状（全到達点が一致し、半径 0 以外の円弧を含まない）なら True。"""
        if any(isinstance(c, ArcTo) and c.radius > 0.0 and c.sweep != 0.0 for c in self.commands):
            return False
        pts = self.anchor_points()
        if pts.shape[0] == 0:
            return True
        return bool(np.all(np.isclose(pts, pts[0], rtol=0.0, atol=1e-9)))

    # ── 変換（純粋） ───────────────────
    def transformed(self, transform: AffineTransform) -> "Path":
        """アフィン変換を全コマンドへ適用した新しい Path。

        Raises
        ------
        ValueError
            円弧を含み、かつ変換が相似変換でない場合。
        """
        return Path(_transform_command(cmd, transform) for cmd in self.commands)

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Path":
        return self.transformed(AffineTransform.translation(dx, dy))

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Path(commands={len(self.commands)}, subpaths={self.n_subpaths})"


class PathBuilder:
    """Path を組み立てる可変ヘルパ（生成呼び出しごとに局所生成して使い捨てる）。

    使用例:
        b = PathBuilder()
        b.move_to(0, 0)
        b.line_to(10, 0)
        b.close()
        path = b.build()
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []
        self._current: Vec2 | None = None
        self._start: Vec2 | None = None

    @property
    def current_point(self) -> Vec2 | None:
        return self._current

    def move_to(self, x: float, y: float) -> "PathBuilder":
        self._commands.append(MoveTo(float(x), float(y)))
        self._current = self._start = (float(x), float(y))
        return self

    def line_to(self, x: float, y: float) -> "PathBuilder":
        if self._current is None:
            # 現在点が無ければ移動として扱う
            return self.move_to(x, y)
        self._commands.append(LineTo(float(x), float(y)))
        self._current = (float(x), float(y))
        return self

    def curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> "PathBuilder":
        if self._current is None:
            self.move_to(c1x, c1y)
        self._commands.append(
            CurveTo(float(c1x), float(c1y), float(c2x), float(c2y), float(x), float(y))
        )
        self._current = (float(x), float(y))
        return self

    def add_arc(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> "PathBuilder":
        """円弧を追加。現在点が無ければ始点へ移動、始点と異なれば直線で接続する。"""
        arc = ArcTo(
            float(center_x),
            float(center_y),
            float(radius),
            float(start_angle),
            float(end_angle),
            bool(clockwise),
        )
        sx, sy = arc.start_point
        if self._current is None:
            self.move_to(sx, sy)
        elif not (math.isclose(self._current[0], sx) and math.isclose(self._current[1], sy)):
            self.line_to(sx, sy)
        self._commands.append(arc)
        self._current = arc.end_point
        return self

    def close(self) -> "PathBuilder":
        if self._current is None:
            return self
        self._commands.append(ClosePath())
        self._current = self._start
        return self

    def add_rect(self, x: float, y: float, width: float, height: float) -> "PathBuilder":
        """閉じた矩形サブパス（MoveTo + 3×LineTo + ClosePath）。"""
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        return self.close()

    def add_ellipse(self, x: float, y: float, width: float, height: float) -> "PathBuilder":
        """矩形に内接する楕円（4 本の 3 次 Bézier、右中央から開始して閉じる）。"""
        rx = width * 0.5
        ry = height * 0.5
        cx = x + rx
        cy = y + ry
        kx = rx * ELLIPSE_KAPPA
        ky = ry * ELLIPSE_KAPPA
        self.move_to(cx + rx, cy)
        self.curve_to(cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry)
        self.curve_to(cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy)
        self.curve_to(cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry)
        self.curve_to(cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy)
        return self.close()

    def add_path(self, path: Path) -> "PathBuilder":
        """既存 Path のコマンドを末尾へ追加する。"""
        for cmd in path:
            self._commands.append(cmd)
            if isinstance(cmd, MoveTo):
                self._current = self._start = (cmd.x, cmd.y)
            elif isinstance(cmd, (LineTo, CurveTo)):
                self._current = (cmd.x, cmd.y)
            elif isinstance(cmd, ArcTo):
                self._current = cmd.end_point
            else:
                self._current = self._start
        return self

    def build(self) -> Path:
        return Path(self._commands)


__all__ = [
    "TAU",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "ArcTo",
    "ClosePath",
    "PathCommand",
    "Path",
    "PathBuilder",
]
