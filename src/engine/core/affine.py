"""
どこで: `engine.core` の軽量 2D アフィン変換ユーティリティ。
何を: 回転/平行移動/拡大縮小を 2x3 行列 `AffineTransform` として表し、点列や Path に適用する。
なぜ: flower の花弁配置（回転→平行移動）のような合成変換を、形状側に行列計算を書かずに済ませるため。

表現:
    | a  c  tx |
    | b  d  ty |    x' = a*x + c*y + tx,  y' = b*x + d*y + ty

`t1.concatenating(t2)` は「t1 を適用した後に t2 を適用する」変換を返す。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from common.types import Vec2


@dataclass(frozen=True)
class AffineTransform:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """原点まわりの回転（ラジアン、+x から +y 方向が正）。"""
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        return cls(cos_t, sin_t, -sin_t, cos_t, 0.0, 0.0)

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        if sy is None:
            sy = sx
        return cls(float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)

    # ── 合成/適用（すべて純粋） ────────
    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        """`self` の後に `other` を適用する合成変換。"""
        return AffineTransform(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    def apply(self, x: float, y: float) -> Vec2:
        return (self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """`(N, 2)` 配列へ一括適用（新しい配列を返す）。"""
        pts = np.asarray(points, dtype=np.float64)
        if pts.size == 0:
            return pts.reshape(0, 2).copy()
        m = np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)
        return pts @ m + np.array([self.tx, self.ty], dtype=np.float64)

    # ── 円弧を保つ変換の判定 ────────
    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def is_similarity(self) -> bool:
        """回転+等方スケール+平行移動のみ（鏡映なし）なら True。円弧が円弧のまま写る。"""
        return (
            math.isclose(self.a, self.d, abs_tol=1e-12)
            and math.isclose(self.b, -self.c, abs_tol=1e-12)
            and self.determinant > 0.0
        )

    @property
    def rotation_angle(self) -> float:
        return math.atan2(self.b, self.a)

    @property
    def scale_factor(self) -> float:
        return math.hypot(self.a, self.b)


__all__ = ["AffineTransform"]
