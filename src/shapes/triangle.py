from __future__ import annotations

from dataclasses import dataclass

from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .registry import shape


@dataclass(frozen=True)
class Triangle:
    """上辺中央を頂点、下辺の両端を底角とする三角形。"""

    def path(self, rect: Rect) -> Path:
        b = PathBuilder()
        b.move_to(rect.mid_x, rect.min_y)
        b.line_to(rect.min_x, rect.max_y)
        b.line_to(rect.max_x, rect.max_y)
        b.line_to(rect.mid_x, rect.min_y)
        return b.close().build()


@shape("triangle")
def generate_triangle(rect: Rect) -> Path:
    """rect いっぱいの三角形を生成します（パラメータなし）。"""
    return Triangle().path(rect)


generate_triangle.__param_meta__ = {}
