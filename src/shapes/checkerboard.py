from __future__ import annotations

import logging
from dataclasses import dataclass

from common.param_utils import ensure_point_budget, truncate_count
from engine.core.path import Path, PathBuilder
from engine.core.rect import Rect

from .animatable import AnimatablePair
from .registry import shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Checkerboard:
    """市松模様（`(row + column)` が偶数のセルだけを矩形として出力）。

    `rows`/`columns` は補間のため実数で保持し、生成時に切り捨てる（4→8 の途中の 5.7 行は 5 行）。
    """

    rows: float = 4
    columns: float = 4

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(float(self.rows), float(self.columns))

    def with_animatable_data(self, value: AnimatablePair) -> "Checkerboard":
        first, second = value
        return Checkerboard(rows=float(first), columns=float(second))

    def path(self, rect: Rect) -> Path:
        rows = truncate_count("rows", self.rows)
        columns = truncate_count("columns", self.columns)
        # 閉じた矩形 1 つは平坦化後 5 頂点、セル数は ceil(rows*columns/2) 以下
        ensure_point_budget("rows", self.rows, 2.5 * (float(rows) * float(columns) + 1.0))

        row_size = rect.height / rows
        column_size = rect.width / columns

        b = PathBuilder()
        for row in range(rows):
            for column in range(columns):
                if (row + column) % 2 == 0:
                    b.add_rect(
                        rect.min_x + column_size * column,
                        rect.min_y + row_size * row,
                        column_size,
                        row_size,
                    )
        logger.debug("checkerboard: %dx%d", rows, columns)
        return b.build()


@shape("checkerboard")
def generate_checkerboard(rows: float, columns: float, rect: Rect) -> Path:
    """市松模様を生成します。

    引数:
        rows: 行数（実数可、切り捨て後 1 以上）。
        columns: 列数（実数可、切り捨て後 1 以上）。
        rect: 配置先の枠。
    """
    return Checkerboard(rows, columns).path(rect)


generate_checkerboard.__param_meta__ = {
    "rows": {"type": "integer", "min": 1, "max": 64, "step": 1},
    "columns": {"type": "integer", "min": 1, "max": 64, "step": 1},
}
