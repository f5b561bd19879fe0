from __future__ import annotations

from dataclasses import dataclass

COMPACT_WIDTH_THRESHOLD = 700

COMPACT_COLUMNS = 1
COMPACT_ITEM_HEIGHT = 280
REGULAR_COLUMNS = 3
REGULAR_ITEM_HEIGHT = 250

CONTENT_INSET = 10
INTER_ITEM_SPACING = 10
HEADER_ESTIMATED_HEIGHT = 20


@dataclass(frozen=True, slots=True)
class GridMetrics:
    columns: int
    item_width: int
    item_height: int
    spacing: int = INTER_ITEM_SPACING
    inset: int = CONTENT_INSET
    header_height: int = HEADER_ESTIMATED_HEIGHT

    @property
    def is_compact(self) -> bool:
        return self.columns == COMPACT_COLUMNS

    def position(self, index: int) -> tuple[int, int]:
        """条目序号 -> (行, 列)"""
        return divmod(index, self.columns)

    def rows_for(self, count: int) -> int:
        return -(-count // self.columns) if count > 0 else 0


def grid_metrics(width: int, threshold: int = COMPACT_WIDTH_THRESHOLD) -> GridMetrics:
    """根据可用宽度计算网格列数与卡片尺寸。

    窄屏（宽度 < threshold）单列、卡片高 280；否则三列、卡片高 250。
    """
    if width < threshold:
        columns, item_height = COMPACT_COLUMNS, COMPACT_ITEM_HEIGHT
    else:
        columns, item_height = REGULAR_COLUMNS, REGULAR_ITEM_HEIGHT

    usable = width - CONTENT_INSET * 2 - INTER_ITEM_SPACING * (columns - 1)
    item_width = max(0, usable // columns)
    return GridMetrics(columns=columns, item_width=item_width, item_height=item_height)
