"""分区块：标题 + 视频卡片网格"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QVBoxLayout, QWidget

from qfluentwidgets import SubtitleLabel

from ...core.layout import GridMetrics
from ...models import Section
from .video_card import VideoCard


class SectionBlock(QWidget):
    def __init__(self, section: Section, parent: QWidget | None = None):
        super().__init__(parent)
        self.section = section

        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.header = SubtitleLabel(section.title, self)
        v.addWidget(self.header)

        self.grid_host = QWidget(self)
        self.grid = QGridLayout(self.grid_host)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        v.addWidget(self.grid_host)

    def set_cards(self, cards: list[VideoCard], metrics: GridMetrics) -> None:
        """按快照顺序重排卡片（只移动，不销毁）"""
        while self.grid.count():
            self.grid.takeAt(0)

        self.header.setMinimumHeight(metrics.header_height)
        self.grid.setContentsMargins(metrics.inset, metrics.inset, metrics.inset, metrics.inset)
        self.grid.setHorizontalSpacing(metrics.spacing)
        self.grid.setVerticalSpacing(metrics.spacing)

        for index, card in enumerate(cards):
            row, col = metrics.position(index)
            card.setParent(self.grid_host)
            card.set_item_size(metrics.item_width, metrics.item_height)
            self.grid.addWidget(card, row, col)
            card.show()
