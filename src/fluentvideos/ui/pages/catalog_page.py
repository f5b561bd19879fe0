"""
视频目录页面

搜索框 + 分区网格。页面本身只负责显示：收到快照后与上一份快照做差分，
按视频标识复用已有卡片，只创建新增的、销毁移除的。
"""
from __future__ import annotations

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from qfluentwidgets import BodyLabel, SearchLineEdit, SubtitleLabel

from ...core.config_manager import config_manager
from ...core.layout import GridMetrics, grid_metrics
from ...core.snapshot import Snapshot, SnapshotDiff
from ...utils.logger import logger
from ..components.section_block import SectionBlock
from ..components.video_card import VideoCard, VideoCardFactory


class CatalogPage(QWidget):
    """视频目录页面（渲染端）"""

    query_changed = Signal(str)
    video_selected = Signal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("catalogPage")

        self._snapshot: Snapshot | None = None
        self._blocks: dict[str, SectionBlock] = {}
        self._cards: dict[str, VideoCard] = {}
        self._metrics: GridMetrics | None = None
        self._threshold = int(config_manager.get("compact_width_threshold") or 700)

        self._init_ui()
        self.card_factory = VideoCardFactory(self.video_selected.emit, self.scroll_widget)

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        self.title_label = SubtitleLabel("视频目录", self)
        layout.addWidget(self.title_label)

        # --- 工具栏: 搜索 + 统计 ---
        toolbar = QHBoxLayout()
        toolbar.setSpacing(8)

        self.search_box = SearchLineEdit(self)
        self.search_box.setPlaceholderText("搜索视频...")
        self.search_box.setFixedWidth(280)
        self.search_box.textChanged.connect(self.query_changed.emit)
        toolbar.addWidget(self.search_box)

        toolbar.addStretch(1)

        self.stats_label = BodyLabel("", self)
        self.stats_label.setTextColor(QColor(120, 120, 120), QColor(150, 150, 150))
        toolbar.addWidget(self.stats_label)

        layout.addLayout(toolbar)

        # --- 分区列表 ---
        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setStyleSheet("background: transparent;")

        self.scroll_widget = QWidget()
        self.scroll_widget.setStyleSheet("background: transparent;")
        self.scroll_layout = QVBoxLayout(self.scroll_widget)
        self.scroll_layout.setContentsMargins(0, 0, 0, 0)
        self.scroll_layout.setSpacing(12)
        self.scroll_layout.addStretch(1)

        self.scroll_area.setWidget(self.scroll_widget)
        # 滚动条出现/消失会改变 viewport 宽度，页面本身的尺寸不变
        self.scroll_area.viewport().installEventFilter(self)
        layout.addWidget(self.scroll_area, 1)

        # --- 空状态 ---
        self.empty_placeholder = QWidget(self)
        empty_layout = QVBoxLayout(self.empty_placeholder)
        empty_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_layout.setSpacing(16)

        self.empty_icon = QLabel("🔍", self.empty_placeholder)
        self.empty_icon.setStyleSheet("font-size: 64px; color: rgba(0,0,0,0.1);")
        self.empty_icon.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.empty_title = SubtitleLabel("没有匹配的视频", self.empty_placeholder)
        self.empty_title.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.empty_desc = BodyLabel("试试其他关键词", self.empty_placeholder)
        self.empty_desc.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_desc.setTextColor(QColor(96, 96, 96), QColor(206, 206, 206))

        empty_layout.addStretch(1)
        empty_layout.addWidget(self.empty_icon)
        empty_layout.addWidget(self.empty_title)
        empty_layout.addWidget(self.empty_desc)
        empty_layout.addStretch(1)

        self.empty_placeholder.setVisible(False)
        layout.addWidget(self.empty_placeholder, 1)

    # ------ Renderer ------

    def apply(self, snapshot: Snapshot, animate: bool) -> None:
        diff = SnapshotDiff.between(self._snapshot, snapshot)
        logger.debug(
            "[CatalogPage] 应用快照: +{} -{} 视频, +{} -{} 分区",
            len(diff.inserted_items),
            len(diff.removed_items),
            len(diff.inserted_sections),
            len(diff.removed_sections),
        )

        for video_id in diff.removed_items:
            card = self._cards.pop(video_id, None)
            if card is not None:
                card.setParent(None)
                card.deleteLater()

        for section_id in diff.removed_sections:
            block = self._blocks.pop(section_id, None)
            if block is not None:
                self.scroll_layout.removeWidget(block)
                block.setParent(None)
                block.deleteLater()

        inserted = set(diff.inserted_items)
        for group in snapshot:
            if group.section.id not in self._blocks:
                self._blocks[group.section.id] = SectionBlock(group.section, self.scroll_widget)
            for video in group.videos:
                if video.id not in self._cards:
                    self._cards[video.id] = self.card_factory.create_card(video)

        self._snapshot = snapshot
        self._relayout()

        if animate:
            for video_id in inserted:
                self._cards[video_id].fade_in()

        self._update_empty_state()
        self._update_stats()

    # ------ 布局 ------

    def _current_metrics(self) -> GridMetrics:
        width = self.scroll_area.viewport().width() or self.width()
        return grid_metrics(width, self._threshold)

    def _relayout(self) -> None:
        if self._snapshot is None:
            return
        self._metrics = self._current_metrics()

        # 按快照顺序重新插入分区块（stretch 保持在最后）
        for block in self._blocks.values():
            self.scroll_layout.removeWidget(block)
        for index, group in enumerate(self._snapshot):
            block = self._blocks[group.section.id]
            self.scroll_layout.insertWidget(index, block)
            block.set_cards([self._cards[v.id] for v in group.videos], self._metrics)
            block.show()

    @property
    def metrics(self) -> GridMetrics | None:
        return self._metrics

    def card_for(self, video_id: str) -> VideoCard | None:
        return self._cards.get(video_id)

    def eventFilter(self, watched, event) -> bool:
        if (
            event.type() == QEvent.Type.Resize
            and watched is self.scroll_area.viewport()
            and self._snapshot is not None
            and self._current_metrics() != self._metrics
        ):
            self._relayout()
        return super().eventFilter(watched, event)

    # ------ 状态更新 ------

    def _update_empty_state(self) -> None:
        has_items = bool(self._snapshot and self._snapshot.number_of_sections)
        self.scroll_area.setVisible(has_items)
        self.empty_placeholder.setVisible(not has_items)

    def _update_stats(self) -> None:
        if self._snapshot is None:
            self.stats_label.setText("")
            return
        self.stats_label.setText(
            f"{self._snapshot.number_of_sections} 个分区 · {self._snapshot.number_of_items} 个视频"
        )
