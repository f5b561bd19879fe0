"""
视频卡片组件

布局:
[缩略图               ]
[标题                 ]
[链接主机 / 无链接     ]
"""
from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, Qt, Signal
from PySide6.QtGui import QColor, QPixmap
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel, QVBoxLayout, QWidget

from qfluentwidgets import CaptionLabel, CardWidget, StrongBodyLabel

from ...models import Video
from ...utils.image_loader import ImageLoader


class VideoCard(CardWidget):
    """单个视频卡片，点击时发出 selected(video_id)"""

    selected = Signal(str)

    def __init__(self, video: Video, parent: QWidget | None = None):
        super().__init__(parent)
        self.video = video
        self._fade: QPropertyAnimation | None = None

        self.image_loader = ImageLoader(self)
        self.image_loader.loaded.connect(self._on_thumb_loaded)

        v = QVBoxLayout(self)
        v.setContentsMargins(10, 10, 10, 10)
        v.setSpacing(6)

        self.thumb = QLabel(self)
        self.thumb.setScaledContents(True)
        self.thumb.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.thumb.setStyleSheet(
            "background: rgba(0,0,0,0.03); border-radius: 6px; "
            "border: 1px solid rgba(0,0,0,0.08); font-size: 36px; color: rgba(0,0,0,0.15);"
        )
        self.thumb.setText("▶")
        v.addWidget(self.thumb, 1)

        self.title_label = StrongBodyLabel(video.title or "未知标题", self)
        self.title_label.setWordWrap(True)
        v.addWidget(self.title_label)

        self.host_label = CaptionLabel(video.host or "无链接", self)
        self.host_label.setTextColor(QColor(120, 120, 120), QColor(150, 150, 150))
        v.addWidget(self.host_label)

        if not video.link:
            self.title_label.setTextColor(QColor(160, 160, 160), QColor(100, 100, 100))
            self.setCursor(Qt.CursorShape.ForbiddenCursor)
        else:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
            self.setToolTip(video.link)

        self.clicked.connect(lambda: self.selected.emit(self.video.id))

        if video.thumbnail_url:
            self.image_loader.load(video.thumbnail_url)

    def set_item_size(self, width: int, height: int) -> None:
        self.setFixedSize(width, height)

    def fade_in(self, duration: int = 250) -> None:
        effect = QGraphicsOpacityEffect(self)
        effect.setOpacity(0.0)
        self.setGraphicsEffect(effect)

        self._fade = QPropertyAnimation(effect, b"opacity", self)
        self._fade.setDuration(duration)
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)
        self._fade.setEasingCurve(QEasingCurve.Type.OutCubic)
        # 动画结束后移除 effect，避免长期离屏绘制
        self._fade.finished.connect(lambda: self.setGraphicsEffect(None))
        self._fade.start()

    def _on_thumb_loaded(self, pixmap: QPixmap) -> None:
        if pixmap and not pixmap.isNull():
            self.thumb.setText("")
            self.thumb.setPixmap(pixmap)


class VideoCardFactory:
    """按视频生成卡片，并把卡片的点击转发给 on_selected"""

    def __init__(self, on_selected, parent: QWidget | None = None):
        self._on_selected = on_selected
        self._parent = parent

    def create_card(self, video: Video) -> VideoCard:
        card = VideoCard(video, self._parent)
        card.selected.connect(self._on_selected)
        return card
