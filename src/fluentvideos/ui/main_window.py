from __future__ import annotations

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication

from qfluentwidgets import FluentIcon, FluentWindow, NavigationItemPosition

from ..catalog.catalog_service import catalog_service
from ..core.config_manager import config_manager
from ..core.controller import CatalogController
from ..utils.logger import logger
from ..utils.paths import resource_path
from .browser import QtBrowserPresenter
from .pages.catalog_page import CatalogPage


class MainWindow(FluentWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("FluentVideos")
        icon_path = resource_path("assets", "logo.png")
        if icon_path.exists():
            self.setWindowIcon(QIcon(str(icon_path)))

        width, height = config_manager.get("window_size") or (1100, 760)
        self.resize(width, height)

        # 居中
        desktop = QApplication.primaryScreen().availableGeometry()
        self.move(
            desktop.x() + desktop.width() // 2 - self.width() // 2,
            desktop.y() + desktop.height() // 2 - self.height() // 2,
        )

        # === 页面 ===
        self.catalog_page = CatalogPage(self)
        self.addSubInterface(
            self.catalog_page,
            FluentIcon.VIDEO,
            "视频目录",
            position=NavigationItemPosition.TOP,
        )

        # === 控制器 ===
        self.controller = CatalogController(
            catalog_service.catalog,
            self.catalog_page,
            QtBrowserPresenter(),
            animate=bool(config_manager.get("animate_changes", True)),
        )
        self.catalog_page.query_changed.connect(self.controller.update_query)
        self.catalog_page.video_selected.connect(self.controller.select_video)

        self.controller.start()
        logger.info(f"[MainWindow] 目录来源: {catalog_service.source}")
