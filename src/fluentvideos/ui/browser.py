from __future__ import annotations

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

from ..utils.logger import logger


class QtBrowserPresenter:
    """用系统默认浏览器打开链接"""

    def present(self, url: str) -> None:
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.error("[Browser] 无法打开链接: {}", url)
