from __future__ import annotations

from collections import OrderedDict
from typing import Generic, TypeVar
from urllib.parse import urlparse

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtNetwork import (
    QNetworkAccessManager,
    QNetworkProxy,
    QNetworkProxyFactory,
    QNetworkReply,
    QNetworkRequest,
)

from ..core.config_manager import config_manager
from .logger import logger

T = TypeVar("T")

CACHE_LIMIT = 256


class LruCache(Generic[T]):
    """按最近使用淘汰的定长缓存"""

    def __init__(self, limit: int = CACHE_LIMIT):
        self.limit = limit
        self._items: OrderedDict[str, T] = OrderedDict()

    def get(self, key: str) -> T | None:
        value = self._items.get(key)
        if value is not None:
            self._items.move_to_end(key)
        return value

    def put(self, key: str, value: T) -> None:
        self._items[key] = value
        self._items.move_to_end(key)
        while len(self._items) > self.limit:
            self._items.popitem(last=False)

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


def thumbnail_url(url_str: str) -> str:
    """规范化缩略图 URL。

    只处理 YouTube 的 WebP 缩略图（Qt 默认不带 WebP 解码插件）：
    https://i.ytimg.com/vi_webp/ID/maxresdefault.webp -> /vi/ID/maxresdefault.jpg
    其他主机的 URL 原样返回。
    """
    url_str = str(url_str or "").strip()
    parsed = urlparse(url_str)
    if parsed.hostname != "i.ytimg.com" or not parsed.path.startswith("/vi_webp/"):
        return url_str
    path = "/vi/" + parsed.path[len("/vi_webp/"):]
    if path.endswith(".webp"):
        path = path[:-5] + ".jpg"
    return parsed._replace(path=path).geturl()


def proxy_settings() -> tuple[str, str]:
    """返回 (mode, url)，url 已补全 scheme；mode 为 off/system 时 url 为空"""
    mode = str(config_manager.get("proxy_mode") or "off").lower().strip()
    raw = str(config_manager.get("proxy_url", "") or "").strip()
    if mode not in {"http", "socks5"} or not raw:
        return mode, ""
    # QUrl 需要 scheme 才能解析出 host/port
    if "://" not in raw:
        raw = f"{mode}://{raw}"
    return mode, raw


class ImageLoader(QObject):
    """异步缩略图加载器（按 URL 缓存，同一进程内不重复下载）"""

    loaded = Signal(QPixmap)

    # 进程内共享，按 URL 缓存已解码的缩略图
    _cache: LruCache[QPixmap] = LruCache()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.manager = QNetworkAccessManager(self)
        self._apply_proxy()

    def _apply_proxy(self) -> None:
        mode, url_str = proxy_settings()

        if mode == "off":
            QNetworkProxyFactory.setUseSystemConfiguration(False)
            self.manager.setProxy(QNetworkProxy(QNetworkProxy.ProxyType.NoProxy))
            return
        if mode == "system":
            QNetworkProxyFactory.setUseSystemConfiguration(True)
            return
        if not url_str:
            logger.warning("[ImageLoader] 代理模式=手动，但 URL 为空")
            return

        url = QUrl(url_str)
        if not url.isValid() or not url.host() or url.port() <= 0:
            logger.error("[ImageLoader] 代理 URL 无效: {}", url_str)
            return

        proxy_type = (
            QNetworkProxy.ProxyType.Socks5Proxy
            if mode == "socks5"
            else QNetworkProxy.ProxyType.HttpProxy
        )
        self.manager.setProxy(QNetworkProxy(proxy_type, url.host(), url.port()))
        logger.debug("[ImageLoader] 使用代理 {}:{}", url.host(), url.port())

    def load(self, url_str: str) -> None:
        url_str = thumbnail_url(url_str)
        if not url_str:
            return

        cached = self._cache.get(url_str)
        if cached is not None:
            self.loaded.emit(cached)
            return

        request = QNetworkRequest(QUrl(url_str))
        request.setRawHeader(
            b"User-Agent",
            b"Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            b"(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        )
        reply = self.manager.get(request)
        reply.finished.connect(lambda: self._on_finished(reply, url_str))

    def _on_finished(self, reply, url_str: str) -> None:
        try:
            # PySide6 的枚举对象在 bool 上恒为 True，不能用 if err: 判断
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.error("[ImageLoader] 网络错误 ({}): {}", url_str, reply.errorString())
                return

            data = reply.readAll()
            pixmap = QPixmap()
            if data.size() == 0 or not pixmap.loadFromData(data):
                logger.error("[ImageLoader] 图片解码失败 ({}, {} bytes)", url_str, data.size())
                return

            self._cache.put(url_str, pixmap)
            logger.debug("[ImageLoader] 已加载 {} ({}x{})", url_str, pixmap.width(), pixmap.height())
            self.loaded.emit(pixmap)
        finally:
            reply.deleteLater()
