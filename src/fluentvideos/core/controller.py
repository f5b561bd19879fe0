"""
目录控制器

持有“当前关键词”和“当前可见分区”两份状态，所有事件在 GUI 线程上同步处理：
关键词变化 -> 重新过滤 -> 构建快照 -> 交给渲染端；
条目选中 -> 从当前快照解析视频 -> 交给浏览器打开链接。
"""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import urlparse

from ..catalog.catalog import Catalog
from ..models import Section, Video
from ..utils.logger import logger
from .search import filtered_sections
from .snapshot import Snapshot, build_snapshot


class Renderer(Protocol):
    def apply(self, snapshot: Snapshot, animate: bool) -> None: ...


class BrowserPresenter(Protocol):
    def present(self, url: str) -> None: ...


class CardDelegate(Protocol):
    """给定一个视频，生成它的显示组件"""

    def create_card(self, video: Video) -> Any: ...


def navigable_link(video: Video) -> str | None:
    """视频链接可打开时返回链接，否则返回 None（只接受绝对 http/https URL）"""
    link = (video.link or "").strip()
    if not link:
        return None
    parsed = urlparse(link)
    if parsed.scheme.lower() not in {"http", "https"} or not parsed.netloc:
        return None
    return link


class CatalogController:
    def __init__(
        self,
        catalog: Catalog,
        renderer: Renderer,
        browser: BrowserPresenter,
        *,
        animate: bool = True,
    ) -> None:
        self.catalog = catalog
        self.renderer = renderer
        self.browser = browser
        self.animate = animate

        self._query: str | None = None
        self._visible: list[Section] = list(catalog.sections)
        self._snapshot: Snapshot = build_snapshot(self._visible)

    # ------ 状态 ------

    @property
    def query(self) -> str | None:
        return self._query

    @property
    def visible_sections(self) -> list[Section]:
        return list(self._visible)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    # ------ 事件 ------

    def start(self) -> None:
        """首次显示：全量快照，不做动画"""
        self._apply(animate=False)

    def update_query(self, text: str | None) -> None:
        self._query = text
        self._visible = filtered_sections(self.catalog.sections, text)
        self._snapshot = build_snapshot(self._visible)
        logger.debug(
            "[Controller] 查询 {!r}: {} 个分区 / {} 个视频",
            text,
            self._snapshot.number_of_sections,
            self._snapshot.number_of_items,
        )
        self._apply(animate=self.animate)

    def select(self, section_index: int, item_index: int) -> str | None:
        video = self._snapshot.item_at(section_index, item_index)
        if video is None:
            logger.debug("[Controller] 选中位置无效: ({}, {})", section_index, item_index)
            return None
        return self._open(video)

    def select_video(self, video_id: str) -> str | None:
        video = self._snapshot.find_item(video_id)
        if video is None:
            logger.debug("[Controller] 选中的视频不在当前快照中: {}", video_id)
            return None
        return self._open(video)

    # ------ 内部 ------

    def _apply(self, animate: bool) -> None:
        self.renderer.apply(self._snapshot, animate)

    def _open(self, video: Video) -> str | None:
        url = navigable_link(video)
        if url is None:
            logger.warning("[Controller] 无效链接: {!r} ({!r})", video.title, video.link)
            return None
        logger.info("[Controller] 打开链接: {}", url)
        self.browser.present(url)
        return url
