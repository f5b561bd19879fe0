"""
视频目录

目录在启动时确定，之后不再修改。分区标识全局唯一，视频标识在整个目录内唯一
（渲染端按标识全局去重/比较条目）。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..core.errors import CatalogError
from ..models import Section, Video


class Catalog:
    """只读的分区集合"""

    def __init__(self, sections: Iterable[Section]) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._videos: dict[str, Video] = {}

        section_ids: set[str] = set()
        for section in self._sections:
            if section.id in section_ids:
                raise CatalogError(f"分区标识重复: {section.title!r} ({section.id})")
            section_ids.add(section.id)
            for video in section.videos:
                if video.id in self._videos:
                    raise CatalogError(f"视频标识重复: {video.title!r} ({video.id})")
                self._videos[video.id] = video

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def video_count(self) -> int:
        return len(self._videos)

    def find_video(self, video_id: str) -> Video | None:
        return self._videos.get(video_id)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self):
        return iter(self._sections)

    def __repr__(self) -> str:
        return f"Catalog(sections={len(self._sections)}, videos={len(self._videos)})"


# ---------------------------------------------------------------------------
# JSON 加载
# ---------------------------------------------------------------------------


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f"{where}: 缺少字段 {key!r}")
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogError(f"{where}: 字段 {key!r} 必须是字符串")
    return value


def _video_from_dict(data: Any, where: str) -> Video:
    if not isinstance(data, dict):
        raise CatalogError(f"{where}: 视频条目必须是对象")
    kwargs: dict[str, Any] = {
        "title": _require_str(data, "title", where),
        "link": _optional_str(data, "link", where) or None,
        "thumbnail_url": _optional_str(data, "thumbnail_url", where) or "",
    }
    vid = _optional_str(data, "id", where)
    if vid:
        kwargs["id"] = vid
    return Video(**kwargs)


def _section_from_dict(data: Any, where: str) -> Section:
    if not isinstance(data, dict):
        raise CatalogError(f"{where}: 分区必须是对象")
    title = _require_str(data, "title", where)
    raw_videos = data.get("videos", [])
    if not isinstance(raw_videos, list):
        raise CatalogError(f"{where}: 'videos' 必须是数组")
    videos = tuple(
        _video_from_dict(item, f"{where}.videos[{i}]") for i, item in enumerate(raw_videos)
    )
    sid = _optional_str(data, "id", where)
    if sid:
        return Section(title=title, videos=videos, id=sid)
    return Section(title=title, videos=videos)


def catalog_from_dict(data: Any) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError("目录文件顶层必须是对象")
    raw_sections = data.get("sections")
    if not isinstance(raw_sections, list):
        raise CatalogError("目录文件缺少 'sections' 数组")
    return Catalog(
        _section_from_dict(item, f"sections[{i}]") for i, item in enumerate(raw_sections)
    )


def load_catalog(path: str | Path) -> Catalog:
    """从 JSON 文件加载目录；文件不可读或结构无效时抛出 CatalogError"""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"无法读取目录文件 {p}: {e}") from e
    try:
        data = json.loads(text)
    except ValueError as e:
        raise CatalogError(f"目录文件不是有效的 JSON {p}: {e}") from e
    return catalog_from_dict(data)
