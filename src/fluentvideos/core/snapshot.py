"""
快照与差分

Snapshot 描述“当前应显示什么”：按顺序排列的 (分区, 视频) 分组，
分区与视频都以稳定的 id 标识。渲染端用 SnapshotDiff 比较前后两份快照，
按标识复用已有卡片，只增删变化的部分。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..models import Section, Video
from .errors import SnapshotError


@dataclass(frozen=True, slots=True)
class SnapshotGroup:
    section: Section
    videos: tuple[Video, ...]


@dataclass(frozen=True)
class Snapshot:
    groups: tuple[SnapshotGroup, ...] = ()
    _items_by_section: dict[str, tuple[Video, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_items_by_section", {g.section.id: g.videos for g in self.groups}
        )

    def __iter__(self) -> Iterator[SnapshotGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def section_identifiers(self) -> list[str]:
        return [g.section.id for g in self.groups]

    @property
    def item_identifiers(self) -> list[str]:
        return [v.id for g in self.groups for v in g.videos]

    @property
    def number_of_sections(self) -> int:
        return len(self.groups)

    @property
    def number_of_items(self) -> int:
        return sum(len(g.videos) for g in self.groups)

    def items_in(self, section_id: str) -> tuple[Video, ...]:
        try:
            return self._items_by_section[section_id]
        except KeyError:
            raise SnapshotError(f"未知分区: {section_id}") from None

    def section_at(self, section_index: int) -> Section | None:
        if 0 <= section_index < len(self.groups):
            return self.groups[section_index].section
        return None

    def item_at(self, section_index: int, item_index: int) -> Video | None:
        """按位置取视频；越界返回 None"""
        if not 0 <= section_index < len(self.groups):
            return None
        videos = self.groups[section_index].videos
        if not 0 <= item_index < len(videos):
            return None
        return videos[item_index]

    def find_item(self, video_id: str) -> Video | None:
        for g in self.groups:
            for v in g.videos:
                if v.id == video_id:
                    return v
        return None


def build_snapshot(sections: Iterable[Section]) -> Snapshot:
    """把分区列表转成快照，保持分区与视频顺序。

    分区或视频标识重复时抛出 SnapshotError。
    """
    seen_sections: set[str] = set()
    seen_items: set[str] = set()
    groups: list[SnapshotGroup] = []

    for section in sections:
        if section.id in seen_sections:
            raise SnapshotError(f"分区标识重复: {section.title!r} ({section.id})")
        seen_sections.add(section.id)

        for video in section.videos:
            if video.id in seen_items:
                raise SnapshotError(f"视频标识重复: {video.title!r} ({video.id})")
            seen_items.add(video.id)

        groups.append(SnapshotGroup(section=section, videos=section.videos))

    return Snapshot(groups=tuple(groups))


@dataclass(frozen=True, slots=True)
class SnapshotDiff:
    """两份快照之间按标识计算的差异。

    视频跨分区移动记为一次删除加一次插入。
    """

    removed_sections: tuple[str, ...] = ()
    inserted_sections: tuple[str, ...] = ()
    removed_items: tuple[str, ...] = ()
    inserted_items: tuple[str, ...] = ()
    kept_items: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (
            self.removed_sections
            or self.inserted_sections
            or self.removed_items
            or self.inserted_items
        )

    @classmethod
    def between(cls, old: Snapshot | None, new: Snapshot) -> SnapshotDiff:
        old_groups = old.groups if old is not None else ()
        old_sections = {g.section.id for g in old_groups}
        new_sections = {g.section.id for g in new.groups}

        # item id -> 所属分区 id
        old_items = {v.id: g.section.id for g in old_groups for v in g.videos}
        new_items = {v.id: g.section.id for g in new.groups for v in g.videos}

        removed_items: list[str] = []
        for g in old_groups:
            for v in g.videos:
                if new_items.get(v.id) != g.section.id:
                    removed_items.append(v.id)

        inserted_items: list[str] = []
        kept_items: list[str] = []
        for g in new.groups:
            for v in g.videos:
                if old_items.get(v.id) == g.section.id:
                    kept_items.append(v.id)
                else:
                    inserted_items.append(v.id)

        return cls(
            removed_sections=tuple(g.section.id for g in old_groups if g.section.id not in new_sections),
            inserted_sections=tuple(g.section.id for g in new.groups if g.section.id not in old_sections),
            removed_items=tuple(removed_items),
            inserted_items=tuple(inserted_items),
            kept_items=tuple(kept_items),
        )
