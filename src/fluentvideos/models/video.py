"""视频目录数据模型

Video / Section 均为不可变值，相等性与哈希只看 ``id``：
差分渲染按标识比较条目，而不是按完整内容比较。
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from urllib.parse import urlparse


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Video:
    title: str = field(compare=False)
    link: str | None = field(default=None, compare=False)
    thumbnail_url: str = field(default="", compare=False)
    id: str = field(default_factory=_new_id)

    @property
    def host(self) -> str:
        """链接的主机名，无链接时为空字符串"""
        if not self.link:
            return ""
        return urlparse(self.link).hostname or ""

    def matches(self, needle: str) -> bool:
        # needle 已经 casefold
        return needle in self.title.casefold()


@dataclass(frozen=True, slots=True)
class Section:
    title: str = field(compare=False)
    videos: tuple[Video, ...] = field(default=(), compare=False)
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        # 允许传入 list，统一存为 tuple
        if not isinstance(self.videos, tuple):
            object.__setattr__(self, "videos", tuple(self.videos))

    def matches(self, needle: str) -> bool:
        return needle in self.title.casefold() or any(v.matches(needle) for v in self.videos)
