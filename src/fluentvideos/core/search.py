"""目录搜索过滤"""

from __future__ import annotations

from typing import Iterable

from ..models import Section


def filtered_sections(sections: Iterable[Section], query: str | None) -> list[Section]:
    """按关键词过滤分区（大小写不敏感的子串匹配）。

    - 关键词为空或 None：原样返回全部分区
    - 分区标题命中，或任一视频标题命中：保留整个分区（含全部视频）
    - 其余分区剔除；顺序保持不变，无命中时返回空列表

    返回的 Section 与输入是同一批对象，标识不变。
    """
    if not query:
        return list(sections)

    needle = query.casefold()
    return [s for s in sections if s.matches(needle)]
