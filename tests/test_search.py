import pytest

from fluentvideos.catalog import builtin_catalog
from fluentvideos.core.search import filtered_sections
from fluentvideos.models import Section, Video


def titles(sections):
    return [s.title for s in sections]


@pytest.mark.parametrize("query", [None, ""])
def test_empty_query_returns_full_catalog(catalog, query):
    result = filtered_sections(catalog.sections, query)
    assert result == list(catalog.sections)
    for got, expected in zip(result, catalog.sections):
        assert got is expected
        assert got.videos is expected.videos


def test_video_title_match_keeps_whole_section(catalog):
    intro = catalog.sections[0]
    result = filtered_sections(catalog.sections, "setup")
    assert result == [intro]
    assert result[0] is intro
    assert [v.title for v in result[0].videos] == ["Getting Started", "Setup"]


def test_section_title_match(catalog):
    result = filtered_sections(catalog.sections, "advanced")
    assert titles(result) == ["Advanced"]
    assert [v.title for v in result[0].videos] == ["Custom Layouts"]


def test_no_match_is_empty(catalog):
    assert filtered_sections(catalog.sections, "zzz") == []


def test_case_insensitive(catalog):
    assert titles(filtered_sections(catalog.sections, "SeTuP")) == ["Intro"]
    assert titles(filtered_sections(catalog.sections, "LAYOUT")) == ["Advanced"]


def test_whitespace_is_significant(catalog):
    # " setup" 不是 "Setup" 的子串
    assert filtered_sections(catalog.sections, " setup") == []
    assert titles(filtered_sections(catalog.sections, "g s")) == ["Intro"]


def test_matches_in_several_sections_keep_catalog_order(catalog):
    # "t" 同时命中两个分区
    assert titles(filtered_sections(catalog.sections, "t")) == ["Intro", "Advanced"]


def test_properties_over_builtin_catalog():
    sections = builtin_catalog().sections
    order = {s.id: i for i, s in enumerate(sections)}
    queries = ["", "qt", "布局", "VIEW", "fluent", "animation", "不存在的关键词", "a"]

    for q in queries:
        result = filtered_sections(sections, q)
        # 幂等
        assert result == filtered_sections(sections, q)
        # 顺序是目录顺序的子序列
        indexes = [order[s.id] for s in result]
        assert indexes == sorted(indexes)
        if not q:
            assert result == list(sections)
            continue
        needle = q.casefold()
        for s in result:
            assert needle in s.title.casefold() or any(
                needle in v.title.casefold() for v in s.videos
            )
        # 未返回的分区一定不命中
        excluded = [s for s in sections if s not in result]
        for s in excluded:
            assert needle not in s.title.casefold()
            assert all(needle not in v.title.casefold() for v in s.videos)


def test_accepts_any_iterable():
    s = Section(title="Only", videos=[Video(title="One")])
    assert filtered_sections(iter([s]), "one") == [s]
