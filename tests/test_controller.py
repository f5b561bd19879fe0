import pytest

from fluentvideos.core.controller import CatalogController, navigable_link
from fluentvideos.core.snapshot import build_snapshot
from fluentvideos.catalog import Catalog
from fluentvideos.models import Section, Video


class FakeRenderer:
    def __init__(self):
        self.applied = []

    def apply(self, snapshot, animate):
        self.applied.append((snapshot, animate))


class FakeBrowser:
    def __init__(self):
        self.opened = []

    def present(self, url):
        self.opened.append(url)


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def browser():
    return FakeBrowser()


@pytest.fixture
def controller(catalog, renderer, browser):
    return CatalogController(catalog, renderer, browser)


def test_start_applies_full_snapshot_without_animation(controller, catalog, renderer):
    controller.start()
    snapshot, animate = renderer.applied[-1]
    assert snapshot == build_snapshot(catalog.sections)
    assert animate is False
    assert controller.query is None


def test_update_query_filters_and_animates(controller, catalog, renderer):
    controller.update_query("setup")
    snapshot, animate = renderer.applied[-1]
    assert animate is True
    assert snapshot.section_identifiers == [catalog.sections[0].id]
    assert controller.visible_sections == [catalog.sections[0]]
    assert controller.query == "setup"


def test_animation_can_be_disabled(catalog, renderer, browser):
    c = CatalogController(catalog, renderer, browser, animate=False)
    c.update_query("x")
    assert renderer.applied[-1][1] is False


def test_same_query_reapplies(controller, renderer):
    controller.update_query("intro")
    controller.update_query("intro")
    assert len(renderer.applied) == 2
    assert renderer.applied[0][0] == renderer.applied[1][0]


def test_clearing_query_restores_catalog(controller, catalog, renderer):
    controller.update_query("zzz")
    assert renderer.applied[-1][0].number_of_sections == 0
    controller.update_query("")
    assert controller.visible_sections == list(catalog.sections)


def test_select_opens_link_from_current_snapshot(controller, browser):
    controller.update_query("advanced")
    # 过滤后 (0, 0) 指向 Advanced 分区的第一个视频
    assert controller.select(0, 0) == "https://example.com/layouts"
    assert browser.opened == ["https://example.com/layouts"]


def test_select_out_of_range_is_ignored(controller, browser):
    controller.update_query("advanced")
    assert controller.select(1, 0) is None
    assert controller.select(0, 5) is None
    assert browser.opened == []


def test_select_video_by_identity(controller, catalog, browser):
    setup = catalog.sections[0].videos[1]
    assert controller.select_video(setup.id) == setup.link
    controller.update_query("advanced")
    # 已被过滤掉的视频不能再被选中
    assert controller.select_video(setup.id) is None
    assert browser.opened == [setup.link]


@pytest.mark.parametrize("link", [None, "", "   ", "not a url", "ftp://example.com/x", "https://"])
def test_invalid_link_does_not_navigate(renderer, browser, link):
    video = Video(title="broken", link=link)
    c = CatalogController(Catalog([Section(title="S", videos=(video,))]), renderer, browser)
    assert c.select(0, 0) is None
    assert browser.opened == []


def test_navigable_link():
    assert navigable_link(Video(title="t", link="HTTPS://Example.com/a")) == "HTTPS://Example.com/a"
    assert navigable_link(Video(title="t", link=" http://e.x/ ")) == "http://e.x/"
    assert navigable_link(Video(title="t", link="javascript:alert(1)")) is None
