import pytest

from fluentvideos.core.errors import SnapshotError
from fluentvideos.core.search import filtered_sections
from fluentvideos.core.snapshot import Snapshot, SnapshotDiff, build_snapshot
from fluentvideos.models import Section, Video


def test_build_snapshot_preserves_order_and_identity(catalog):
    snap = build_snapshot(catalog.sections)
    intro, advanced = catalog.sections

    assert snap.section_identifiers == [intro.id, advanced.id]
    assert snap.item_identifiers == [v.id for v in intro.videos] + [advanced.videos[0].id]
    assert snap.number_of_sections == 2
    assert snap.number_of_items == 3
    assert snap.items_in(intro.id) == intro.videos
    assert snap.groups[1].section is advanced


def test_item_at_and_out_of_range(catalog):
    snap = build_snapshot(catalog.sections)
    assert snap.item_at(0, 1).title == "Setup"
    assert snap.item_at(1, 0).title == "Custom Layouts"
    assert snap.item_at(1, 1) is None
    assert snap.item_at(2, 0) is None
    assert snap.item_at(-1, 0) is None
    assert snap.section_at(0).title == "Intro"
    assert snap.section_at(5) is None


def test_items_in_unknown_section_raises(catalog):
    with pytest.raises(SnapshotError):
        build_snapshot(catalog.sections).items_in("nope")


def test_empty_snapshot():
    snap = build_snapshot([])
    assert snap == Snapshot()
    assert len(snap) == 0
    assert snap.number_of_items == 0


def test_duplicate_section_identity_rejected():
    s = Section(title="A", videos=(), id="same")
    with pytest.raises(SnapshotError):
        build_snapshot([s, Section(title="B", id="same")])


def test_duplicate_item_identity_rejected():
    v = Video(title="x", id="v1")
    with pytest.raises(SnapshotError):
        build_snapshot([Section(title="A", videos=(v,)), Section(title="B", videos=(v,))])


def test_snapshots_of_same_sections_are_equal(catalog):
    assert build_snapshot(catalog.sections) == build_snapshot(list(catalog.sections))


def test_diff_from_nothing_inserts_everything(catalog):
    snap = build_snapshot(catalog.sections)
    diff = SnapshotDiff.between(None, snap)
    assert diff.inserted_sections == tuple(snap.section_identifiers)
    assert diff.inserted_items == tuple(snap.item_identifiers)
    assert diff.removed_items == ()
    assert diff.kept_items == ()


def test_diff_after_filtering_keeps_surviving_items(catalog):
    full = build_snapshot(catalog.sections)
    narrowed = build_snapshot(filtered_sections(catalog.sections, "setup"))
    intro, advanced = catalog.sections

    diff = SnapshotDiff.between(full, narrowed)
    assert diff.removed_sections == (advanced.id,)
    assert diff.removed_items == (advanced.videos[0].id,)
    assert diff.inserted_items == ()
    assert diff.kept_items == tuple(v.id for v in intro.videos)

    back = SnapshotDiff.between(narrowed, full)
    assert back.inserted_sections == (advanced.id,)
    assert back.inserted_items == (advanced.videos[0].id,)
    assert back.removed_items == ()


def test_diff_identical_is_empty(catalog):
    snap = build_snapshot(catalog.sections)
    assert SnapshotDiff.between(snap, build_snapshot(catalog.sections)).is_empty


def test_item_moved_between_sections_is_remove_plus_insert():
    v = Video(title="moving", id="v")
    a, b = Section(title="A", id="a"), Section(title="B", id="b")
    old = build_snapshot([Section(title="A", videos=(v,), id="a"), b])
    new = build_snapshot([a, Section(title="B", videos=(v,), id="b")])

    diff = SnapshotDiff.between(old, new)
    assert diff.removed_items == ("v",)
    assert diff.inserted_items == ("v",)
    assert diff.removed_sections == ()
    assert diff.inserted_sections == ()
