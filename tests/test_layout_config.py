import pytest

from fluentvideos.core.config_manager import ConfigManager
from fluentvideos.core.layout import grid_metrics


def test_compact_width_is_single_column():
    m = grid_metrics(400)
    assert m.columns == 1
    assert m.item_height == 280
    assert m.item_width == 400 - 20
    assert m.is_compact


def test_regular_width_is_three_columns():
    m = grid_metrics(1000)
    assert m.columns == 3
    assert m.item_height == 250
    assert m.item_width == (1000 - 20 - 20) // 3
    assert not m.is_compact


def test_threshold_boundary():
    assert grid_metrics(699).columns == 1
    assert grid_metrics(700).columns == 3
    assert grid_metrics(800, threshold=900).columns == 1


def test_tiny_width_never_negative():
    assert grid_metrics(0).item_width == 0


def test_positions_and_rows():
    m = grid_metrics(1000)
    assert [m.position(i) for i in range(4)] == [(0, 0), (0, 1), (0, 2), (1, 0)]
    assert m.rows_for(0) == 0
    assert m.rows_for(3) == 1
    assert m.rows_for(4) == 2


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


@pytest.mark.parametrize(
    "overrides, key, expected",
    [
        ({"proxy_mode": "SOCKS5 "}, "proxy_mode", "socks5"),
        ({"proxy_mode": "custom"}, "proxy_mode", "off"),
        ({"catalog_file": "/definitely/missing/catalog.json"}, "catalog_file", ""),
        ({"compact_width_threshold": -5}, "compact_width_threshold", 700),
        ({"compact_width_threshold": "abc"}, "compact_width_threshold", 700),
        ({"compact_width_threshold": "900"}, "compact_width_threshold", 900),
        ({"window_size": [0, 10]}, "window_size", [1100, 760]),
        ({"window_size": "big"}, "window_size", [1100, 760]),
        ({"animate_changes": 0}, "animate_changes", True),
        ({"animate_changes": "false"}, "animate_changes", True),
        ({"animate_changes": False}, "animate_changes", False),
    ],
)
def test_config_normalize(overrides, key, expected):
    merged = ConfigManager.normalize({**ConfigManager.DEFAULT_CONFIG, **overrides})
    assert merged[key] == expected


def test_config_normalize_keeps_existing_catalog_file(tmp_path):
    p = tmp_path / "c.json"
    p.write_text("{}", encoding="utf-8")
    merged = ConfigManager.normalize({**ConfigManager.DEFAULT_CONFIG, "catalog_file": str(p)})
    assert merged["catalog_file"] == str(p)
