from __future__ import annotations

import os
import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def project_root() -> Path:
    # src/fluentvideos/utils/paths.py -> src/fluentvideos/utils -> src/fluentvideos -> src -> root
    return Path(__file__).resolve().parents[3]


def user_data_dir(app_name: str = "FluentVideos") -> Path:
    home = Path(os.path.expanduser("~"))
    return home / "Documents" / app_name


def resource_path(*parts: str) -> Path:
    # When frozen, resources live under sys._MEIPASS.
    base = Path(getattr(sys, "_MEIPASS", "")) if is_frozen() else project_root()
    return base.joinpath(*parts)


def config_path() -> Path:
    # Dev: repo-root config.json for convenience.
    # Frozen: store config under a writable per-user directory.
    if is_frozen():
        return user_data_dir() / "config.json"
    return project_root() / "config.json"


def resolve_user_path(raw: str) -> Path:
    """Resolve a user-supplied path (``~`` expanded, relative to the config dir)."""

    p = Path(os.path.expanduser(raw))
    if not p.is_absolute():
        p = config_path().parent / p
    return p
