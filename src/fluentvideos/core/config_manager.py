from __future__ import annotations

import json
from typing import Any

from ..utils.paths import config_path, resolve_user_path


class ConfigManager:
    """配置管理单例（JSON 持久化）。"""

    _instance: "ConfigManager | None" = None

    DEFAULT_CONFIG: dict[str, Any] = {
        # 外部目录文件 (JSON)；空代表使用内置目录
        "catalog_file": "",
        # 应用快照时是否对新增卡片做淡入动画
        "animate_changes": True,
        # 可用宽度低于该值 (px) 时网格退化为单列
        "compact_width_threshold": 700,
        "window_size": [1100, 760],
        # Thumbnail proxy mode:
        # - off: do NOT use system/ambient proxy
        # - system: follow system/ambient proxy settings
        # - http / socks5: manual proxy (proxy_url is host:port or URL)
        "proxy_mode": "system",
        "proxy_url": "127.0.0.1:7890",
    }

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self) -> None:
        # Dev: repo root config.json; Frozen: Documents/FluentVideos/config.json
        self.config_file = config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()
        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.DEFAULT_CONFIG.copy()
        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()
        # 合并默认配置，防止新版本缺字段
        return self.normalize({**self.DEFAULT_CONFIG, **data})

    @classmethod
    def normalize(cls, merged: dict[str, Any]) -> dict[str, Any]:
        pm = str(merged.get("proxy_mode") or "off").lower().strip()
        if pm not in {"off", "system", "http", "socks5"}:
            pm = "off"
        merged["proxy_mode"] = pm

        # 目录文件被移动/删除后回退到内置目录
        raw = str(merged.get("catalog_file") or "").strip()
        if raw and not resolve_user_path(raw).exists():
            raw = ""
        merged["catalog_file"] = raw

        try:
            threshold = int(merged.get("compact_width_threshold"))
        except (TypeError, ValueError):
            threshold = 0
        if threshold <= 0:
            threshold = cls.DEFAULT_CONFIG["compact_width_threshold"]
        merged["compact_width_threshold"] = threshold

        size = merged.get("window_size")
        if not (
            isinstance(size, (list, tuple))
            and len(size) == 2
            and all(isinstance(v, int) and v > 0 for v in size)
        ):
            merged["window_size"] = list(cls.DEFAULT_CONFIG["window_size"])

        # 只接受真正的布尔值，手写的 "false" 之类回退到默认
        if not isinstance(merged.get("animate_changes"), bool):
            merged["animate_changes"] = cls.DEFAULT_CONFIG["animate_changes"]
        return merged

    def save(self) -> None:
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(
                json.dumps(self.config, indent=4, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError:
            # Avoid crashing UI if disk is read-only / permission issues.
            pass

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value
        self.save()


config_manager = ConfigManager()
