"""
目录服务

启动时确定全局目录：
- 配置了 catalog_file 且可加载 -> 使用外部目录
- 否则（未配置 / 加载失败）-> 使用内置目录
"""

from __future__ import annotations

from ..core.config_manager import config_manager
from ..core.errors import CatalogError
from ..utils.logger import logger
from ..utils.paths import resolve_user_path
from .builtin import builtin_catalog
from .catalog import Catalog, load_catalog


class CatalogService:
    """目录管理（全局单例）"""

    _instance: CatalogService | None = None

    def __new__(cls) -> CatalogService:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self) -> None:
        self._catalog: Catalog | None = None
        self.source = "builtin"

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            self._catalog = self._resolve(str(config_manager.get("catalog_file") or ""))
        return self._catalog

    def _resolve(self, raw_path: str) -> Catalog:
        raw_path = raw_path.strip()
        if raw_path:
            path = resolve_user_path(raw_path)
            try:
                catalog = load_catalog(path)
            except CatalogError as e:
                logger.error(f"[Catalog] 加载目录文件失败，改用内置目录: {e}")
            else:
                self.source = str(path)
                logger.info(f"[Catalog] 已加载 {path}: {catalog!r}")
                return catalog

        self.source = "builtin"
        catalog = builtin_catalog()
        logger.info(f"[Catalog] 使用内置目录: {catalog!r}")
        return catalog


# 全局单例
catalog_service = CatalogService()
