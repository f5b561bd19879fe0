"""
FluentVideos 核心层

- config_manager -> 配置 (JSON 持久化)
- errors         -> 异常层级
- search         -> 关键词过滤
- snapshot       -> 快照构建与差分
- layout         -> 网格尺寸计算
- controller     -> 事件处理与状态
"""

from .config_manager import ConfigManager, config_manager
from .errors import CatalogError, FluentVideosError, SnapshotError

__all__ = [
    # 配置管理
    "ConfigManager",
    "config_manager",
    # 异常
    "FluentVideosError",
    "CatalogError",
    "SnapshotError",
]
