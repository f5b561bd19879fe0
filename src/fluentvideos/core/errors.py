"""FluentVideos 异常层级"""

from __future__ import annotations


class FluentVideosError(Exception):
    """所有应用异常的基类"""


class CatalogError(FluentVideosError):
    """目录数据无效（结构错误、标识重复、文件无法读取）"""


class SnapshotError(FluentVideosError):
    """快照中出现重复的分区或条目标识"""
