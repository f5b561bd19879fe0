"""
FluentVideos 数据模型层

包含目录、过滤与快照共享的数据模型定义。
"""

from .video import Section, Video

__all__ = [
    "Section",
    "Video",
]
