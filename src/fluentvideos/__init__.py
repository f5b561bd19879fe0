"""FluentVideos: 可搜索的分区视频目录"""

__version__ = "1.0.0"
