"""内置视频目录"""

from __future__ import annotations

from functools import lru_cache

from ..models import Section, Video
from .catalog import Catalog

_QT_DOCS = "https://doc.qt.io/qtforpython-6"
_FLUENT_DOCS = "https://qfluentwidgets.com"


@lru_cache(maxsize=1)
def builtin_catalog() -> Catalog:
    """内置目录；进程内只构建一次，保证标识稳定"""
    return Catalog(
        [
            Section(
                id="getting-started",
                title="入门",
                videos=(
                    Video(
                        id="qt-for-python",
                        title="Qt for Python 入门",
                        link=f"{_QT_DOCS}/gettingstarted.html",
                    ),
                    Video(
                        id="first-widget-app",
                        title="第一个 Widgets 应用",
                        link=f"{_QT_DOCS}/tutorials/basictutorial/widgets.html",
                    ),
                    Video(
                        id="signals-and-slots",
                        title="信号与槽 Signals and Slots",
                        link=f"{_QT_DOCS}/tutorials/basictutorial/signals_and_slots.html",
                    ),
                ),
            ),
            Section(
                id="layouts",
                title="布局",
                videos=(
                    Video(
                        id="layout-management",
                        title="Layout Management 布局管理",
                        link="https://doc.qt.io/qt-6/layout.html",
                    ),
                    Video(
                        id="flow-layout",
                        title="Flow Layout 流式布局",
                        link=f"{_QT_DOCS}/examples/example_widgets_layouts_flowlayout.html",
                    ),
                ),
            ),
            Section(
                id="model-view",
                title="Model/View 编程",
                videos=(
                    Video(
                        id="model-view-intro",
                        title="Model/View 架构概览",
                        link="https://doc.qt.io/qt-6/model-view-programming.html",
                    ),
                    Video(
                        id="item-views",
                        title="QListView 与 QTableView",
                        link="https://doc.qt.io/qt-6/modelview.html",
                    ),
                    Video(
                        id="custom-delegates",
                        title="自定义 Delegate 绘制",
                        link=None,  # 尚未发布
                    ),
                ),
            ),
            Section(
                id="fluent-design",
                title="Fluent Design",
                videos=(
                    Video(
                        id="fluent-widgets-quickstart",
                        title="QFluentWidgets 快速上手",
                        link=f"{_FLUENT_DOCS}/en/pages/about",
                    ),
                    Video(
                        id="fluent-window",
                        title="FluentWindow 导航界面",
                        link=f"{_FLUENT_DOCS}/en/pages/components/fluentwindow",
                    ),
                ),
            ),
            Section(
                id="animation",
                title="动画",
                videos=(
                    Video(
                        id="animation-framework",
                        title="The Animation Framework",
                        link="https://doc.qt.io/qt-6/animation-overview.html",
                    ),
                ),
            ),
        ]
    )
