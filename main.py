from __future__ import annotations

import os
import sys
from pathlib import Path

# 解决 Windows 下 QtNetwork HTTPS 可能遇到的 OpenSSL DLL 缺失问题（缩略图下载）
# 注意：需要在导入 PySide6 相关模块之前设置 PATH
if sys.platform == "win32":
    try:
        import PySide6

        package_dir = os.path.dirname(PySide6.__file__)
        openssl_dir = os.path.join(package_dir, "openssl", "bin")
        if os.path.exists(openssl_dir):
            os.environ["PATH"] = openssl_dir + os.pathsep + os.environ.get("PATH", "")
    except (ImportError, OSError):
        pass

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication


def main() -> None:
    # Ensure "src" is importable when running from repo root
    src_dir = Path(__file__).resolve().parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    app = QApplication(sys.argv)
    app.setAttribute(Qt.ApplicationAttribute.AA_DontCreateNativeWidgetSiblings)

    font = QFont("Microsoft YaHei UI", 9)
    font.setHintingPreference(QFont.HintingPreference.PreferNoHinting)
    app.setFont(font)

    # Import UI after QApplication is created to avoid triggering Qt font operations
    # during module import.
    from fluentvideos.ui.main_window import MainWindow

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
