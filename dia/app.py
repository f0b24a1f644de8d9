"""PySide6 application entry point."""

import sys

from PySide6.QtWidgets import QApplication

from dia.config import APP_NAME, load_config
from dia.core.logger import setup_logging
from dia.gui.main_window import MainWindow


def main(argv=None, path=None):
    argv = list(sys.argv if argv is None else argv)
    load_config()
    setup_logging()

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setQuitOnLastWindowClosed(True)
    window = MainWindow()
    if path:
        window.open_path(path)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
