"""Main application window: menu bar, editor, status bar. Close is gated by the controller."""

from PySide6.QtWidgets import QMainWindow, QStatusBar

from dia.application.controller import DiaController
from dia.config import get_config
from dia.core.logger import get_logger
from dia.core.recent_files import RecentFiles
from dia.gui.frontend import DEFAULT_CONTENT, EditorFrontend
from dia.gui.panels import EditorPanel
from dia.gui.qt_shell import QtShell

logger = get_logger("gui.main_window")


class MainWindow(QMainWindow):
    """Single-document window. The menu bar is rendered from the controller's menu tree."""

    def __init__(self, recent: RecentFiles = None, version: str = None, platform: str = None):
        super().__init__()
        self._config = get_config()
        self._setup_window()
        self._shell = QtShell(self)
        self._controller = DiaController(self._shell, recent=recent, version=version, platform=platform)
        self._editor = EditorPanel()
        self.setCentralWidget(self._editor)
        self._setup_statusbar()
        self._frontend = EditorFrontend(self._controller, self._editor, self._shell.bus, self)
        self._frontend.apply_settings(self._config.get("editor") or {})
        self._shell.titleChanged.connect(self._on_title_changed)
        self._controller.startup()
        self._frontend.set_content(DEFAULT_CONTENT)

    @property
    def controller(self) -> DiaController:
        return self._controller

    @property
    def shell(self) -> QtShell:
        return self._shell

    @property
    def editor(self) -> EditorPanel:
        return self._editor

    def _setup_window(self):
        win = self._config.get("window") or {}
        self.setWindowTitle("dia - Untitled")
        self.setMinimumSize(int(win.get("min_width", 800)), int(win.get("min_height", 600)))
        self.resize(int(win.get("width", 1280)), int(win.get("height", 800)))

    def _setup_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready")

    def open_path(self, path) -> bool:
        """Open path at startup (command line). Returns False and shows the error on failure."""
        result = self._controller.open_path(path)
        if result.error:
            self._frontend.show_error(result.error)
            return False
        self._frontend.set_content(result.content)
        self._statusbar.showMessage("Opened: %s" % result.file_path)
        return True

    def _on_title_changed(self, title: str):
        self._editor.set_header(self._controller.document.display_name)

    def closeEvent(self, event):
        if self._controller.before_close():
            event.ignore()
            return
        self._frontend.detach()
        event.accept()
