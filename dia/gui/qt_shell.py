"""Qt implementation of HostShell: native dialogs, QMenuBar rendering, window title, frontend events."""

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QFileDialog, QMessageBox

from dia.application.menu import SEPARATOR, SUBMENU
from dia.application.shell import HostShell
from dia.core.event_bus import EventBus
from dia.core.logger import get_logger
from dia.exceptions import DialogError

logger = get_logger("gui.qt_shell")


def qt_filter_string(filters) -> str:
    """FileFilter sequence -> 'Mermaid (*.mmd *.mermaid);;All Files (*)'."""
    return ";;".join(str(f) for f in filters)


def qt_accelerator(accelerator: str) -> str:
    """'CmdOrCtrl+Shift+S' -> 'Ctrl+Shift+S' (Qt maps Ctrl to Cmd on macOS)."""
    return accelerator.replace("CmdOrCtrl", "Ctrl")


class QtShell(QObject, HostShell):
    """
    Host shell backed by a QMainWindow. Events go out on an EventBus (for the
    editor frontend) and as the eventEmitted signal.
    """

    eventEmitted = Signal(str, object)   # event name, payload
    titleChanged = Signal(str)
    menuRebuilt = Signal()

    def __init__(self, window, bus: EventBus = None):
        QObject.__init__(self)
        self._window = window
        self.bus = bus if bus is not None else EventBus()
        self._actions = []
        self._menus = []

    def show_open_dialog(self, title, filters) -> str:
        try:
            path, _ = QFileDialog.getOpenFileName(self._window, title, "", qt_filter_string(filters))
        except RuntimeError as e:
            raise DialogError(str(e)) from e
        return path or ""

    def show_save_dialog(self, title, default_filename, filters) -> str:
        try:
            path, _ = QFileDialog.getSaveFileName(
                self._window, title, default_filename, qt_filter_string(filters)
            )
        except RuntimeError as e:
            raise DialogError(str(e)) from e
        return path or ""

    def show_message_dialog(self, title, message, buttons, default_button="", cancel_button="") -> str:
        try:
            box = QMessageBox(self._window)
            box.setIcon(QMessageBox.Icon.Question)
            box.setWindowTitle(title)
            box.setText(message)
            by_button = {}
            for label in buttons:
                btn = box.addButton(label, QMessageBox.ButtonRole.ActionRole)
                by_button[btn] = label
                if label == default_button:
                    box.setDefaultButton(btn)
                if label == cancel_button:
                    box.setEscapeButton(btn)
            box.exec()
        except RuntimeError as e:
            raise DialogError(str(e)) from e
        clicked = box.clickedButton()
        if clicked is None:
            return cancel_button
        return by_button.get(clicked, cancel_button)

    def set_window_title(self, title: str) -> None:
        self._window.setWindowTitle(title)
        self.titleChanged.emit(title)

    def rebuild_menu(self, menu) -> None:
        if menu is None:
            return
        menubar = self._window.menuBar()
        menubar.clear()
        # deferred delete: a menu action may be the one triggering this rebuild
        for old in self._menus:
            old.deleteLater()
        self._menus = []
        self._actions = []
        for item in menu:
            if item.kind == SUBMENU:
                qmenu = menubar.addMenu(item.label)
                self._menus.append(qmenu)
                self._fill(qmenu, item.submenu)
        self.menuRebuilt.emit()

    def _fill(self, qmenu, menu) -> None:
        for item in menu:
            if item.kind == SEPARATOR:
                qmenu.addSeparator()
            elif item.kind == SUBMENU:
                self._fill(qmenu.addMenu(item.label), item.submenu)
            else:
                action = QAction(item.label, qmenu)
                if item.accelerator:
                    action.setShortcut(QKeySequence(qt_accelerator(item.accelerator)))
                action.setEnabled(item.enabled)
                action.triggered.connect(lambda checked=False, it=item: it.trigger())
                qmenu.addAction(action)
                self._actions.append(action)

    def emit(self, event_name, payload=None) -> None:
        delivered = self.bus.emit(event_name, payload)
        logger.debug("event %s -> %d handler(s)", event_name, delivered)
        self.eventEmitted.emit(event_name, payload)

    def quit(self) -> None:
        # queued: quit may be requested from inside closeEvent (save-and-quit)
        QTimer.singleShot(0, self._window.close)

    def hide(self) -> None:
        self._window.hide()
