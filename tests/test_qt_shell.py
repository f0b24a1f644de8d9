"""
Qt host shell and main window. Require headless Qt (conftest sets
QT_QPA_PLATFORM=offscreen on Linux; or run with: xvfb-run -a pytest ...).
"""
from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtWidgets import QApplication, QMainWindow

from dia.application.shell import FileFilter
from dia.core import events
from dia.core.recent_files import RecentFiles
from dia.gui.frontend import DEFAULT_CONTENT
from dia.gui.main_window import MainWindow
from dia.gui.qt_shell import QtShell, qt_accelerator, qt_filter_string


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def window(qapp, tmp_path):
    win = MainWindow(recent=RecentFiles(path=tmp_path / "recent-files.json"), version="9.9.9", platform="linux")
    yield win
    win.controller.document.dirty = False
    win.close()
    qapp.processEvents()


def _menu_actions(win):
    return {a.text(): a for a in win.menuBar().actions()}


def _find_action(qmenu, text):
    for action in qmenu.actions():
        if action.text() == text:
            return action
    raise AssertionError("no action %r" % text)


def test_filter_string():
    filters = (FileFilter("Mermaid", ("*.mmd", "*.mermaid")), FileFilter("All Files", ("*",)))
    assert qt_filter_string(filters) == "Mermaid (*.mmd *.mermaid);;All Files (*)"


def test_accelerator_mapping():
    assert qt_accelerator("CmdOrCtrl+Shift+S") == "Ctrl+Shift+S"
    assert qt_accelerator("CmdOrCtrl+,") == "Ctrl+,"


def test_set_title_and_emit(qapp):
    win = QMainWindow()
    shell = QtShell(win)
    titles, signalled, delivered = [], [], []
    shell.titleChanged.connect(titles.append)
    shell.eventEmitted.connect(lambda name, payload: signalled.append((name, payload)))
    shell.bus.subscribe(events.THEME_SET, delivered.append)

    shell.set_window_title("dia - x.mmd *")
    shell.emit(events.THEME_SET, "nord")

    assert win.windowTitle() == "dia - x.mmd *"
    assert titles == ["dia - x.mmd *"]
    assert signalled == [(events.THEME_SET, "nord")]
    assert delivered == ["nord"]


def test_window_renders_menu(window):
    menus = _menu_actions(window)
    assert list(menus) == ["File", "Edit", "View", "Help"]
    file_menu = menus["File"].menu()
    texts = [a.text() for a in file_menu.actions() if not a.isSeparator()]
    assert texts == ["New", "Open...", "Open Recent", "Save", "Save As...", "Quit"]
    recent_menu = _find_action(file_menu, "Open Recent").menu()
    placeholder = recent_menu.actions()[0]
    assert placeholder.text() == "No Recent Files"
    assert not placeholder.isEnabled()
    assert _find_action(file_menu, "Save As...").shortcut().toString() == "Ctrl+Shift+S"


def test_window_initial_state(window):
    assert window.windowTitle() == "dia - Untitled"
    assert window.editor.content() == DEFAULT_CONTENT
    assert window.controller.document.dirty is False
    assert window.controller.get_version() == "9.9.9"


def test_editing_marks_dirty(window):
    window.editor._editor.insertPlainText("%% note\n")
    assert window.controller.document.dirty is True
    assert window.windowTitle() == "dia - Untitled *"


def test_open_path_loads_editor_and_recent_menu(window, tmp_path):
    path = tmp_path / "flow.mmd"
    path.write_text("graph LR\n    X --> Y\n", encoding="utf-8")

    assert window.open_path(str(path)) is True

    assert window.editor.content() == "graph LR\n    X --> Y\n"
    assert window.windowTitle() == "dia - flow.mmd"
    assert window.controller.document.dirty is False
    file_menu = _menu_actions(window)["File"].menu()
    recent_menu = _find_action(file_menu, "Open Recent").menu()
    assert recent_menu.actions()[0].text() == "flow.mmd (%s)" % str(tmp_path)


def test_menu_new_resets_document(window, tmp_path):
    path = tmp_path / "flow.mmd"
    path.write_text("graph LR\n", encoding="utf-8")
    window.open_path(str(path))

    file_menu = _menu_actions(window)["File"].menu()
    _find_action(file_menu, "New").trigger()

    assert window.editor.content() == DEFAULT_CONTENT
    assert window.controller.document.current_path is None
    assert window.windowTitle() == "dia - Untitled"


def test_theme_menu_applies_theme(window):
    view_menu = _menu_actions(window)["View"].menu()
    theme_menu = _find_action(view_menu, "Theme").menu()
    _find_action(theme_menu, "Dracula").trigger()
    assert window.editor.theme == "dracula"


def test_save_writes_current_file(window, tmp_path):
    path = tmp_path / "flow.mmd"
    path.write_text("graph LR\n", encoding="utf-8")
    window.open_path(str(path))
    window.editor._editor.insertPlainText("%% edit\n")

    window.shell.emit(events.FILE_SAVE)

    assert Path(path).read_text(encoding="utf-8") == window.editor.content()
    assert window.controller.document.dirty is False


def test_quit_closes_clean_window(qapp, window):
    window.show()
    window.shell.quit()
    qapp.processEvents()
    assert not window.isVisible()


def test_close_with_save_writes_file_and_closes(qapp, window, tmp_path, monkeypatch):
    path = tmp_path / "flow.mmd"
    path.write_text("graph LR\n", encoding="utf-8")
    window.open_path(str(path))
    window.editor._editor.insertPlainText("%% pending\n")
    asked = []

    def answer_save(title, message, buttons, default_button="", cancel_button=""):
        asked.append(buttons)
        return "Save"

    monkeypatch.setattr(window.shell, "show_message_dialog", answer_save)
    window.show()

    window.close()
    assert window.isVisible()
    qapp.processEvents()

    assert asked == [["Save", "Discard", "Cancel"]]
    assert path.read_text(encoding="utf-8") == window.editor.content()
    assert window.controller.document.dirty is False
    assert not window.controller.save_and_quit_pending
    assert not window.isVisible()


def test_close_with_cancelled_save_as_stays_open(qapp, window, monkeypatch):
    window.editor._editor.insertPlainText("%% unsaved\n")
    monkeypatch.setattr(window.shell, "show_message_dialog", lambda *args, **kwargs: "Save")
    monkeypatch.setattr(window.shell, "show_save_dialog", lambda *args: "")
    window.show()

    window.close()
    qapp.processEvents()

    assert window.isVisible()
    assert window.controller.document.dirty is True
    assert not window.controller.save_and_quit_pending
