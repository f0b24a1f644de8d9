"""
Pytest configuration and shared fixtures.

Headless Qt on Linux: set QT_QPA_PLATFORM=offscreen so that widgets and native
dialogs can be created in CI without a display. Where offscreen is not available,
run under Xvfb:

  xvfb-run -a pytest tests/test_qt_shell.py -v
"""
import os
import sys

# Must set before any PySide6/Qt import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from dia.application.controller import DiaController
from dia.application.shell import HostShell
from dia.config import reset_config
from dia.core.recent_files import RecentFiles
from dia.exceptions import DialogError


class FakeShell(HostShell):
    """Records every call; dialog answers are queued on open_answers / save_answers / message_answers."""

    def __init__(self):
        self.open_answers = []
        self.save_answers = []
        self.message_answers = []
        self.dialogs = []
        self.titles = []
        self.menus = []
        self.events = []
        self.quit_calls = 0
        self.hide_calls = 0

    def _answer(self, queue):
        answer = queue.pop(0) if queue else ""
        if isinstance(answer, Exception):
            raise answer
        return answer

    def show_open_dialog(self, title, filters):
        self.dialogs.append(("open", title, tuple(filters)))
        return self._answer(self.open_answers)

    def show_save_dialog(self, title, default_filename, filters):
        self.dialogs.append(("save", title, default_filename, tuple(filters)))
        return self._answer(self.save_answers)

    def show_message_dialog(self, title, message, buttons, default_button="", cancel_button=""):
        self.dialogs.append(("message", title, message, tuple(buttons), default_button, cancel_button))
        return self._answer(self.message_answers)

    def set_window_title(self, title):
        self.titles.append(title)

    def rebuild_menu(self, menu):
        self.menus.append(menu)

    def emit(self, event_name, payload=None):
        self.events.append((event_name, payload))

    def quit(self):
        self.quit_calls += 1

    def hide(self):
        self.hide_calls += 1

    @property
    def title(self):
        return self.titles[-1] if self.titles else None

    def event_names(self):
        return [name for name, _ in self.events]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the dia config directory at a temp dir so tests never touch the real one."""
    config_dir = tmp_path / "config" / "dia"
    monkeypatch.setenv("DIA_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("DIA_CONFIG", raising=False)
    reset_config()
    yield config_dir
    reset_config()


@pytest.fixture
def shell():
    return FakeShell()


@pytest.fixture
def recent_path(tmp_path):
    return tmp_path / "state" / "recent-files.json"


@pytest.fixture
def recent(recent_path):
    return RecentFiles(path=recent_path)


@pytest.fixture
def controller(shell, recent):
    ctl = DiaController(shell, recent=recent, version="1.2.3", platform="linux")
    ctl.startup()
    return ctl


@pytest.fixture
def dialog_error():
    return DialogError("no display")
