import logging
from typing import Any, Optional

import dia
from dia.config import DEFAULT_FILENAME, OPEN_FILTERS, SAVE_FILTERS
from dia.core import events
from dia.core.close_latch import CloseLatch
from dia.core.document import DocumentState
from dia.core.recent_files import RecentFiles
from dia.exceptions import DiaError, DialogError
from dia.application.menu import Menu, build_app_menu, populate_recent_menu
from dia.application.shell import FileFilter, HostShell

logger = logging.getLogger(__name__)

OPEN_TITLE = "Open Mermaid Diagram"
SAVE_TITLE = "Save Mermaid Diagram"
UNSAVED_TITLE = "Unsaved Changes"
DISCARD_MESSAGE = "You have unsaved changes. Discard them?"
QUIT_MESSAGE = "You have unsaved changes. Save before quitting?"

YES, NO = "Yes", "No"
SAVE, DISCARD, CANCEL = "Save", "Discard", "Cancel"


class FileResult:
    """Envelope returned to the frontend for every file operation. error non-empty means failure."""

    def __init__(self, content: str = "", file_path: str = "", error: str = ""):
        self.content = content
        self.file_path = file_path
        self.error = error

    @property
    def ok(self) -> bool:
        return not self.error

    @property
    def cancelled(self) -> bool:
        return not self.error and not self.file_path

    def to_dict(self) -> dict:
        out = {"content": self.content, "filePath": self.file_path}
        if self.error:
            out["error"] = self.error
        return out

    def __eq__(self, other):
        if not isinstance(other, FileResult):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "FileResult(%r)" % self.to_dict()


class DiaController:
    """
    Host shell adapter: owns the current document, the recent-files registry
    and the close latch. All calls happen on the UI thread; results and
    menu/title updates are pushed back through the injected HostShell.
    """

    def __init__(
        self,
        shell: HostShell,
        recent: Optional[RecentFiles] = None,
        version: Optional[str] = None,
        platform: Optional[str] = None,
    ):
        self.shell = shell
        self.version = version or dia.__version__
        self.platform = platform
        self.document = DocumentState()
        self.close_latch = CloseLatch()
        self.recent = recent if recent is not None else RecentFiles()
        self.recent.on_change = self.refresh_menu
        self.menu: Optional[Menu] = None
        self.recent_menu: Optional[Menu] = None
        self._save_and_quit_pending = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def startup(self) -> None:
        """Load the recent list, build the menu and set the initial title."""
        try:
            self.recent.load()
        except DiaError as e:
            logger.error("failed to load recent files: %s", e)
        self.build_menu()
        self.update_title()

    def build_menu(self) -> Menu:
        self.menu = build_app_menu(self, self.platform)
        self.refresh_menu()
        return self.menu

    def get_version(self) -> str:
        return self.version

    def emit(self, event_name: str, payload: Any = None) -> None:
        self.shell.emit(event_name, payload)

    # ------------------------------------------------------------------
    # File operations
    # ------------------------------------------------------------------

    def open_file(self) -> FileResult:
        """Ask for a file and open it. Cancel gives an empty result."""
        try:
            path = self.shell.show_open_dialog(OPEN_TITLE, FileFilter.from_pairs(OPEN_FILTERS))
        except DialogError as e:
            return FileResult(error="dialog error: %s" % e)
        if not path:
            return FileResult()
        return self.open_path(path)

    def open_path(self, path) -> FileResult:
        path = str(path)
        try:
            # Undecodable bytes become U+FFFD; line endings are kept as-is
            with open(path, encoding="utf-8", errors="replace", newline="") as f:
                content = f.read()
        except OSError as e:
            logger.warning("open failed: %s", e, extra={"document": path})
            return FileResult(error="read error: %s" % e)

        self.document.mark_clean(path)
        self.recent.add(path)
        self.update_title()
        logger.info("opened", extra={"document": path})
        return FileResult(content=content, file_path=path)

    def save_with_content(self, content: str) -> FileResult:
        """Write to the current file; no current file means Save As."""
        if not self.document.current_path:
            return self.save_as_with_content(content)
        return self.write(self.document.current_path, content)

    def save_as_with_content(self, content: str) -> FileResult:
        try:
            path = self.shell.show_save_dialog(SAVE_TITLE, DEFAULT_FILENAME, FileFilter.from_pairs(SAVE_FILTERS))
        except DialogError as e:
            return FileResult(error="dialog error: %s" % e)
        if not path:
            return FileResult()
        self.document.current_path = path
        return self.write(path, content)

    def write(self, path, content: str) -> FileResult:
        path = str(path)
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.warning("save failed: %s", e, extra={"document": path})
            return FileResult(error="write error: %s" % e)

        self.document.mark_clean(path)
        self.recent.add(path)
        self.update_title()
        logger.info("saved", extra={"document": path})
        return FileResult(file_path=path)

    def new_document(self) -> None:
        """Forget the current file after the frontend loaded fresh content."""
        self.document.reset()
        self.update_title()

    # ------------------------------------------------------------------
    # Dirty tracking and close confirmation
    # ------------------------------------------------------------------

    def set_dirty(self, dirty: bool) -> None:
        self.document.dirty = bool(dirty)
        self.update_title()

    def confirm_discard(self) -> bool:
        """True if there is nothing to lose or the user chose to discard."""
        if not self.document.dirty:
            return True
        try:
            result = self.shell.show_message_dialog(
                UNSAVED_TITLE, DISCARD_MESSAGE, [YES, NO], default_button=NO,
            )
        except DialogError as e:
            logger.error("discard dialog failed: %s", e)
            return False
        return result == YES

    def allow_close_once(self) -> None:
        self.close_latch.arm()

    def before_close(self) -> bool:
        """Return True to prevent the window from closing."""
        if self.close_latch.consume():
            self._save_and_quit_pending = False
            return False
        if not self.document.dirty:
            return False

        try:
            result = self.shell.show_message_dialog(
                UNSAVED_TITLE,
                QUIT_MESSAGE,
                [SAVE, DISCARD, CANCEL],
                default_button=SAVE,
                cancel_button=CANCEL,
            )
        except DialogError as e:
            logger.error("close dialog failed: %s", e)
            return True

        if result == SAVE:
            self._save_and_quit_pending = True
            self.emit(events.SAVE_AND_QUIT)
            return True
        if result == DISCARD:
            return False
        return True

    @property
    def save_and_quit_pending(self) -> bool:
        return self._save_and_quit_pending

    def finish_save_and_quit(self, result: FileResult) -> bool:
        """
        Called by the frontend once it has handled app:save-and-quit.
        A successful save arms the close latch and asks the shell to close again;
        a failed or cancelled save leaves the window open.
        """
        if not self._save_and_quit_pending:
            return False
        self._save_and_quit_pending = False
        if result.error or not result.file_path:
            logger.warning("save before quit did not complete: %s", result.error or "cancelled")
            return False
        self.allow_close_once()
        self.shell.quit()
        return True

    # ------------------------------------------------------------------
    # Recent files
    # ------------------------------------------------------------------

    def open_recent_file(self, path: str) -> Optional[FileResult]:
        """Open a recent entry; unreadable entries are removed. None if the user kept their changes."""
        if not self.confirm_discard():
            return None
        result = self.open_path(path)
        if result.error:
            self.recent.remove(path)
        self.emit(events.FILE_OPENED, result.to_dict())
        return result

    def clear_recent_files(self) -> None:
        self.recent.clear()

    def refresh_menu(self) -> None:
        if self.recent_menu is None:
            return
        populate_recent_menu(self.recent_menu, self.recent.files, self.open_recent_file, self.clear_recent_files)
        self.shell.rebuild_menu(self.menu)

    def update_title(self) -> None:
        self.shell.set_window_title(self.document.title)
