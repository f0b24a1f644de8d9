"""
Host shell interface. The controller only talks to the UI through HostShell,
so it can run against Qt, a webview bridge or a test double.
"""

from typing import Any, Sequence, Tuple


class FileFilter:
    """Dialog filter: display name plus glob patterns, e.g. ("Mermaid", ("*.mmd", "*.mermaid"))."""

    def __init__(self, name: str, patterns: Sequence[str]):
        self.name = name
        self.patterns = tuple(patterns)

    @classmethod
    def from_pairs(cls, pairs) -> Tuple["FileFilter", ...]:
        return tuple(cls(name, patterns) for name, patterns in pairs)

    def __str__(self):
        return "%s (%s)" % (self.name, " ".join(self.patterns))

    def __eq__(self, other):
        return isinstance(other, FileFilter) and (self.name, self.patterns) == (other.name, other.patterns)

    def __hash__(self):
        return hash((self.name, self.patterns))

    def __repr__(self):
        return "FileFilter(%r, %r)" % (self.name, self.patterns)


class HostShell:
    """
    Capabilities the native shell provides.

    Dialog methods block until the user responds. They return "" on cancel and
    raise DialogError when the dialog cannot be shown.
    """

    def show_open_dialog(self, title: str, filters: Sequence[FileFilter]) -> str:
        raise NotImplementedError

    def show_save_dialog(self, title: str, default_filename: str, filters: Sequence[FileFilter]) -> str:
        raise NotImplementedError

    def show_message_dialog(
        self,
        title: str,
        message: str,
        buttons: Sequence[str],
        default_button: str = "",
        cancel_button: str = "",
    ) -> str:
        """Return the label of the chosen button."""
        raise NotImplementedError

    def set_window_title(self, title: str) -> None:
        raise NotImplementedError

    def rebuild_menu(self, menu) -> None:
        """Render (or re-render) the application menu tree."""
        raise NotImplementedError

    def emit(self, event_name: str, payload: Any = None) -> None:
        """Fire-and-forget event to the frontend."""
        raise NotImplementedError

    def quit(self) -> None:
        """Request the window to close; goes through the before-close check."""
        raise NotImplementedError

    def hide(self) -> None:
        pass
