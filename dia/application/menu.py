"""
Toolkit-independent menu tree and the builders for the dia application menu.

    macOS:         dia (About, Settings, Hide, Quit) | File | Edit | View
    Linux/Windows: File (+ Quit) | Edit (Settings) | View | Help (About)
"""

import sys
from typing import Callable, Iterable, List, Optional

from dia.config import APP_NAME, THEMES
from dia.core import events
from dia.utils.paths import display_label

TEXT = "text"
SEPARATOR = "separator"
SUBMENU = "submenu"

NO_RECENT_LABEL = "No Recent Files"
CLEAR_RECENT_LABEL = "Clear Menu"
OPEN_RECENT_LABEL = "Open Recent"


class MenuItem:
    def __init__(
        self,
        kind: str,
        label: str = "",
        accelerator: Optional[str] = None,
        callback: Optional[Callable[[], None]] = None,
        enabled: bool = True,
        submenu: Optional["Menu"] = None,
    ):
        self.kind = kind
        self.label = label
        self.accelerator = accelerator
        self.callback = callback
        self.enabled = enabled
        self.submenu = submenu

    @property
    def is_separator(self) -> bool:
        return self.kind == SEPARATOR

    def disable(self) -> "MenuItem":
        self.enabled = False
        return self

    def trigger(self) -> None:
        if self.enabled and self.callback is not None:
            self.callback()

    def __repr__(self):
        if self.kind == SEPARATOR:
            return "MenuItem(separator)"
        return "MenuItem(%s, %r)" % (self.kind, self.label)


class Menu:
    """Ordered list of MenuItem. Submenus are Menu instances hung off SUBMENU items."""

    def __init__(self, label: str = ""):
        self.label = label
        self.items: List[MenuItem] = []

    def add_text(self, label: str, accelerator: Optional[str] = None, callback=None) -> MenuItem:
        item = MenuItem(TEXT, label, accelerator, callback)
        self.items.append(item)
        return item

    def add_separator(self) -> MenuItem:
        item = MenuItem(SEPARATOR)
        self.items.append(item)
        return item

    def add_submenu(self, label: str) -> "Menu":
        sub = Menu(label)
        self.items.append(MenuItem(SUBMENU, label, submenu=sub))
        return sub

    def clear(self) -> None:
        self.items = []

    def find(self, label: str) -> Optional[MenuItem]:
        """First item with label, searching submenus depth-first."""
        for item in self.items:
            if item.label == label:
                return item
            if item.submenu is not None:
                found = item.submenu.find(label)
                if found is not None:
                    return found
        return None

    def labels(self) -> List[str]:
        return [i.label for i in self.items if not i.is_separator]

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def populate_recent_menu(
    menu: Menu,
    paths: Iterable[str],
    on_open: Callable[[str], None],
    on_clear: Callable[[], None],
) -> Menu:
    """Refill the Open Recent submenu: one item per path (or a disabled placeholder), separator, Clear Menu."""
    menu.clear()
    paths = list(paths)
    if not paths:
        menu.add_text(NO_RECENT_LABEL).disable()
    for path in paths:
        menu.add_text(display_label(path), callback=_bind(on_open, path))
    menu.add_separator()
    menu.add_text(CLEAR_RECENT_LABEL, callback=on_clear)
    return menu


def _bind(fn, arg):
    return lambda: fn(arg)


def build_app_menu(controller, platform: Optional[str] = None) -> Menu:
    """
    Build the full application menu for controller.
    Returns the root Menu; the Open Recent submenu is controller.recent_menu.
    """
    platform = platform or sys.platform
    is_mac = platform == "darwin"
    emit = controller.emit
    root = Menu()

    if is_mac:
        app_menu = root.add_submenu(APP_NAME)
        app_menu.add_text("About %s" % APP_NAME, callback=lambda: emit(events.ABOUT_OPEN))
        app_menu.add_separator()
        app_menu.add_text("Settings...", "CmdOrCtrl+,", lambda: emit(events.SETTINGS_OPEN))
        app_menu.add_separator()
        app_menu.add_text("Hide %s" % APP_NAME, "CmdOrCtrl+H", controller.shell.hide)
        app_menu.add_separator()
        app_menu.add_text("Quit %s" % APP_NAME, "CmdOrCtrl+Q", controller.shell.quit)

    file_menu = root.add_submenu("File")
    file_menu.add_text("New", "CmdOrCtrl+N", lambda: emit(events.FILE_NEW))
    file_menu.add_text("Open...", "CmdOrCtrl+O", lambda: emit(events.FILE_OPEN_REQUEST))
    controller.recent_menu = file_menu.add_submenu(OPEN_RECENT_LABEL)
    file_menu.add_separator()
    file_menu.add_text("Save", "CmdOrCtrl+S", lambda: emit(events.FILE_SAVE))
    file_menu.add_text("Save As...", "CmdOrCtrl+Shift+S", lambda: emit(events.FILE_SAVE_AS))
    if not is_mac:
        file_menu.add_separator()
        file_menu.add_text("Quit", "CmdOrCtrl+Q", controller.shell.quit)

    edit_menu = root.add_submenu("Edit")
    if not is_mac:
        edit_menu.add_text("Settings...", "CmdOrCtrl+,", lambda: emit(events.SETTINGS_OPEN))

    view_menu = root.add_submenu("View")
    theme_menu = view_menu.add_submenu("Theme")
    for theme, label in THEMES:
        theme_menu.add_text(label, callback=_bind(lambda t: emit(events.THEME_SET, t), theme))

    if not is_mac:
        help_menu = root.add_submenu("Help")
        help_menu.add_text("About %s" % APP_NAME, callback=lambda: emit(events.ABOUT_OPEN))

    return root
