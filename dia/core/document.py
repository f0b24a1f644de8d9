"""Current document handle: path + dirty flag, and the window title derived from them."""

import os
from typing import Optional

from dia.config import APP_NAME

UNTITLED = "Untitled"
DIRTY_SUFFIX = " *"


class DocumentState:
    """The single open document. dirty is only set by explicit notification from the editor."""

    def __init__(self, current_path: Optional[str] = None, dirty: bool = False):
        self.current_path = current_path
        self.dirty = dirty

    @property
    def display_name(self) -> str:
        if self.current_path:
            return os.path.basename(self.current_path)
        return UNTITLED

    @property
    def title(self) -> str:
        title = "%s - %s" % (APP_NAME, self.display_name)
        if self.dirty:
            title += DIRTY_SUFFIX
        return title

    def mark_clean(self, path: str) -> None:
        """After a successful open or save."""
        self.current_path = path
        self.dirty = False

    def reset(self) -> None:
        self.current_path = None
        self.dirty = False

    def __repr__(self):
        return "DocumentState(current_path=%r, dirty=%r)" % (self.current_path, self.dirty)
