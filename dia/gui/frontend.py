"""
Editor frontend: reacts to shell events (file:*, theme:set, settings:open, about:open,
app:save-and-quit) and calls back into the controller, the way the web editor does.
"""

from PySide6.QtWidgets import QMessageBox

from dia.config import get_config, save_user_config
from dia.core import events
from dia.core.logger import get_logger
from dia.exceptions import DiaError
from dia.gui.dialogs import AboutDialog, SettingsDialog

logger = get_logger("gui.frontend")

DEFAULT_CONTENT = """graph TD
    A[Start] --> B{Is it working?}
    B -->|Yes| C[Great]
    B -->|No| D[Debug]
    D --> B
"""


class EditorFrontend:
    """Binds an EditorPanel to a DiaController through the shell's event bus."""

    def __init__(self, controller, editor, bus, parent=None):
        self._controller = controller
        self._editor = editor
        self._bus = bus
        self._parent = parent
        self._disconnect = None
        editor.contentEdited.connect(self._on_content_edited)
        self._subscribe()

    def _subscribe(self):
        self._disconnect = self._bus.connect({
            events.FILE_NEW: self._on_new,
            events.FILE_OPEN_REQUEST: self._on_open_request,
            events.FILE_SAVE: self._on_save,
            events.FILE_SAVE_AS: self._on_save_as,
            events.FILE_OPENED: self._on_file_opened,
            events.THEME_SET: self._on_theme_set,
            events.SETTINGS_OPEN: self._on_settings_open,
            events.ABOUT_OPEN: self._on_about_open,
            events.SAVE_AND_QUIT: self._on_save_and_quit,
        })
        unhandled = self._bus.missing()
        if unhandled:
            logger.warning("frontend ignores: %s", ", ".join(unhandled))

    def detach(self):
        if self._disconnect is not None:
            self._disconnect()
            self._disconnect = None

    def apply_settings(self, settings: dict):
        self._editor.set_font(settings.get("font_family", "Monospace"), settings.get("font_size", 14))
        self._editor.apply_theme(settings.get("theme", "default"))

    def set_content(self, text: str):
        self._editor.set_content(text)
        self._controller.set_dirty(False)
        self._editor.set_header(self._controller.document.display_name)

    def show_error(self, message: str):
        logger.error(message)
        QMessageBox.critical(self._parent, "Error", message)

    def _on_content_edited(self):
        if not self._controller.document.dirty:
            self._controller.set_dirty(True)

    def _on_new(self, data):
        if not self._controller.confirm_discard():
            return
        self._controller.new_document()
        self.set_content(DEFAULT_CONTENT)

    def _on_open_request(self, data):
        if not self._controller.confirm_discard():
            return
        result = self._controller.open_file()
        if result.error:
            self.show_error(result.error)
            return
        if result.file_path:
            self.set_content(result.content)

    def _on_save(self, data):
        result = self._controller.save_with_content(self._editor.content())
        if result.error:
            self.show_error(result.error)
        self._editor.set_header(self._controller.document.display_name)

    def _on_save_as(self, data):
        result = self._controller.save_as_with_content(self._editor.content())
        if result.error:
            self.show_error(result.error)
        self._editor.set_header(self._controller.document.display_name)

    def _on_file_opened(self, data):
        data = data or {}
        if data.get("error"):
            self.show_error(data["error"])
            return
        self.set_content(data.get("content", ""))

    def _on_theme_set(self, theme):
        self._editor.apply_theme(theme or "default")

    def _on_settings_open(self, data):
        editor_settings = dict(get_config().get("editor") or {})
        dialog = SettingsDialog(editor_settings, self._parent)
        if not dialog.exec():
            return
        values = dialog.values()
        self.apply_settings(values)
        try:
            save_user_config({"editor": values})
        except (DiaError, OSError) as e:
            logger.error("failed to save settings: %s", e)

    def _on_about_open(self, data):
        AboutDialog(self._controller.get_version(), self._parent).exec()

    def _on_save_and_quit(self, data):
        result = self._controller.save_with_content(self._editor.content())
        if result.error:
            self.show_error(result.error)
        self._controller.finish_save_and_quit(result)
