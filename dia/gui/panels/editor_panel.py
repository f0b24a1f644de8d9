"""Editor panel — plain-text Mermaid source with monospace font."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

# Editor colors per diagram theme (background, foreground)
THEME_COLORS = {
    "default": ("#ffffff", "#1e1e1e"),
    "dark": ("#1e1e1e", "#e0e0e0"),
    "forest": ("#f4fbf4", "#1b3a1b"),
    "neutral": ("#f5f5f5", "#333333"),
    "catppuccin": ("#1e1e2e", "#cdd6f4"),
    "dracula": ("#282a36", "#f8f8f2"),
    "nord": ("#2e3440", "#d8dee9"),
    "synthwave": ("#262335", "#f0e6ff"),
    "rose": ("#fff5f7", "#4a1d2b"),
    "ocean": ("#0f1c2e", "#cfe3ff"),
    "solarized": ("#fdf6e3", "#586e75"),
}


class EditorPanel(QWidget):
    """Central panel: editable source. contentEdited fires on user edits only, not on set_content()."""

    contentEdited = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        self._header = QLabel("Untitled")
        self._header.setProperty("class", "header")
        layout.addWidget(self._header)
        self._editor = QPlainTextEdit()
        self._editor.setPlaceholderText("graph TD …")
        layout.addWidget(self._editor)
        self._loading = False
        self._theme = "default"
        self.set_font("Monospace", 14)
        self.apply_theme("default")
        self._editor.textChanged.connect(self._on_text_changed)

    def content(self) -> str:
        return self._editor.toPlainText()

    def set_content(self, text: str) -> None:
        self._loading = True
        try:
            self._editor.setPlainText(text)
        finally:
            self._loading = False

    def set_header(self, text: str) -> None:
        self._header.setText(text)

    def set_font(self, family: str, size: int) -> None:
        font = QFont(family, int(size))
        font.setStyleHint(QFont.StyleHint.Monospace)
        self._editor.setFont(font)

    @property
    def theme(self) -> str:
        return self._theme

    def apply_theme(self, theme: str) -> None:
        bg, fg = THEME_COLORS.get(theme, THEME_COLORS["default"])
        self._theme = theme if theme in THEME_COLORS else "default"
        self._editor.setStyleSheet(
            "QPlainTextEdit { background-color: %s; color: %s; border: 1px solid #3d3d3d; "
            "border-radius: 6px; padding: 8px; }" % (bg, fg)
        )

    def _on_text_changed(self):
        if not self._loading:
            self.contentEdited.emit()
