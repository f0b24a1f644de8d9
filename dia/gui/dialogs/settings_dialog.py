"""Settings dialog: editor font and diagram theme."""

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
)

from dia.config import THEMES

FONT_OPTIONS = (
    "Monospace",
    "JetBrains Mono",
    "Fira Code",
    "Source Code Pro",
    "Cascadia Code",
    "Consolas",
    "Menlo",
)


class SettingsDialog(QDialog):
    """Edits the 'editor' section of the config: font_family, font_size, theme."""

    def __init__(self, editor_settings: dict, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self._font_family = QComboBox()
        self._font_family.addItems(FONT_OPTIONS)
        family = editor_settings.get("font_family", FONT_OPTIONS[0])
        if self._font_family.findText(family) < 0:
            self._font_family.addItem(family)
        self._font_family.setCurrentText(family)
        form.addRow("Font family", self._font_family)

        self._font_size = QSpinBox()
        self._font_size.setRange(8, 48)
        self._font_size.setValue(int(editor_settings.get("font_size", 14) or 14))
        form.addRow("Font size", self._font_size)

        self._theme = QComboBox()
        for value, label in THEMES:
            self._theme.addItem(label, value)
        idx = self._theme.findData(editor_settings.get("theme", "default"))
        self._theme.setCurrentIndex(max(idx, 0))
        form.addRow("Diagram theme", self._theme)

        layout.addLayout(form)
        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def values(self) -> dict:
        return {
            "font_family": self._font_family.currentText(),
            "font_size": self._font_size.value(),
            "theme": self._theme.currentData(),
        }
