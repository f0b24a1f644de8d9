# GUI panels

from dia.gui.panels.editor_panel import EditorPanel, THEME_COLORS

__all__ = ["EditorPanel", "THEME_COLORS"]
