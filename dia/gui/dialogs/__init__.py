# GUI dialogs

from dia.gui.dialogs.settings_dialog import SettingsDialog
from dia.gui.dialogs.about_dialog import AboutDialog

__all__ = ["SettingsDialog", "AboutDialog"]
