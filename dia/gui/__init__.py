# PySide6 host shell, main window and editor frontend
