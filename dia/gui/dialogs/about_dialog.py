"""About dialog."""

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton


class AboutDialog(QDialog):
    """About dia."""

    def __init__(self, version: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle("About dia")
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("dia"))
        layout.addWidget(QLabel("Mermaid diagram editor."))
        self.version_label = QLabel("Version %s" % version)
        layout.addWidget(self.version_label)
        close = QPushButton("Close")
        close.clicked.connect(self.accept)
        layout.addWidget(close)
