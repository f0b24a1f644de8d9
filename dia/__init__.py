"""dia — native shell for a Mermaid diagram editor."""

__version__ = "0.1.0"

from dia.application.controller import DiaController, FileResult
from dia.application.shell import HostShell
from dia.core.recent_files import RecentFiles

__all__ = [
    "__version__",
    "DiaController",
    "FileResult",
    "HostShell",
    "RecentFiles",
]
