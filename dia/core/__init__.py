from .close_latch import CloseLatch, LatchState
from .document import DocumentState
from .event_bus import EventBus
from .recent_files import RecentFiles, normalize_recent_files
from .logger import get_logger, setup_logging

__all__ = [
    "CloseLatch", "LatchState", "DocumentState", "EventBus",
    "RecentFiles", "normalize_recent_files",
    "get_logger", "setup_logging",
]
