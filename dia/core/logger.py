"""
Logging for the dia.* hierarchy.

Call setup_logging() once at startup and get_logger() everywhere else. Records
about a specific file pass extra={"document": path}; the formatter shows it as
"[path]" right after the logger name.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional

from dia.config import ENV_LOG_LEVEL, ENV_LOG_DIR

ROOT_NAME = "dia"
LOG_FILE_NAME = "dia.log"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class DiaFormatter(logging.Formatter):
    """Timestamp, level, logger name and optional [document] prefix."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        fmt = fmt or "%(asctime)s [%(levelname)s] %(name)s%(document)s %(message)s"
        super().__init__(fmt=fmt, datefmt=datefmt or _DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        document = getattr(record, "document", "")
        record.document = f" [{document}]" if document else ""
        try:
            return super().format(record)
        finally:
            record.document = document


def _level_from_env() -> int:
    name = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return logging.getLevelName(name) if name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else logging.INFO


def _log_file_path(log_file, log_dir) -> Optional[Path]:
    """Explicit log_file wins, then log_dir, then DIA_LOG_DIR; None means console only."""
    if log_file is not None:
        return Path(log_file)
    log_dir = log_dir or os.environ.get(ENV_LOG_DIR) or None
    return Path(log_dir) / LOG_FILE_NAME if log_dir else None


def _build_handlers(level: int, log_path: Optional[Path], use_console: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if use_console:
        handlers.append(logging.StreamHandler())
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[os.PathLike | str] = None,
    log_dir: Optional[os.PathLike | str] = None,
    format_string: Optional[str] = None,
    use_console: bool = True,
) -> None:
    """
    Attach console and/or file handlers to the "dia" logger.

    level defaults to DIA_LOG_LEVEL (else INFO). The file is log_file when
    given, otherwise dia.log inside log_dir or DIA_LOG_DIR. Only the first
    call has any effect.
    """
    global _setup_done
    if _setup_done:
        return

    if level is None:
        level = _level_from_env()
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)

    formatter = DiaFormatter(format_string)
    for handler in _build_handlers(level, _log_file_path(log_file, log_dir), use_console):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Logger under dia.* (get_logger("recent_files") -> dia.recent_files)."""
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)
