"""
Recent-files registry: ordered, deduplicated, bounded list of absolute paths.
Persisted as a JSON array at <user-config-dir>/dia/recent-files.json.
Every mutation is written to disk (best effort) and reported to on_change.
"""
import json
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from dia.config import MAX_RECENT, RECENT_FILES_NAME
from dia.exceptions import DiaError, RecentFilesDecodeError, RecentFilesError
from dia.utils.paths import app_config_dir, normalize_path

from .logger import get_logger

logger = get_logger("recent_files")


def normalize_recent_files(paths: Iterable[str], max_items: int = MAX_RECENT) -> List[str]:
    """Normalize every path, drop invalid ones and duplicates (first seen wins), cap at max_items."""
    result: List[str] = []
    seen = set()
    for raw in paths:
        clean = normalize_path(raw)
        if not clean or clean in seen:
            continue
        seen.add(clean)
        result.append(clean)
        if len(result) >= max_items:
            break
    return result


class RecentFiles:
    """
    Most-recently-used list of opened files.

    path: explicit location of recent-files.json; resolved from the user
    config directory on first use when omitted, then cached.
    on_change: called with no arguments after every effective mutation.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        on_change: Optional[Callable[[], None]] = None,
        max_items: int = MAX_RECENT,
    ):
        self._path = Path(path) if path is not None else None
        self._files: List[str] = []
        self.on_change = on_change
        self.max_items = max_items

    @property
    def files(self) -> List[str]:
        """Copy of the current list, most recent first."""
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self):
        return iter(list(self._files))

    def __contains__(self, path) -> bool:
        clean = normalize_path(path)
        return bool(clean) and clean in self._files

    def config_path(self) -> Path:
        """Location of recent-files.json. Raises ConfigDirError if the config dir is unknown."""
        if self._path is None:
            self._path = app_config_dir() / RECENT_FILES_NAME
        return self._path

    def load(self) -> List[str]:
        """
        Replace the in-memory list with the persisted one.
        Missing file -> empty list. Raises RecentFilesError / RecentFilesDecodeError / ConfigDirError.
        """
        path = self.config_path()
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._files = []
            return []
        except OSError as e:
            raise RecentFilesError("read %s: %s" % (path, e)) from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise RecentFilesDecodeError("decode %s: %s" % (path, e)) from e
        if data is None:
            data = []
        if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
            raise RecentFilesDecodeError("decode %s: expected a JSON array of strings" % path)

        self._files = normalize_recent_files(data, self.max_items)
        return self.files

    def save(self) -> Path:
        """Write the list as an indented JSON array. Raises RecentFilesError / ConfigDirError."""
        path = self.config_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RecentFilesError("mkdir %s: %s" % (path.parent, e)) from e
        data = json.dumps(self._files, indent=2) + "\n"
        try:
            path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise RecentFilesError("write %s: %s" % (path, e)) from e
        return path

    def add(self, path) -> None:
        """Move path to the front (inserting it if new) and drop entries past max_items."""
        clean = normalize_path(path)
        if not clean:
            return
        nxt = [clean] + [p for p in self._files if p != clean]
        self._files = nxt[: self.max_items]
        self._commit()

    def remove(self, path) -> bool:
        """Drop path from the list. Returns False (and writes nothing) when it was not listed."""
        clean = normalize_path(path)
        if not clean:
            return False
        nxt = [p for p in self._files if p != clean]
        if len(nxt) == len(self._files):
            return False
        self._files = nxt
        self._commit()
        return True

    def clear(self) -> None:
        self._files = []
        self._commit()

    def _commit(self) -> None:
        self._persist()
        if self.on_change is not None:
            self.on_change()

    def _persist(self) -> None:
        try:
            self.save()
        except DiaError as e:
            logger.error("failed to persist recent files: %s", e)
