"""Flat metadata store keyed by canonical file path."""

import logging
import os
import stat
import threading
from collections.abc import Iterator

from filetree.exceptions import PathResolutionError
from filetree.paths import RealFilesystem, absolute_path, canonicalize, dir_prefix, entries_under
from filetree.time_format import timestamp_from_mtime
from filetree.types import EntryKind, FileEntry, FilesystemInterface

logger = logging.getLogger(__name__)


def build_file_entry(canonical_path: str, stat_result: os.stat_result) -> FileEntry:
    """Build the stored metadata for a regular file.

    Args:
        canonical_path: Absolute canonical path of the file
        stat_result: Stat result for the file

    Returns:
        FileEntry for the store

    """
    name = os.path.basename(canonical_path)
    parent = os.path.dirname(canonical_path)
    extension = name.rsplit(".", 1)[1] if "." in name else None
    return FileEntry(
        name=name,
        path=canonical_path,
        kind=EntryKind.FILE,
        parent=parent if parent != canonical_path else None,
        size=stat_result.st_size,
        modified_at=timestamp_from_mtime(stat_result.st_mtime),
        extension=extension or None,
    )


class MetadataStore:
    """Mapping from canonical path to file metadata; the sole source of truth.

    Only files are stored. Directories are inferred from the parents of
    stored entries when rendering, so an empty directory is never visible.
    """

    def __init__(self, filesystem: FilesystemInterface | None = None) -> None:
        """Initialize an empty store.

        Args:
            filesystem: Optional filesystem implementation for testing

        """
        self.filesystem = filesystem if filesystem is not None else RealFilesystem()
        self._entries: dict[str, FileEntry] = {}
        self._file_count = 0
        self._lock = threading.RLock()

    @property
    def file_count(self) -> int:
        """Number of successful ``set`` calls since the last reset."""
        return self._file_count

    def reset_count(self) -> None:
        with self._lock:
            self._file_count = 0

    def set(self, path: str | os.PathLike[str]) -> FileEntry | None:
        """Add or refresh the entry for a single file.

        Missing paths, directories and anything else that is not a regular
        file are ignored.

        Args:
            path: Path to a file (symlinks are followed)

        Returns:
            The stored entry, or None if nothing was recorded

        """
        raw = os.fspath(path)
        try:
            stat_result = self.filesystem.stat(raw)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", raw, e)
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            return None

        try:
            canonical = canonicalize(raw, self.filesystem)
        except PathResolutionError as e:
            logger.debug("Skipping %s: %s", raw, e)
            return None

        entry = build_file_entry(canonical, stat_result)
        with self._lock:
            self._entries[canonical] = entry
            self._file_count += 1
        return entry

    def remove(self, path: str | os.PathLike[str]) -> int:
        """Delete ``path`` and every entry below it.

        The path is canonicalized when it still exists; otherwise the
        absolute, unresolved form is matched instead.

        Args:
            path: File or directory path

        Returns:
            Number of entries removed

        """
        try:
            target = canonicalize(path, self.filesystem)
        except PathResolutionError:
            target = absolute_path(path)
            logger.debug("Path %s no longer resolves, removing by literal prefix", target)

        prefix = dir_prefix(target)
        with self._lock:
            doomed = [key for key in self._entries if key == target or key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._file_count = 0

    def get(self, path: str) -> FileEntry | None:
        return self._entries.get(path)

    def entries(self) -> list[FileEntry]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            return list(self._entries.values())

    def paths_under(self, directory: str) -> list[FileEntry]:
        """Snapshot of the entries strictly below ``directory``."""
        return entries_under(directory, self.entries())

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
