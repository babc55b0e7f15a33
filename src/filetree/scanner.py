"""Depth-first directory scanner that populates the metadata store."""

import logging
import os
import stat
from collections.abc import Iterator

from filetree.config import ScanOptions
from filetree.paths import RealFilesystem
from filetree.store import MetadataStore
from filetree.types import FilesystemInterface

logger = logging.getLogger(__name__)


class Scanner:
    """Depth-first walker with ignore-list, depth, hidden-name and file quota limits.

    Uses an explicit stack of directory iterators rather than recursion to
    avoid RecursionError on deep structures, while keeping depth-first order.
    Symlinks are neither followed nor recorded during traversal.
    """

    def __init__(
        self,
        store: MetadataStore,
        options: ScanOptions,
        filesystem: FilesystemInterface | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            store: Store receiving file entries
            options: Filters and limits for this scan
            filesystem: Optional filesystem implementation for testing

        """
        self.store = store
        self.options = options
        self.filesystem = filesystem if filesystem is not None else RealFilesystem()

    def _quota_reached(self) -> bool:
        return self.options.quota_reached(self.store.file_count)

    def scan(self, root_path: str | os.PathLike[str]) -> int:
        """Scan ``root_path`` and record every file that passes the filters.

        A missing or unreadable root leaves the store untouched. A root that
        is a regular file is recorded as a single entry.

        Args:
            root_path: Directory (or file) to scan

        Returns:
            Number of file entries recorded by this scan

        """
        if self.options.max_files == 0:
            return 0

        raw = os.fspath(root_path)
        start_count = self.store.file_count
        try:
            root_stat = self.filesystem.stat(raw)
        except OSError as e:
            logger.debug("Scan root %s is not accessible: %s", raw, e)
            return 0

        if stat.S_ISDIR(root_stat.st_mode):
            self._walk(raw)
        elif stat.S_ISREG(root_stat.st_mode) and not self._quota_reached():
            self.store.set(raw)

        recorded = self.store.file_count - start_count
        logger.debug("Scanned %s: %d files recorded", raw, recorded)
        return recorded

    def _open_directory(self, dir_path: str, depth: int) -> Iterator[os.DirEntry[str]] | None:
        """Apply the per-directory stops and start listing ``dir_path``.

        Returns None when the directory is pruned by the depth limit, the
        ignore list or an exhausted quota, or when it cannot be listed.
        """
        if self.options.depth_exceeded(depth):
            logger.debug("Depth limit (%s) reached at %s", self.options.max_depth, dir_path)
            return None

        name = os.path.basename(dir_path.rstrip(os.sep))
        if self.options.is_ignored_dir(name):
            logger.debug("Ignoring directory %s", dir_path)
            return None

        if self._quota_reached():
            return None

        try:
            return iter(self.filesystem.scandir(dir_path))
        except OSError as e:
            logger.warning("Cannot scan directory %s: %s", dir_path, e)
            return None

    def _walk(self, root: str) -> None:
        stack: list[tuple[Iterator[os.DirEntry[str]], int, str]] = []
        root_entries = self._open_directory(root, 0)
        if root_entries is not None:
            stack.append((root_entries, 0, root))

        try:
            while stack:
                entries, depth, dir_path = stack[-1]
                try:
                    entry = next(entries)
                except StopIteration:
                    stack.pop()
                    continue
                except OSError as e:
                    logger.warning("Cannot scan directory %s: %s", dir_path, e)
                    stack.pop()
                    continue

                # Quota may run out in the middle of a listing
                if self._quota_reached():
                    break

                if not self.options.show_hidden and entry.name.startswith("."):
                    continue

                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = not is_dir and entry.is_file(follow_symlinks=False)
                except OSError as e:
                    logger.debug("Error processing entry %s: %s", entry.path, e)
                    continue

                if is_dir:
                    child_entries = self._open_directory(entry.path, depth + 1)
                    if child_entries is not None:
                        stack.append((child_entries, depth + 1, entry.path))
                elif is_file:
                    self.store.set(entry.path)
        finally:
            for entries, _, _ in stack:
                close = getattr(entries, "close", None)
                if close is not None:
                    close()
