"""Path canonicalization and prefix grouping over the flat entry store."""

import logging
import os
from collections.abc import Iterable, Iterator

from filetree.exceptions import PathResolutionError
from filetree.types import DirectoryListing, FileEntry, FilesystemInterface

logger = logging.getLogger(__name__)


class RealFilesystem:
    """Real filesystem implementation using the os module."""

    def scandir(self, path: str) -> Iterator[os.DirEntry[str]]:
        with os.scandir(path) as it:
            yield from it

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def realpath(self, path: str) -> str:
        return os.path.realpath(path, strict=True)


def canonicalize(path: str | os.PathLike[str], filesystem: FilesystemInterface | None = None) -> str:
    """Resolve ``path`` to an absolute, symlink-free path that must exist.

    Args:
        path: Path to resolve (relative paths are taken from the cwd)
        filesystem: Optional filesystem implementation for testing

    Returns:
        Canonical path string

    Raises:
        PathResolutionError: If the path does not exist or cannot be resolved

    """
    fs = filesystem if filesystem is not None else RealFilesystem()
    raw = os.fspath(path)
    try:
        return fs.realpath(raw)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(raw, str(e)) from e


def absolute_path(path: str | os.PathLike[str]) -> str:
    """Absolute, normalized form of ``path`` without touching the filesystem."""
    return os.path.abspath(os.fspath(path))


def dir_prefix(directory: str) -> str:
    """Prefix shared by every strict descendant of ``directory``."""
    return directory if directory.endswith(os.sep) else directory + os.sep


def is_descendant(path: str, directory: str) -> bool:
    """Return True if ``path`` lies strictly below ``directory``."""
    return path.startswith(dir_prefix(directory))


def entries_under(directory: str, entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Keep entries that are strict descendants of ``directory``, in store order."""
    prefix = dir_prefix(directory)
    return [entry for entry in entries if entry.path.startswith(prefix)]


def relative_parts(path: str, directory: str) -> list[str]:
    """Split the part of ``path`` below ``directory`` into segments."""
    return path[len(dir_prefix(directory)) :].split(os.sep)


def has_hidden_segment(path: str, directory: str) -> bool:
    """Return True if any segment of ``path`` below ``directory`` starts with '.'."""
    return any(part.startswith(".") for part in relative_parts(path, directory))


def group_children(
    directory: str,
    entries: Iterable[FileEntry],
    show_hidden: bool = True,
) -> DirectoryListing:
    """Group descendants of ``directory`` into direct files and inferred subdirectories.

    Directories are never stored; a subdirectory exists here only because at
    least one entry lies below it. Both groups come back sorted by name so
    every renderer sees the same order.

    Args:
        directory: Canonical directory path
        entries: Candidate entries (anything outside ``directory`` is ignored)
        show_hidden: When False, drop entries with a dot-prefixed segment
            below ``directory``

    Returns:
        DirectoryListing with sorted files and sorted subdirectory groups

    """
    listing = DirectoryListing()
    subdirs: dict[str, list[FileEntry]] = {}
    for entry in entries_under(directory, entries):
        parts = relative_parts(entry.path, directory)
        if not show_hidden and any(part.startswith(".") for part in parts):
            continue
        if len(parts) == 1:
            listing.files.append(entry)
        elif parts[0]:
            subdirs.setdefault(parts[0], []).append(entry)

    listing.files.sort(key=lambda e: e.name)
    listing.subdirs = dict(sorted(subdirs.items()))
    return listing


def display_name(root_path: str | os.PathLike[str]) -> str:
    """Name shown for the render root: last segment of the path as given."""
    raw = os.fspath(root_path)
    stripped = raw.rstrip(os.sep)
    name = os.path.basename(stripped)
    return name or raw
