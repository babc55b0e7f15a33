"""Rebuild a hierarchical TreeNode from the flat entry store."""

import os
from collections.abc import Iterable

from filetree.paths import canonicalize, display_name, entries_under, group_children
from filetree.types import FileEntry, FilesystemInterface, TreeNode


def _build_directory(name: str, path: str, entries: list[FileEntry]) -> TreeNode:
    children: list[TreeNode] = []
    listing = group_children(path, entries)
    for subdir_name, subdir_entries in listing.subdirs.items():
        subdir_path = os.path.join(path, subdir_name)
        children.append(_build_directory(subdir_name, subdir_path, subdir_entries))
    children.extend(TreeNode.from_entry(entry) for entry in listing.files)
    return TreeNode.directory(name, path, children)


def reconstruct(
    root_path: str | os.PathLike[str],
    entries: Iterable[FileEntry],
    filesystem: FilesystemInterface | None = None,
) -> TreeNode:
    """Build the directory tree below ``root_path`` from stored file entries.

    Directories are inferred from entry paths: a directory appears once, and
    only if some file lies below it. Children are ordered subdirectories
    first, then files, each by name.

    Args:
        root_path: Root directory as supplied by the caller
        entries: Flat store contents
        filesystem: Optional filesystem implementation for testing

    Returns:
        Root TreeNode (a directory, possibly with no children)

    Raises:
        PathResolutionError: If ``root_path`` cannot be canonicalized

    """
    root = canonicalize(root_path, filesystem)
    return _build_directory(display_name(root_path), root, entries_under(root, entries))
