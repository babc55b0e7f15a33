"""In-memory filesystem tree model with ASCII, JSON and Markdown renderings.

Scan a directory once, then render it as often as needed. Single files can
be added or removed without rescanning.

Usage:
    from filetree import FileTree

    tree = FileTree()
    tree.init("project", {"ignoreDirs": ["node_modules"], "maxDepth": 4})
    print(tree.generate("project"))
    print(tree.generate("project", {"format": "json"}))
"""

from filetree.config import GenerateOptions, ScanOptions, load_scan_options
from filetree.exceptions import (
    ConfigError,
    FileTreeError,
    PathResolutionError,
    UnsupportedFormatError,
)
from filetree.service import FileTree
from filetree.types import EntryKind, FileEntry, OutputFormat, TreeNode

__all__ = [
    "FileTree",
    "ScanOptions",
    "GenerateOptions",
    "load_scan_options",
    "OutputFormat",
    "EntryKind",
    "FileEntry",
    "TreeNode",
    "FileTreeError",
    "PathResolutionError",
    "UnsupportedFormatError",
    "ConfigError",
]
