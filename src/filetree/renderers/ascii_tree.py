"""ASCII tree renderer with box-drawing connectors."""

import os
from collections.abc import Sequence

from filetree.config import GenerateOptions
from filetree.paths import canonicalize, entries_under, group_children
from filetree.renderers.base import TreeRenderer, format_size_label
from filetree.types import FileEntry, OutputFormat

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "


class AsciiTreeRenderer(TreeRenderer):
    """Render the flat store as a ``tree``-style listing.

    Walks the store directly instead of going through the reconstructor.
    The root line is ``.``; each level lists subdirectories before files,
    both sorted by name. Lines at depth ``n`` are indented with ``n - 1``
    pipe segments regardless of whether an ancestor was the last sibling.

    Example:
        .
        ├── sub
        │   └── b.txt
        └── a.txt

    """

    output_format = OutputFormat.TREE
    fallback = ""

    def _render(
        self,
        root_path: str | os.PathLike[str],
        entries: Sequence[FileEntry],
        options: GenerateOptions,
        show_hidden: bool,
    ) -> str:
        root = canonicalize(root_path, self.filesystem)
        below_root = entries_under(root, entries)
        if not below_root:
            return ""

        lines = ["."]
        self._render_directory(root, below_root, 1, lines, show_hidden, options.include_stats)
        return "\n".join(lines)

    def _render_directory(
        self,
        path: str,
        entries: list[FileEntry],
        depth: int,
        lines: list[str],
        show_hidden: bool,
        include_stats: bool,
    ) -> None:
        listing = group_children(path, entries, show_hidden)
        indent = PIPE * (depth - 1)
        total = len(listing.subdirs) + len(listing.files)
        position = 0

        for name, subdir_entries in listing.subdirs.items():
            position += 1
            connector = LAST_BRANCH if position == total else BRANCH
            lines.append(f"{indent}{connector}{name}")
            self._render_directory(
                os.path.join(path, name),
                subdir_entries,
                depth + 1,
                lines,
                show_hidden,
                include_stats,
            )

        for entry in listing.files:
            position += 1
            connector = LAST_BRANCH if position == total else BRANCH
            label = format_size_label(entry.size) if include_stats else ""
            lines.append(f"{indent}{connector}{entry.name}{label}")
