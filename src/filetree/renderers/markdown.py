"""Indented Markdown list renderer."""

import os
from collections.abc import Sequence

from filetree.config import GenerateOptions
from filetree.reconstruct import reconstruct
from filetree.renderers.base import TreeRenderer, format_size_label
from filetree.types import FileEntry, OutputFormat, TreeNode

INDENT = "  "


class MarkdownTreeRenderer(TreeRenderer):
    """Render the reconstructed tree as a nested bullet list.

    Example:
        project/
          - src/
            - main.py
          - README.md

    """

    output_format = OutputFormat.MARKDOWN
    fallback = ""

    def _render(
        self,
        root_path: str | os.PathLike[str],
        entries: Sequence[FileEntry],
        options: GenerateOptions,
        show_hidden: bool,
    ) -> str:
        node = reconstruct(root_path, entries, self.filesystem)
        lines: list[str] = []
        self._append_node(node, 0, lines, options.include_stats)
        return "".join(f"{line}\n" for line in lines)

    def _append_node(self, node: TreeNode, depth: int, lines: list[str], include_stats: bool) -> None:
        prefix = "" if depth == 0 else "- "
        lines.append(f"{INDENT * depth}{prefix}{node.name}/")
        for child in node.children or []:
            if child.is_dir:
                self._append_node(child, depth + 1, lines, include_stats)
            else:
                label = format_size_label(child.size) if include_stats else ""
                lines.append(f"{INDENT * (depth + 1)}- {child.name}{label}")
