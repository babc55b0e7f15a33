"""Nested JSON renderer."""

import json
import os
from collections.abc import Sequence

from filetree.config import GenerateOptions
from filetree.reconstruct import reconstruct
from filetree.renderers.base import TreeRenderer
from filetree.types import FileEntry, OutputFormat

JSON_INDENT = 2


class JsonTreeRenderer(TreeRenderer):
    """Serialize the reconstructed tree with two-space indentation."""

    output_format = OutputFormat.JSON
    fallback = "{}"

    def _render(
        self,
        root_path: str | os.PathLike[str],
        entries: Sequence[FileEntry],
        options: GenerateOptions,
        show_hidden: bool,
    ) -> str:
        node = reconstruct(root_path, entries, self.filesystem)
        return json.dumps(node.to_dict(), indent=JSON_INDENT, ensure_ascii=False)
