"""Output renderers keyed by format name."""

from filetree.exceptions import UnsupportedFormatError
from filetree.renderers.ascii_tree import AsciiTreeRenderer
from filetree.renderers.base import TreeRenderer, format_size_label
from filetree.renderers.json_tree import JsonTreeRenderer
from filetree.renderers.markdown import MarkdownTreeRenderer
from filetree.types import FilesystemInterface, OutputFormat

RENDERERS: dict[OutputFormat, type[TreeRenderer]] = {
    OutputFormat.TREE: AsciiTreeRenderer,
    OutputFormat.JSON: JsonTreeRenderer,
    OutputFormat.MARKDOWN: MarkdownTreeRenderer,
}


def get_renderer(format: str, filesystem: FilesystemInterface | None = None) -> TreeRenderer:
    """Instantiate the renderer for ``format``.

    Raises:
        UnsupportedFormatError: If ``format`` is not a known output format

    """
    try:
        output_format = OutputFormat(format)
    except ValueError:
        raise UnsupportedFormatError(format) from None
    return RENDERERS[output_format](filesystem)


__all__ = [
    "RENDERERS",
    "TreeRenderer",
    "AsciiTreeRenderer",
    "JsonTreeRenderer",
    "MarkdownTreeRenderer",
    "format_size_label",
    "get_renderer",
]
