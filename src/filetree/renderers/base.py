"""Renderer base class and the error-to-fallback boundary."""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from filetree.config import GenerateOptions
from filetree.exceptions import FileTreeError, UnsupportedFormatError
from filetree.types import FileEntry, FilesystemInterface, OutputFormat

logger = logging.getLogger(__name__)

KIB = 1024
MIB = 1024 * 1024


def format_size_label(size: int | None) -> str:
    """Format a file size as a short bracketed label, e.g. `` [12 KB]``.

    Args:
        size: Size in bytes (None = unknown)

    Returns:
        Label with a leading space, or empty string when size is unknown

    """
    if size is None:
        return ""
    if size < KIB:
        return f" [{size} B]"
    if size < MIB:
        return f" [{size // KIB} KB]"
    return f" [{size // MIB} MB]"


class TreeRenderer(ABC):
    """Base class for output formats.

    Subclasses implement ``_render`` and may raise ``FileTreeError`` or
    ``OSError`` freely; ``render`` maps every such failure to the format's
    ``fallback`` output so callers never see them.
    """

    output_format: ClassVar[OutputFormat]
    fallback: ClassVar[str] = ""

    def __init__(self, filesystem: FilesystemInterface | None = None) -> None:
        """Initialize the renderer.

        Args:
            filesystem: Optional filesystem implementation for testing

        """
        self.filesystem = filesystem

    def render(
        self,
        root_path: str | os.PathLike[str],
        entries: Sequence[FileEntry],
        options: GenerateOptions | None = None,
        show_hidden: bool = False,
    ) -> str:
        """Render the entries below ``root_path``.

        Args:
            root_path: Root directory to render
            entries: Snapshot of the store contents
            options: Render options (defaults apply when None)
            show_hidden: Keep dot-prefixed paths (honored by formats that filter)

        Returns:
            Rendered text, or ``fallback`` if rendering failed

        """
        opts = options if options is not None else GenerateOptions()
        try:
            return self._render(root_path, entries, opts, show_hidden)
        except UnsupportedFormatError:
            raise
        except (FileTreeError, OSError) as e:
            logger.debug("%s render of %s failed: %s", self.output_format, root_path, e)
            return self.fallback

    @abstractmethod
    def _render(
        self,
        root_path: str | os.PathLike[str],
        entries: Sequence[FileEntry],
        options: GenerateOptions,
        show_hidden: bool,
    ) -> str:
        """Produce the rendering; errors propagate to ``render``."""
        ...
