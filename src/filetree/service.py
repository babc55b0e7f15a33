"""High-level facade: scan once, render many times."""

import logging
import os
from collections.abc import Mapping
from typing import Any

from filetree.config import (
    GenerateOptions,
    ScanOptions,
    coerce_generate_options,
    coerce_scan_options,
)
from filetree.renderers import get_renderer
from filetree.scanner import Scanner
from filetree.store import MetadataStore
from filetree.types import FilesystemInterface

logger = logging.getLogger(__name__)


class FileTree:
    """In-memory model of a filesystem subtree with multiple renderings.

    Orchestrates the scanner, the metadata store and the renderers. Every
    filesystem failure is absorbed (the affected entry is omitted); the only
    error ``generate`` raises is ``UnsupportedFormatError``.

    Example:
        >>> tree = FileTree()
        >>> tree.init("src", {"ignoreDirs": ["__pycache__"], "maxDepth": 3})
        >>> print(tree.generate("src", {"format": "markdown"}))

    """

    def __init__(self, filesystem: FilesystemInterface | None = None) -> None:
        """Initialize an empty model.

        Args:
            filesystem: Optional filesystem implementation for testing

        """
        self.filesystem = filesystem
        self.store = MetadataStore(filesystem)
        self._options = ScanOptions()

    @property
    def options(self) -> ScanOptions:
        """Scan options remembered from the last ``init`` call."""
        return self._options

    @property
    def file_count(self) -> int:
        return self.store.file_count

    def init(
        self,
        path: str | os.PathLike[str],
        options: ScanOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Scan ``path`` into the store.

        Resets the file counter and remembered options first. Entries from
        earlier scans are kept; call ``clear`` for a fresh model.

        Args:
            path: Directory (or single file) to scan
            options: Scan options, as a model or a mapping

        """
        self._options = coerce_scan_options(options)
        self.store.reset_count()
        if self._options.max_files == 0:
            logger.debug("max_files is 0, skipping scan of %s", path)
            return

        scanner = Scanner(self.store, self._options, self.filesystem)
        scanner.scan(path)

    def set(self, path: str | os.PathLike[str]) -> None:
        """Add or refresh a single file; no-op for missing paths and directories."""
        self.store.set(path)

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Remove ``path`` and everything below it."""
        removed = self.store.remove(path)
        logger.debug("Removed %d entries under %s", removed, path)

    def clear(self) -> None:
        """Drop all entries and reset counters and options."""
        self.store.clear()
        self._options = ScanOptions()

    def generate(
        self,
        root_path: str | os.PathLike[str],
        options: GenerateOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Render the stored entries below ``root_path``.

        Args:
            root_path: Root directory of the rendering
            options: ``format`` (tree, json, markdown; default tree) and
                ``include_stats``

        Returns:
            Rendered text; ``''`` (tree/markdown) or ``'{}'`` (json) when the
            root cannot be resolved

        Raises:
            UnsupportedFormatError: If the format is not recognized

        """
        opts = coerce_generate_options(options)
        renderer = get_renderer(opts.format, self.filesystem)
        return renderer.render(
            root_path,
            self.store.entries(),
            opts,
            show_hidden=self._options.show_hidden,
        )
