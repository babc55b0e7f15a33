"""Shared types for the filetree package."""

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, Protocol

from filetree.time_format import format_iso_timestamp


class EntryKind(StrEnum):
    """Kind of a stored entry or reconstructed node."""

    FILE = "file"
    DIRECTORY = "directory"


class OutputFormat(StrEnum):
    """Rendering formats supported by ``FileTree.generate``."""

    TREE = "tree"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class FileEntry:
    """Metadata recorded for a single file in the store.

    Attributes:
        name: Base name (last path segment)
        path: Absolute canonical path, the store key
        kind: Always ``EntryKind.FILE`` for scanned entries
        parent: Absolute path of the containing directory (None at filesystem root)
        size: Size in bytes
        modified_at: Last modification time (UTC)
        extension: Text after the last "." in the name, None when absent

    """

    name: str
    path: str
    kind: EntryKind = EntryKind.FILE
    parent: str | None = None
    size: int | None = None
    modified_at: datetime | None = None
    extension: str | None = None


@dataclass
class TreeNode:
    """Hierarchical node rebuilt from the flat store for one render call."""

    name: str
    kind: EntryKind
    path: str
    size: int | None = None
    modified_at: datetime | None = None
    extension: str | None = None
    children: list["TreeNode"] | None = None

    @classmethod
    def directory(
        cls, name: str, path: str, children: list["TreeNode"] | None = None
    ) -> "TreeNode":
        if children is None:
            children = []
        return cls(name=name, kind=EntryKind.DIRECTORY, path=path, children=children)

    @classmethod
    def from_entry(cls, entry: FileEntry) -> "TreeNode":
        return cls(
            name=entry.name,
            kind=EntryKind.FILE,
            path=entry.path,
            size=entry.size,
            modified_at=entry.modified_at,
            extension=entry.extension,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape, omitting attributes that are absent.

        Key order is fixed: name, type, path, size, modified, extension, children.
        """
        data: dict[str, Any] = {
            "name": self.name,
            "type": str(self.kind),
            "path": self.path,
        }
        if self.size is not None:
            data["size"] = self.size
        if self.modified_at is not None:
            data["modified"] = format_iso_timestamp(self.modified_at)
        if self.extension is not None:
            data["extension"] = self.extension
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class DirectoryListing:
    """Direct contents of one directory, grouped from the flat store.

    Attributes:
        files: Entries whose parent is the directory, sorted by name
        subdirs: Inferred subdirectory name -> entries below it, sorted by name

    """

    files: list[FileEntry] = field(default_factory=list)
    subdirs: dict[str, list[FileEntry]] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.files or self.subdirs)


class FilesystemInterface(Protocol):
    """Protocol for filesystem operations to enable dependency injection."""

    def scandir(self, path: str) -> Iterator[os.DirEntry[str]]:
        """Scan directory and yield its entries.

        Args:
            path: Directory path to scan

        Yields:
            DirEntry objects for each entry in the directory

        Raises:
            OSError: If the directory cannot be listed

        """
        ...

    def stat(self, path: str) -> os.stat_result:
        """Get file stats, following symlinks.

        Args:
            path: Path to get stats for

        Returns:
            Stat result

        Raises:
            OSError: If the path cannot be statted

        """
        ...

    def realpath(self, path: str) -> str:
        """Resolve ``path`` to its absolute canonical form.

        Raises:
            OSError: If the path does not exist

        """
        ...
