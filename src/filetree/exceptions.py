"""Exception hierarchy for filetree.

Only ``UnsupportedFormatError`` (and ``ConfigError`` when loading options
files) ever reaches library callers. ``PathResolutionError`` is raised by the
inner layer and mapped to a fallback output at the renderer boundary.
"""

__all__ = [
    "FileTreeError",
    "PathResolutionError",
    "UnsupportedFormatError",
    "ConfigError",
]


class FileTreeError(Exception):
    """Base exception for all filetree errors."""

    pass


class PathResolutionError(FileTreeError):
    """A path could not be canonicalized (missing, dangling link, no access).

    Attributes:
        path: The path that failed to resolve.

    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot resolve path: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedFormatError(FileTreeError):
    """Requested output format is not one of tree, json, markdown.

    Attributes:
        format: The rejected format value.

    """

    def __init__(self, format: object) -> None:
        self.format = format
        super().__init__(f"Unsupported format: {format}")


class ConfigError(FileTreeError):
    """Scan options file is unreadable or does not validate."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
