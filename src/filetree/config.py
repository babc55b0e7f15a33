"""Configuration models for scanning and rendering.

Options are accepted in snake_case or in the camelCase spelling used by
embedding callers (``ignoreDirs``, ``maxFiles``, ``showHidden``,
``maxDepth``, ``includeStats``).
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filetree.exceptions import ConfigError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class ScanOptions(BaseModel):
    """Filters and limits applied while scanning a directory tree.

    Unknown keys are ignored so one options mapping can serve several calls.

    Attributes:
        ignore_dirs: Directory names (not paths) pruned at any depth.
        max_files: Global cap on recorded file entries (None = unlimited).
        show_hidden: Record and descend into dot-prefixed entries.
        max_depth: Directories at depth >= max_depth are not descended into
            (root = 0, None = unlimited).

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    ignore_dirs: tuple[str, ...] = Field(
        default=(),
        alias="ignoreDirs",
        description="Directory basenames to skip during traversal",
    )
    max_files: int | None = Field(
        default=None,
        ge=0,
        alias="maxFiles",
        description="Maximum number of file entries recorded by one scan",
    )
    show_hidden: bool = Field(
        default=False,
        alias="showHidden",
        description="Include entries whose name starts with '.'",
    )
    max_depth: int | None = Field(
        default=None,
        ge=0,
        alias="maxDepth",
        description="Maximum directory depth to traverse",
    )

    @field_validator("ignore_dirs", mode="before")
    @classmethod
    def convert_list_to_tuple(cls, v: Any) -> tuple[str, ...]:
        """Convert list to tuple and deduplicate while preserving order."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        if isinstance(v, (list, tuple, set, frozenset)):
            seen: set[str] = set()
            result: list[str] = []
            for x in v:
                if x not in seen:
                    seen.add(x)
                    result.append(x)
            return tuple(result)
        return cast("tuple[str, ...]", v)

    def is_ignored_dir(self, name: str) -> bool:
        return name in self.ignore_dirs

    def quota_reached(self, file_count: int) -> bool:
        """Check whether ``file_count`` has used up the ``max_files`` quota."""
        return self.max_files is not None and file_count >= self.max_files

    def depth_exceeded(self, depth: int) -> bool:
        return self.max_depth is not None and depth >= self.max_depth


class GenerateOptions(BaseModel):
    """Options for a single ``generate`` call.

    ``format`` is kept as a plain string; validation happens in
    ``FileTree.generate`` so an unknown value surfaces as
    ``UnsupportedFormatError`` rather than a pydantic error.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    format: str = Field(default="tree", description="tree, json or markdown")
    include_stats: bool = Field(
        default=False,
        alias="includeStats",
        description="Append file size labels in tree and markdown output",
    )

    @field_validator("format", mode="before")
    @classmethod
    def default_empty_format(cls, v: Any) -> Any:
        """Treat None and the empty string as the default format."""
        return v or "tree"


def coerce_scan_options(options: ScanOptions | Mapping[str, Any] | None) -> ScanOptions:
    """Normalize caller-supplied scan options into a ``ScanOptions`` instance."""
    if options is None:
        return ScanOptions()
    if isinstance(options, ScanOptions):
        return options
    return ScanOptions.model_validate(dict(options))


def coerce_generate_options(
    options: GenerateOptions | Mapping[str, Any] | None,
) -> GenerateOptions:
    """Normalize caller-supplied render options into a ``GenerateOptions`` instance."""
    if options is None:
        return GenerateOptions()
    if isinstance(options, GenerateOptions):
        return options
    data = dict(options)
    fmt = data.get("format")
    if fmt and not isinstance(fmt, str):
        raise UnsupportedFormatError(fmt)
    return GenerateOptions.model_validate(data)


def load_scan_options(path: Path) -> ScanOptions:
    """Load scan options from a YAML file.

    The file holds a single mapping whose keys are ScanOptions fields, e.g.::

        ignore_dirs: [node_modules, .git]
        max_depth: 4
        showHidden: true

    Args:
        path: Path to the YAML file

    Returns:
        Validated ScanOptions

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, is not a
            mapping, or fails validation.

    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read options file {path}: {e}", str(path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", str(path)) from e

    if data is None:
        logger.debug("Options file %s is empty, using defaults", path)
        return ScanOptions()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Options file {path} must contain a mapping, got {type(data).__name__}",
            str(path),
        )

    try:
        return ScanOptions.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid scan options in {path}: {e}", str(path)) from e
