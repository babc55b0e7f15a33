"""Command-line interface for filetree.

Example:
    $ filetree show .
    $ filetree show src --format json --ignore-dir __pycache__ --max-depth 3
    $ filetree show . --format markdown --config filetree.yaml --output TREE.md
"""

import logging
from pathlib import Path
from typing import Any

import typer

from filetree.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _info,
    _setup_logging,
)
from filetree.config import ScanOptions, load_scan_options
from filetree.exceptions import ConfigError, UnsupportedFormatError
from filetree.service import FileTree
from filetree.types import OutputFormat

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="filetree",
    help="Scan a directory and render it as an ASCII tree, JSON or Markdown",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Filesystem tree renderer."""
    _setup_logging(verbose=verbose)


def _merge_options(
    base: ScanOptions,
    ignore_dirs: list[str] | None,
    max_files: int | None,
    max_depth: int | None,
    show_hidden: bool | None,
) -> ScanOptions:
    """Overlay explicitly passed CLI flags on options loaded from a file."""
    overrides: dict[str, Any] = {}
    if ignore_dirs:
        overrides["ignore_dirs"] = (*base.ignore_dirs, *ignore_dirs)
    if max_files is not None:
        overrides["max_files"] = max_files
    if max_depth is not None:
        overrides["max_depth"] = max_depth
    if show_hidden is not None:
        overrides["show_hidden"] = show_hidden
    if not overrides:
        return base
    return ScanOptions.model_validate({**base.model_dump(), **overrides})


@app.command(name="show")
def show_command(
    path: Path = typer.Argument(
        Path("."),
        help="Directory (or file) to scan",
    ),
    format: str = typer.Option(
        OutputFormat.TREE.value,
        "--format",
        "-f",
        help="Output format: tree, json or markdown",
    ),
    ignore_dirs: list[str] | None = typer.Option(
        None,
        "--ignore-dir",
        "-i",
        help="Directory name to skip (repeatable)",
    ),
    max_files: int | None = typer.Option(
        None,
        "--max-files",
        min=0,
        help="Maximum number of files to record",
    ),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        min=0,
        help="Maximum directory depth to descend",
    ),
    show_hidden: bool | None = typer.Option(
        None,
        "--show-hidden/--hide-hidden",
        help="Include dot-prefixed files and directories",
    ),
    stats: bool = typer.Option(
        False,
        "--stats",
        help="Show file sizes in tree and markdown output",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with scan options",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendering to a file instead of stdout",
    ),
) -> None:
    """Scan PATH and print its rendering.

    Exit codes:
        0 = success
        1 = unsupported format or output write failure
        2 = invalid options file

    """
    base_options = ScanOptions()
    if config is not None:
        try:
            base_options = load_scan_options(config)
        except ConfigError as e:
            _error(str(e))
            raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    options = _merge_options(base_options, ignore_dirs, max_files, max_depth, show_hidden)

    tree = FileTree()
    tree.init(path, options)
    logger.debug("Recorded %d files under %s", tree.file_count, path)

    try:
        rendered = tree.generate(path, {"format": format, "include_stats": stats})
    except UnsupportedFormatError as e:
        _error(f"{e}. Use one of: {', '.join(f.value for f in OutputFormat)}")
        raise typer.Exit(code=EXIT_ERROR) from None

    if output is None:
        typer.echo(rendered)
        return

    try:
        output.write_text(rendered + ("" if rendered.endswith("\n") else "\n"), encoding="utf-8")
    except OSError as e:
        _error(f"Cannot write {output}: {e}")
        raise typer.Exit(code=EXIT_ERROR) from None
    _info(f"Wrote {format} tree to {output}")
