"""Tests for scan/generate option models and YAML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from filetree.config import (
    GenerateOptions,
    ScanOptions,
    coerce_generate_options,
    coerce_scan_options,
    load_scan_options,
)
from filetree.exceptions import ConfigError, UnsupportedFormatError


class TestScanOptions:
    """Test cases for ScanOptions."""

    def test_defaults(self) -> None:
        """Defaults scan everything except hidden entries."""
        options = ScanOptions()
        assert options.ignore_dirs == ()
        assert options.max_files is None
        assert options.max_depth is None
        assert options.show_hidden is False

    def test_camel_case_aliases(self) -> None:
        """camelCase keys map onto the snake_case fields."""
        options = ScanOptions.model_validate(
            {"ignoreDirs": ["dist"], "maxFiles": 3, "showHidden": True, "maxDepth": 2}
        )
        assert options.ignore_dirs == ("dist",)
        assert options.max_files == 3
        assert options.show_hidden is True
        assert options.max_depth == 2

    def test_ignore_dirs_deduplicated_in_order(self) -> None:
        """List input becomes a tuple without duplicates, order kept."""
        options = ScanOptions(ignore_dirs=["b", "a", "b"])
        assert options.ignore_dirs == ("b", "a")

    def test_negative_limits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScanOptions(max_files=-1)
        with pytest.raises(ValidationError):
            ScanOptions(max_depth=-1)

    def test_unknown_keys_ignored(self) -> None:
        """Keys meant for other calls (e.g. a render format) do not fail a scan."""
        options = ScanOptions.model_validate({"maxFiles": 5, "format": "json"})
        assert options == ScanOptions(max_files=5)

    def test_frozen(self) -> None:
        options = ScanOptions()
        with pytest.raises(ValidationError):
            options.max_files = 2  # type: ignore[misc]

    def test_limit_helpers(self) -> None:
        """Quota and depth helpers treat None as unlimited."""
        unlimited = ScanOptions()
        assert not unlimited.quota_reached(10_000)
        assert not unlimited.depth_exceeded(10_000)

        limited = ScanOptions(max_files=2, max_depth=1)
        assert not limited.quota_reached(1)
        assert limited.quota_reached(2)
        assert not limited.depth_exceeded(0)
        assert limited.depth_exceeded(1)


class TestCoercion:
    """Test cases for option coercion helpers."""

    def test_none_gives_defaults(self) -> None:
        assert coerce_scan_options(None) == ScanOptions()
        assert coerce_generate_options(None) == GenerateOptions()

    def test_model_passed_through(self) -> None:
        options = ScanOptions(max_depth=1)
        assert coerce_scan_options(options) is options

    def test_generate_format_none_defaults_to_tree(self) -> None:
        assert coerce_generate_options({"format": None}).format == "tree"

    def test_generate_format_not_validated(self) -> None:
        """Unknown formats survive coercion; generate() rejects them."""
        assert coerce_generate_options({"format": "bogus"}).format == "bogus"

    @pytest.mark.parametrize("value", ["", None])
    def test_generate_empty_format_defaults_to_tree(self, value: str | None) -> None:
        assert coerce_generate_options({"format": value}).format == "tree"
        assert GenerateOptions(format=value).format == "tree"  # type: ignore[arg-type]

    def test_generate_non_string_format_rejected(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            coerce_generate_options({"format": 1})
        assert exc_info.value.format == 1

    def test_include_stats_alias(self) -> None:
        assert coerce_generate_options({"includeStats": True}).include_stats is True


class TestLoadScanOptions:
    """Test cases for load_scan_options."""

    def test_loads_mixed_case_keys(self, tmp_path: Path) -> None:
        config = tmp_path / "filetree.yaml"
        config.write_text("ignore_dirs:\n  - node_modules\nmaxDepth: 3\nshowHidden: true\n")

        options = load_scan_options(config)

        assert options.ignore_dirs == ("node_modules",)
        assert options.max_depth == 3
        assert options.show_hidden is True

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_scan_options(config) == ScanOptions()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_scan_options(tmp_path / "missing.yaml")
        assert exc_info.value.path == str(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("ignore_dirs: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_scan_options(config)

    def test_non_mapping(self, tmp_path: Path) -> None:
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_scan_options(config)

    def test_invalid_values(self, tmp_path: Path) -> None:
        config = tmp_path / "neg.yaml"
        config.write_text("max_files: -5\n")
        with pytest.raises(ConfigError, match="Invalid scan options"):
            load_scan_options(config)

    def test_unknown_keys_in_file_ignored(self, tmp_path: Path) -> None:
        config = tmp_path / "extra.yaml"
        config.write_text("maxDepth: 2\nformat: json\n")

        assert load_scan_options(config) == ScanOptions(max_depth=2)
