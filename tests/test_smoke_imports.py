"""Smoke tests for module imports.

Catches broken imports, circular dependencies, and missing dependencies early.
"""

import importlib

import pytest

MODULES = [
    "filetree",
    "filetree.__main__",
    "filetree.cli",
    "filetree.cli_utils",
    "filetree.config",
    "filetree.exceptions",
    "filetree.paths",
    "filetree.reconstruct",
    "filetree.renderers",
    "filetree.renderers.ascii_tree",
    "filetree.renderers.base",
    "filetree.renderers.json_tree",
    "filetree.renderers.markdown",
    "filetree.scanner",
    "filetree.service",
    "filetree.store",
    "filetree.time_format",
    "filetree.types",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_module_imports(module_name: str) -> None:
    """Each module imports cleanly."""
    importlib.import_module(module_name)


def test_public_api() -> None:
    import filetree

    for name in filetree.__all__:
        assert hasattr(filetree, name), name
