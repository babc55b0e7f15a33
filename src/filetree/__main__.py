"""Allow ``python -m filetree``."""

from filetree.cli import app

if __name__ == "__main__":
    app()
