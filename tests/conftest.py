"""Shared fixtures for fnglob tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tree_paths():
    """A varied set of slash-style paths, in a fixed order.

    Tree:
        readme.txt, setup.py, .hidden,
        src/main.py, src/util.py, src/.config, src/sub/deep.txt,
        docs/guide.md, docs/api.md, data.txt
    """
    return [
        "readme.txt",
        "setup.py",
        ".hidden",
        "src/main.py",
        "src/util.py",
        "src/.config",
        "src/sub/deep.txt",
        "docs/guide.md",
        "docs/api.md",
        "data.txt",
    ]
