"""Pytest configuration for autoload CLI tests."""

import logging
from pathlib import Path
from textwrap import dedent

import pytest

from autoload_cli.host import FileSystem
from autoload_cli.host import SymbolHost
from autoload_cli.loader import Loader
from autoload_cli.logging_setup import JsonlHandler


def write_source(root: Path, relative: str, body: str = "") -> Path:
    """Write a source file below ``root`` and return its path."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(body))
    return path


@pytest.fixture
def src(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def host() -> SymbolHost:
    return SymbolHost()


@pytest.fixture
def loader(host: SymbolHost) -> Loader:
    """Loader with an empty fallback search path so nothing leaks in from sys.path."""
    return Loader(host, FileSystem(search_path=[]))


@pytest.fixture
def reset_root_logging():
    """Drop JSONL handlers and restore the root level after a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
