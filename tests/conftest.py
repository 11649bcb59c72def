"""
Shared fixtures for fuzzyfind tests
"""

import logging
from pathlib import Path
from typing import Dict

import pytest


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create files (and their parent directories) below root"""
    for rel_path, content in files.items():
        path = root / rel_path
        if rel_path.endswith('/'):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def make_tree(tmp_path, monkeypatch):
    """Build a directory tree in tmp_path and make it the working directory"""
    def _make(files: Dict[str, str]) -> Path:
        write_tree(tmp_path, files)
        monkeypatch.chdir(tmp_path)
        return tmp_path
    return _make


@pytest.fixture
def restore_logging():
    """Undo configure_logging() changes to the root logger"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
