"""Shared pytest fixtures for the psistall test suite.

Provides:
- fixtures_root: a procfs-shaped directory holding canned pressure files
- fs: an FS rooted at fixtures_root
"""

from pathlib import Path

import pytest

from psistall import FS


@pytest.fixture
def fixtures_root() -> str:
    """Directory laid out like /proc, with pressure/{cpu,io,memory}."""
    return str(Path(__file__).parent / "fixtures")


@pytest.fixture
def fs(fixtures_root):
    return FS(fixtures_root)
