"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including naming conventions, on-disk project trees, and resolver factories.
"""

from pathlib import Path

import pytest

from constants import CONVENTION_PRESETS
from core.resolver import CounterpartResolver
from core.walker import FilesystemDirectoryWalker, MockDirectoryWalker
from models import SupportedFramework


@pytest.fixture
def convention():
    """WPF (C#) naming convention."""
    return CONVENTION_PRESETS[SupportedFramework.WPF]


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root for testing."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def make_tree():
    """Factory that creates empty files (and their parents) below a root."""

    def _factory(root: Path, *relative_paths: str) -> list[Path]:
        created = []
        for rel in relative_paths:
            file_path = root / rel
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.touch()
            created.append(file_path)
        return created

    return _factory


@pytest.fixture
def fs_resolver(convention):
    """Resolver walking the real file system."""
    return CounterpartResolver(
        convention, FilesystemDirectoryWalker(ignore_dirs=convention["ignore_dirs"])
    )


@pytest.fixture
def mock_resolver_factory(convention):
    """Factory for resolvers backed by a MockDirectoryWalker."""

    def _factory(files=()):
        walker = MockDirectoryWalker(files)
        return CounterpartResolver(convention, walker), walker

    return _factory
