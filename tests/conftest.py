"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest

from mcp_edit_service.config.settings import Settings
from mcp_edit_service.container import DependencyContainer
from mcp_edit_service.ports.llm.rewrite_port import RewritePort

ORIGINAL_CODE = "function add(a,b){return a+b}"
UPDATED_CODE = (
    "function add(a,b){if(a==null||b==null)throw new Error('bad');return a+b}"
)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory holding a file to edit.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "add.js"), "w") as f:
            f.write(ORIGINAL_CODE)

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "notes.md"), "w") as f:
            f.write("# Notes\n\nNothing here yet.\n")

        yield temp_dir


@pytest.fixture
def target_file(temp_directory):
    """Path of the editable file inside temp_directory."""
    return os.path.join(temp_directory, "add.js")


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_rewrite():
    """
    Create a rewrite adapter returning UPDATED_CODE.

    Returns:
        Mock implementing RewritePort
    """
    adapter = MagicMock(spec=RewritePort)
    adapter.rewrite = AsyncMock(return_value=UPDATED_CODE)
    return adapter


@pytest.fixture
def settings():
    """Settings with a fake credential, independent of the environment."""
    return Settings(api_key="test-key-123456")


@pytest.fixture
def dependency_container(settings, mock_logger):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    return DependencyContainer(settings, logger=mock_logger)


@pytest.fixture
def list_backups():
    """Return a function listing the backup files created next to a path."""

    def _list(path):
        directory, name = os.path.split(path)
        return sorted(
            os.path.join(directory, f)
            for f in os.listdir(directory)
            if f.startswith(name + ".backup.")
        )

    return _list


@pytest.fixture
def original_code():
    return ORIGINAL_CODE


@pytest.fixture
def updated_code():
    return UPDATED_CODE
