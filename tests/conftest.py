"""Pytest configuration and shared fixtures for skiptools tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from skiptools.models.tool import Tool


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_tools() -> list[Tool]:
    """A small catalog of annotated tools.

    Order: read_file, write_file (depends on read_file), search_web,
    run_command, get_weather, get_time (no keywords).
    """
    return [
        Tool(
            name="read_file",
            description="""Read the contents of a file from the filesystem.

This tool allows you to read the contents of any file
that exists in the current workspace.

skip:
  keywords: ["read", "file", "contents", "view", "open", "show"]""",
        ),
        Tool(
            name="write_file",
            description="""Write content to a file on the filesystem.

skip:
  depends_on: ["read_file"]
  keywords: ["write", "save", "create", "edit"]""",
        ),
        Tool(
            name="search_web",
            description="""Search the internet for information.

skip:
  keywords: ["search", "web", "internet", "lookup", "google"]""",
        ),
        Tool(
            name="run_command",
            description="""Execute a command in the terminal.

skip:
  keywords: ["execute", "command", "terminal", "bash", "shell"]""",
        ),
        Tool(
            name="get_weather",
            description="""Get current weather information for a location.

skip:
  keywords: ["weather", "temperature", "forecast", "climate", "rain"]""",
        ),
        Tool(
            name="get_time",
            description="Get the current time.",
        ),
    ]
