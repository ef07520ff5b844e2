"""Loader for tool catalogs and conversation files.

A tool catalog is a YAML (or JSON) document holding either a list of tools
or a mapping with a ``tools`` list::

    tools:
      - name: get_weather
        description: |
          Get the current weather for a location.

          skip:
            keywords: ["weather", "forecast"]

Conversation files hold a list of chat messages, or a mapping with a
``messages`` list, in the OpenAI chat format.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from skiptools.lib.errors import ConfigError, MissingFileError
from skiptools.lib.tool_filter.parser import coerce_tool
from skiptools.models.tool import Tool

logger = logging.getLogger(__name__)


def _extract_list(content: Any, key: str, file_path: str) -> list[Any]:
    """Return the list stored at the top level or under ``key``.

    Raises:
        ConfigError: If the document holds neither form.
    """
    if content is None:
        return []
    if isinstance(content, dict):
        content = content.get(key, [])
    if not isinstance(content, list):
        raise ConfigError(
            key,
            f"Expected a list of {key} (or a mapping with a '{key}' list) "
            f"in {file_path}, got {type(content).__name__}",
        )
    return content


def _describe_tool_errors(exc: PydanticValidationError) -> str:
    """Render the field errors of one catalog entry, one indented line each."""
    lines = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "tool"
        lines.append(f"  {field}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines)


class ToolCatalogLoader:
    """Loads tool catalogs and message histories from disk."""

    def parse_yaml(self, file_path: str, kind: str = "file") -> Any:
        """Parse a YAML file and return its contents.

        Args:
            file_path: Path to the YAML file to parse
            kind: What the file holds, used in the not-found message

        Returns:
            Parsed YAML content, or None if the file is empty

        Raises:
            MissingFileError: If the file cannot be opened
            ConfigError: If YAML parsing fails
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except OSError as e:
            raise MissingFileError(file_path, kind) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

    def load_tools(self, file_path: str) -> list[Tool]:
        """Load and validate a tool catalog.

        A ``skip`` entry given directly on a tool goes through the same checks
        as a description block: an unusable one is logged and dropped.

        Args:
            file_path: Path to the catalog file

        Returns:
            Validated Tool instances in file order

        Raises:
            MissingFileError: If the file doesn't exist
            ConfigError: If parsing fails or an entry lacks a usable name or
                description
        """
        content = self.parse_yaml(file_path, kind="tool catalog")
        entries = _extract_list(content, "tools", file_path)

        tools: list[Tool] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ConfigError(
                    "tools",
                    f"Tool at index {index} in {file_path} must be a mapping, "
                    f"got {type(entry).__name__}",
                )
            try:
                tools.append(coerce_tool(entry))
            except PydanticValidationError as e:
                raise ConfigError(
                    "tools",
                    f"Invalid tool at index {index} in {file_path}:\n"
                    f"{_describe_tool_errors(e)}",
                ) from e

        logger.debug(f"Loaded {len(tools)} tools from {file_path}")
        return tools

    def load_messages(self, file_path: str) -> list[dict[str, Any]]:
        """Load a conversation history.

        Messages are returned as plain dicts; the filtering engine reads them
        without further validation.

        Args:
            file_path: Path to the messages file

        Returns:
            List of message dicts in file order

        Raises:
            MissingFileError: If the file doesn't exist
            ConfigError: If the document is not a list of mappings
        """
        content = self.parse_yaml(file_path, kind="messages file")
        entries = _extract_list(content, "messages", file_path)

        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ConfigError(
                    "messages",
                    f"Message at index {index} in {file_path} must be a mapping, "
                    f"got {type(entry).__name__}",
                )

        logger.debug(f"Loaded {len(entries)} messages from {file_path}")
        return entries
