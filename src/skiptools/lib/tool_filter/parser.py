"""Extraction of skip configuration blocks from tool descriptions.

A tool description may end with an indented YAML block introduced by a
``skip:`` line::

    Read the contents of a file.

    skip:
      keywords: ["read", "file"]
      depends_on: ["list_files"]

The block is removed from the description offered to the model and parsed
into a SkipConfig. A malformed block is logged and ignored; it never stops
tools from loading.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

import yaml

from skiptools.config.defaults import SKIP_BLOCK_KEY
from skiptools.lib.logging_config import get_logger
from skiptools.models.tool import ParsedDescription, ParsedTool, SkipConfig, Tool

logger = get_logger(__name__)

# Marker line on its own, followed by the indented lines of the block
SKIP_BLOCK_REGEX = re.compile(
    rf"\n\s*{re.escape(SKIP_BLOCK_KEY)}:\s*\n((?:\s+.+\n?)*)"
)

_LIST_FIELDS = ("depends_on", "keywords")

# Keys a tool mapping may use for a directly supplied configuration
_DIRECT_CONFIG_KEYS = (SKIP_BLOCK_KEY, "config")


def validate_skip_config(config: Any) -> bool:
    """Check that a value has the shape of a skip configuration.

    Only the shape is checked: a mapping whose ``depends_on`` and
    ``keywords`` entries, when present, are lists of strings. Other keys do
    not affect the result.

    Args:
        config: Candidate configuration value.

    Returns:
        True if the value can be used as a skip configuration.
    """
    if isinstance(config, SkipConfig):
        return True
    if not isinstance(config, Mapping):
        return False

    for field in _LIST_FIELDS:
        value = config.get(field)
        if value is None:
            continue
        if not isinstance(value, list):
            return False
        if not all(isinstance(item, str) for item in value):
            return False

    return True


def build_skip_config(data: Any, source: str) -> SkipConfig | None:
    """Turn a raw configuration value into a SkipConfig.

    Values failing the shape check are logged and dropped. Unknown keys are
    logged and ignored; ``depends_on`` and ``keywords`` are still used.

    Args:
        data: Raw value, usually a mapping loaded from YAML.
        source: Where the value came from, for log messages.

    Returns:
        The configuration, or None if the value is unusable.
    """
    if isinstance(data, SkipConfig):
        return data

    if not validate_skip_config(data):
        logger.warning(
            f"Failed to parse skip configuration of {source}: invalid skip "
            f"configuration format (got {type(data).__name__})"
        )
        return None

    unknown = sorted(str(key) for key in data if key not in _LIST_FIELDS)
    if unknown:
        logger.warning(
            f"Ignoring unknown skip configuration keys of {source}: "
            f"{', '.join(unknown)}"
        )

    return SkipConfig.model_validate(
        {field: data[field] for field in _LIST_FIELDS if field in data}
    )


def parse_tool_description(description: str) -> ParsedDescription:
    """Split a tool description into clean text and skip configuration.

    Args:
        description: Raw tool description.

    Returns:
        ParsedDescription with the trimmed description and the parsed
        configuration, or None as configuration when no usable block exists.
    """
    match = SKIP_BLOCK_REGEX.search(description)
    if match is None:
        return ParsedDescription(clean_description=description.strip())

    clean_description = (
        description[: match.start()] + description[match.end() :]
    ).strip()

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse skip configuration: {e}")
        return ParsedDescription(clean_description=clean_description)

    config = build_skip_config(data, source="description block")
    return ParsedDescription(clean_description=clean_description, config=config)


def coerce_tool(item: Tool | Mapping[str, Any]) -> Tool:
    """Validate a tool mapping into a Tool.

    A directly supplied configuration (under ``skip`` or ``config``) that
    fails the shape check is dropped with a warning rather than rejected, so
    only a missing or empty name or description fails validation.

    Args:
        item: A Tool, returned unchanged, or a mapping.

    Returns:
        The validated Tool.

    Raises:
        pydantic.ValidationError: If name or description is invalid.
    """
    if isinstance(item, Tool):
        return item

    fields = dict(item)
    raw_config = None
    for key in _DIRECT_CONFIG_KEYS:
        value = fields.pop(key, None)
        if raw_config is None:
            raw_config = value

    config = None
    if raw_config is not None:
        config = build_skip_config(
            raw_config, source=f"tool '{fields.get('name', 'unknown')}'"
        )

    return Tool.model_validate({**fields, "config": config})


def parse_tools(tools: Iterable[Tool | Mapping[str, Any]]) -> list[ParsedTool]:
    """Parse the descriptions of several tools, preserving their order.

    A configuration block found in the description takes precedence over a
    configuration supplied directly on the tool.

    Args:
        tools: Tools, or mappings validated into Tool.

    Returns:
        One ParsedTool per input tool, in input order.

    Raises:
        pydantic.ValidationError: If a tool mapping lacks a usable name or
            description.
    """
    parsed_tools: list[ParsedTool] = []

    for item in tools:
        tool = coerce_tool(item)
        parsed = parse_tool_description(tool.description)
        config = parsed.config if parsed.config is not None else tool.config

        parsed_tools.append(
            ParsedTool(
                name=tool.name,
                description=tool.description,
                config=config,
                original_description=tool.description,
                clean_description=parsed.clean_description,
            )
        )
        logger.debug(
            f"Parsed tool {tool.name}: "
            f"keywords={config.keywords if config else None}, "
            f"depends_on={config.depends_on if config else None}"
        )

    return parsed_tools
