"""Keyword-based tool filtering.

This package reduces the tools offered to a language model to those
relevant to the conversation, based on keywords declared in each tool's
description, and re-adds the tools that selected tools depend on.

Key components:
- parser: Extracts the ``skip:`` configuration block from descriptions
- query: Builds query text from conversation messages
- matching: Keyword matching and one-hop dependency expansion
- SkipTools: Engine orchestrating the above per filter call

Example usage:
    from skiptools.lib.tool_filter import SkipTools

    engine = SkipTools(tools)
    result = engine.filter(
        messages=[{"role": "user", "content": "What's the weather?"}],
        max_tools=5,
    )
    names = [tool.name for tool in result.tools]
"""

from skiptools.lib.tool_filter.engine import SkipTools
from skiptools.lib.tool_filter.matching import expand_dependencies, match_by_keywords
from skiptools.lib.tool_filter.parser import (
    build_skip_config,
    coerce_tool,
    parse_tool_description,
    parse_tools,
    validate_skip_config,
)
from skiptools.lib.tool_filter.query import extract_query, extract_text_from_content

__all__ = [
    "SkipTools",
    "build_skip_config",
    "coerce_tool",
    "expand_dependencies",
    "extract_query",
    "extract_text_from_content",
    "match_by_keywords",
    "parse_tool_description",
    "parse_tools",
    "validate_skip_config",
]
