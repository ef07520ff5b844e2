"""Tool filtering engine.

This module provides the SkipTools class, which narrows a fixed tool list
down to the tools relevant to a conversation.

Key responsibilities:
- Parse skip configuration out of every tool description once
- Reject dependency references to tools that were not provided
- Extract query text from the whole conversation or only its new messages
- Select tools by keyword, add their direct dependencies, cap the count
- Explain the outcome in a human-readable reason

One engine is meant to follow one conversation. It keeps the number of
messages seen by the previous call and holds no lock, so concurrent filter
calls on the same instance must be serialized by the caller.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from skiptools.lib.errors import DependencyError
from skiptools.lib.logging_config import get_logger
from skiptools.lib.tool_filter.matching import expand_dependencies, match_by_keywords
from skiptools.lib.tool_filter.parser import parse_tools
from skiptools.lib.tool_filter.query import extract_query
from skiptools.models.filter import FilterResult
from skiptools.models.tool import ParsedTool, Tool

logger = get_logger(__name__)


class SkipTools:
    """Filters tools based on skip configurations and conversation content.

    Attributes:
        parsed_tools: Tools with parsed configuration, in construction order.
        _last_processed_message_count: Length of the history seen by the
            previous filter call.
    """

    def __init__(self, tools: Sequence[Tool | Mapping[str, Any]]) -> None:
        """Parse the tools and validate their dependencies.

        Args:
            tools: Tools available to the model, or mappings validated into Tool.

        Raises:
            DependencyError: If a tool depends on a tool not in the list.
            pydantic.ValidationError: If a tool mapping is malformed.
        """
        self.parsed_tools: list[ParsedTool] = parse_tools(tools)
        self._last_processed_message_count = 0
        self._validate_dependencies()

        logger.info(f"SkipTools initialized with {len(self.parsed_tools)} tools")

    @property
    def last_processed_message_count(self) -> int:
        """Length of the message history supplied to the previous call."""
        return self._last_processed_message_count

    def _validate_dependencies(self) -> None:
        """Check that every dependency names a tool in the list.

        Raises:
            DependencyError: On the first unresolved dependency.
        """
        tool_names = {tool.name for tool in self.parsed_tools}

        for tool in self.parsed_tools:
            if tool.config is None or not tool.config.depends_on:
                continue
            for dependency in tool.config.depends_on:
                if dependency not in tool_names:
                    raise DependencyError(tool.name, dependency)

    def filter(
        self,
        messages: Sequence[Any],
        max_tools: int | None = None,
        only_new_messages: bool = False,
    ) -> FilterResult:
        """Select the tools relevant to the conversation.

        Args:
            messages: Full conversation history, as Message models or dicts.
            max_tools: Maximum number of tools to return. None or a value
                below 1 means no limit.
            only_new_messages: Only read messages added since the previous
                call. The whole history is read otherwise.

        Returns:
            FilterResult with the selected tools in construction order.
        """
        start = self._last_processed_message_count if only_new_messages else 0
        extracted = extract_query(messages, start=start)
        self._last_processed_message_count = len(messages)

        matched = self.parsed_tools
        if extracted.query:
            matched = match_by_keywords(self.parsed_tools, extracted.query)

        selected = expand_dependencies(matched, self.parsed_tools)
        matched_names = {tool.name for tool in matched}
        dependencies_added = sum(
            1 for tool in selected if tool.name not in matched_names
        )

        truncated = False
        if max_tools is not None and max_tools > 0 and len(selected) > max_tools:
            selected = selected[:max_tools]
            truncated = True

        reason = self._generate_filter_reason(
            has_messages=len(messages) > 0,
            has_query=bool(extracted.query),
            message_count=extracted.messages_scanned,
            message_scope="new" if only_new_messages else "all",
            dependencies_added=dependencies_added,
            max_tools=max_tools if truncated else None,
        )

        logger.debug(
            f"Filtered tools: {len(selected)}/{len(self.parsed_tools)} "
            f"({reason}) for query: {extracted.query[:50]}..."
        )

        return FilterResult(
            tools=selected,
            total_original_count=len(self.parsed_tools),
            filtered_count=len(selected),
            reason=reason,
            messages_processed=extracted.messages_processed,
        )

    def _generate_filter_reason(
        self,
        has_messages: bool,
        has_query: bool,
        message_count: int,
        message_scope: str,
        dependencies_added: int,
        max_tools: int | None,
    ) -> str:
        """Generate a human-readable reason for the filtering result.

        Args:
            has_messages: Whether any messages were supplied.
            has_query: Whether query text was found.
            message_count: Number of messages read for the query.
            message_scope: "all" or "new".
            dependencies_added: Tools added only as dependencies.
            max_tools: Limit applied, or None if nothing was truncated.

        Returns:
            Comma-separated description, or "no filters applied".
        """
        reasons: list[str] = []

        if has_query:
            reasons.append(
                f"filtered by keywords from {message_count} {message_scope} messages"
            )
        elif has_messages:
            reasons.append(f"no query text in {message_count} {message_scope} messages")

        if dependencies_added > 0:
            reasons.append(f"{dependencies_added} dependencies added")

        if max_tools is not None:
            reasons.append(f"limited to {max_tools} tools")

        return ", ".join(reasons) if reasons else "no filters applied"

    def reset(self) -> None:
        """Forget previously processed messages, e.g. for a new conversation."""
        self._last_processed_message_count = 0

    def get_all_tools(self) -> list[ParsedTool]:
        """Get all parsed tools.

        Returns:
            A copy of the parsed tool list in construction order.
        """
        return list(self.parsed_tools)

    def get_clean_descriptions(self) -> list[dict[str, str]]:
        """Get clean descriptions (without the skip block) for all tools.

        Returns:
            List of {"name", "description"} dicts for prompt assembly.
        """
        return [
            {"name": tool.name, "description": tool.clean_description}
            for tool in self.parsed_tools
        ]
