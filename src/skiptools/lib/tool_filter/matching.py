"""Keyword matching and dependency expansion over parsed tools.

Matching is deliberately loose so that partial words in a conversation
still select a tool: "weath" selects a tool with the keyword "weather", and
"files" selects one with the keyword "file".
"""

from collections.abc import Sequence

from skiptools.config.defaults import MIN_WORD_LENGTH
from skiptools.models.tool import ParsedTool


def _query_words(query_lower: str) -> list[str]:
    """Split a lowercased query into words long enough for word matching."""
    return [word for word in query_lower.split() if len(word) >= MIN_WORD_LENGTH]


def keyword_matches(keyword: str, query_lower: str, query_words: list[str]) -> bool:
    """Check a single keyword against the query.

    Substring containment in the whole query is checked first. Only then is
    each query word compared with the keyword by containment or prefix in
    either direction.

    Args:
        keyword: Keyword as declared on the tool.
        query_lower: Lowercased query text.
        query_words: Words of the query eligible for word matching.

    Returns:
        True if the keyword matches.
    """
    keyword_lower = keyword.lower()

    if keyword_lower in query_lower:
        return True

    return any(
        keyword_lower in word
        or word in keyword_lower
        or keyword_lower.startswith(word)
        or word.startswith(keyword_lower)
        for word in query_words
    )


def match_by_keywords(tools: Sequence[ParsedTool], query: str) -> list[ParsedTool]:
    """Keep the tools relevant to the query, in their original order.

    Tools without keywords are always kept. A tool with keywords is kept if
    any of them matches. An empty query keeps every tool.

    Args:
        tools: Tools to filter.
        query: Query text extracted from the conversation.

    Returns:
        Order-preserving subsequence of tools.
    """
    if not query or not query.strip():
        return list(tools)

    query_lower = query.lower()
    query_words = _query_words(query_lower)

    matched: list[ParsedTool] = []
    for tool in tools:
        if tool.config is None or not tool.config.has_keywords:
            matched.append(tool)
            continue
        keywords = tool.config.keywords or []
        if any(keyword_matches(kw, query_lower, query_words) for kw in keywords):
            matched.append(tool)

    return matched


def expand_dependencies(
    filtered: Sequence[ParsedTool], all_tools: Sequence[ParsedTool]
) -> list[ParsedTool]:
    """Add the direct dependencies of the filtered tools.

    Dependencies of dependencies are not followed.

    Args:
        filtered: Tools selected so far.
        all_tools: Every tool known to the engine, in construction order.

    Returns:
        Tools from all_tools that were selected or are a direct dependency of
        a selected tool, in all_tools order.
    """
    selected_names = {tool.name for tool in filtered}

    for tool in filtered:
        if tool.config is not None and tool.config.depends_on:
            selected_names.update(tool.config.depends_on)

    return [tool for tool in all_tools if tool.name in selected_names]
