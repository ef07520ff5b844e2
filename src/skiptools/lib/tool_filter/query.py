"""Query extraction from conversation messages.

Only text that reflects user intent takes part in matching: tool responses
and assistant messages that invoke tools are skipped. Messages can be
Message models or plain dicts in the OpenAI chat format.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from skiptools.models.filter import ExtractedQuery


def _get_field(item: Any, key: str) -> Any:
    """Read a field from a mapping or an object, returning None if missing."""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def is_intent_message(message: Any) -> bool:
    """Return whether a message carries user-intent text.

    Tool responses and assistant messages that carry tool calls are not
    user intent.
    """
    role = _get_field(message, "role")
    if role == "tool":
        return False
    if role == "assistant" and _get_field(message, "tool_calls"):
        return False
    return True


def extract_text_from_content(content: Any) -> str | None:
    """Extract plain text from message content.

    Args:
        content: Either a string, used verbatim, or a list of typed parts of
            which only ``text`` parts contribute.

    Returns:
        The extracted text, or None for unsupported content.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, Sequence):
        texts = []
        for part in content:
            if _get_field(part, "type") != "text":
                continue
            text = _get_field(part, "text")
            if isinstance(text, str):
                texts.append(text)
        return " ".join(texts)

    return None


def extract_query(messages: Sequence[Any], start: int = 0) -> ExtractedQuery:
    """Build the query text from a window of the conversation.

    Args:
        messages: Full conversation history.
        start: Index of the first message to read. Messages before it have
            been seen by an earlier call.

    Returns:
        ExtractedQuery whose messages_processed is always len(messages),
        however much of the history was read.
    """
    window = list(messages[start:]) if start > 0 else list(messages)

    fragments: list[str] = []
    for message in window:
        if not is_intent_message(message):
            continue
        content = _get_field(message, "content")
        if not content:
            continue
        text = extract_text_from_content(content)
        if text and text.strip():
            fragments.append(text.strip())

    return ExtractedQuery(
        query=" ".join(fragments),
        messages_processed=len(messages),
        messages_scanned=len(window),
    )
