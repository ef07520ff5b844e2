"""Unit tests for tool_filter query extraction."""

from skiptools.lib.tool_filter.query import (
    extract_query,
    extract_text_from_content,
    is_intent_message,
)
from skiptools.models.message import ContentPart, Message


class TestExtractTextFromContent:
    """Tests for extract_text_from_content."""

    def test_string_content_verbatim(self) -> None:
        """Test that string content is returned unchanged."""
        assert extract_text_from_content("  Hello World ") == "  Hello World "

    def test_text_parts_joined(self) -> None:
        """Test that only text parts are joined from multi-part content."""
        content = [
            {"type": "text", "text": "Look at"},
            {"type": "image_url", "image_url": {"url": "https://example.com/a.png"}},
            {"type": "text", "text": "this weather map"},
        ]

        assert extract_text_from_content(content) == "Look at this weather map"

    def test_content_part_models(self) -> None:
        """Test that ContentPart models are read like dicts."""
        content = [
            ContentPart(type="text", text="read"),
            ContentPart(type="input_audio"),
        ]

        assert extract_text_from_content(content) == "read"

    def test_unsupported_content(self) -> None:
        """Test that unsupported content yields None."""
        assert extract_text_from_content(None) is None
        assert extract_text_from_content({"type": "text", "text": "x"}) is None
        assert extract_text_from_content(42) is None


class TestIsIntentMessage:
    """Tests for is_intent_message."""

    def test_user_and_plain_assistant(self) -> None:
        """Test that user and plain assistant messages are intent."""
        assert is_intent_message({"role": "user", "content": "hi"})
        assert is_intent_message({"role": "assistant", "content": "hello"})
        assert is_intent_message({"role": "system", "content": "be brief"})

    def test_tool_messages_skipped(self) -> None:
        """Test that tool responses are not intent."""
        assert not is_intent_message(
            {"role": "tool", "content": "72F", "tool_call_id": "call_1"}
        )

    def test_assistant_tool_calls_skipped(self) -> None:
        """Test that assistant messages invoking tools are not intent."""
        message = Message(
            role="assistant",
            content="Checking the forecast",
            tool_calls=[{"id": "call_1", "type": "function"}],
        )

        assert not is_intent_message(message)

    def test_assistant_with_empty_tool_calls(self) -> None:
        """Test that an empty tool_calls list does not mark a tool invocation."""
        assert is_intent_message(
            {"role": "assistant", "content": "done", "tool_calls": []}
        )


class TestExtractQuery:
    """Tests for extract_query."""

    def test_empty_messages(self) -> None:
        """Test extraction from an empty history."""
        result = extract_query([])

        assert result.query == ""
        assert result.messages_processed == 0
        assert result.messages_scanned == 0

    def test_joins_fragments_and_skips_tool_traffic(self) -> None:
        """Test that tool traffic is dropped and fragments are joined."""
        messages = [
            {"role": "user", "content": "  What's the weather?  "},
            {
                "role": "assistant",
                "content": "calling weather tool",
                "tool_calls": [{"id": "c1"}],
            },
            {"role": "tool", "content": "sunny", "tool_call_id": "c1"},
            {"role": "assistant", "content": "It is sunny."},
            {"role": "user", "content": "   "},
            {"role": "user", "content": [{"type": "text", "text": "Thanks"}]},
        ]

        result = extract_query(messages)

        assert result.query == "What's the weather? It is sunny. Thanks"
        assert result.messages_processed == 6
        assert result.messages_scanned == 6

    def test_window_start(self) -> None:
        """Test that only messages from start onwards are read."""
        messages = [
            {"role": "user", "content": "read a file"},
            {"role": "assistant", "content": "done"},
            {"role": "user", "content": "now search the web"},
        ]

        result = extract_query(messages, start=2)

        assert result.query == "now search the web"
        assert result.messages_processed == 3
        assert result.messages_scanned == 1

    def test_window_start_beyond_history(self) -> None:
        """Test that a start past the end yields an empty window."""
        messages = [{"role": "user", "content": "hello"}]

        result = extract_query(messages, start=5)

        assert result.query == ""
        assert result.messages_processed == 1
        assert result.messages_scanned == 0

    def test_message_models(self) -> None:
        """Test extraction from Message models."""
        messages = [
            Message(role="user", content="show me the forecast"),
            Message(role="user", content=None),
        ]

        result = extract_query(messages)

        assert result.query == "show me the forecast"
