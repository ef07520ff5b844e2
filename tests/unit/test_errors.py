"""Tests for custom exception hierarchy in skiptools.lib.errors."""

from skiptools.lib.errors import (
    ConfigError,
    DependencyError,
    MissingFileError,
    SkipToolsError,
)


class TestSkipToolsError:
    """Tests for base SkipToolsError exception."""

    def test_error_creates_with_message(self) -> None:
        """Test that SkipToolsError can be created with a message."""
        error = SkipToolsError("Test error message")
        assert str(error) == "Test error message"

    def test_error_is_exception(self) -> None:
        """Test that SkipToolsError is an Exception subclass."""
        assert isinstance(SkipToolsError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("tools", "Expected a list")

        assert str(error) == "Configuration error in 'tools': Expected a list"
        assert error.field == "tools"
        assert error.message == "Expected a list"

    def test_config_error_is_skiptools_error(self) -> None:
        """Test that ConfigError is a SkipToolsError subclass."""
        assert isinstance(ConfigError("field", "message"), SkipToolsError)


class TestDependencyError:
    """Tests for DependencyError exception."""

    def test_message_names_both_tools(self) -> None:
        """Test the literal message format."""
        error = DependencyError("X", "Y")

        assert str(error) == (
            'Tool "X" depends on "Y" which is not found in the provided tools '
            "list. Dependencies must reference other tools in the same list."
        )

    def test_attributes(self) -> None:
        """Test that the tool names and field are kept on the error."""
        error = DependencyError("writer", "reader")

        assert error.tool_name == "writer"
        assert error.dependency == "reader"
        assert error.field == "depends_on"
        assert error.message == str(error)

    def test_is_config_error(self) -> None:
        """Test that DependencyError is a ConfigError subclass."""
        assert isinstance(DependencyError("a", "b"), ConfigError)


class TestMissingFileError:
    """Tests for MissingFileError exception."""

    def test_message_names_kind_and_path(self) -> None:
        """Test that the kind of file and its path are both reported."""
        error = MissingFileError("/tmp/tools.yaml", "tool catalog")

        assert str(error) == "Tool catalog not found: /tmp/tools.yaml"
        assert error.path == "/tmp/tools.yaml"
        assert error.kind == "tool catalog"

    def test_is_not_a_config_error(self) -> None:
        """Test that a missing file is kept apart from invalid content."""
        error = MissingFileError("chat.json", "messages file")

        assert isinstance(error, SkipToolsError)
        assert not isinstance(error, ConfigError)
