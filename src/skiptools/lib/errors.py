"""Custom exception hierarchy for skiptools configuration and filtering."""


class SkipToolsError(Exception):
    """Base exception for all skiptools errors.

    All skiptools-specific exceptions inherit from this class, enabling
    centralized exception handling by callers.
    """

    pass


class ConfigError(SkipToolsError):
    """Exception raised for configuration errors.

    Raised when a tool catalog cannot be loaded or when the tool list handed
    to the engine is inconsistent.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class DependencyError(ConfigError):
    """Exception raised when a tool depends on a tool that is not provided.

    Raised once, while the engine is being constructed. The message names
    both the dependent tool and the missing dependency.

    Attributes:
        tool_name: Name of the tool declaring the dependency
        dependency: Name of the dependency that could not be resolved
    """

    def __init__(self, tool_name: str, dependency: str) -> None:
        """Create a dependency error for a dangling depends_on entry."""
        self.tool_name = tool_name
        self.dependency = dependency
        self.field = "depends_on"
        self.message = (
            f'Tool "{tool_name}" depends on "{dependency}" which is not found '
            f"in the provided tools list. Dependencies must reference other "
            f"tools in the same list."
        )
        SkipToolsError.__init__(self, self.message)


class MissingFileError(SkipToolsError):
    """Exception raised when a tool catalog or conversation file is missing.

    Attributes:
        path: Path that could not be opened
        kind: What the file was expected to hold, e.g. "tool catalog"
    """

    def __init__(self, path: str, kind: str) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"{kind.capitalize()} not found: {path}")
