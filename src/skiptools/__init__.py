"""skiptools - Keyword-based tool filtering for language model calls.

Large tool lists cost tokens and distract models. skiptools keeps only the
tools relevant to the current conversation, based on keywords each tool
declares at the end of its description, and re-adds the tools that the
selected tools depend on.

Main features:
- Annotate tools with a trailing 'skip:' YAML block (keywords, depends_on)
- Dependency references validated once, when the engine is built
- Incremental filtering over only the messages added since the last call
- Result size limiting and a human-readable filtering reason
"""

from skiptools.lib.errors import (
    ConfigError,
    DependencyError,
    SkipToolsError,
)
from skiptools.lib.tool_filter import (
    SkipTools,
    parse_tool_description,
    parse_tools,
    validate_skip_config,
)
from skiptools.models import (
    ContentPart,
    FilterResult,
    Message,
    ParsedTool,
    SkipConfig,
    Tool,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ContentPart",
    "DependencyError",
    "FilterResult",
    "Message",
    "ParsedTool",
    "SkipConfig",
    "SkipTools",
    "SkipToolsError",
    "Tool",
    "parse_tool_description",
    "parse_tools",
    "validate_skip_config",
]
