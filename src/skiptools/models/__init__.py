"""Data models for skiptools."""

from skiptools.models.filter import ExtractedQuery, FilterResult
from skiptools.models.message import ContentPart, Message
from skiptools.models.tool import ParsedDescription, ParsedTool, SkipConfig, Tool

__all__ = [
    "ContentPart",
    "ExtractedQuery",
    "FilterResult",
    "Message",
    "ParsedDescription",
    "ParsedTool",
    "SkipConfig",
    "Tool",
]
