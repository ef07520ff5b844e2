"""Result models for tool filtering."""

from pydantic import BaseModel, Field

from skiptools.models.tool import ParsedTool


class ExtractedQuery(BaseModel):
    """Query text pulled out of a conversation window.

    Attributes:
        query: Text fragments joined with single spaces. Empty when the window
            holds no user-intent text.
        messages_processed: Length of the full history that was supplied.
        messages_scanned: Number of messages in the window that was read.
    """

    query: str = ""
    messages_processed: int = Field(default=0, ge=0)
    messages_scanned: int = Field(default=0, ge=0)


class FilterResult(BaseModel):
    """Outcome of a single filter call.

    Attributes:
        tools: Selected tools in construction order.
        total_original_count: Number of tools the engine was built with.
        filtered_count: Number of tools selected.
        reason: Human-readable account of what filtering took place.
        messages_processed: Length of the message history supplied.
    """

    tools: list[ParsedTool] = Field(default_factory=list)
    total_original_count: int = Field(..., ge=0)
    filtered_count: int = Field(..., ge=0)
    reason: str
    messages_processed: int = Field(..., ge=0)

    @property
    def tool_names(self) -> list[str]:
        """Names of the selected tools, in order."""
        return [tool.name for tool in self.tools]
