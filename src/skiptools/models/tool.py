"""Tool models for keyword-based tool filtering.

This module defines the records handed to and returned by the filtering
engine. Tools are immutable once created.

Models:
- SkipConfig: Keywords and direct dependencies declared for a tool
- Tool: A tool as supplied by the caller
- ParsedTool: A tool after its description has been parsed
- ParsedDescription: Result of parsing a single description
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkipConfig(BaseModel):
    """Filtering configuration declared for a tool.

    A tool without keywords is always offered to the model. Dependencies are
    direct only: the tools listed here are added whenever this tool is
    selected, but their own dependencies are not.

    Attributes:
        depends_on: Names of tools that must accompany this tool.
        keywords: Terms whose presence in the conversation selects the tool.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    depends_on: list[str] | None = Field(
        default=None, description="Direct dependencies by tool name"
    )
    keywords: list[str] | None = Field(
        default=None, description="Match terms; absent means always included"
    )

    @property
    def has_keywords(self) -> bool:
        """Whether the tool takes part in keyword filtering."""
        return bool(self.keywords)


class Tool(BaseModel):
    """A callable tool offered to a language model.

    The configuration may be given directly, under ``config`` or the
    annotation key ``skip``, or embedded at the end of the description.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., description="Tool identifier, unique within a list")
    description: str = Field(..., description="Raw tool description")
    config: SkipConfig | None = Field(
        default=None,
        alias="skip",
        description="Directly supplied filtering configuration",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty."""
        if not v or not v.strip():
            raise ValueError("name must be a non-empty string")
        return v


class ParsedTool(Tool):
    """A tool whose description has been split into prose and configuration.

    ``config`` holds the resolved configuration: a block parsed from the
    description takes precedence over one supplied directly.

    ``description`` is the raw input text, block included, and always equals
    ``original_description``. Use ``clean_description`` for the text to send
    to a model.
    """

    original_description: str = Field(..., description="Untouched input text")
    clean_description: str = Field(
        ..., description="Description with the configuration block removed"
    )


class ParsedDescription(BaseModel):
    """Clean description text and the configuration found in it, if any."""

    model_config = ConfigDict(frozen=True)

    clean_description: str
    config: SkipConfig | None = None
