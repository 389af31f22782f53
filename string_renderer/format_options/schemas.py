"""Format-option definition schemas — data models for the option catalog.

FormatOptionDefinitions describe the named options StringRenderer applies,
with worked examples that double as executable documentation.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FormatOptionExample(BaseModel):
    """One worked example: input value and its rendered output."""

    input: str
    output: str
    locale: Optional[str] = Field(
        default=None,
        description="Locale the example renders under (default locale if unset)",
    )


class FormatOptionDefinition(BaseModel):
    """A named format option and what it does."""

    # Identity
    option_key: str = Field(
        ...,
        description="The format string written in templates (e.g. 'upper', 'url-encode')",
    )
    option_name: str = Field(
        ...,
        description="Human-readable name (e.g. 'Uppercase')",
    )
    description: str = Field(
        default="",
        description="What this option does and when to use it",
    )
    category: str = Field(
        ...,
        description="Option category: 'case', 'encoding', 'identifier'",
    )

    examples: list[FormatOptionExample] = Field(
        default_factory=list,
        description="Worked examples rendered by this option",
    )
    locale_sensitive: bool = Field(
        default=False,
        description="Whether the output depends on the render locale",
    )

    # Metadata
    status: str = Field(
        default="active",
        description="'active', 'draft', 'deprecated'",
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Categorization tags",
    )


class FormatOptionSummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    option_key: str
    option_name: str
    description: str = ""
    category: str = ""
    locale_sensitive: bool = False
    status: str = "active"


class RenderRequest(BaseModel):
    """Request to render a value with a format option."""

    value: str
    format_string: Optional[str] = Field(
        default=None,
        description="Format option or printf-style template; omit to pass through",
    )
    locale: Optional[str] = Field(
        default=None,
        description="Locale identifier (e.g. 'en_US', 'tr'); default locale if unset",
    )


class RenderResponse(BaseModel):
    """Result of rendering a value."""

    value: str
    format_string: Optional[str] = None
    locale: str
    rendered: str
