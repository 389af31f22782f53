"""Attribute renderer abstraction.

A template engine hands every attribute it emits to a renderer together with
the format option written in the template and the locale of the render.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from string_renderer.formatting.locales import LocaleLike


@runtime_checkable
class AttributeRenderer(Protocol):
    """Protocol for attribute renderer implementations."""

    def to_string(
        self,
        value: Any,
        format_string: Optional[str],
        locale: LocaleLike,
    ) -> str:
        """Render value as text, applying format_string under locale."""
        ...
