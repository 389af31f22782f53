"""API routes for format options.

Consumers fetch the catalog to discover the built-in format options and
render values through StringRenderer without embedding it.
"""

import logging

from fastapi import APIRouter, HTTPException

from string_renderer.format_options.registry import get_format_option_registry, to_summary
from string_renderer.format_options.schemas import (
    FormatOptionDefinition,
    FormatOptionSummary,
    RenderRequest,
    RenderResponse,
)
from string_renderer.formatting import StringRenderer, StringRendererError, parse_locale

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/format-options", tags=["format-options"])

_renderer = StringRenderer()


def _get_or_404(option_key: str) -> FormatOptionDefinition:
    """Get a format option by key or raise 404."""
    registry = get_format_option_registry()
    option = registry.get(option_key)
    if option is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Format option '{option_key}' not found. Available: {available}",
        )
    return option


# -- List endpoints --


@router.get("", response_model=list[FormatOptionSummary])
async def list_format_options():
    """List all format options (summaries)."""
    registry = get_format_option_registry()
    return registry.list_summaries()


@router.get("/category/{category}", response_model=list[FormatOptionSummary])
async def format_options_for_category(category: str):
    """List active format options in a category."""
    registry = get_format_option_registry()
    return [to_summary(o) for o in registry.for_category(category)]


# -- Render --


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest):
    """Render a value with a format option or printf-style template.

    Unknown format strings are treated as templates. Malformed locales
    and templates are reported as 422.
    """
    try:
        locale = parse_locale(request.locale)
        rendered = _renderer.to_string(request.value, request.format_string, locale)
    except StringRendererError as e:
        logger.info(f"Render rejected ({request.format_string!r}): {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return RenderResponse(
        value=request.value,
        format_string=request.format_string,
        locale=locale.tag,
        rendered=rendered,
    )


# -- Detail --


@router.get("/{option_key}", response_model=FormatOptionDefinition)
async def get_format_option(option_key: str):
    """Get a full format-option definition."""
    return _get_or_404(option_key)
