"""String formatting for template attributes.

Provides the StringRenderer attribute renderer, the helpers behind its
format options, and locale parsing for case conversion.
"""

from string_renderer.formatting.base import AttributeRenderer
from string_renderer.formatting.exceptions import (
    FormatTemplateError,
    InvalidLocaleError,
    StringRendererError,
)
from string_renderer.formatting.locales import LocaleId, parse_locale
from string_renderer.formatting.string_renderer import (
    BUILTIN_OPTIONS,
    StringRenderer,
    escape_html,
    render_string,
    to_upper_camel_case,
    url_encode,
)

__all__ = [
    "AttributeRenderer",
    "BUILTIN_OPTIONS",
    "FormatTemplateError",
    "InvalidLocaleError",
    "LocaleId",
    "StringRenderer",
    "StringRendererError",
    "escape_html",
    "parse_locale",
    "render_string",
    "to_upper_camel_case",
    "url_encode",
]
