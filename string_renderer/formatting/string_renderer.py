"""String attribute renderer.

Applies a named format option to a string value:
- upper / lower: locale-tailored case conversion
- cap: uppercase the first character only
- Camel: snake_case or camelCase -> UpperCamelCase
- url-encode: application/x-www-form-urlencoded, UTF-8
- xml-encode: escape markup characters, numeric references for the rest
- anything else: printf-style template taking the value as its one argument
"""

import logging
import re
from typing import Any, Optional
from urllib.parse import quote_plus

from string_renderer.formatting import locales
from string_renderer.formatting.exceptions import FormatTemplateError
from string_renderer.formatting.locales import LocaleLike

logger = logging.getLogger(__name__)

# Start of string or underscore, one cased letter, then the letters after it.
# Only the uppercase prefix of the trailing letters is folded. An underscore
# is dropped unless the match starts the string.
UPPER_CAMEL = re.compile(r"(^|_)([^\W\d_])([^\W\d_]*)")

# Characters x-www-form-urlencoded leaves alone besides ASCII alphanumerics
_URL_SAFE = "*"

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "\t",
    "\n": "\n",
    "\r": "\r",
}

# One printf directive: flags, width and precision, then the conversion
_DIRECTIVE = re.compile(r"%([-#0 +]*\d*(?:\.\d+)?)([A-Za-z%])")

# Python-only conversions with no printf counterpart
_REJECTED_CONVERSIONS = frozenset("rac")

BUILTIN_OPTIONS = ("upper", "lower", "cap", "Camel", "url-encode", "xml-encode")


class StringRenderer:
    """Renders str attributes with format options.

    Stateless: one instance can be shared between threads and templates.
    """

    def to_string(
        self,
        value: Any,
        format_string: Optional[str] = None,
        locale: LocaleLike = None,
    ) -> str:
        """Render value with the given format option.

        Args:
            value: The attribute value (non-str values are rendered via str())
            format_string: Format option name or printf-style template;
                           None returns the value unchanged
            locale: Locale for case conversion (LocaleId, identifier or None)

        Returns:
            The formatted string

        Raises:
            InvalidLocaleError: If locale cannot be parsed
            FormatTemplateError: If a template cannot take the value
        """
        s = value if isinstance(value, str) else str(value)
        if format_string is None:
            return s
        if format_string == "upper":
            return locales.upper(s, locale)
        if format_string == "lower":
            return locales.lower(s, locale)
        if format_string == "Camel":
            return to_upper_camel_case(s, locale)
        if format_string == "cap":
            return locales.upper(s[0], locale) + s[1:] if s else s
        if format_string == "url-encode":
            return url_encode(s)
        if format_string == "xml-encode":
            return escape_html(s)
        return apply_template(format_string, s, locale)


def escape_html(s: Optional[str]) -> Optional[str]:
    """Escape s for inclusion in XML/HTML text.

    &, < and > become entities; tab, newline and carriage return are kept;
    other control characters and everything outside printable ASCII become
    decimal character references.
    """
    if s is None:
        return None
    buf = []
    for c in s:
        escaped = _XML_ESCAPES.get(c)
        if escaped is not None:
            buf.append(escaped)
        elif c < " " or c > "~":
            buf.append(f"&#{ord(c)};")
        else:
            buf.append(c)
    return "".join(buf)


def url_encode(s: str) -> str:
    """Percent-encode s as application/x-www-form-urlencoded (UTF-8)."""
    # quote_plus never escapes '~'; form encoding does
    encoded = quote_plus(s, safe=_URL_SAFE, encoding="utf-8", errors="replace")
    return encoded.replace("~", "%7E")


def to_upper_camel_case(s: str, locale: LocaleLike = None) -> str:
    """Convert snake_case or camelCase text to UpperCamelCase.

    'my_class_Name' -> 'MyClassName', 'HTTP_SERVER' -> 'HttpServer'.
    A result of 'Class' is returned as 'class'.
    """
    loc = locales.parse_locale(locale)

    def replacer(match):
        sep, first, rest = match.group(1), match.group(2), match.group(3)
        if not (first.isupper() or first.islower()):
            return match.group(0)
        run = 0
        while run < len(rest) and rest[run].isupper():
            run += 1
        lead = sep if match.start() == 0 else ""
        return (
            lead
            + locales.upper(first, loc)
            + locales.lower(rest[:run], loc)
            + rest[run:]
        )

    name = UPPER_CAMEL.sub(replacer, s)

    # 'Class' collides with the class accessor of generated code
    return "class" if name == "Class" else name


def apply_template(template: str, s: str, locale: LocaleLike = None) -> str:
    """Substitute s into a printf-style template.

    '%S' substitutes s uppercased under locale and '%n' is a line
    separator. A template without any conversion renders as itself
    ('%%' -> '%').

    Raises:
        FormatTemplateError: If the template needs anything other than
                             at most one string argument
    """
    loc = locales.parse_locale(locale)
    uppercase = False

    def convert(match):
        nonlocal uppercase
        spec, conversion = match.group(1), match.group(2)
        if conversion == "S":
            uppercase = True
            return f"%{spec}s"
        if conversion == "n":
            return "\n"
        if conversion in _REJECTED_CONVERSIONS:
            logger.debug(f"Format template {template!r} uses unsupported %{conversion}")
            raise FormatTemplateError(
                f"Format template '{template}' uses unsupported conversion '%{conversion}'"
            )
        return match.group(0)

    python_template = _DIRECTIVE.sub(convert, template)

    if uppercase:
        s = locales.upper(s, loc)

    try:
        return python_template % (s,)
    except ValueError as e:
        logger.debug(f"Malformed format template {template!r}: {e}")
        raise FormatTemplateError(f"Malformed format template '{template}': {e}") from e
    except TypeError as e:
        single_error = e

    try:
        return python_template % ()
    except (TypeError, ValueError):
        logger.debug(f"Format template {template!r} rejected value: {single_error}")
        raise FormatTemplateError(
            f"Format template '{template}' cannot render a single string: {single_error}"
        ) from single_error


_renderer = StringRenderer()


def render_string(
    value: Any,
    format_string: Optional[str] = None,
    locale: LocaleLike = None,
) -> str:
    """Render value with the shared StringRenderer instance."""
    return _renderer.to_string(value, format_string, locale)
