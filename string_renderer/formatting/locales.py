"""Locale identifiers and locale-tailored case mapping.

Python's str.upper()/str.lower() implement the Unicode default full case
mapping. On top of that, this module applies the language-specific rules
from Unicode SpecialCasing:

- Turkish / Azerbaijani: dotted and dotless i map to each other
  (i <-> İ, ı <-> I), and I followed by COMBINING DOT ABOVE lowercases to i.
- Lithuanian: lowercase I, J and Į keep an explicit dot above when an
  accent follows, and Ì, Í, Ĩ expand to i + dot + accent. Uppercasing drops
  a COMBINING DOT ABOVE that follows a soft-dotted letter such as i or j.
"""

import logging
import re
import unicodedata
from typing import Optional, Union

from pydantic import BaseModel, Field

from string_renderer import config
from string_renderer.formatting.exceptions import InvalidLocaleError

logger = logging.getLogger(__name__)

# language[-_]territory[-_]variant, optional .encoding and @modifier
_LOCALE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,8})"
    r"(?:[-_](?P<territory>[A-Za-z]{2}|\d{3}))?"
    r"(?:[-_](?P<variant>[A-Za-z0-9]{1,8}))?"
    r"(?:\.[A-Za-z0-9_-]+)?"
    r"(?:@(?P<modifier>[A-Za-z0-9]+))?$"
)

TURKIC_LANGUAGES = frozenset({"tr", "az"})
LITHUANIAN = "lt"

COMBINING_DOT_ABOVE = "\u0307"

_LITHUANIAN_LOWER = {
    "I": "i",
    "J": "j",
    "\u012e": "\u012f",  # I with ogonek
}

_LITHUANIAN_LOWER_ACCENTED = {
    "\u00cc": "i\u0307\u0300",
    "\u00cd": "i\u0307\u0301",
    "\u0128": "i\u0307\u0303",
}

# Soft_Dotted letters whose dot a following COMBINING DOT ABOVE duplicates
_SOFT_DOTTED = frozenset(
    "ij\u012f\u0249\u0268\u029d\u03f3\u0456\u0458\u2148\u2149"
)


class LocaleId(BaseModel):
    """A parsed locale identifier (e.g. en_US, tr, sr_RS@latin)."""

    language: str = Field(
        ...,
        description="Lowercase ISO 639 language code (e.g. 'en', 'tr')",
    )
    territory: Optional[str] = Field(
        default=None,
        description="Uppercase ISO 3166 region or UN M.49 code (e.g. 'US')",
    )
    variant: Optional[str] = Field(
        default=None,
        description="Variant or @modifier (e.g. 'latin')",
    )

    @property
    def tag(self) -> str:
        """Underscore-joined identifier, e.g. 'en_US'."""
        parts = [self.language]
        if self.territory:
            parts.append(self.territory)
        if self.variant:
            parts.append(self.variant)
        return "_".join(parts)

    @property
    def is_turkic(self) -> bool:
        return self.language in TURKIC_LANGUAGES

    @property
    def is_lithuanian(self) -> bool:
        return self.language == LITHUANIAN

    def __str__(self) -> str:
        return self.tag


LocaleLike = Union[LocaleId, str, None]


def parse_locale(value: LocaleLike) -> LocaleId:
    """Parse a locale identifier.

    Args:
        value: A LocaleId, a string such as 'en', 'en_US', 'tr-TR',
               'de_DE.UTF-8', 'sr_RS@latin', or None for the default locale

    Returns:
        LocaleId

    Raises:
        InvalidLocaleError: If the identifier is empty or malformed
    """
    if isinstance(value, LocaleId):
        return value
    if value is None:
        value = config.DEFAULT_LOCALE

    text = value.strip()
    match = _LOCALE_PATTERN.match(text)
    if not match:
        logger.debug(f"Rejected locale identifier: {value!r}")
        raise InvalidLocaleError(f"Invalid locale identifier: '{value}'")

    territory = match.group("territory")
    variant = match.group("variant") or match.group("modifier")
    return LocaleId(
        language=match.group("language").lower(),
        territory=territory.upper() if territory else None,
        variant=variant,
    )


def upper(text: str, locale: LocaleLike = None) -> str:
    """Uppercase text using the case rules of locale."""
    loc = parse_locale(locale)
    if loc.is_turkic:
        text = text.replace("i", "İ")
    elif loc.is_lithuanian:
        text = _strip_soft_dots(text)
    return text.upper()


def lower(text: str, locale: LocaleLike = None) -> str:
    """Lowercase text using the case rules of locale."""
    loc = parse_locale(locale)
    if loc.is_turkic:
        return _lower_turkic(text)
    if loc.is_lithuanian:
        return _lower_lithuanian(text)
    return text.lower()


def _lower_turkic(text: str) -> str:
    out = []
    skip_dot = False
    for i, ch in enumerate(text):
        if skip_dot:
            skip_dot = False
            if ch == COMBINING_DOT_ABOVE:
                continue
        if ch == "I":
            if text[i + 1:i + 2] == COMBINING_DOT_ABOVE:
                out.append("i")
                skip_dot = True
            else:
                out.append("ı")
        elif ch == "İ":
            out.append("i")
        else:
            out.append(ch.lower())
    return "".join(out)


def _lower_lithuanian(text: str) -> str:
    out = []
    for i, ch in enumerate(text):
        if ch in _LITHUANIAN_LOWER_ACCENTED:
            out.append(_LITHUANIAN_LOWER_ACCENTED[ch])
        elif ch in _LITHUANIAN_LOWER and _accent_follows(text, i + 1):
            out.append(_LITHUANIAN_LOWER[ch] + COMBINING_DOT_ABOVE)
        else:
            out.append(ch.lower())
    return "".join(out)


def _strip_soft_dots(text: str) -> str:
    """Drop COMBINING DOT ABOVE after a soft-dotted letter (Lithuanian uppercase)."""
    out = []
    after_soft_dotted = False
    for ch in text:
        ccc = unicodedata.combining(ch)
        if ch == COMBINING_DOT_ABOVE and after_soft_dotted:
            after_soft_dotted = False
            continue
        out.append(ch)
        if ccc == 0:
            after_soft_dotted = ch in _SOFT_DOTTED
        elif ccc == 230:
            after_soft_dotted = False
    return "".join(out)


def _accent_follows(text: str, start: int) -> bool:
    """True if a combining mark of class Above (230) follows start."""
    for ch in text[start:]:
        ccc = unicodedata.combining(ch)
        if ccc == 230:
            return True
        if ccc == 0:
            return False
    return False
