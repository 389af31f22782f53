"""
Formatting Domain Exceptions

All exceptions raised while rendering string attributes.
"""


class StringRendererError(Exception):
    """Base exception for string rendering errors"""
    pass


class InvalidLocaleError(StringRendererError, ValueError):
    """Raised when a locale identifier cannot be parsed"""
    pass


class FormatTemplateError(StringRendererError, ValueError):
    """Raised when a format template cannot take a single string argument"""
    pass
