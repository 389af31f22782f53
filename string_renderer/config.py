"""String Renderer - Configuration."""

import os
from pathlib import Path
from typing import Optional

# Locale applied when a caller passes no locale
DEFAULT_LOCALE = os.environ.get("STRING_RENDERER_DEFAULT_LOCALE", "en")


def _resolve_definitions_dir() -> Optional[Path]:
    """Directory override for format-option definitions, if configured."""
    override = os.environ.get("STRING_RENDERER_DEFINITIONS_DIR")
    if override:
        return Path(override)
    return None


DEFINITIONS_DIR = _resolve_definitions_dir()

SERVICE_NAME = "String Renderer API"
APP_VERSION = "0.1.0"
