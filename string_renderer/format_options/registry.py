"""Format-option registry — loads and serves option definitions from JSON files.

- JSON-per-file in definitions/ directory
- Lazy loading with _loaded guard
- In-memory dict keyed by option_key
- Global singleton via get_format_option_registry()
- Query methods: for_category, is_builtin
"""

import json
import logging
from pathlib import Path
from typing import Optional

from string_renderer import config

from .schemas import FormatOptionDefinition, FormatOptionSummary

logger = logging.getLogger(__name__)


class FormatOptionRegistry:
    """Registry of format-option definitions loaded from JSON files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = config.DEFINITIONS_DIR or Path(__file__).parent / "definitions"
        self.definitions_dir = definitions_dir
        self._options: dict[str, FormatOptionDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all format-option definitions from JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Format-option definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                option = FormatOptionDefinition.model_validate(data)
                self._options[option.option_key] = option
                logger.debug(f"Loaded format option: {option.option_key}")
            except Exception as e:
                logger.error(f"Failed to load format option from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._options)} format-option definitions")

    def get(self, option_key: str) -> Optional[FormatOptionDefinition]:
        """Get a format-option definition by key."""
        self.load()
        return self._options.get(option_key)

    def list_all(self) -> list[FormatOptionDefinition]:
        """List all format-option definitions."""
        self.load()
        return list(self._options.values())

    def list_summaries(self) -> list[FormatOptionSummary]:
        """List format-option summaries, sorted by key."""
        self.load()
        return [
            to_summary(o)
            for o in sorted(self._options.values(), key=lambda o: o.option_key)
        ]

    def list_keys(self) -> list[str]:
        """List all option keys."""
        self.load()
        return list(self._options.keys())

    def count(self) -> int:
        """Get total number of format options."""
        self.load()
        return len(self._options)

    def for_category(self, category: str) -> list[FormatOptionDefinition]:
        """Get active options in a category."""
        self.load()
        return [
            o
            for o in self._options.values()
            if o.category == category and o.status == "active"
        ]

    def is_builtin(self, format_string: Optional[str]) -> bool:
        """Whether format_string names a cataloged option rather than a template."""
        if format_string is None:
            return False
        self.load()
        return format_string in self._options

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._options.clear()
        self.load()


def to_summary(option: FormatOptionDefinition) -> FormatOptionSummary:
    return FormatOptionSummary(
        option_key=option.option_key,
        option_name=option.option_name,
        description=option.description,
        category=option.category,
        locale_sensitive=option.locale_sensitive,
        status=option.status,
    )


# Global registry instance
_registry: Optional[FormatOptionRegistry] = None


def get_format_option_registry() -> FormatOptionRegistry:
    """Get the global format-option registry instance."""
    global _registry
    if _registry is None:
        _registry = FormatOptionRegistry()
        _registry.load()
    return _registry
