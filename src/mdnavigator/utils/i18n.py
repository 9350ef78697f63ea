from __future__ import annotations

"""
Internationalization (i18n) Utility.

Singleton manager for interface strings. Locale files are nested JSON
dictionaries addressed with dot-notation keys ('gui.shutdown.title') and
support ``str.format`` interpolation.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific strings.

    Missing keys resolve to the caller supplied ``default`` or, failing
    that, to the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locales directory.

        Args:
            locale: ISO identifier of the language (e.g. 'en').
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a string by dot-notation key.

        Args:
            key: Hierarchical identifier (e.g. 'cli.errors.fetch').
            default: Text used when the key is missing.
            **kwargs: Values interpolated with ``str.format``.

        Returns:
            str: The formatted string.
        """
        current: Any = self._translations
        for part in key.split("."):
            if not isinstance(current, dict):
                current = None
                break
            current = current.get(part)

        template = current if isinstance(current, str) else (default if default is not None else key)

        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for '{key}': {e}")
            return template

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

i18n = I18n(DEFAULT_LOCALE)
