from __future__ import annotations

"""
User-facing message catalog.

CLI help, status and error texts live in `interface/locales/<locale>.json`
as nested objects and are looked up with dotted keys such as
`cli.status.saved`, then formatted with keyword arguments.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "interface", "locales"
)


class I18n:
    """
    Message catalog for a single locale.

    Lookups never raise: an unknown key yields the caller's default or the
    key itself, so a missing catalog degrades to readable identifiers.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self.locale = locale
        self.is_loaded = False
        self._locales_dir = locales_dir
        self._catalog: Dict[str, Any] = {}

        self.load_locale(locale)

    def load_locale(self, locale: str) -> None:
        """
        Replace the catalog with `<locale>.json`.

        A missing or unreadable file leaves the catalog empty and
        `is_loaded` False.
        """
        path = os.path.join(self._locales_dir, f"{locale}.json")
        self._catalog = {}
        self.is_loaded = False

        try:
            with open(path, "r", encoding="utf-8") as f:
                catalog = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: no catalog for locale '{locale}' at {path}.")
            return
        except (OSError, ValueError) as e:
            logger.error(f"I18n: unreadable catalog {path}: {e}")
            return

        if not isinstance(catalog, dict):
            logger.error(f"I18n: catalog {path} is not a JSON object.")
            return

        self._catalog = catalog
        self.locale = locale
        self.is_loaded = True

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Message for a dotted key, formatted with `kwargs`.

        Args:
            key: Dotted path into the catalog, e.g. 'cli.errors.exists'.
            default: Text used when the key is absent (the key otherwise).
            **kwargs: Values for the message's `{placeholders}`.

        Returns:
            str: The message; unformatted if a placeholder has no value.
        """
        text = self._lookup(key) or default or key
        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: cannot format '{key}': {e}")
            return text

    def _lookup(self, key: str) -> Optional[str]:
        node: Any = self._catalog
        for part in key.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node if isinstance(node, str) else None


i18n = I18n(DEFAULT_LOCALE)
