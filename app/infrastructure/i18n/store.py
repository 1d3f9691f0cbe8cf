"""In-memory message store.

Holds every message map known to one IntlService, organized as
``locale -> module -> MessageMap``. Maps only ever grow through merge(), so a
later source can override individual keys but never drop keys contributed
earlier.
"""

import copy
import threading
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.models import LocaleMessages, MessageMap
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge source into target, in place.

    Nested mappings present on both sides are merged key by key; any other
    value in source replaces the value in target.

    Args:
        target: Dictionary to merge into.
        source: Mapping whose values win on conflicts.

    Returns:
        The updated target.
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = deep_merge({}, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


class MessageStore:
    """Message maps keyed by locale and module name.

    Example:
        store = MessageStore()
        store.merge("en-US", "global", {"hello": "Hello"})
        store.merge("en-US", "global", {"bye": "Bye"})
        store.get("en-US", "global")  # {"hello": "Hello", "bye": "Bye"}
    """

    def __init__(self):
        self._messages: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.RLock()

    def merge(self, locale: str, module: str, messages: Optional[MessageMap]) -> None:
        """Deep-merge messages into the map for (locale, module).

        Keys missing from messages are kept; keys present in both are
        overwritten by messages.

        Args:
            locale: Locale the messages belong to.
            module: Module the messages belong to.
            messages: Partial message map. None is ignored.
        """
        if not messages:
            return
        with self._lock:
            modules = self._messages.setdefault(locale, {})
            current = modules.setdefault(module, {})
            deep_merge(current, messages)
        logger.debug(
            "messages_merged",
            locale=locale,
            module=module,
            key_count=len(messages),
        )

    def load(self, locale_messages: Optional[LocaleMessages], module: str) -> None:
        """Merge a ``locale -> MessageMap`` mapping under one module.

        Args:
            locale_messages: Messages keyed by locale. None is ignored.
            module: Module every map is stored under.
        """
        if not locale_messages:
            return
        for locale, messages in locale_messages.items():
            if not isinstance(messages, Mapping):
                logger.warning(
                    "invalid_locale_messages",
                    locale=locale,
                    module=module,
                    expected="mapping",
                )
                continue
            self.merge(locale, module, messages)

    def get(self, locale: str, module: str) -> Dict[str, Any]:
        """Get a copy of the message map for (locale, module).

        Returns:
            The current map, or an empty dict when nothing is stored.
        """
        with self._lock:
            messages = self._messages.get(locale, {}).get(module)
            return copy.deepcopy(messages) if messages else {}

    def has(self, locale: str, module: str) -> bool:
        """Check whether (locale, module) has a non-empty message map."""
        with self._lock:
            return bool(self._messages.get(locale, {}).get(module))

    def locales(self) -> List[str]:
        """List the locales that have at least one module."""
        with self._lock:
            return [locale for locale, modules in self._messages.items() if modules]

    def modules(self, locale: str) -> List[str]:
        """List the modules stored for a locale."""
        with self._lock:
            return list(self._messages.get(locale, {}).keys())
