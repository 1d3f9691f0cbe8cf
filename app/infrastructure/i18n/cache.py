"""Bounded formatter cache.

Maps ``(locale, module)`` to a MessageFormatter with least-recently-used
eviction. Construction is single-flight: concurrent misses on one key share
a single build, so the remote loader runs at most once per key.

A cached formatter keeps the messages it was built from. Later merges into
the MessageStore are only picked up after the entry is evicted or
invalidated.
"""

import asyncio
import threading
from collections import OrderedDict
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.exceptions import ConfigurationError
from infrastructure.i18n.formatter import MessageFormatter
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.models import MessageMap, MessageRequest, make_cache_key
from infrastructure.i18n.store import MessageStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_CACHE_SIZE = 100


def _retrieve_exception(task: "asyncio.Task[MessageFormatter]") -> None:
    # Every caller may be gone by the time a build fails
    if not task.cancelled():
        task.exception()


class FormatterCache:
    """LRU cache of MessageFormatter instances keyed by "<locale>:<module>".

    Attributes:
        store: MessageStore read on cache misses.
        default_locale: Default locale passed to every formatter.
        loader: Optional MessageLoader used when the store has no messages.
        maxsize: Maximum number of cached formatters.

    Raises:
        ConfigurationError: If maxsize is not positive.
    """

    def __init__(
        self,
        store: MessageStore,
        default_locale: str,
        loader: Optional[MessageLoader] = None,
        maxsize: int = DEFAULT_CACHE_SIZE,
    ):
        if maxsize <= 0:
            raise ConfigurationError(f"maxsize must be a positive integer, got {maxsize!r}")

        self.store = store
        self.default_locale = default_locale
        self.loader = loader
        self.maxsize = maxsize
        self._entries: "OrderedDict[str, MessageFormatter]" = OrderedDict()
        self._in_flight: Dict[str, "asyncio.Task[MessageFormatter]"] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._remote_loads = 0

    async def get_or_create(self, locale: str, module: str) -> MessageFormatter:
        """Get the formatter for (locale, module), building it on a miss.

        The build runs in its own task. Callers only wait on it, so a
        cancelled caller never cancels a build other callers are waiting on.

        Args:
            locale: Resolved locale.
            module: Module name.

        Returns:
            The shared MessageFormatter for the pair.
        """
        key = make_cache_key(locale, module)

        with self._lock:
            formatter = self._entries.get(key)
            if formatter is not None:
                self._entries.move_to_end(key)
                self._hits += 1
                return formatter

            self._misses += 1
            task = self._in_flight.get(key)
            if task is None:
                logger.debug("formatter_cache_miss", cache_key=key)
                task = asyncio.ensure_future(self._build_and_store(key, locale, module))
                task.add_done_callback(_retrieve_exception)
                self._in_flight[key] = task
            else:
                logger.debug("formatter_build_joined", cache_key=key)

        return await asyncio.shield(task)

    async def _build_and_store(self, key: str, locale: str, module: str) -> MessageFormatter:
        try:
            formatter = await self._build(locale, module)
            with self._lock:
                self._put(key, formatter)
            return formatter
        finally:
            with self._lock:
                self._in_flight.pop(key, None)

    async def _build(self, locale: str, module: str) -> MessageFormatter:
        messages = self.store.get(locale, module)
        if not messages and self.loader is not None:
            messages = await self._load_remote(locale, module)

        return MessageFormatter(
            locale=locale,
            default_locale=self.default_locale,
            messages=messages,
        )

    async def _load_remote(self, locale: str, module: str) -> MessageMap:
        self._remote_loads += 1
        try:
            remote_messages = await self.loader.load(MessageRequest(locale=locale, module=module))
        except Exception as e:
            logger.error(
                "remote_messages_load_failed",
                locale=locale,
                module=module,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return {}

        if not isinstance(remote_messages, Mapping):
            logger.error(
                "remote_messages_load_failed",
                locale=locale,
                module=module,
                error=f"expected a mapping, got {type(remote_messages).__name__}",
                error_type="TypeError",
            )
            return {}

        self.store.merge(locale, module, remote_messages)
        logger.info(
            "remote_messages_loaded",
            locale=locale,
            module=module,
            key_count=len(remote_messages),
        )
        return self.store.get(locale, module)

    def _put(self, key: str, formatter: MessageFormatter) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.maxsize:
            evicted_key, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("formatter_cache_evicted", cache_key=evicted_key)
        self._entries[key] = formatter

    def peek(self, locale: str, module: str) -> Optional[MessageFormatter]:
        """Return the cached formatter without touching its LRU position."""
        with self._lock:
            return self._entries.get(make_cache_key(locale, module))

    def invalidate(self, locale: str, module: str) -> bool:
        """Drop the cached formatter for (locale, module).

        Returns:
            True if an entry was removed.
        """
        key = make_cache_key(locale, module)
        with self._lock:
            removed = self._entries.pop(key, None) is not None
        if removed:
            logger.info("formatter_cache_invalidated", cache_key=key)
        return removed

    def clear(self) -> None:
        """Drop every cached formatter and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0
            self._remote_loads = 0
        logger.info("formatter_cache_cleared")

    def keys(self) -> list:
        """Cache keys from least to most recently used."""
        with self._lock:
            return list(self._entries.keys())

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with size, maxsize, hits, misses, evictions, remote_loads
            and in_flight counts.
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "maxsize": self.maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "remote_loads": self._remote_loads,
                "in_flight": len(self._in_flight),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
