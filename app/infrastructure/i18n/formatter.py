"""Message formatter.

A MessageFormatter is bound to one locale and a snapshot of one message
map. It is immutable after construction so a single instance can be shared
by every request that resolves to the same (locale, module) pair.
"""

import copy
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from infrastructure.i18n.models import MessageMap
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Matches {{name}} and {name}
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}|\{\s*(\w+)\s*\}")


class MessageFormatter:
    """Formats messages of one (locale, message map) snapshot.

    Missing messages fall back to the supplied default message, then to the
    message id itself. Missing interpolation values leave the template
    unformatted. Neither case raises.

    Attributes:
        locale: Locale the messages are written in.
        default_locale: Locale of the service, used when callers need to know
            what locale a fallback would be in.
        messages: Read-only snapshot of the message map.
    """

    __slots__ = ("_locale", "_default_locale", "_messages")

    def __init__(self, locale: str, default_locale: str, messages: Optional[MessageMap] = None):
        self._locale = locale
        self._default_locale = default_locale
        self._messages = MappingProxyType(copy.deepcopy(dict(messages or {})))

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def messages(self) -> Mapping[str, Any]:
        return self._messages

    def get_message(self, message_id: str) -> Optional[str]:
        """Look up a message template.

        Flat ids are looked up directly; dotted ids ("errors.not_found") are
        also resolved through nested mappings.

        Returns:
            The template string, or None if absent.
        """
        message = self._messages.get(message_id)
        if message is None and "." in message_id:
            node: Any = self._messages
            for part in message_id.split("."):
                if not isinstance(node, Mapping) or part not in node:
                    return None
                node = node[part]
            message = node
        return message if isinstance(message, str) else None

    def has_message(self, message_id: str) -> bool:
        return self.get_message(message_id) is not None

    def format_message(
        self,
        message_id: str,
        values: Optional[Mapping[str, Any]] = None,
        default_message: Optional[str] = None,
    ) -> str:
        """Format a message with interpolation values.

        Args:
            message_id: Message identifier.
            values: Values for ``{name}`` / ``{{name}}`` placeholders.
            default_message: Template used when the id is not translated.

        Returns:
            The formatted message, the raw template if formatting failed, or
            the message id when no template exists.
        """
        template = self.get_message(message_id)
        if template is None:
            logger.debug(
                "missing_translation",
                message_id=message_id,
                locale=self._locale,
            )
            template = default_message
        if template is None:
            return message_id
        return self._interpolate(message_id, template, values or {})

    def _interpolate(self, message_id: str, template: str, values: Mapping[str, Any]) -> str:
        missing = []
        for double, single in PLACEHOLDER_PATTERN.findall(template):
            name = double or single
            if name not in values and name not in missing:
                missing.append(name)
        if missing:
            logger.warning(
                "message_format_failed",
                message_id=message_id,
                locale=self._locale,
                missing_variables=missing,
                available_variables=list(values.keys()),
            )
            return template

        def replace(match: "re.Match[str]") -> str:
            name = match.group(1) or match.group(2)
            return str(values[name])

        return PLACEHOLDER_PATTERN.sub(replace, template)

    def __repr__(self) -> str:
        return (
            f"MessageFormatter(locale={self._locale!r}, "
            f"default_locale={self._default_locale!r}, "
            f"message_count={len(self._messages)})"
        )
