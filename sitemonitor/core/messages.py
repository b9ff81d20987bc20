"""
Centralised user-facing strings for the site-monitor form validators.

Each message is addressed by a :class:`MessageKey`.  The English defaults live
here; a host that localises its UI hands translated templates to a
:class:`MessageCatalog` (directly, or through ``SITEMONITOR_MESSAGES``).
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from sitemonitor.core.settings import Settings

__all__ = ["DEFAULT_MESSAGES", "MessageCatalog", "MessageKey", "parse_key"]


class MessageKey(str, Enum):
    PREFIX_OF_URL = "prefix_of_url"
    MALFORMED_URL = "malformed_url"
    TIMEOUT_IS_BLANK = "timeout_is_blank"
    TIMEOUT_IS_NOT_DIGIT = "timeout_is_not_digit"
    INVALID_RESPONSE_CODE = "invalid_response_code"


# --- URL field ---
URL_PREFIX_ERROR = "URL must start with http:// or https://"
URL_MALFORMED_ERROR = "URL is malformed"

# --- timeout field ---
TIMEOUT_BLANK_ERROR = "Timeout must not be blank"
TIMEOUT_NOT_DIGIT_ERROR = "Timeout must be a whole number of seconds"

# --- response codes field (offending codes are appended) ---
RESPONSE_CODE_ERROR_PREFIX = "Invalid response code(s): "

DEFAULT_MESSAGES: dict[MessageKey, str] = {
    MessageKey.PREFIX_OF_URL: URL_PREFIX_ERROR,
    MessageKey.MALFORMED_URL: URL_MALFORMED_ERROR,
    MessageKey.TIMEOUT_IS_BLANK: TIMEOUT_BLANK_ERROR,
    MessageKey.TIMEOUT_IS_NOT_DIGIT: TIMEOUT_NOT_DIGIT_ERROR,
    MessageKey.INVALID_RESPONSE_CODE: RESPONSE_CODE_ERROR_PREFIX,
}


def parse_key(raw: str | MessageKey) -> MessageKey:
    """Accept a key by value (``"malformed_url"``) or by name (``"MALFORMED_URL"``)."""
    if isinstance(raw, MessageKey):
        return raw
    normalised = raw.strip().lower()
    try:
        return MessageKey(normalised)
    except ValueError:
        raise ValueError(f"Unknown message key: {raw!r}") from None


class MessageCatalog:
    """Resolve :class:`MessageKey` values to display text, defaults first."""

    def __init__(self, overrides: Mapping[str | MessageKey, str] | None = None) -> None:
        self._messages: dict[MessageKey, str] = dict(DEFAULT_MESSAGES)
        for key, text in (overrides or {}).items():
            self._messages[parse_key(key)] = text

    @classmethod
    def from_settings(cls, settings: Settings) -> MessageCatalog:
        return cls(settings.messages)

    def get(self, key: MessageKey) -> str:
        return self._messages[key]

    def __getitem__(self, key: MessageKey) -> str:
        return self.get(key)

    def __repr__(self) -> str:
        overridden = sorted(k.name for k, v in self._messages.items() if v != DEFAULT_MESSAGES[k])
        return f"MessageCatalog(overridden={overridden})"
