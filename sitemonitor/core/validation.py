#!/usr/bin/env python
"""
core/validation.py - Form validators for a site-monitor configuration.

Three independent checks, one per form field: the site URL, the HTTP
connection timeout and the list of accepted HTTP response codes.  Each takes
the raw field text and returns an :class:`Ok` or an :class:`Error` carrying
the text to show next to the field.  Malformed input is an expected outcome,
so nothing here raises for it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from sitemonitor.core.messages import MessageCatalog, MessageKey
from sitemonitor.utils.urls import (
    WEB_PREFIXES,
    default_scheme,
    is_blank,
    is_digits,
    is_well_formed_url,
)

logger = logging.getLogger(__name__)

__all__ = ["Error", "Ok", "SiteMonitorValidator", "ValidationResult"]


@dataclass(frozen=True)
class Ok:
    """The field value is acceptable."""

    @property
    def is_ok(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Error:
    """The field value is rejected; *message* is the user-facing reason."""

    message: str

    @property
    def is_ok(self) -> Literal[False]:
        return False


ValidationResult = Ok | Error


def _split_codes(response_codes: str) -> list[str]:
    # Trailing empty tokens are dropped ("200,300," lists two codes)
    tokens = response_codes.split(",")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class SiteMonitorValidator:
    """Stateless validators for the site-monitor form fields."""

    def __init__(self, messages: MessageCatalog | None = None) -> None:
        self.messages = messages if messages is not None else MessageCatalog()

    def _error(self, key: MessageKey, suffix: str = "") -> Error:
        return Error(self.messages[key] + suffix)

    def validate_url(self, url: str | None) -> ValidationResult:
        """
        Validate the monitored site URL.

        Blank is fine here; whether the field is required is decided by the form.
        A URL naming a protocol must use http or https.  One without a protocol
        is checked as if ``http://`` had been prepended, though the caller keeps
        the text as entered.
        """
        if url is None or is_blank(url):
            return Ok()

        if "://" in url:
            if not url.startswith(WEB_PREFIXES):
                logger.debug("Rejected URL %r: unsupported protocol", url)
                return self._error(MessageKey.PREFIX_OF_URL)
            return Ok()

        if not is_well_formed_url(default_scheme(url)):
            logger.debug("Rejected URL %r: malformed", url)
            return self._error(MessageKey.MALFORMED_URL)
        return Ok()

    def validate_timeout(self, timeout: str | None) -> ValidationResult:
        """Validate the HTTP connection timeout, in whole seconds."""
        if timeout is None or is_blank(timeout):
            return self._error(MessageKey.TIMEOUT_IS_BLANK)
        if not is_digits(timeout):
            logger.debug("Rejected timeout %r: not all digits", timeout)
            return self._error(MessageKey.TIMEOUT_IS_NOT_DIGIT)
        return Ok()

    def validate_response_codes(self, response_codes: str | None) -> ValidationResult:
        """
        Validate a comma-separated list of HTTP response codes.

        Tokens are trimmed before the digit test.  Every offending token is
        reported as entered, in order, each followed by a single space.
        """
        if response_codes is None or is_blank(response_codes):
            return Ok()

        invalid = [code for code in _split_codes(response_codes) if not is_digits(code.strip())]
        if not invalid:
            return Ok()

        logger.debug("Rejected response codes %r: %d invalid", response_codes, len(invalid))
        return self._error(MessageKey.INVALID_RESPONSE_CODE, "".join(f"{code} " for code in invalid))
