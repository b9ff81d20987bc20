from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

__all__ = ["WEB_PREFIXES", "default_scheme", "is_blank", "is_digits", "is_well_formed_url"]

WEB_PREFIXES: tuple[str, str] = ("http://", "https://")

# Reg-name punctuation (RFC 3986) plus any Unicode word character, so IDN hosts pass.
_HOST_RE = re.compile(r"[\w\-.~!$&'()*+,;=%]+")

# Ports are read as a signed 32-bit int, without a 0-65535 range check.
_MAX_PORT = 2**31 - 1

# Unicode spaces that do not count as whitespace in a blank test.
_NON_BREAKING = frozenset("\u00a0\u2007\u202f\u0085")

# ---------------------------------------------------------------------------+
# Plain string predicates shared by the form validators                      +
# ---------------------------------------------------------------------------+


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, the empty string and whitespace-only text.

    Non-breaking spaces are content, not whitespace.
    """
    if value is None:
        return True
    return all(ch.isspace() and ch not in _NON_BREAKING for ch in value)


def is_digits(value: str) -> bool:
    """True when *value* is non-empty and every character is a decimal digit.

    No sign, decimal point or surrounding whitespace is tolerated.
    """
    return value.isdecimal()


# ---------------------------------------------------------------------------+
# URL helpers                                                                +
# ---------------------------------------------------------------------------+


def default_scheme(url: str) -> str:
    """Prefix ``http://`` unless *url* already starts with an http(s) scheme."""
    if not url.startswith(WEB_PREFIXES):
        return f"http://{url}"
    return url


def _host_and_port(netloc: str) -> tuple[str, str, bool]:
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        host, closed, rest = hostinfo[1:].partition("]")
        if not closed or (rest and not rest.startswith(":")):
            raise ValueError(f"Invalid IPv6 host in {netloc!r}")
        return host, rest[1:], True
    host, _, port = hostinfo.partition(":")
    return host, port, False


def is_well_formed_url(candidate: str) -> bool:
    """
    Purely syntactic check of an absolute http/https URL.

    • Scheme must be ``http`` or ``https`` and a host must be present.
    • The host is a bracketed IPv6 literal or a run of reg-name / word characters
      (internationalised names are fine, whitespace is not).
    • A port, if given, is ASCII digits that fit a signed 32-bit int.

    Nothing is resolved or fetched.
    """
    try:
        parsed = urlsplit(candidate)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return False
        host, port, bracketed = _host_and_port(parsed.netloc)
    except ValueError:
        return False

    if port and not (port.isascii() and port.isdigit() and int(port) <= _MAX_PORT):
        return False

    if bracketed:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    return _HOST_RE.fullmatch(host) is not None
