"""Core of the site monitor: settings, messages, logging and the form validators."""

from .messages import MessageCatalog, MessageKey
from .settings import Settings, settings
from .validation import Error, Ok, SiteMonitorValidator, ValidationResult

__all__ = [
    "Error",
    "MessageCatalog",
    "MessageKey",
    "Ok",
    "Settings",
    "SiteMonitorValidator",
    "ValidationResult",
    "settings",
]
