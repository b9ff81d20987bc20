"""
Validators for a site-monitor configuration form.

    >>> from sitemonitor import validate_timeout
    >>> validate_timeout("30")
    Ok()

The module-level functions use a validator whose messages come from
``sitemonitor.core.settings``; build a :class:`SiteMonitorValidator` yourself
to inject another :class:`MessageCatalog`.
"""

from sitemonitor.core.messages import MessageCatalog, MessageKey
from sitemonitor.core.settings import settings
from sitemonitor.core.validation import Error, Ok, SiteMonitorValidator, ValidationResult

_default_validator = SiteMonitorValidator(MessageCatalog.from_settings(settings))

validate_url = _default_validator.validate_url
validate_timeout = _default_validator.validate_timeout
validate_response_codes = _default_validator.validate_response_codes

__all__ = [
    "Error",
    "MessageCatalog",
    "MessageKey",
    "Ok",
    "SiteMonitorValidator",
    "ValidationResult",
    "validate_response_codes",
    "validate_timeout",
    "validate_url",
]
