"""
tests/conftest.py – test harness bootstrap.
Configures quiet logging and provides validator fixtures.
"""

import pytest

from sitemonitor.core.logger_setup import setup_logging
from sitemonitor.core.messages import MessageCatalog
from sitemonitor.core.validation import SiteMonitorValidator

# ------------------------------------------------------------------+
# Global logging setup                                              +
# ------------------------------------------------------------------+
setup_logging({"root": {"level": "WARNING"}})


@pytest.fixture
def validator() -> SiteMonitorValidator:
    """Validator with the built-in English messages."""
    return SiteMonitorValidator(MessageCatalog())
