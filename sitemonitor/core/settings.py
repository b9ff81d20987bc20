"""
Settings for the site-monitor validators.

Values come from the environment (prefix ``SITEMONITOR_``) or a ``.env`` file:

    SITEMONITOR_LOG_LEVEL=DEBUG
    SITEMONITOR_MESSAGES='{"malformed_url": "Adresse invalide"}'
"""

from typing import TYPE_CHECKING, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from sitemonitor.core.messages import parse_key


class Settings(BaseSettings):
    if TYPE_CHECKING:  # pragma: no cover

        def __init__(self, **data: Any) -> None: ...

    log_level: str = "INFO"

    # Per-key message template overrides, keyed by MessageKey value or name
    messages: dict[str, str] = {}

    model_config = {
        "env_prefix": "SITEMONITOR_",
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "env_nested_delimiter": "__",  # SITEMONITOR_MESSAGES__MALFORMED_URL=...
    }

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:  # noqa: D401
        """Store the level the way ``logging`` spells it."""
        return v.strip().upper()

    @field_validator("messages")
    @classmethod
    def _known_keys(cls, v: dict[str, str]) -> dict[str, str]:
        # parse_key raises ValueError for anything outside MessageKey
        return {parse_key(k).value: text for k, text in v.items()}


settings: "Settings" = Settings()

__all__ = ["Settings", "settings"]
