"""Credential presence check, run before every outbound request path."""

import structlog

from lingochat.core.config import Settings
from lingochat.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


# Environment variable name → Settings attribute
REQUIRED_CREDENTIALS = {
    "GOOGLE_TRANSLATE_API_KEY": "google_translate_api_key",
    "OPENAI_API_KEY": "openai_api_key",
}


class EnvironmentValidator:
    """Fails fast when a service credential is absent."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def missing_keys(self) -> frozenset[str]:
        return frozenset(
            env_name
            for env_name, attr in REQUIRED_CREDENTIALS.items()
            if not getattr(self._settings, attr, "")
        )

    def validate(self) -> None:
        """Raise ConfigurationError naming every missing credential."""
        missing = self.missing_keys()
        if missing:
            logger.error("environment_invalid", missing_keys=sorted(missing))
            raise ConfigurationError(missing)
