"""Application configuration via pydantic-settings.

All values loaded from the .env file at the project root.
The .env file takes precedence over OS-level environment variables
so stale system env vars never shadow the project config.
Credentials default to empty strings; absence is reported by the
EnvironmentValidator before any network call, not at import time.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Project root is two levels up: lingochat/core/config.py → lingochat → root
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Credentials ---
    google_translate_api_key: str = ""
    openai_api_key: str = ""

    # --- Endpoints ---
    detect_endpoint: str = (
        "https://translation.googleapis.com/language/translate/v2/detect"
    )
    translate_endpoint: str = (
        "https://translation.googleapis.com/language/translate/v2"
    )
    completion_endpoint: str = "https://api.openai.com/v1/chat/completions"

    # --- Summarization ---
    summary_model: str = "gpt-4"
    summary_temperature: float = 0.7
    summarize_min_length: int = 150

    # --- Requests ---
    request_timeout_ms: int = 5000

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
