"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_URL = TypeAdapter(AnyUrl)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        error_uri: The ``type`` URI stamped on every problem-detail response.
            Must be an absolute URI; kept exactly as configured.
        default_locale: Locale used when a request does not ask for a
            supported one.
        messages_dir: Directory holding the message template files.
            Defaults to the templates bundled with the package.
        rate_limit_enabled: Toggle for request rate limiting.
        rate_limit_default: Rate limit applied to write endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "UserValidation"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    error_uri: str = "https://example.com/problems/user-validation"
    default_locale: str = "en"
    messages_dir: Optional[Path] = None
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    @field_validator("error_uri")
    @classmethod
    def _check_error_uri(cls, value: str) -> str:
        """Reject values that are not absolute URIs without rewriting them."""
        _URL.validate_python(value)
        return value

    def get_messages_dir(self) -> Path:
        """Return the effective message template directory.

        Priority:
        1. Explicit ``MESSAGES_DIR``
        2. Templates shipped in ``uservalidation/shared/i18n/messages``
        """
        if self.messages_dir is not None:
            return self.messages_dir
        return Path(__file__).resolve().parent.parent / "shared" / "i18n" / "messages"


settings = Settings()
