"""Application configuration using Pydantic Settings."""

import json
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from passpolicy.exceptions import ConfigurationError, PolicyConfigurationError
from passpolicy.policy import (
    DEFAULT_FORBIDDEN_WORDS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    PasswordPolicy,
)


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Password requirements
    PASSWORD_MIN_LENGTH: int = DEFAULT_MIN_LENGTH
    PASSWORD_MAX_LENGTH: int = DEFAULT_MAX_LENGTH
    PASSWORD_REQUIRE_UPPERCASE: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = True
    PASSWORD_REQUIRE_NUMBERS: bool = True
    PASSWORD_REQUIRE_SPECIAL: bool = True

    # Forbidden words - stored as raw string to avoid pydantic-settings JSON parsing issues
    PASSWORD_FORBIDDEN_WORDS_RAW: str = Field(
        default=",".join(DEFAULT_FORBIDDEN_WORDS),
        validation_alias="PASSWORD_FORBIDDEN_WORDS",
    )

    @property
    def PASSWORD_FORBIDDEN_WORDS(self) -> list[str]:  # noqa: N802 - matches env var name
        """Parse forbidden words from JSON array or comma-separated string."""
        v = self.PASSWORD_FORBIDDEN_WORDS_RAW.strip() if self.PASSWORD_FORBIDDEN_WORDS_RAW else ""
        if not v:
            return []
        # Try JSON array first
        if v.startswith("["):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
            except json.JSONDecodeError:
                pass
        return [word.strip() for word in v.split(",") if word.strip()]


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable line."""
    messages = []
    for err in error.errors():
        if "error" in err.get("ctx", {}):
            messages.append(str(err["ctx"]["error"]))
        else:
            location = ".".join(str(part) for part in err["loc"])
            messages.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(messages)


def policy_from_settings(settings: Settings) -> PasswordPolicy:
    """Build the password policy described by the settings.

    Raises:
        PolicyConfigurationError: If the configured rules are inconsistent
    """
    try:
        return PasswordPolicy(
            min_length=settings.PASSWORD_MIN_LENGTH,
            max_length=settings.PASSWORD_MAX_LENGTH,
            require_uppercase=settings.PASSWORD_REQUIRE_UPPERCASE,
            require_lowercase=settings.PASSWORD_REQUIRE_LOWERCASE,
            require_numbers=settings.PASSWORD_REQUIRE_NUMBERS,
            require_special=settings.PASSWORD_REQUIRE_SPECIAL,
            forbidden_words=tuple(settings.PASSWORD_FORBIDDEN_WORDS),
        )
    except ValidationError as e:
        raise PolicyConfigurationError(_describe_validation_error(e)) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If an environment value cannot be parsed
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(_describe_validation_error(e)) from e
