"""Pytest fixtures for passpolicy tests."""

from collections.abc import Generator

import pytest
import structlog

from passpolicy.config import get_settings
from passpolicy.policy import PasswordPolicy

_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "LOG_JSON",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_MAX_LENGTH",
    "PASSWORD_REQUIRE_UPPERCASE",
    "PASSWORD_REQUIRE_LOWERCASE",
    "PASSWORD_REQUIRE_NUMBERS",
    "PASSWORD_REQUIRE_SPECIAL",
    "PASSWORD_FORBIDDEN_WORDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate each test from the host environment and cached settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def relaxed_policy() -> PasswordPolicy:
    """Policy with no character-class requirements and no forbidden words."""
    return PasswordPolicy(
        min_length=4,
        max_length=16,
        require_uppercase=False,
        require_lowercase=False,
        require_numbers=False,
        require_special=False,
        forbidden_words=(),
    )
