"""Custom exception classes for the password policy package."""


class ConfigurationError(ValueError):
    """Raised when configuration validation fails."""


class PolicyConfigurationError(ConfigurationError):
    """Raised when a password policy is constructed with inconsistent rules."""


class NegativeMinLengthError(PolicyConfigurationError):
    """Raised when the minimum password length is negative."""

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length
        super().__init__(f"Password minimum length must not be negative (got {min_length})")


class InvalidLengthBoundsError(PolicyConfigurationError):
    """Raised when the maximum password length is below the minimum."""

    def __init__(self, min_length: int, max_length: int) -> None:
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"Password maximum length ({max_length}) must be at least "
            f"the minimum length ({min_length})"
        )


class EmptyForbiddenWordError(PolicyConfigurationError):
    """Raised when the forbidden word list contains an empty entry."""

    def __init__(self) -> None:
        super().__init__("Forbidden words must be non-empty strings")
