"""Password policy configuration and the static catalogues the engine checks against."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from passpolicy.exceptions import (
    EmptyForbiddenWordError,
    InvalidLengthBoundsError,
    NegativeMinLengthError,
)

DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 128

DEFAULT_FORBIDDEN_WORDS: tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "admin",
    "user",
    "test",
)

# Characters accepted by the special-character requirement (backtick included)
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~`")

# Three-character runs treated as easy to guess, matched against the lowercased password
SEQUENTIAL_PATTERNS: tuple[str, ...] = (
    # Alphabet runs
    "abc", "bcd", "cde", "def", "efg", "fgh", "ghi", "hij", "ijk", "jkl", "klm", "lmn",
    "mno", "nop", "opq", "pqr", "qrs", "rst", "stu", "tuv", "uvw", "vwx", "wxy", "xyz",
    # Digit runs
    "123", "234", "345", "456", "567", "678", "789", "890",
    # QWERTY top row
    "qwe", "wer", "ert", "rty", "tyu", "yui", "uio", "iop",
)  # fmt: skip


class PasswordPolicy(BaseModel):
    """Composition rules a password must satisfy.

    Instances are frozen: build one (or use ``DEFAULT_POLICY``) and share it
    across any number of validation calls.
    """

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=DEFAULT_MIN_LENGTH, description="Minimum length in characters")
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, description="Maximum length in characters")
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special: bool = True
    forbidden_words: tuple[str, ...] = Field(
        default=DEFAULT_FORBIDDEN_WORDS,
        description="Case-insensitive substrings a password may not contain, checked in order",
    )

    @field_validator("forbidden_words")
    @classmethod
    def validate_forbidden_words(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty entries, which would match every password."""
        if any(not word for word in v):
            raise EmptyForbiddenWordError
        return v

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "PasswordPolicy":
        """Ensure 0 <= min_length <= max_length."""
        if self.min_length < 0:
            raise NegativeMinLengthError(self.min_length)
        if self.max_length < self.min_length:
            raise InvalidLengthBoundsError(self.min_length, self.max_length)
        return self


DEFAULT_POLICY = PasswordPolicy()
