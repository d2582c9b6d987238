"""Password policy engine: rule checks, weak-pattern heuristics and strength scoring.

Every function here is pure. Passing ``policy=None`` substitutes
``DEFAULT_POLICY``; anything that is not a ``PasswordPolicy`` raises
``TypeError``. Negative outcomes are reported as data, never raised.
"""

import re
import unicodedata
from dataclasses import dataclass, field

import structlog

from passpolicy.policy import DEFAULT_POLICY, SEQUENTIAL_PATTERNS, SPECIAL_CHARACTERS, PasswordPolicy
from passpolicy.schemas import PasswordValidationResponse, StrengthLevel

logger = structlog.get_logger()

# Strength scoring constants
LENGTH_SHORT = 8
LENGTH_MEDIUM = 12
LENGTH_LONG = 16
LENGTH_SHORT_BONUS = 20
LENGTH_MEDIUM_BONUS = 10
LENGTH_LONG_BONUS = 10
CHARACTER_CLASS_BONUS = 15
PATTERN_PENALTY = 20
REPEAT_PENALTY = 10
MIN_SCORE = 0
MAX_SCORE = 100

# Strength level thresholds (exclusive upper bound of each band)
VERY_WEAK_BELOW = 20
WEAK_BELOW = 40
FAIR_BELOW = 60
GOOD_BELOW = 80
STRONG_BELOW = 90

# Scoring only recognises ASCII letters and digits
_ASCII_UPPER = re.compile(r"[A-Z]")
_ASCII_LOWER = re.compile(r"[a-z]")
_ASCII_DIGIT = re.compile(r"[0-9]")

PATTERN_WARNING = "Password contains common patterns that may be easy to guess"
REPEAT_WARNING = "Password contains repeated characters which may weaken security"


@dataclass
class PasswordValidationResult:
    """Result of password validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _resolve_policy(policy: PasswordPolicy | None) -> PasswordPolicy:
    if policy is None:
        return DEFAULT_POLICY
    if not isinstance(policy, PasswordPolicy):
        raise TypeError(f"policy must be a PasswordPolicy, got {type(policy).__name__}")
    return policy


def _has_category(password: str, category: str) -> bool:
    return any(unicodedata.category(char) == category for char in password)


def _has_special(password: str) -> bool:
    return any(char in SPECIAL_CHARACTERS for char in password)


def has_common_patterns(password: str) -> bool:
    """Check for alphabet, digit or keyboard runs such as "abc", "123" or "qwe"."""
    lower_password = password.lower()
    return any(pattern in lower_password for pattern in SEQUENTIAL_PATTERNS)


def has_repeated_characters(password: str) -> bool:
    """Check for three identical characters in a row."""
    return any(
        password[i] == password[i + 1] == password[i + 2] for i in range(len(password) - 2)
    )


def validate_password(
    password: str, policy: PasswordPolicy | None = None
) -> PasswordValidationResult:
    """Validate a password against a policy.

    Every rule is evaluated and contributes its own error, so callers get the
    full list of problems in one pass. Pattern and repetition findings are
    reported as warnings and never make the password invalid.

    Args:
        password: The password to validate
        policy: Rules to apply; ``DEFAULT_POLICY`` when omitted

    Returns:
        PasswordValidationResult with is_valid flag, errors and warnings
    """
    policy = _resolve_policy(policy)
    errors: list[str] = []
    warnings: list[str] = []

    # Length bounds
    if len(password) < policy.min_length:
        errors.append(f"Password must be at least {policy.min_length} characters long")
    if len(password) > policy.max_length:
        errors.append(f"Password must be no more than {policy.max_length} characters long")

    # Character classes (Unicode-aware)
    if policy.require_uppercase and not _has_category(password, "Lu"):
        errors.append("Password must contain at least one uppercase letter")
    if policy.require_lowercase and not _has_category(password, "Ll"):
        errors.append("Password must contain at least one lowercase letter")
    if policy.require_numbers and not _has_category(password, "Nd"):
        errors.append("Password must contain at least one number")
    if policy.require_special and not _has_special(password):
        errors.append("Password must contain at least one special character")

    lower_password = password.lower()
    for word in policy.forbidden_words:
        if word.lower() in lower_password:
            errors.append(f"Password cannot contain common words like '{word}'")

    if has_common_patterns(password):
        warnings.append(PATTERN_WARNING)
    if has_repeated_characters(password):
        warnings.append(REPEAT_WARNING)

    return PasswordValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def calculate_strength(password: str, policy: PasswordPolicy | None = None) -> int:
    """Calculate a 0-100 strength score.

    The score is independent of validation: forbidden words and the policy's
    requirement flags do not affect it. ``policy`` is accepted so both entry
    points share a call shape. Character classes are ASCII-only here, unlike
    the Unicode-aware checks in ``validate_password``.
    """
    _resolve_policy(policy)
    score = 0

    length = len(password)
    if length >= LENGTH_SHORT:
        score += LENGTH_SHORT_BONUS
    if length >= LENGTH_MEDIUM:
        score += LENGTH_MEDIUM_BONUS
    if length >= LENGTH_LONG:
        score += LENGTH_LONG_BONUS

    for pattern in (_ASCII_UPPER, _ASCII_LOWER, _ASCII_DIGIT):
        if pattern.search(password):
            score += CHARACTER_CLASS_BONUS
    if _has_special(password):
        score += CHARACTER_CLASS_BONUS

    # Penalties
    if has_common_patterns(password):
        score -= PATTERN_PENALTY
    if has_repeated_characters(password):
        score -= REPEAT_PENALTY

    return max(MIN_SCORE, min(MAX_SCORE, score))


def strength_level(score: int) -> StrengthLevel:
    """Convert a numeric score to its strength level."""
    if score < VERY_WEAK_BELOW:
        return StrengthLevel.VERY_WEAK
    if score < WEAK_BELOW:
        return StrengthLevel.WEAK
    if score < FAIR_BELOW:
        return StrengthLevel.FAIR
    if score < GOOD_BELOW:
        return StrengthLevel.GOOD
    if score < STRONG_BELOW:
        return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def evaluate_password(
    password: str, policy: PasswordPolicy | None = None
) -> PasswordValidationResponse:
    """Validate and rate a password in one call.

    Returns the combined response account workflows hand back to clients:
    validity, strength score, level, errors and warnings.
    """
    policy = _resolve_policy(policy)
    result = validate_password(password, policy)
    strength = calculate_strength(password, policy)
    level = strength_level(strength)

    # Only log once the host has configured structlog; never log the password
    if structlog.is_configured():
        logger.debug(
            "Password evaluated",
            is_valid=result.is_valid,
            strength=strength,
            level=level.value,
            error_count=len(result.errors),
            warning_count=len(result.warnings),
        )

    return PasswordValidationResponse(
        is_valid=result.is_valid,
        strength=strength,
        level=level,
        errors=result.errors,
        warnings=result.warnings,
    )
