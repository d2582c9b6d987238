"""Password policy engine for account workflows."""

from passpolicy.policy import DEFAULT_POLICY, PasswordPolicy
from passpolicy.schemas import (
    PasswordValidationRequest,
    PasswordValidationResponse,
    StrengthLevel,
)
from passpolicy.validator import (
    PasswordValidationResult,
    calculate_strength,
    evaluate_password,
    strength_level,
    validate_password,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "PasswordPolicy",
    "PasswordValidationRequest",
    "PasswordValidationResponse",
    "PasswordValidationResult",
    "StrengthLevel",
    "__version__",
    "calculate_strength",
    "evaluate_password",
    "strength_level",
    "validate_password",
]
