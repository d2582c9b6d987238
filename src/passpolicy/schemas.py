"""Request and response models exchanged with the account workflows."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StrengthLevel(str, Enum):
    """Qualitative bands of the 0-100 strength score."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


class PasswordValidationRequest(BaseModel):
    """A password submitted for checking."""

    password: str = Field(min_length=1)


class PasswordValidationResponse(BaseModel):
    """Combined validation outcome and strength rating for one password."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    strength: int = Field(ge=0, le=100)
    level: StrengthLevel
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, leaving out empty errors and warnings."""
        data = self.model_dump(mode="json", by_alias=True)
        for key in ("errors", "warnings"):
            if not data[key]:
                del data[key]
        return data
