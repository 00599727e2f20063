from datetime import datetime
from pydantic import BaseModel, field_validator
from rental_manager.core.validators import is_valid_reset_code
from rental_manager.schemas.record_base import StoredRecord, ensure_utc


class ResetToken(StoredRecord):
    """Short-lived code that authorizes one password change"""

    user_id: str
    code: str
    expires_at: datetime

    @field_validator("code")
    @classmethod
    def check_code(cls, value: str) -> str:
        if not is_valid_reset_code(value):
            raise ValueError("Reset code must be 6 digits")
        return value

    @field_validator("expires_at")
    @classmethod
    def check_expires_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def is_live(self, now: datetime) -> bool:
        return self.expires_at > now


class ResetInitiation(BaseModel):
    """Result of asking for a reset code"""

    success: bool
    message: str
    # Returned to the caller in place of SMS delivery
    reset_code: str | None = None


class ResetCodeValidation(BaseModel):
    """Result of checking a reset code"""

    valid: bool
    user_id: str | None = None
    message: str | None = None
