from datetime import datetime
from typing import Any
from pydantic import Field, field_validator, model_validator
from rental_manager.core.validators import is_valid_aadhar
from rental_manager.schemas.record_base import StoredRecord, ensure_utc
from rental_manager.schemas.room_schemas import RoomType

# (alias, field name) pairs the registration form cannot leave empty
_REQUIRED_FIELDS = (
    ("aadharNumber", "aadhar_number"),
    ("company", "company"),
    ("roomNumber", "room_number"),
)


class TenantRegistration(StoredRecord):
    """Links a tenant identity to the room they moved into"""

    tenant_id: str = Field(..., min_length=1)
    tenant_name: str
    aadhar_number: str
    aadhar_card_url: str | None = ""
    company: str
    family_members_count: int = Field(default=1, ge=1)
    room_number: str = Field(..., min_length=1)
    room_type: RoomType
    joined_at: datetime
    phone: str | None = ""

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        """Missing form fields are reported before any format check"""
        if isinstance(data, dict):
            for alias, name in _REQUIRED_FIELDS:
                value = data.get(alias, data.get(name))
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise ValueError("Please fill all required fields")
        return data

    @field_validator("aadhar_number")
    @classmethod
    def check_aadhar(cls, value: str) -> str:
        if not is_valid_aadhar(value):
            raise ValueError("Please enter a valid 12-digit Aadhar number")
        return value

    @field_validator("joined_at")
    @classmethod
    def check_joined_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)
