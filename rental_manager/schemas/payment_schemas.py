import re
from datetime import datetime
from enum import Enum as PyEnum
from pydantic import Field, field_validator
from rental_manager.schemas.record_base import StoredRecord, ensure_utc

_MONTH_RE = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")


class PaymentStatus(str, PyEnum):
    """Payment status enumeration"""

    PAID = "paid"
    PENDING = "pending"


class PaymentType(str, PyEnum):
    """Payment type enumeration"""

    RENT = "rent"
    DEPOSIT = "deposit"


class Payment(StoredRecord):
    """
    Payment ledger row.

    At most one row exists per (tenant_id, month); resubmitting for the
    same month replaces the earlier row.
    """

    tenant_id: str = Field(..., min_length=1)
    room_number: str
    month: str  # YYYY-MM
    amount: int | float
    screenshot_url: str = ""
    status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime
    type: PaymentType = PaymentType.RENT

    @field_validator("month")
    @classmethod
    def check_month(cls, value: str) -> str:
        if not _MONTH_RE.fullmatch(value):
            raise ValueError("Month must use the YYYY-MM format")
        return value

    @field_validator("amount")
    @classmethod
    def check_amount(cls, value: int | float) -> int | float:
        if value < 0:
            raise ValueError("Amount cannot be negative")
        return value

    @field_validator("created_at")
    @classmethod
    def check_created_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def is_paid(self) -> bool:
        return self.status == PaymentStatus.PAID
