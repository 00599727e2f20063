from enum import Enum as PyEnum
from pydantic import Field, model_validator
from rental_manager.schemas.record_base import StoredRecord


class RoomType(str, PyEnum):
    """Room type enumeration"""

    SINGLE = "single"
    DOUBLE = "double"


class RoomStatus(str, PyEnum):
    """Room occupancy enumeration"""

    VACANT = "vacant"
    OCCUPIED = "occupied"


class Room(StoredRecord):
    """
    Room inventory row.

    A room is occupied exactly when it has a tenant assigned.
    """

    room_number: str = Field(..., min_length=1)
    floor: int = Field(..., ge=0)
    room_type: RoomType
    status: RoomStatus = RoomStatus.VACANT
    tenant_id: str | None = None

    @model_validator(mode="after")
    def check_occupancy(self) -> "Room":
        occupied = self.status == RoomStatus.OCCUPIED
        if occupied != (self.tenant_id is not None):
            raise ValueError(
                f"Room {self.room_number} status '{self.status.value}' does not match tenant assignment"
            )
        return self

    def is_vacant(self) -> bool:
        return self.status == RoomStatus.VACANT
