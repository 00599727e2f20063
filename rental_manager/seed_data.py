"""Demo accounts and the building's fixed room catalog."""

from rental_manager.models.role import UserRole
from rental_manager.schemas.room_schemas import Room, RoomStatus, RoomType
from rental_manager.schemas.user_schemas import User

FLOORS = range(1, 6)
ROOMS_PER_FLOOR = 4

DEMO_USERS: list[dict] = [
    {
        "uid": "1",
        "name": "Owner Admin",
        "email": "owner@building.com",
        "password": "owner123",
        "role": UserRole.OWNER,
        "phone": "9876543210",
    },
    {
        "uid": "2",
        "name": "Tenant One",
        "email": "tenant1@building.com",
        "password": "tenant123",
        "role": UserRole.TENANT,
        "phone": "9876543211",
    },
    {
        "uid": "3",
        "name": "Tenant Two",
        "email": "tenant2@building.com",
        "password": "tenant123",
        "role": UserRole.TENANT,
        "phone": "9876543212",
    },
]


def demo_users() -> list[User]:
    return [User(**data) for data in DEMO_USERS]


def room_catalog() -> list[Room]:
    """
    Build the 20-room catalog: rooms 101-104 through 501-504.

    Positions 1-2 on each floor are single rooms, 3-4 are doubles.
    """
    rooms = []
    for floor in FLOORS:
        for position in range(1, ROOMS_PER_FLOOR + 1):
            rooms.append(
                Room(
                    room_number=f"{floor}0{position}",
                    floor=floor,
                    room_type=RoomType.SINGLE if position <= 2 else RoomType.DOUBLE,
                    status=RoomStatus.VACANT,
                    tenant_id=None,
                )
            )
    return rooms
