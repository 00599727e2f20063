"""Repository for the room inventory table."""

from rental_manager.repositories.json_table_repository import JsonTableRepository
from rental_manager.schemas.room_schemas import Room, RoomStatus, RoomType


class RoomRepository(JsonTableRepository[Room]):
    """Repository for Room rows"""

    key = "rooms"
    record_type = Room

    def get_by_number(self, room_number: str) -> Room | None:
        """
        Get room by its number.

        Args:
            room_number: Room number, e.g. "203"

        Returns:
            Room or None if not in the catalog
        """
        return next((r for r in self.get_all() if r.room_number == room_number), None)

    def get_vacant(self, room_type: RoomType | None = None) -> list[Room]:
        """
        Get vacant rooms in table order.

        Args:
            room_type: Optional room type filter

        Returns:
            List of vacant rooms
        """
        return [
            r
            for r in self.get_all()
            if r.is_vacant() and (room_type is None or r.room_type == room_type)
        ]

    def get_by_floor(self, floor: int) -> list[Room]:
        return [r for r in self.get_all() if r.floor == floor]

    def mark_occupied(self, room_number: str, tenant_id: str) -> Room | None:
        """
        Assign a tenant to a room.

        Args:
            room_number: Room to occupy
            tenant_id: Tenant moving in

        Returns:
            Updated room, or None if the room does not exist
        """
        rooms = self.get_all()
        for room in rooms:
            if room.room_number == room_number:
                room.status = RoomStatus.OCCUPIED
                room.tenant_id = tenant_id
                self.save_all(rooms)
                return room
        return None
