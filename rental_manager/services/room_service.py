import logging

from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.room_repository import RoomRepository
from rental_manager.schemas.room_schemas import Room, RoomType
from rental_manager.seed_data import room_catalog

logger = logging.getLogger(__name__)


class RoomService:
    """Service for the room inventory"""

    def __init__(self, kv: KeyValueStore):
        self.repo = RoomRepository(kv)

    def initialize_rooms(self) -> bool:
        """
        Seed the room catalog once.

        A table that is already present is never reseeded, even when its
        contents cannot be read.

        Returns:
            True if the catalog was written by this call
        """
        seeded = self.repo.seed(room_catalog())
        if seeded:
            logger.info("Seeded room catalog")
        return seeded

    def get_available_rooms(self, room_type: RoomType | str | None = None) -> list[Room]:
        """Vacant rooms, optionally of one type; an unknown type matches nothing"""
        if room_type is None:
            return self.repo.get_vacant()
        try:
            wanted = RoomType(room_type)
        except ValueError:
            logger.info("Unknown room type filter %r", room_type)
            return []
        return self.repo.get_vacant(wanted)

    def get_all_rooms(self) -> list[Room]:
        return self.repo.get_all()

    def get_rooms_by_floor(self, floor: int) -> list[Room]:
        return self.repo.get_by_floor(floor)
