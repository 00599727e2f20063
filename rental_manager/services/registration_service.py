import logging

from rental_manager.core.clock import Clock, system_clock
from rental_manager.core.exceptions import ConflictException, NotFoundException, ValidationException
from rental_manager.models.session_context import SessionContext
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.registration_repository import RegistrationRepository
from rental_manager.repositories.room_repository import RoomRepository
from rental_manager.schemas.registration_schemas import TenantRegistration
from rental_manager.schemas.room_schemas import RoomType

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for tenant registration business logic"""

    def __init__(self, kv: KeyValueStore, clock: Clock | None = None):
        self.kv = kv
        self.clock = clock or system_clock
        self.repo = RegistrationRepository(kv)
        self.room_repo = RoomRepository(kv)

    def is_tenant_registered(self, user_id: str) -> bool:
        return self.repo.exists_for_tenant(user_id)

    def get_tenant_registration(self, tenant_id: str) -> TenantRegistration | None:
        return self.repo.get_by_tenant(tenant_id)

    def register_tenant(self, registration: TenantRegistration) -> TenantRegistration:
        """
        Record a registration and move the tenant into their room.

        The registration row and the room update are written in one
        transaction, so the room table never disagrees with the
        registration table.

        Raises:
            ConflictException: If the tenant is already registered or the
                room is already occupied
            NotFoundException: If the room is not in the catalog
            ValidationException: If the room type differs from the catalog
        """
        with self.kv.atomic():
            if self.repo.exists_for_tenant(registration.tenant_id):
                raise ConflictException("Tenant is already registered")

            room = self.room_repo.get_by_number(registration.room_number)
            if room is None:
                raise NotFoundException(f"Room {registration.room_number} not found")
            if not room.is_vacant():
                raise ConflictException(f"Room {registration.room_number} is already occupied")
            if room.room_type != registration.room_type:
                raise ValidationException(
                    f"Room {registration.room_number} is a {room.room_type.value} room"
                )

            self.repo.create(registration)
            self.room_repo.mark_occupied(registration.room_number, registration.tenant_id)

        logger.info(
            "Registered tenant %s in room %s", registration.tenant_id, registration.room_number
        )
        return registration

    def build_registration(
        self,
        session: SessionContext,
        aadhar_number: str,
        company: str,
        family_members_count: int,
        room_number: str,
        room_type: RoomType | str,
        aadhar_card_url: str = "",
    ) -> TenantRegistration:
        """
        Assemble a registration for the signed-in tenant.

        Name and phone come from the session; the join time is now.

        Raises:
            pydantic.ValidationError: If a field is malformed
        """
        return TenantRegistration(
            tenant_id=session.user_id,
            tenant_name=session.user.name,
            aadhar_number=aadhar_number,
            aadhar_card_url=aadhar_card_url,
            company=company,
            family_members_count=family_members_count,
            room_number=room_number,
            room_type=room_type,
            joined_at=self.clock(),
            phone=session.user.phone or "",
        )
