import logging

from rental_manager.config import settings
from rental_manager.core.clock import Clock, month_of, system_clock
from rental_manager.core.exceptions import ConflictException, NotFoundException, ValidationException
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.payment_repository import PaymentRepository
from rental_manager.repositories.registration_repository import RegistrationRepository
from rental_manager.schemas.payment_schemas import Payment, PaymentStatus, PaymentType
from rental_manager.schemas.room_schemas import RoomType

logger = logging.getLogger(__name__)


def monthly_rent(room_type: RoomType | str) -> int:
    """
    Fixed monthly rent for a room type.

    Raises:
        ValidationException: If room_type is not a known type
    """
    try:
        kind = RoomType(room_type)
    except ValueError:
        raise ValidationException(f"Unknown room type '{room_type}'")
    if kind == RoomType.SINGLE:
        return settings.SINGLE_ROOM_RENT
    return settings.DOUBLE_ROOM_RENT


class PaymentService:
    """Service for the payment ledger"""

    def __init__(self, kv: KeyValueStore, clock: Clock | None = None):
        self.clock = clock or system_clock
        self.repo = PaymentRepository(kv)
        self.registration_repo = RegistrationRepository(kv)

    def get_tenant_payments(self, tenant_id: str) -> list[Payment]:
        return self.repo.get_by_tenant(tenant_id)

    def get_all_payments(self) -> list[Payment]:
        return self.repo.get_all()

    def add_payment(self, payment: Payment) -> Payment:
        """
        Store a payment, replacing any earlier one for the same tenant
        and month.
        """
        replaced = self.repo.upsert(payment)
        if replaced:
            logger.info(
                "Replaced %d payment(s) for tenant %s, %s", replaced, payment.tenant_id, payment.month
            )
        else:
            logger.info("Recorded payment for tenant %s, %s", payment.tenant_id, payment.month)
        return payment

    def submit_rent_payment(self, tenant_id: str, screenshot_url: str) -> Payment:
        """
        Record this month's rent as paid, with proof of payment.

        Raises:
            NotFoundException: If the tenant has no registration
            ConflictException: If this month is already marked paid
        """
        registration = self.registration_repo.get_by_tenant(tenant_id)
        if registration is None:
            raise NotFoundException(
                "Registration not found. Please complete your registration first."
            )

        now = self.clock()
        month = month_of(now)
        existing = self.repo.get_for_tenant_month(tenant_id, month)
        if existing is not None and existing.is_paid():
            raise ConflictException("Payment for this month has already been submitted.")

        payment = Payment(
            tenant_id=tenant_id,
            room_number=registration.room_number,
            month=month,
            amount=monthly_rent(registration.room_type),
            screenshot_url=screenshot_url,
            status=PaymentStatus.PAID,
            created_at=now,
            type=PaymentType.RENT,
        )
        return self.add_payment(payment)
