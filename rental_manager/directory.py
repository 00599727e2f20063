"""
Directory store: the function surface the UI layer calls.

Every operation runs synchronously against an explicitly supplied
KeyValueStore. Failures come back as result values with a message the UI
can render inline; nothing raises across this boundary in normal use.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session
from rental_manager.core.clock import Clock, system_clock
from rental_manager.core.exceptions import RentalManagerException
from rental_manager.models.session_context import SessionContext
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.schemas.dashboard_schemas import OccupancyStats, RevenueStats
from rental_manager.schemas.payment_schemas import Payment, PaymentStatus
from rental_manager.schemas.registration_schemas import TenantRegistration
from rental_manager.schemas.reset_schemas import ResetCodeValidation, ResetInitiation
from rental_manager.schemas.result_schemas import OperationResult
from rental_manager.schemas.room_schemas import Room, RoomType
from rental_manager.schemas.user_schemas import AuthUser, SignUpResult, User
from rental_manager.services.auth_service import AuthService
from rental_manager.services.dashboard_service import DashboardService
from rental_manager.services.navigation_service import NavigationService, View
from rental_manager.services.password_reset_service import INVALID_CODE_MESSAGE, PasswordResetService
from rental_manager.services.payment_service import PaymentService, monthly_rent
from rental_manager.services.registration_service import RegistrationService
from rental_manager.services.room_service import RoomService

logger = logging.getLogger(__name__)


def failure_message(exc: Exception) -> str:
    """Message to show for a rejected operation"""
    if isinstance(exc, ValidationError):
        error = exc.errors()[0]
        if error["type"] == "value_error":
            return str(error["ctx"]["error"])
        field = ".".join(str(part) for part in error["loc"])
        return f"{field}: {error['msg']}" if field else error["msg"]
    return str(exc)


def _coerce(model: type[BaseModel], value: BaseModel | Mapping[str, Any]) -> Any:
    if isinstance(value, model):
        return value
    return model.model_validate(value)


class DirectoryStore:
    """
    Data-access layer over the key-value substrate.

    Tables: users, rooms, tenant registrations, payments and password
    reset tokens, plus the session pointer for the signed-in user.
    """

    def __init__(self, kv: KeyValueStore, clock: Clock | None = None):
        self.kv = kv
        self.clock = clock or system_clock
        self.auth = AuthService(kv)
        self.rooms = RoomService(kv)
        self.registrations = RegistrationService(kv, self.clock)
        self.payments = PaymentService(kv, self.clock)
        self.dashboard = DashboardService(kv, self.clock)
        self.resets = PasswordResetService(kv, self.clock)
        self.navigation = NavigationService(kv)

    @classmethod
    def from_db(cls, db: Session, clock: Clock | None = None) -> "DirectoryStore":
        return cls(KeyValueStore(db), clock)

    def initialize(self) -> None:
        """Seed demo users and the room catalog if they are absent"""
        self.auth.seed_users()
        self.rooms.initialize_rooms()

    # Identity & session

    def login(self, email: str, password: str) -> AuthUser | None:
        return self.auth.login(email, password)

    def logout(self) -> None:
        self.auth.logout()

    def get_current_user(self) -> AuthUser | None:
        return self.auth.get_current_user()

    def get_current_session(self) -> SessionContext | None:
        return self.auth.get_current_session()

    def sign_up(self, name: str, email: str, password: str, phone: str, role: str) -> SignUpResult:
        try:
            user = self.auth.sign_up(name, email, password, phone, role)
        except RentalManagerException as e:
            return SignUpResult(success=False, message=failure_message(e))
        return SignUpResult(success=True, message="Account created successfully", user=user)

    def get_all_users(self) -> list[User]:
        return self.auth.get_all_users()

    # Room inventory

    def initialize_rooms(self) -> bool:
        return self.rooms.initialize_rooms()

    def get_available_rooms(self, room_type: RoomType | str | None = None) -> list[Room]:
        return self.rooms.get_available_rooms(room_type)

    def get_all_rooms(self) -> list[Room]:
        return self.rooms.get_all_rooms()

    def get_rooms_by_floor(self, floor: int) -> list[Room]:
        return self.rooms.get_rooms_by_floor(floor)

    # Registration

    def is_tenant_registered(self, user_id: str) -> bool:
        return self.registrations.is_tenant_registered(user_id)

    def get_tenant_registration(self, tenant_id: str) -> TenantRegistration | None:
        return self.registrations.get_tenant_registration(tenant_id)

    def register_tenant(
        self, registration: TenantRegistration | Mapping[str, Any]
    ) -> OperationResult:
        """
        Register a tenant and occupy their room in one write.

        Accepts a TenantRegistration or a mapping with camelCase or
        snake_case keys.
        """
        try:
            record = _coerce(TenantRegistration, registration)
            self.registrations.register_tenant(record)
        except (RentalManagerException, ValidationError) as e:
            logger.info("Registration rejected: %s", failure_message(e))
            return OperationResult.fail(failure_message(e))
        return OperationResult.ok("Registration successful")

    def register_current_tenant(
        self,
        session: SessionContext,
        aadhar_number: str,
        company: str,
        family_members_count: int,
        room_number: str,
        room_type: RoomType | str,
        aadhar_card_url: str = "",
    ) -> OperationResult:
        """Registration form submit for the signed-in tenant"""
        try:
            record = self.registrations.build_registration(
                session,
                aadhar_number=aadhar_number,
                company=company,
                family_members_count=family_members_count,
                room_number=room_number,
                room_type=room_type,
                aadhar_card_url=aadhar_card_url,
            )
        except ValidationError as e:
            return OperationResult.fail(failure_message(e))
        return self.register_tenant(record)

    # Payment ledger

    def get_tenant_payments(self, tenant_id: str) -> list[Payment]:
        return self.payments.get_tenant_payments(tenant_id)

    def get_all_payments(self) -> list[Payment]:
        return self.payments.get_all_payments()

    def add_payment(self, payment: Payment | Mapping[str, Any]) -> OperationResult:
        """Upsert a payment by (tenant, month)"""
        try:
            record = _coerce(Payment, payment)
        except ValidationError as e:
            return OperationResult.fail(failure_message(e))
        self.payments.add_payment(record)
        return OperationResult.ok("Payment recorded")

    def submit_rent_payment(self, tenant_id: str, screenshot_url: str) -> OperationResult:
        try:
            self.payments.submit_rent_payment(tenant_id, screenshot_url)
        except RentalManagerException as e:
            return OperationResult.fail(failure_message(e))
        return OperationResult.ok("Payment proof uploaded successfully!")

    def monthly_rent(self, room_type: RoomType | str) -> int | None:
        """Rent for a room type, or None if the type is unknown"""
        try:
            return monthly_rent(room_type)
        except RentalManagerException:
            return None

    # Dashboards

    def current_month(self) -> str:
        return self.dashboard.current_month()

    def room_payment_status(self, room_number: str) -> PaymentStatus:
        return self.dashboard.room_payment_status(room_number)

    def tenant_payment_status(self, tenant_id: str) -> PaymentStatus:
        return self.dashboard.tenant_payment_status(tenant_id)

    def occupancy_stats(self) -> OccupancyStats:
        return self.dashboard.occupancy_stats()

    def revenue_stats(self) -> RevenueStats:
        return self.dashboard.revenue_stats()

    # Password reset

    def initiate_password_reset(self, phone: str) -> ResetInitiation:
        try:
            token = self.resets.initiate(phone)
        except RentalManagerException as e:
            return ResetInitiation(success=False, message=failure_message(e))
        return ResetInitiation(
            success=True,
            message=f"Reset code sent to {phone}. For demo, code is: {token.code}",
            reset_code=token.code,
        )

    def validate_reset_code(self, code: str) -> ResetCodeValidation:
        try:
            token = self.resets.validate(code)
        except RentalManagerException:
            return ResetCodeValidation(valid=False, message=INVALID_CODE_MESSAGE)
        return ResetCodeValidation(valid=True, user_id=token.user_id)

    def reset_password(self, code: str, new_password: str) -> OperationResult:
        try:
            self.resets.reset_password(code, new_password)
        except RentalManagerException as e:
            return OperationResult.fail(failure_message(e))
        return OperationResult.ok("Password reset successful")

    def purge_expired_reset_tokens(self) -> int:
        return self.resets.purge_expired()

    # Navigation

    def resolve_view(self, session: SessionContext | None = None) -> View:
        """Landing screen for session, or for the stored session if omitted"""
        if session is None:
            session = self.get_current_session()
        return self.navigation.resolve_view(session)
