"""Derived statistics for the owner and tenant dashboards. Nothing here is persisted."""

from rental_manager.core.clock import Clock, month_of, system_clock
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.payment_repository import PaymentRepository
from rental_manager.repositories.room_repository import RoomRepository
from rental_manager.schemas.dashboard_schemas import OccupancyStats, RevenueStats
from rental_manager.schemas.payment_schemas import PaymentStatus
from rental_manager.schemas.room_schemas import RoomStatus
from rental_manager.services.payment_service import monthly_rent


class DashboardService:
    """Read-only computations over rooms and payments"""

    def __init__(self, kv: KeyValueStore, clock: Clock | None = None):
        self.clock = clock or system_clock
        self.room_repo = RoomRepository(kv)
        self.payment_repo = PaymentRepository(kv)

    def current_month(self) -> str:
        return month_of(self.clock())

    def room_payment_status(self, room_number: str) -> PaymentStatus:
        """This month's payment status for a room; pending if none recorded"""
        payment = self.payment_repo.get_for_room_month(room_number, self.current_month())
        return payment.status if payment is not None else PaymentStatus.PENDING

    def tenant_payment_status(self, tenant_id: str) -> PaymentStatus:
        """This month's payment status for a tenant; pending if none recorded"""
        payment = self.payment_repo.get_for_tenant_month(tenant_id, self.current_month())
        return payment.status if payment is not None else PaymentStatus.PENDING

    def occupancy_stats(self) -> OccupancyStats:
        rooms = self.room_repo.get_all()
        total = len(rooms)
        occupied = sum(1 for r in rooms if r.status == RoomStatus.OCCUPIED)
        rate = round(occupied / total * 100, 1) if total > 0 else 0.0
        return OccupancyStats(
            total=total,
            occupied=occupied,
            vacant=total - occupied,
            occupancy_rate=rate,
        )

    def revenue_stats(self) -> RevenueStats:
        """
        Rent collection for the current month.

        Expected revenue counts every occupied room at its type's rent;
        collected counts this month's paid records.
        """
        occupied = [r for r in self.room_repo.get_all() if r.status == RoomStatus.OCCUPIED]
        paid = [p for p in self.payment_repo.get_by_month(self.current_month()) if p.is_paid()]
        return RevenueStats(
            current=sum(p.amount for p in paid),
            expected=sum(monthly_rent(r.room_type) for r in occupied),
            collected=len(paid),
            pending=max(len(occupied) - len(paid), 0),
        )
