from rental_manager.repositories.json_table_repository import JsonTableRepository
from rental_manager.schemas.payment_schemas import Payment


class PaymentRepository(JsonTableRepository[Payment]):
    """Repository for the payment ledger"""

    key = "tenantPayments"
    record_type = Payment

    def get_by_tenant(self, tenant_id: str) -> list[Payment]:
        """Get all payments for a tenant in table order"""
        return [p for p in self.get_all() if p.tenant_id == tenant_id]

    def get_for_tenant_month(self, tenant_id: str, month: str) -> Payment | None:
        return next(
            (p for p in self.get_all() if p.tenant_id == tenant_id and p.month == month),
            None,
        )

    def get_for_room_month(self, room_number: str, month: str) -> Payment | None:
        return next(
            (p for p in self.get_all() if p.room_number == room_number and p.month == month),
            None,
        )

    def get_by_month(self, month: str) -> list[Payment]:
        return [p for p in self.get_all() if p.month == month]

    def upsert(self, payment: Payment) -> int:
        """
        Store payment, replacing any row with the same (tenant_id, month).

        The new row goes to the end of the table.

        Returns:
            Number of rows replaced (0 or more)
        """
        payments = self.get_all()
        kept = [
            p
            for p in payments
            if not (p.tenant_id == payment.tenant_id and p.month == payment.month)
        ]
        replaced = len(payments) - len(kept)
        kept.append(payment)
        self.save_all(kept)
        return replaced
