from rental_manager.repositories.json_table_repository import JsonTableRepository
from rental_manager.schemas.registration_schemas import TenantRegistration


class RegistrationRepository(JsonTableRepository[TenantRegistration]):
    """Repository for tenant registrations"""

    key = "tenantRegistrations"
    record_type = TenantRegistration

    def get_by_tenant(self, tenant_id: str) -> TenantRegistration | None:
        """Get the first registration for tenant_id"""
        return next((r for r in self.get_all() if r.tenant_id == tenant_id), None)

    def exists_for_tenant(self, tenant_id: str) -> bool:
        return any(r.tenant_id == tenant_id for r in self.get_all())

    def create(self, registration: TenantRegistration) -> TenantRegistration:
        """Append a registration"""
        return self.append(registration)
