from enum import Enum as PyEnum

from rental_manager.models.session_context import SessionContext
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.registration_repository import RegistrationRepository


class View(str, PyEnum):
    """Top-level screens the UI can show"""

    AUTH = "auth"
    FORGOT_PASSWORD = "forgot-password"
    TENANT_REGISTRATION = "tenant-registration"
    TENANT_DASHBOARD = "tenant-dashboard"
    OWNER_DASHBOARD = "owner-dashboard"


class NavigationService:
    """Picks the landing screen for a session"""

    def __init__(self, kv: KeyValueStore):
        self.registration_repo = RegistrationRepository(kv)

    def resolve_view(self, session: SessionContext | None) -> View:
        """
        Landing screen after start-up or sign-in.

        Tenants without a registration are sent to the registration form.
        """
        if session is None:
            return View.AUTH
        if session.is_owner():
            return View.OWNER_DASHBOARD
        if self.registration_repo.exists_for_tenant(session.user_id):
            return View.TENANT_DASHBOARD
        return View.TENANT_REGISTRATION
