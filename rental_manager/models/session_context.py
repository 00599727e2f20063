"""Explicit session value handed to the UI layer."""

from dataclasses import dataclass
from rental_manager.models.role import UserRole
from rental_manager.schemas.user_schemas import AuthUser


@dataclass(frozen=True)
class SessionContext:
    """
    The authenticated identity for the current UI session.

    Built from the stored session pointer and passed to the operations
    that act on behalf of the signed-in user, instead of each of them
    re-reading the pointer on its own.

    Attributes:
        user: Public projection of the signed-in user
    """

    user: AuthUser

    @property
    def user_id(self) -> str:
        return self.user.uid

    def is_owner(self) -> bool:
        """Check if the signed-in user owns the building."""
        return self.user.role == UserRole.OWNER

    def is_tenant(self) -> bool:
        """Check if the signed-in user is a tenant."""
        return self.user.role == UserRole.TENANT

    def __repr__(self) -> str:
        return f"<SessionContext(uid={self.user.uid}, role={self.user.role.value})>"
