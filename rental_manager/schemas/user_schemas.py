from pydantic import BaseModel, Field
from rental_manager.models.role import UserRole
from rental_manager.schemas.record_base import StoredRecord


class User(StoredRecord):
    """Identity table row. Passwords are stored as entered."""

    uid: str = Field(..., min_length=1)
    name: str
    email: str
    password: str
    role: UserRole
    phone: str | None = None

    def to_auth_user(self) -> "AuthUser":
        """Public projection kept in the session pointer"""
        return AuthUser(
            uid=self.uid,
            name=self.name,
            email=self.email,
            role=self.role,
            phone=self.phone,
        )


class AuthUser(StoredRecord):
    """Currently authenticated identity, without credentials"""

    uid: str = Field(..., min_length=1)
    name: str
    email: str
    role: UserRole
    phone: str | None = None


class SignUpResult(BaseModel):
    """Outcome of a sign-up attempt"""

    success: bool
    message: str
    user: AuthUser | None = None
