"""
Identity and session service.

Handles login, logout, sign-up and the stored session pointer.
Credentials are compared as stored; the identity table keeps plaintext
passwords.
"""

import logging
import uuid

from rental_manager.config import settings
from rental_manager.core.exceptions import ConflictException, ValidationException
from rental_manager.core.validators import all_present, is_strong_enough, is_valid_phone
from rental_manager.models.role import UserRole
from rental_manager.models.session_context import SessionContext
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.session_repository import SessionRepository
from rental_manager.repositories.user_repository import UserRepository
from rental_manager.schemas.user_schemas import AuthUser, User
from rental_manager.seed_data import demo_users

logger = logging.getLogger(__name__)


class AuthService:
    """Service for identity and session logic"""

    def __init__(self, kv: KeyValueStore):
        self.kv = kv
        self.user_repo = UserRepository(kv)
        self.session_repo = SessionRepository(kv)

    def seed_users(self) -> bool:
        """Write the demo accounts if the identity table is absent"""
        if not settings.SEED_DEMO_USERS:
            return False
        seeded = self.user_repo.seed(demo_users())
        if seeded:
            logger.info("Seeded %d demo users", len(demo_users()))
        return seeded

    def login(self, email: str, password: str) -> AuthUser | None:
        """
        Authenticate by exact (email, password) match.

        On success the public projection becomes the session pointer.
        On failure the existing session pointer is left as it was.

        Returns:
            AuthUser, or None if nothing matched
        """
        user = self.user_repo.get_by_credentials(email, password)
        if user is None:
            logger.info("Failed login for %s", email)
            return None

        auth_user = user.to_auth_user()
        self.session_repo.set(auth_user)
        logger.info("User %s logged in", auth_user.uid)
        return auth_user

    def logout(self) -> None:
        self.session_repo.clear()

    def get_current_user(self) -> AuthUser | None:
        return self.session_repo.get()

    def get_current_session(self) -> SessionContext | None:
        user = self.session_repo.get()
        return SessionContext(user=user) if user is not None else None

    def sign_up(self, name: str, email: str, password: str, phone: str, role: str) -> AuthUser:
        """
        Create an account and sign it in.

        Raises:
            ValidationException: If a field is missing or malformed
            ConflictException: If the email is already taken
        """
        if not all_present(name, email, password, phone, role):
            raise ValidationException("Please fill all fields")
        if not is_strong_enough(password):
            raise ValidationException("Password must be at least 6 characters long")
        if not is_valid_phone(phone):
            raise ValidationException("Please enter a valid 10-digit phone number")
        try:
            user_role = UserRole(role)
        except ValueError:
            raise ValidationException("Invalid role")

        if self.user_repo.get_by_email(email) is not None:
            raise ConflictException("An account with this email already exists")

        user = User(
            uid=str(uuid.uuid4()),
            name=name,
            email=email,
            password=password,
            role=user_role,
            phone=phone,
        )
        auth_user = user.to_auth_user()
        with self.kv.atomic():
            self.user_repo.create(user)
            self.session_repo.set(auth_user)
        logger.info("Created %s account %s", user_role.value, user.uid)
        return auth_user

    def get_all_users(self) -> list[User]:
        return self.user_repo.get_all()
