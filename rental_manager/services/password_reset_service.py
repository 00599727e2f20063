"""
Password reset flow.

phone entry -> code verification -> new password -> done. The caller
drives each step. Codes are handed back to the caller instead of being
sent by SMS.
"""

import logging
import secrets
from datetime import timedelta

from rental_manager.config import settings
from rental_manager.core.clock import Clock, system_clock
from rental_manager.core.exceptions import NotFoundException
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.repositories.reset_token_repository import ResetTokenRepository
from rental_manager.repositories.user_repository import UserRepository
from rental_manager.schemas.reset_schemas import ResetToken

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid or expired reset code"


def generate_reset_code() -> str:
    """Uniformly random 6-digit code in [100000, 999999]"""
    return str(100000 + secrets.randbelow(900000))


class PasswordResetService:
    """Service for issuing and redeeming reset codes"""

    def __init__(self, kv: KeyValueStore, clock: Clock | None = None):
        self.kv = kv
        self.clock = clock or system_clock
        self.repo = ResetTokenRepository(kv)
        self.user_repo = UserRepository(kv)

    def initiate(self, phone: str) -> ResetToken:
        """
        Issue a reset code for the account registered to phone.

        Codes issued earlier for the same account stay valid until they
        expire or are used.

        Raises:
            NotFoundException: If no user has this phone number
        """
        user = self.user_repo.get_by_phone(phone)
        if user is None:
            raise NotFoundException("Phone number not found")

        token = ResetToken(
            user_id=user.uid,
            code=generate_reset_code(),
            expires_at=self.clock() + timedelta(seconds=settings.RESET_CODE_TTL_SECONDS),
        )
        self.repo.create(token)
        logger.info("Issued reset code for user %s", user.uid)
        return token

    def validate(self, code: str) -> ResetToken:
        """
        Find a live token for code.

        The token is not tied to the phone number or session that asked
        for it; whoever holds a live code can use it.

        Raises:
            NotFoundException: If no unexpired token has this code
        """
        token = self.repo.find_live(code, self.clock())
        if token is None:
            raise NotFoundException(INVALID_CODE_MESSAGE)
        return token

    def reset_password(self, code: str, new_password: str) -> str:
        """
        Set a new password using a live code, then burn the code.

        Password strength is checked by the caller.

        Returns:
            uid of the user whose password changed

        Raises:
            NotFoundException: If the code is invalid or expired, or its
                user no longer exists
        """
        with self.kv.atomic():
            token = self.validate(code)
            if not self.user_repo.update_password(token.user_id, new_password):
                raise NotFoundException("User not found")
            removed = self.repo.delete_by_code(code)

        logger.info("Password reset for user %s (%d code(s) consumed)", token.user_id, removed)
        return token.user_id

    def purge_expired(self) -> int:
        """Drop expired tokens; returns how many were removed"""
        removed = self.repo.delete_expired(self.clock())
        if removed:
            logger.info("Purged %d expired reset code(s)", removed)
        return removed
