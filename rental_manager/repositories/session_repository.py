import json
import logging

from pydantic import ValidationError
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.schemas.user_schemas import AuthUser

logger = logging.getLogger(__name__)


class SessionRepository:
    """Repository for the single stored session pointer"""

    key = "rentalUser"

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def get(self) -> AuthUser | None:
        """
        Read the signed-in user.

        A pointer that cannot be parsed counts as signed out.
        """
        raw = self.kv.get(self.key)
        if raw is None:
            return None
        try:
            return AuthUser.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Ignoring unreadable session pointer")
            return None

    def set(self, user: AuthUser) -> None:
        self.kv.set(self.key, json.dumps(user.to_storage()))

    def clear(self) -> None:
        self.kv.remove(self.key)
