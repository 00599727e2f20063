from datetime import datetime

from rental_manager.repositories.json_table_repository import JsonTableRepository
from rental_manager.schemas.reset_schemas import ResetToken


class ResetTokenRepository(JsonTableRepository[ResetToken]):
    """Repository for password reset tokens"""

    key = "passwordResets"
    record_type = ResetToken

    def create(self, token: ResetToken) -> ResetToken:
        """Append a token; earlier tokens for the same user stay valid"""
        return self.append(token)

    def find_live(self, code: str, now: datetime) -> ResetToken | None:
        """First token with this code that has not expired at now"""
        return next((t for t in self.get_all() if t.code == code and t.is_live(now)), None)

    def delete_by_code(self, code: str) -> int:
        """
        Delete every token carrying code.

        Returns:
            Number of tokens removed
        """
        tokens = self.get_all()
        kept = [t for t in tokens if t.code != code]
        self.save_all(kept)
        return len(tokens) - len(kept)

    def delete_expired(self, now: datetime) -> int:
        tokens = self.get_all()
        kept = [t for t in tokens if t.is_live(now)]
        if len(kept) != len(tokens):
            self.save_all(kept)
        return len(tokens) - len(kept)
