from rental_manager.repositories.json_table_repository import JsonTableRepository
from rental_manager.schemas.user_schemas import User


class UserRepository(JsonTableRepository[User]):
    """Repository for the identity table"""

    key = "allUsers"
    record_type = User

    def get_by_uid(self, uid: str) -> User | None:
        """Get user by uid"""
        return next((u for u in self.get_all() if u.uid == uid), None)

    def get_by_email(self, email: str) -> User | None:
        """Get user by exact email"""
        return next((u for u in self.get_all() if u.email == email), None)

    def get_by_phone(self, phone: str) -> User | None:
        """Get the first user whose phone matches exactly"""
        return next((u for u in self.get_all() if u.phone == phone), None)

    def get_by_credentials(self, email: str, password: str) -> User | None:
        """
        Get user by exact (email, password) match.

        Both comparisons are case-sensitive.
        """
        return next(
            (u for u in self.get_all() if u.email == email and u.password == password),
            None,
        )

    def create(self, user: User) -> User:
        """Append a new user"""
        return self.append(user)

    def update_password(self, uid: str, new_password: str) -> bool:
        """
        Overwrite one user's password in place.

        Returns:
            False if no user has this uid
        """
        users = self.get_all()
        for user in users:
            if user.uid == uid:
                user.password = new_password
                self.save_all(users)
                return True
        return False
