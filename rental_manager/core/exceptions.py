class RentalManagerException(Exception):
    """Base exception for the rental manager directory store"""

    pass


class NotFoundException(RentalManagerException):
    """Raised when a user, room, registration or reset token is missing"""

    pass


class ValidationException(RentalManagerException):
    """Raised when input fails a shape check"""

    pass


class ConflictException(RentalManagerException):
    """Raised when a write would break a stored invariant"""

    pass


class StorageCorruptionException(RentalManagerException):
    """Raised when a persisted table cannot be decoded"""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored table '{key}' is corrupt: {reason}")
        self.key = key
        self.reason = reason
