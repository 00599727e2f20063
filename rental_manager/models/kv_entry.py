from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from rental_manager.models.base import Base, TimestampMixin


class KeyValueEntry(Base, TimestampMixin):
    """
    One persisted key of the directory store.

    Each table (users, rooms, registrations, payments, reset tokens) and the
    session pointer lives under its own key as a JSON document.
    """

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key='{self.key}', size={len(self.value)})>"
