"""Persistent key-value substrate backed by one SQLAlchemy table."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.orm import Session
from rental_manager.models.kv_entry import KeyValueEntry


class KeyValueStore:
    """
    String-to-string store with get/set/remove semantics.

    Outside ``atomic()`` every write is committed immediately, so the last
    write wins. Inside ``atomic()`` writes are only flushed, and the
    outermost block commits them together or rolls all of them back.
    """

    def __init__(self, db: Session):
        self.db = db
        self._depth = 0

    def get(self, key: str) -> str | None:
        """Get the stored value for key, or None if absent"""
        entry = self.db.get(KeyValueEntry, key)
        return entry.value if entry is not None else None

    def contains(self, key: str) -> bool:
        return self.db.get(KeyValueEntry, key) is not None

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under key"""
        entry = self.db.get(KeyValueEntry, key)
        if entry is None:
            self.db.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        self._write()

    def remove(self, key: str) -> None:
        """Delete key; removing an absent key is a no-op"""
        entry = self.db.get(KeyValueEntry, key)
        if entry is None:
            return
        self.db.delete(entry)
        self._write()

    def keys(self) -> list[str]:
        """All stored keys, sorted"""
        return list(self.db.scalars(select(KeyValueEntry.key).order_by(KeyValueEntry.key)))

    @contextmanager
    def atomic(self) -> Iterator["KeyValueStore"]:
        """
        Group several writes into one commit.

        Blocks nest; only the outermost one commits. Any exception raised
        inside the block rolls back every write made since it was entered
        and is re-raised.
        """
        self._depth += 1
        try:
            yield self
        except BaseException:
            self.db.rollback()
            raise
        else:
            if self._depth == 1:
                self.db.commit()
        finally:
            self._depth -= 1

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    def _write(self) -> None:
        if self._depth == 0:
            self.db.commit()
        else:
            self.db.flush()  # Visible to later reads, committed by atomic()
