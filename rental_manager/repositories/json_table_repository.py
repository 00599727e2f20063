"""Base repository for a JSON array stored under one key."""

import json
import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError
from rental_manager.core.exceptions import StorageCorruptionException
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.schemas.record_base import StoredRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=StoredRecord)

QUARANTINE_PREFIX = "quarantine:"


def quarantine_key(key: str) -> str:
    return f"{QUARANTINE_PREFIX}{key}"


class JsonTableRepository(Generic[RecordT]):
    """
    Reads and writes a whole table at once.

    Every call loads the full array, works on it in memory and writes the
    full array back. Rows that fail schema validation are moved aside to
    ``quarantine:<key>`` instead of failing the read; a document that is
    not a JSON array is quarantined whole and the table reads as empty.
    """

    key: ClassVar[str]
    record_type: ClassVar[type[StoredRecord]]

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def exists(self) -> bool:
        """Whether the table key is present, regardless of its contents"""
        return self.kv.contains(self.key)

    def get_all(self) -> list[RecordT]:
        """Load every valid row in table order"""
        raw = self.kv.get(self.key)
        if raw is None:
            return []

        try:
            items = self._decode(raw)
        except StorageCorruptionException as e:
            logger.warning("%s; reading table as empty", e)
            self._quarantine([raw], e.reason)
            return []

        records: list[RecordT] = []
        rejected: list[Any] = []
        for index, item in enumerate(items):
            try:
                records.append(self.record_type.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "Rejected row %d of '%s': %d validation error(s)",
                    index,
                    self.key,
                    e.error_count(),
                )
                rejected.append(item)

        if rejected:
            self._quarantine(rejected, "row failed validation")
        return records

    def save_all(self, records: list[RecordT]) -> None:
        """Replace the stored table with records"""
        self.kv.set(self.key, json.dumps([record.to_storage() for record in records]))

    def append(self, record: RecordT) -> RecordT:
        records = self.get_all()
        records.append(record)
        self.save_all(records)
        return record

    def seed(self, records: list[RecordT]) -> bool:
        """
        Write records only if the table key is absent.

        Returns:
            True if the table was written
        """
        if self.exists():
            return False
        self.save_all(records)
        return True

    def get_quarantined(self) -> list[dict]:
        """Rows and documents set aside from this table"""
        raw = self.kv.get(quarantine_key(self.key))
        if raw is None:
            return []
        try:
            entries = json.loads(raw)
        except json.JSONDecodeError:
            return []
        return entries if isinstance(entries, list) else []

    def _decode(self, raw: str) -> list[Any]:
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageCorruptionException(self.key, f"invalid JSON ({e.msg})") from e
        if not isinstance(items, list):
            raise StorageCorruptionException(self.key, f"expected an array, found {type(items).__name__}")
        return items

    def _quarantine(self, items: list[Any], reason: str) -> None:
        entries = self.get_quarantined()
        known = [entry.get("entry") for entry in entries if isinstance(entry, dict)]
        added = 0
        for item in items:
            # Re-reading a bad table must not pile up copies
            if item in known:
                continue
            entries.append({"entry": item, "reason": reason})
            known.append(item)
            added += 1
        if added:
            self.kv.set(quarantine_key(self.key), json.dumps(entries))
            logger.warning("Quarantined %d entr(ies) from '%s'", added, self.key)
