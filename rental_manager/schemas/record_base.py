"""Base class for records persisted as camelCase JSON."""

from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredRecord(BaseModel):
    """
    A row of one of the directory store's JSON tables.

    Attributes are snake_case in Python; on disk every field uses the
    camelCase key the stored documents have always used.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_storage(self) -> dict:
        """Serialize to the JSON-ready camelCase mapping"""
        return self.model_dump(by_alias=True, mode="json")


def ensure_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so comparisons with the clock work"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
