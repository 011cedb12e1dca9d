"""User domain entity."""

from datetime import UTC, datetime

from pydantic import AwareDatetime, BaseModel, Field, NaiveDatetime, field_validator

# Marks a field as deprecated in the generated JSON schema / OpenAPI document
_DEPRECATED = {"deprecated": True}


class User(BaseModel):
    """User entity representing a person in the system.

    ``instant`` is the canonical point in time for a user. ``timestamp``,
    ``local_date_time`` and ``zoned_date_time`` are older representations of
    the same concept kept for compatibility; they are independently settable
    and nothing reconciles them with ``instant`` or with each other.
    """

    id: int | None = Field(
        default=None, description="Identifier assigned by storage on insert"
    )
    email: str | None = Field(default=None, description="User's email address")
    name: str | None = Field(default=None, description="User's name")

    timestamp: NaiveDatetime | None = Field(
        default=None,
        description="Legacy point in time. Deprecated: use instant.",
        json_schema_extra=_DEPRECATED,
    )
    local_date_time: NaiveDatetime | None = Field(
        default=None,
        serialization_alias="localDateTime",
        description="Point in time without timezone. Deprecated: use instant.",
        json_schema_extra=_DEPRECATED,
    )
    zoned_date_time: AwareDatetime | None = Field(
        default=None,
        serialization_alias="zonedDateTime",
        description="Point in time with UTC offset. Deprecated: use instant.",
        json_schema_extra=_DEPRECATED,
    )
    instant: datetime | None = Field(
        default=None, description="Absolute point in time, always UTC"
    )

    @field_validator("instant")
    @classmethod
    def _normalize_instant(cls, value: datetime | None) -> datetime | None:
        # Naive values are taken to already be UTC
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
