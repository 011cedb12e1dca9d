from datetime import datetime

from sqlmodel import Field, SQLModel

from user_lookup.core.rows.types import LocalDateTime, UTCDateTime


class UserRow(SQLModel, table=True):
    """Persistence model for users.

    Only the primary key is indexed. ``timestamp`` and ``local_date_time``
    are stored as naive datetimes; ``zoned_date_time`` and ``instant`` are
    stored normalized to UTC.
    """

    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    email: str | None = None
    name: str | None = None
    timestamp: datetime | None = Field(default=None, sa_type=LocalDateTime)
    local_date_time: datetime | None = Field(default=None, sa_type=LocalDateTime)
    zoned_date_time: datetime | None = Field(default=None, sa_type=UTCDateTime)
    instant: datetime | None = Field(default=None, sa_type=UTCDateTime)
