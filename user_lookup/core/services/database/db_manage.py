from loguru import logger
from sqlmodel import SQLModel

from user_lookup.core.services.database.db_session import DbSessionService


class DbManageService:
    """Schema management on top of a :class:`DbSessionService` engine."""

    def __init__(self, database_service: DbSessionService):
        self._engine = database_service.engine

    def create_all(self) -> None:
        """Create all database tables."""
        from user_lookup.core.rows.user_row import UserRow  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        from user_lookup.core.rows.user_row import UserRow  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
