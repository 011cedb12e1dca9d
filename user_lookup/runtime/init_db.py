"""Database initialization script."""

from user_lookup.core.services import DbManageService, DbSessionService


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    DbManageService(database_service or DbSessionService()).create_all()


if __name__ == "__main__":
    init_db()
