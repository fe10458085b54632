"""Database initialization script."""

from src.app.core.services import DbSessionService


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    (database_service or DbSessionService()).create_all()


if __name__ == "__main__":
    init_db()
