"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


def engine_options(config: ConfigData) -> dict[str, Any]:
    """Keyword arguments for `create_engine` matching the configured database."""
    database = config.database
    options: dict[str, Any] = {"echo": database.echo}

    if database.is_sqlite:
        # Sync handlers run in FastAPI's threadpool
        options["connect_args"] = {"check_same_thread": False, "timeout": 20}
        if database.is_in_memory:
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        pool_recycle=database.pool_recycle,
        pool_pre_ping=True,
    )
    if database.url.startswith("postgresql"):
        options["connect_args"] = {
            "application_name": f"products_api_{config.app.environment}",
            "connect_timeout": 30,
        }
    return options


class DbSessionService:
    """Owns the shared engine; hands out one session per unit of work."""

    def __init__(self, engine: Engine | None = None):
        if engine is None:
            config = get_config()
            if config.database.is_sqlite and config.app.environment == "production":
                logger.warning("Running the products API on SQLite in production")
            engine = create_engine(config.database.url, **engine_options(config))
            logger.info("Database engine created for {}", engine.url.get_backend_name())
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        """Create the products table if it does not exist yet."""
        from src.app.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database tables created")

    def get_session(self) -> Session:
        # Entities are copied out of rows after commit, so rows need not expire
        return Session(self._engine, expire_on_commit=False)

    def health_check(self) -> bool:
        """True when the database answers `SELECT 1`."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False
        return True

    def get_pool_status(self) -> dict[str, int]:
        pool = self._engine.pool
        # StaticPool and NullPool have no counters
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
