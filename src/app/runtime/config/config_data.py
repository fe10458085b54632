"""Pydantic models for the `config:` section of config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CORSConfig(BaseModel):
    """Origins, methods and headers the browser is allowed to use."""

    origins: list[str] = Field(default=["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "PUT", "DELETE"])
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Minimum level for every sink")
    format: Literal["json", "plain"] = Field(
        default="json", description="Format of the file sink"
    )
    file: str | None = Field(
        default="logs/app.log", description="Rotating log file; empty disables it"
    )
    max_size_mb: int = Field(default=10, description="Rotate the file at this size")
    backup_count: int = Field(default=5, description="Rotated files to keep")


class DatabaseConfig(BaseModel):
    """Where the products table lives and how connections to it are pooled."""

    url: str = Field(
        default="sqlite:///./products.db", description="SQLAlchemy database URL"
    )
    echo: bool = Field(default=False, description="Log every SQL statement")
    create_tables_on_startup: bool = Field(
        default=True, description="Create missing tables when the API starts"
    )
    # Pool settings are ignored for SQLite
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = Field(default=30, description="Seconds to wait for a connection")
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is replaced")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs that name no file, which live on one connection only."""
        return self.is_sqlite and (
            ":memory:" in self.url or self.url in ("sqlite://", "sqlite:///")
        )


class AppConfig(BaseModel):
    environment: Literal["development", "production", "test"] = "development"
    host: str = Field(default="localhost", description="Interface uvicorn binds to")
    port: int = Field(default=8000, description="Port uvicorn listens on")
    cors: CORSConfig = Field(default_factory=CORSConfig)


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    app: AppConfig = Field(default_factory=AppConfig)
