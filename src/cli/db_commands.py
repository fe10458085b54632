"""Database CLI commands."""

import typer
from rich.panel import Panel
from sqlalchemy.exc import SQLAlchemyError

from src.app.runtime.context import get_config

from .utils import console

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command(name="init")
def init(
    database_url: str | None = typer.Option(
        None, "--database-url", help="Override the configured database URL"
    ),
) -> None:
    """Create the products table if it does not exist."""
    from src.app.runtime.config.config_data import ConfigData, DatabaseConfig
    from src.app.runtime.context import with_context
    from src.app.runtime.init_db import init_db

    override = (
        ConfigData(database=DatabaseConfig(url=database_url)) if database_url else None
    )

    with with_context(override):
        url = get_config().database.url
        console.print(Panel.fit(f"Initializing database at [cyan]{url}[/cyan]"))
        try:
            init_db()
        except SQLAlchemyError as e:
            console.print(f"[red]❌ Database initialization failed: {e}[/red]")
            raise typer.Exit(1) from e

    console.print("[green]✅ Tables created[/green]")


@db_app.command(name="check")
def check() -> None:
    """Check that the configured database answers."""
    from src.app.core.services import DbSessionService

    service = DbSessionService()
    try:
        healthy = service.health_check()
    finally:
        service.dispose()

    if not healthy:
        console.print("[red]❌ Database is not reachable[/red]")
        raise typer.Exit(1)
    console.print("[green]✅ Database is reachable[/green]")
