"""Server CLI commands."""

import typer
from rich.panel import Panel

from src.app.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the Products API with uvicorn.

    Host and port default to the values in config.yaml.
    """
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Products API[/bold green] on {bind_host}:{bind_port}",
            border_style="green",
        )
    )

    uvicorn.run(
        "src.app.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )
