"""Service lifecycle CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.product_api.runtime.context import get_config

from .utils import console

server_app = typer.Typer(help="Run the HTTP service and manage its store")


@server_app.command(name="start")
def start_server(
    host: str | None = typer.Option(None, help="Host to bind (default from config)"),
    port: int | None = typer.Option(None, help="Port to bind (default from config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    Start the product API server with uvicorn.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Product API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.product_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,  # Request logging middleware covers access logs
    )


@server_app.command(name="init-db")
def init_database() -> None:
    """Create the product table if it does not exist."""
    from src.product_api.runtime.init_db import init_db

    database_service = init_db()
    database_service.dispose()
    console.print(
        f"[green]Database ready at {get_config().database.connection_string}[/green]"
    )


@server_app.command(name="show-config")
def show_config() -> None:
    """Print the effective configuration."""
    config = get_config()

    table = Table(title="Effective configuration")
    table.add_column("Section", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Value", style="yellow")

    for section, values in config.model_dump().items():
        for key, value in values.items():
            table.add_row(section, key, str(value))

    console.print(table)
