"""Product store inspection CLI commands."""

import typer
from rich.table import Table

from src.product_api.entities.service.product import ProductRepository
from src.product_api.runtime.init_db import init_db

from .utils import console

products_app = typer.Typer(help="Inspect products stored in the database")


@products_app.command("list")
def list_products() -> None:
    """List all active products."""
    database_service = init_db()
    try:
        with database_service.session_scope() as session:
            products = ProductRepository(session).list_active()
    finally:
        database_service.dispose()

    if not products:
        console.print("[yellow]No active products found[/yellow]")
        return

    table = Table(title="Active products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Price", style="blue")
    table.add_column("Stock", style="magenta")
    table.add_column("Updated", style="yellow")

    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            f"{product.price:.2f}",
            str(product.stock_quantity),
            product.updated_at or "",
        )

    console.print(table)
