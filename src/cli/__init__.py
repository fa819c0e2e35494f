"""Main CLI application module."""

import typer

from .product_commands import products_app
from .server_commands import server_app

# Create the main CLI application
app = typer.Typer(
    help="Product API CLI - run the service and inspect its store",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(server_app, name="server")
app.add_typer(products_app, name="products")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
