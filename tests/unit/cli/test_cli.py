"""Unit tests for the command line interface."""

from pathlib import Path

from typer.testing import CliRunner

from src.cli import app
from src.product_api.core.services import DbSessionService
from src.product_api.entities.service.product import Product, ProductRepository
from src.product_api.runtime.config.config_data import ConfigData, DatabaseConfig
from src.product_api.runtime.context import with_context

runner = CliRunner()


def file_config(db_path: Path) -> ConfigData:
    return ConfigData(database=DatabaseConfig(url=f"sqlite:///{db_path}"))


class TestServerCommands:
    def test_init_db_creates_store(self, tmp_path: Path):
        db_path = tmp_path / "product.db"

        with with_context(file_config(db_path)):
            result = runner.invoke(app, ["server", "init-db"])

        assert result.exit_code == 0
        assert "Database ready" in result.output
        assert db_path.exists()

    def test_init_db_fails_for_unopenable_store(self, tmp_path: Path):
        with with_context(file_config(tmp_path / "nope" / "product.db")):
            result = runner.invoke(app, ["server", "init-db"])

        assert result.exit_code == 1

    def test_show_config(self):
        result = runner.invoke(app, ["server", "show-config"])

        assert result.exit_code == 0
        assert "upsert_on_update" in result.output


class TestProductCommands:
    def test_list_empty(self, tmp_path: Path):
        with with_context(file_config(tmp_path / "product.db")):
            result = runner.invoke(app, ["products", "list"])

        assert result.exit_code == 0
        assert "No active products found" in result.output

    def test_list_products(self, tmp_path: Path):
        config = file_config(tmp_path / "product.db")

        with with_context(config):
            result = runner.invoke(app, ["server", "init-db"])
            assert result.exit_code == 0

            service = DbSessionService(config.database)
            with service.session_scope() as session:
                repo = ProductRepository(session)
                repo.create(Product(name="Listed", price=2.5, stock_quantity=3))
                hidden = repo.create(Product(name="Hidden"))
                repo.delete(hidden.id)
            service.dispose()

            result = runner.invoke(app, ["products", "list"])

        assert result.exit_code == 0
        assert "Listed" in result.output
        assert "Hidden" not in result.output
