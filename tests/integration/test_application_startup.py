"""Integration tests for application lifecycle and startup behavior."""

import asyncio
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from src.product_api.api.http.app import create_app, shutdown, startup
from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.core.services import DbSessionService
from src.product_api.runtime.config.config_data import ConfigData, DatabaseConfig
from src.product_api.runtime.context import get_config, with_context
from src.product_api.runtime.init_db import init_db


def file_config(db_path: Path) -> ConfigData:
    return ConfigData(database=DatabaseConfig(url=f"sqlite:///{db_path}"))


class TestApplicationStartup:
    """Test application startup and store initialization."""

    def test_startup_creates_store_and_schema(self, tmp_path: Path):
        db_path = tmp_path / "product.db"
        application = create_app()

        with with_context(file_config(db_path)):
            asyncio.run(startup(application))

        deps: ApplicationDependencies = application.state.app_dependencies
        try:
            assert db_path.exists()
            assert deps.database_service.health_check() is True
            assert inspect(deps.database_service.engine).has_table("product")
            assert deps.config.database.url == f"sqlite:///{db_path}"
        finally:
            asyncio.run(shutdown(application))

    def test_startup_is_idempotent_on_existing_store(self, tmp_path: Path):
        db_path = tmp_path / "product.db"
        first = init_db(DbSessionService(file_config(db_path).database))
        first.dispose()

        second = init_db(DbSessionService(file_config(db_path).database))
        try:
            assert inspect(second.engine).has_table("product")
        finally:
            second.dispose()

    def test_unopenable_store_terminates_process(self, tmp_path: Path):
        db_path = tmp_path / "missing" / "dir" / "product.db"

        with pytest.raises(SystemExit) as exc_info:
            init_db(DbSessionService(file_config(db_path).database))

        assert exc_info.value.code == 1

    def test_startup_keeps_injected_dependencies(self, database_service: DbSessionService):
        deps = ApplicationDependencies(config=get_config(), database_service=database_service)
        application = create_app(deps)

        asyncio.run(startup(application))

        assert application.state.app_dependencies is deps

    def test_data_survives_restart(self, tmp_path: Path):
        db_path = tmp_path / "product.db"

        with with_context(file_config(db_path)):
            first = create_app()
            asyncio.run(startup(first))
            created = TestClient(first).post("/products", json={"name": "Persisted"})
            asyncio.run(shutdown(first))

            second = create_app()
            asyncio.run(startup(second))
            response = TestClient(second).get(f"/products/{created.json()['data']['id']}")
            asyncio.run(shutdown(second))

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Persisted"
