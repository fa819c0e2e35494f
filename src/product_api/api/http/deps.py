from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.entities.service.product import ProductRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies attached to the running application."""
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield a database session scoped to the request."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(
    session: Session = Depends(get_db_session),
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> ProductRepository:
    products_config = app_deps.config.products
    return ProductRepository(
        session,
        upsert_on_update=products_config.upsert_on_update,
        auto_timestamps=products_config.auto_timestamps,
    )
