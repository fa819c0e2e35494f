"""Database initialization script."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.product_api.core.services.database.db_manage import DbManageService
from src.product_api.core.services.database.db_session import DbSessionService


def init_db(database_service: DbSessionService | None = None) -> DbSessionService:
    """Open the product store and create its tables.

    The store being unreachable is fatal: the error is logged and the process
    exits with status 1.
    """
    try:
        database_service = database_service or DbSessionService()
        DbManageService(database_service.engine).create_all()
    except SQLAlchemyError as e:
        logger.critical("Error connecting to database: {}", e)
        raise SystemExit(1) from e
    return database_service


if __name__ == "__main__":
    init_db()
