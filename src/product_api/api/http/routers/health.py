"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=None)
def health(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Liveness and database connectivity check.

    Returns 200 when the product store answers, 503 otherwise.
    """
    db_healthy = app_deps.database_service.health_check()
    response = {
        "status": "healthy" if db_healthy else "unhealthy",
        "service": app_deps.config.app.name,
        "database": "healthy" if db_healthy else "unhealthy",
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response
