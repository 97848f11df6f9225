"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from orm_bootstrap.api.http.app_data import ApplicationDependencies
from orm_bootstrap.core.services import DbManageService
from orm_bootstrap.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe; returns 200 as long as the process is running."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe; 503 unless the database answers a round trip."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    database_service = app_deps.database_service

    db_healthy = database_service.health_check()
    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": get_config().app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": database_service.engine.dialect.name,
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
async def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database health with the state of every declared table."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    database_service = app_deps.database_service

    try:
        existing = DbManageService(database_service, app_deps.schemas).table_names()
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )

    return {
        "status": "healthy",
        "type": database_service.engine.dialect.name,
        "schemas": {
            name: schema.__tablename__ in existing  # type: ignore[attr-defined]
            for name, schema in app_deps.schemas.items()
        },
    }
