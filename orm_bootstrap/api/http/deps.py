"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from orm_bootstrap.api.http.app_data import ApplicationDependencies
from orm_bootstrap.core.services import DbSessionService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed after the request."""
    with get_database_service(request).get_session() as session:
        yield session
