"""Core services exports."""

from .database.db_bootstrap import (
    SEED_RECORDS,
    BootstrapError,
    BootstrapResult,
    DatabaseBootstrap,
    bootstrap_database,
)
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Database Services
    "DbSessionService",
    "DbManageService",
    # Bootstrap
    "DatabaseBootstrap",
    "BootstrapError",
    "BootstrapResult",
    "SEED_RECORDS",
    "bootstrap_database",
]
