"""Database initialization script."""

from orm_bootstrap.api.utils.app_startup import configure_logging
from orm_bootstrap.core.services import DbSessionService, bootstrap_database
from orm_bootstrap.runtime.context import get_config


def init_db() -> None:
    """Drop, recreate and seed the configured database."""
    main_config = get_config()
    configure_logging()

    database_service = DbSessionService(main_config.database)
    try:
        bootstrap_database(database_service, seed=main_config.bootstrap.seed)
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
