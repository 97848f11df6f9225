"""Database engine and session factory shared by the bootstrap, API and CLI."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, create_engine

from orm_bootstrap.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Connection handle built from a database configuration.

    One instance is created per process entry point and passed explicitly to
    the bootstrap sequence, the FastAPI dependencies and the CLI.
    """

    def __init__(self, config: DatabaseConfig):
        self._config = config
        url = config.connection_string

        engine_kwargs: dict[str, Any] = {
            "echo": config.echo,
            "connect_args": self._get_connect_args(config),
        }
        if config.is_memory:
            # Every session must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool

        logger.info(
            "Initializing database engine for {}",
            make_url(url).render_as_string(hide_password=True),
        )
        self._engine = create_engine(url, **engine_kwargs)

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        if config.is_sqlite:
            return {"check_same_thread": False, "timeout": 20}
        return {}

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Commit on success, roll back and re-raise on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise
        finally:
            db.close()

    def verify_connection(self) -> None:
        """Perform a round trip against the database.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database cannot be reached.
        """
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Unable to connect to the database: {}", e)
            raise
        logger.info("Connection has been established successfully.")

    def health_check(self) -> bool:
        """Non-raising variant of ``verify_connection`` for health probes."""
        try:
            self.verify_connection()
        except Exception:
            return False
        return True

    def dispose(self) -> None:
        """Release every pooled connection held by the engine."""
        self._engine.dispose()
