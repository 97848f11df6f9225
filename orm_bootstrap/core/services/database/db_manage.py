"""Storage structure management for the declared schemas."""

from collections.abc import Mapping

from loguru import logger
from sqlalchemy import Table, inspect
from sqlmodel import SQLModel

from orm_bootstrap.core.services.database.db_session import DbSessionService
from orm_bootstrap.entities import SCHEMAS, EntityTable


class DbManageService:
    """Drop and create the tables backing a set of schemas.

    Only the tables of the given schemas are touched, never the whole
    SQLModel metadata.
    """

    def __init__(
        self,
        database_service: DbSessionService,
        schemas: Mapping[str, type[EntityTable]] = SCHEMAS,
    ):
        self._database_service = database_service
        self._schemas = dict(schemas)

    @property
    def tables(self) -> list[Table]:
        return [schema.__table__ for schema in self._schemas.values()]  # type: ignore[attr-defined]

    def drop_all(self) -> None:
        """Drop every declared table that exists."""
        SQLModel.metadata.drop_all(self._database_service.engine, tables=self.tables)
        logger.info("Dropped tables: {}", ", ".join(t.name for t in self.tables))

    def create_all(self) -> None:
        """Create every declared table that does not exist yet."""
        SQLModel.metadata.create_all(self._database_service.engine, tables=self.tables)
        logger.info("Database initialized with tables: {}", ", ".join(t.name for t in self.tables))

    def table_names(self) -> set[str]:
        """Names of the tables currently present in storage."""
        return set(inspect(self._database_service.engine).get_table_names())

    def column_names(self, entity_name: str) -> list[str]:
        """Names of the stored columns backing ``entity_name``."""
        table = self._schemas[entity_name].__table__  # type: ignore[attr-defined]
        columns = inspect(self._database_service.engine).get_columns(table.name)
        return [column["name"] for column in columns]
