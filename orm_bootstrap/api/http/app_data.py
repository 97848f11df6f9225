from dataclasses import dataclass

from orm_bootstrap.core.services import DbSessionService
from orm_bootstrap.entities import EntityTable


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    schemas: dict[str, type[EntityTable]]
    # Set when the engine was created by the app lifespan and must be disposed with it
    owns_database: bool = False
