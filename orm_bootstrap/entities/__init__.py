"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model (the schema descriptor)
- repository.py: Data access layer

Importing this module declares the schemas against the SQLModel metadata. It
never touches storage; tables are only dropped, created or written by the
bootstrap sequence.
"""

from .core._base import EntityTable
from .core.user import User, UserRepository, UserTable
from .service.fruit import Fruit, FruitRepository, FruitTable

# Schema handles exported to downstream code, keyed by entity name
SCHEMAS: dict[str, type[EntityTable]] = {
    "User": UserTable,
    "Fruit": FruitTable,
}

__all__ = [
    "SCHEMAS",
    "EntityTable",
    "User",
    "UserTable",
    "UserRepository",
    "Fruit",
    "FruitTable",
    "FruitRepository",
]
