"""Entity: Fruit."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from orm_bootstrap.entities.core._base import Entity


class Fruit(Entity):
    """Fruit entity served by the fruits CRUD API."""

    name: str | None = Field(default=None, description="Name")

    def __eq__(self, other: Any) -> bool:
        """Compare fruits by business attributes, ignoring timestamps."""
        if not isinstance(other, Fruit):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))


class FruitCreate(BaseModel):
    """Request body for creating a fruit; id and timestamps are assigned on insert."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
