"""Fruit database table model."""

from orm_bootstrap.entities.core._base import EntityTable


class FruitTable(EntityTable, table=True):
    """Database persistence model for fruits."""

    __tablename__ = "fruits"

    name: str | None = None
