"""Fruit repository for data access operations."""

from datetime import UTC, datetime

from sqlmodel import Session, select

from .entity import Fruit
from .table import FruitTable


class FruitRepository:
    """Data-access layer for fruits."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, fruit_id: str) -> Fruit | None:
        row = self._session.get(FruitTable, fruit_id)
        if row is None:
            return None
        return Fruit.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Fruit]:
        rows = self._session.exec(select(FruitTable)).all()
        return [Fruit.model_validate(row, from_attributes=True) for row in rows]

    def create(self, fruit: Fruit) -> Fruit:
        row = FruitTable(**fruit.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Fruit.model_validate(row, from_attributes=True)

    def update(self, fruit: Fruit) -> Fruit:
        row = self._session.get(FruitTable, fruit.id)
        if row is None:
            raise ValueError(f"Fruit with id {fruit.id} not found")

        row.name = fruit.name
        row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Fruit.model_validate(row, from_attributes=True)

    def delete(self, fruit_id: str) -> bool:
        row = self._session.get(FruitTable, fruit_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
