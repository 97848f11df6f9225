import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base domain model with auto-generated UUID identifier and timestamps."""

    id: str = PydanticField(
        default_factory=_new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=_utc_now)
    updated_at: datetime = PydanticField(default_factory=_utc_now)


class EntityTable(SQLModel, table=False):
    """Base schema descriptor shared by every table.

    Subclasses declared with ``table=True`` are registered in the SQLModel
    metadata on import; nothing is written to storage until the bootstrap
    sequence or ``create_all`` runs.
    """

    id: str = Field(
        primary_key=True,
        default_factory=_new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(
        default_factory=_utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
