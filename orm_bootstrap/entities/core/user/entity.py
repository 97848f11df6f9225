"""User domain entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from orm_bootstrap.entities.core._base import Entity


class User(Entity):
    """User entity representing a person in the system.

    No attribute is required; the schema declares types only.
    """

    first_name: str | None = Field(default=None, description="User's first name")
    last_name: str | None = Field(default=None, description="User's last name")
    email: str | None = Field(default=None, description="User's email address")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
        )

    def __hash__(self) -> int:
        return hash((self.id, self.first_name, self.last_name, self.email))


class UserCreate(BaseModel):
    """Request body for creating a user; id and timestamps are assigned on insert."""

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
