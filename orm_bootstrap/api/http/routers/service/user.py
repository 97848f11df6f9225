"""User API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from orm_bootstrap.api.http.deps import get_db_session
from orm_bootstrap.entities.core.user import User, UserCreate, UserRepository

router = APIRouter()


@router.post("/", response_model=User, status_code=201)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_db_session),
) -> User:
    """Create a new user."""
    repository = UserRepository(session)
    created_user = repository.create(User(**user.model_dump()))
    session.commit()
    return created_user


@router.get("/{item_id}", response_model=User)
def get_user(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> User:
    """Get a user by ID."""
    repository = UserRepository(session)
    user = repository.get(item_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/{item_id}", response_model=User)
def update_user(
    item_id: str,
    user_update: User,
    session: Session = Depends(get_db_session),
) -> User:
    """Update a user."""
    repository = UserRepository(session)

    # The path wins over any id in the body
    user_update.id = item_id

    try:
        updated_user = repository.update(user_update)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    session.commit()
    return updated_user


@router.delete("/{item_id}")
def delete_user(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> dict[str, str]:
    """Delete a user."""
    repository = UserRepository(session)
    if not repository.delete(item_id):
        raise HTTPException(status_code=404, detail="User not found")
    session.commit()
    return {"message": "User deleted successfully"}


@router.get("/", response_model=list[User])
def list_users(
    session: Session = Depends(get_db_session),
) -> list[User]:
    """List all users."""
    return UserRepository(session).list_all()
