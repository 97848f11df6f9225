"""Fruit API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from orm_bootstrap.api.http.deps import get_db_session
from orm_bootstrap.entities.service.fruit import Fruit, FruitCreate, FruitRepository

router = APIRouter()


@router.post("/", response_model=Fruit, status_code=201)
def create_fruit(
    fruit: FruitCreate,
    session: Session = Depends(get_db_session),
) -> Fruit:
    """Create a new fruit."""
    repository = FruitRepository(session)
    created_fruit = repository.create(Fruit(**fruit.model_dump()))
    session.commit()
    return created_fruit


@router.get("/{item_id}", response_model=Fruit)
def get_fruit(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> Fruit:
    """Get a fruit by ID."""
    repository = FruitRepository(session)
    fruit = repository.get(item_id)
    if fruit is None:
        raise HTTPException(status_code=404, detail="Fruit not found")
    return fruit


@router.put("/{item_id}", response_model=Fruit)
def update_fruit(
    item_id: str,
    fruit_update: Fruit,
    session: Session = Depends(get_db_session),
) -> Fruit:
    """Update a fruit."""
    repository = FruitRepository(session)

    # The path wins over any id in the body
    fruit_update.id = item_id

    try:
        updated_fruit = repository.update(fruit_update)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    session.commit()
    return updated_fruit


@router.delete("/{item_id}")
def delete_fruit(
    item_id: str,
    session: Session = Depends(get_db_session),
) -> dict[str, str]:
    """Delete a fruit."""
    repository = FruitRepository(session)
    if not repository.delete(item_id):
        raise HTTPException(status_code=404, detail="Fruit not found")
    session.commit()
    return {"message": "Fruit deleted successfully"}


@router.get("/", response_model=list[Fruit])
def list_fruits(
    session: Session = Depends(get_db_session),
) -> list[Fruit]:
    """List all fruits."""
    return FruitRepository(session).list_all()
