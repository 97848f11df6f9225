"""Entity package: Fruit."""

from .entity import Fruit, FruitCreate
from .repository import FruitRepository
from .table import FruitTable

__all__ = ["Fruit", "FruitCreate", "FruitRepository", "FruitTable"]
