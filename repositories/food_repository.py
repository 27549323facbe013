"""
Food Repository - Data access layer for the food catalog
"""

from typing import Iterable, Set
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Food
from app.exceptions import ConflictError


class FoodRepository(BaseRepository[Food]):
    """Repository for food data access"""

    def __init__(self, db: Session):
        super().__init__(db, Food)

    def create_food(self, name: str, calories: int) -> Food:
        """Create a new food"""
        return self.create(Food(name=name, calories=calories))

    def update_fields(self, food: Food, **changes) -> Food:
        """Apply the given column values to an existing food"""
        for key, value in changes.items():
            setattr(food, key, value)
        return self.update(food)

    def delete_by_id(self, food_id: int) -> bool:
        """Delete a food; a food still referenced by meals cannot be removed"""
        food = self.get_by_id(food_id)
        if not food:
            return False
        try:
            self.db.delete(food)
            self.db.commit()
            return True
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                f"Food {food_id} is referenced by logged meals",
                details={"food_id": food_id},
            ) from e

    def existing_ids(self, food_ids: Iterable[int]) -> Set[int]:
        """Subset of ``food_ids`` present in the catalog"""
        wanted = set(food_ids)
        if not wanted:
            return set()
        rows = self.db.query(Food.id).filter(Food.id.in_(wanted)).all()
        return {r.id for r in rows}
