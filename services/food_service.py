from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Food
from domain.schemas.food_schemas import FoodUpdate
from repositories import FoodRepository
from services.base import store_guard
from app.exceptions import NotFoundError

logger = logging.getLogger("mealtrack.foods")


class FoodService:
    @staticmethod
    def list_foods(db: Session) -> List[Food]:
        with store_guard(db, "list foods"):
            return FoodRepository(db).get_all()

    @staticmethod
    def get_food(db: Session, food_id: int) -> Food:
        with store_guard(db, "get food"):
            food = FoodRepository(db).get_by_id(food_id)
        if not food:
            raise NotFoundError(f"Food {food_id} not found", details={"food_id": food_id})
        return food

    @staticmethod
    def create_food(db: Session, name: str, calories: int) -> Food:
        """Insert a new food; names are not unique"""
        with store_guard(db, "create food"):
            food = FoodRepository(db).create_food(name=name, calories=calories)
        logger.info("Created food %s (%s, %d kcal)", food.id, food.name, food.calories)
        return food

    @staticmethod
    def update_food(db: Session, food_id: int, update: FoodUpdate) -> Food:
        """
        Partially update a food.

        Only non-empty fields are written: ``{"name": "", "calories": 1000}``
        keeps the current name and sets calories to 1000.

        Raises:
            NotFoundError: If the food does not exist
        """
        repo = FoodRepository(db)
        with store_guard(db, "update food"):
            food = repo.get_by_id(food_id)
            if not food:
                raise NotFoundError(
                    f"Food {food_id} not found", details={"food_id": food_id}
                )
            changes = update.changes()
            if changes:
                food = repo.update_fields(food, **changes)
                logger.info("Updated food %s: %s", food_id, sorted(changes))
            else:
                logger.debug("No changes for food %s", food_id)
        return food

    @staticmethod
    def delete_food(db: Session, food_id: int) -> None:
        """
        Delete a food.

        Raises:
            NotFoundError: If the food does not exist
            ConflictError: If meals still reference the food
        """
        with store_guard(db, "delete food"):
            removed = FoodRepository(db).delete_by_id(food_id)
        if not removed:
            raise NotFoundError(f"Food {food_id} not found", details={"food_id": food_id})
        logger.info("Deleted food %s", food_id)
