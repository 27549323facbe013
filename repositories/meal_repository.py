"""
Meal Repository - Data access layer for the meal log
"""

from datetime import date
from typing import List, Sequence, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal, Food, Category


class MealRepository(BaseRepository[Meal]):
    """Repository for meal log data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def add_meals(
        self, food_ids: Sequence[int], category_id: int, day: date
    ) -> List[Meal]:
        """
        Stage one meal row per food id, in order.

        Rows are flushed (ids and defaults assigned) but not committed; the
        caller owns the transaction.
        """
        meals = [
            Meal(food_id=food_id, category_id=category_id, date=day)
            for food_id in food_ids
        ]
        self.db.add_all(meals)
        self.db.flush()
        return meals

    def _joined(self, category_name: str, day: date):
        return (
            self.db.query(Meal)
            .join(Category, Meal.category_id == Category.id)
            .join(Food, Meal.food_id == Food.id)
            .filter(Category.name == category_name, Meal.date == day)
        )

    def find_views(self, category_name: str, day: date) -> list:
        """Meal rows for a category name and day, joined with food and category"""
        return (
            self._joined(category_name, day)
            .with_entities(
                Meal.id,
                Meal.food_id,
                Meal.category_id,
                Meal.date,
                Meal.created_at,
                Food.name.label("food_name"),
                Food.calories.label("calories"),
                Category.name.label("category_name"),
            )
            .order_by(Meal.id)
            .all()
        )

    def calorie_totals(self, category_name: str, day: date) -> Tuple[int, int]:
        """(meal count, calorie sum) for a category name and day"""
        row = (
            self._joined(category_name, day)
            .with_entities(
                func.count(Meal.id).label("meal_count"),
                func.coalesce(func.sum(Food.calories), 0).label("total_calories"),
            )
            .one()
        )
        return int(row.meal_count), int(row.total_calories)

    def delete_by_id(self, meal_id: int) -> bool:
        """Delete meal by ID"""
        return self.delete(meal_id)
