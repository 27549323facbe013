from __future__ import annotations

import logging
from typing import List, Sequence

from sqlalchemy.orm import Session

from app.exceptions import (
    CategoryNotFoundError,
    FoodNotFoundError,
    NotFoundError,
    ServiceValidationError,
)
from domain.dates import DateInput, normalize_date
from domain.models import Meal
from domain.schemas.meal_schemas import MealSummary, MealView
from repositories import CategoryRepository, FoodRepository, MealRepository
from services.base import store_guard

logger = logging.getLogger("mealtrack.meals")


class MealService:
    """
    Meal log operations:
    - query a category's meals for one day, joined with food and category
    - log a meal as one row per food, all-or-nothing
    - delete single meal rows
    """

    def __init__(self, db: Session):
        self.db: Session = db
        self.meals = MealRepository(db)
        self.foods = FoodRepository(db)
        self.categories = CategoryRepository(db)

    # ---------- reads ----------

    def find_by_category_and_date(self, category: str, raw_date: DateInput) -> List[MealView]:
        """
        Every meal logged under ``category`` on the given day.

        An unknown category or a day with nothing logged gives an empty list.

        Raises:
            InvalidDateError: If the date cannot be parsed
        """
        day = normalize_date(raw_date)
        with store_guard(self.db, "find meals"):
            rows = self.meals.find_views(category, day)
        logger.debug("Found %d meals for %s on %s", len(rows), category, day)
        return [MealView.model_validate(dict(r._mapping)) for r in rows]

    def summarize(self, category: str, raw_date: DateInput) -> MealSummary:
        """Meal count and raw calorie sum for a category on one day"""
        day = normalize_date(raw_date)
        with store_guard(self.db, "summarize meals"):
            meal_count, total_calories = self.meals.calorie_totals(category, day)
        return MealSummary(
            category=category,
            date=day,
            meal_count=meal_count,
            total_calories=total_calories,
        )

    def get_meal(self, meal_id: int) -> Meal:
        with store_guard(self.db, "get meal"):
            meal = self.meals.get_by_id(meal_id)
        if not meal:
            raise NotFoundError(f"Meal {meal_id} not found", details={"meal_id": meal_id})
        return meal

    # ---------- writes ----------

    def create_meals(
        self, food_ids: Sequence[int], category: str, raw_date: DateInput
    ) -> List[Meal]:
        """
        Log one meal row per food id, sharing category and date.

        Steps:
        1. Resolve the category name (no auto-create)
        2. Normalize the date
        3. Check every food id exists before writing anything
        4. Insert all rows and commit once

        Rows come back in the order of ``food_ids``; repeated ids give
        repeated rows.

        Raises:
            ServiceValidationError: If ``food_ids`` is empty
            CategoryNotFoundError: If the category does not exist
            InvalidDateError: If the date cannot be parsed
            FoodNotFoundError: For the first food id that does not exist
            StoreError: If the store rejects the batch (nothing is kept)
        """
        food_ids = list(food_ids)
        if not food_ids:
            raise ServiceValidationError("At least one food id is required")

        with store_guard(self.db, "create meals"):
            cat = self.categories.get_by_name(category)
            if cat is None:
                raise CategoryNotFoundError(category)

            day = normalize_date(raw_date)

            known = self.foods.existing_ids(food_ids)
            for food_id in food_ids:
                if food_id not in known:
                    raise FoodNotFoundError(food_id)

            meals = self.meals.add_meals(food_ids, cat.id, day)
            self.db.commit()
            for meal in meals:
                self.db.refresh(meal)

        logger.info(
            "Logged %d meals for %s on %s: foods=%s", len(meals), category, day, food_ids
        )
        return meals

    def delete_meal(self, meal_id: int) -> None:
        """
        Delete one meal row.

        Raises:
            NotFoundError: If the meal does not exist
        """
        with store_guard(self.db, "delete meal"):
            removed = self.meals.delete_by_id(meal_id)
        if not removed:
            raise NotFoundError(f"Meal {meal_id} not found", details={"meal_id": meal_id})
        logger.info("Deleted meal %s", meal_id)
