"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.food_schemas import FoodCreate, FoodUpdate, FoodResponse
from domain.schemas.category_schemas import CategoryCreate, CategoryResponse
from domain.schemas.meal_schemas import (
    MealCreateRequest,
    MealResponse,
    MealView,
    MealSummary,
)

__all__ = [
    # Food schemas
    "FoodCreate",
    "FoodUpdate",
    "FoodResponse",
    # Category schemas
    "CategoryCreate",
    "CategoryResponse",
    # Meal schemas
    "MealCreateRequest",
    "MealResponse",
    "MealView",
    "MealSummary",
]
