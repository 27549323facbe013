"""Services package - Business logic layer"""

from services.food_service import FoodService
from services.category_service import CategoryService
from services.meal_service import MealService

__all__ = [
    "FoodService",
    "CategoryService",
    "MealService",
]
