"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.food_repository import FoodRepository
from repositories.category_repository import CategoryRepository
from repositories.meal_repository import MealRepository

__all__ = [
    "BaseRepository",
    "FoodRepository",
    "CategoryRepository",
    "MealRepository",
]
