"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.food import Food
from domain.models.category import Category
from domain.models.meal import Meal

__all__ = [
    # Database
    "Base",
    "Database",
    # Catalog models
    "Food",
    "Category",
    # Meal log
    "Meal",
]
