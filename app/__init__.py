"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    InvalidDateError,
    NotFoundError,
    FoodNotFoundError,
    CategoryNotFoundError,
    ConflictError,
    StoreError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "InvalidDateError",
    "NotFoundError",
    "FoodNotFoundError",
    "CategoryNotFoundError",
    "ConflictError",
    "StoreError",
]
