"""
Domain layer - Business entities, models, schemas, and date handling.
"""

from domain import dates, models, schemas

__all__ = ["dates", "models", "schemas"]
