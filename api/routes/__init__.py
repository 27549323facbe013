"""API routes package"""

from . import foods, categories, meals, health

__all__ = ["foods", "categories", "meals", "health"]
