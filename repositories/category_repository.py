"""
Category Repository - Data access layer for meal categories
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Category
from app.exceptions import ConflictError


class CategoryRepository(BaseRepository[Category]):
    """Repository for category data access"""

    def __init__(self, db: Session):
        super().__init__(db, Category)

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by exact (case-sensitive) name"""
        return self.db.query(Category).filter(Category.name == name).first()

    def create_category(self, name: str) -> Category:
        """Create a new category"""
        category = Category(name=name)
        try:
            return self.create(category)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                f"Category '{name}' already exists", details={"category": name}
            ) from e
