from typing import Iterable, List
from sqlalchemy.orm import Session
import logging

from domain.models import Category
from repositories import CategoryRepository
from services.base import store_guard
from app.exceptions import CategoryNotFoundError

logger = logging.getLogger("mealtrack.categories")


class CategoryService:
    @staticmethod
    def list_categories(db: Session) -> List[Category]:
        with store_guard(db, "list categories"):
            return CategoryRepository(db).get_all()

    @staticmethod
    def create_category(db: Session, name: str) -> Category:
        """Create a category; duplicate names raise ConflictError"""
        with store_guard(db, "create category"):
            category = CategoryRepository(db).create_category(name)
        logger.info("Created category %s (%s)", category.id, category.name)
        return category

    @staticmethod
    def resolve(db: Session, name: str) -> Category:
        """
        Look up a category by exact name.

        Raises:
            CategoryNotFoundError: If no category has that name
        """
        with store_guard(db, "resolve category"):
            category = CategoryRepository(db).get_by_name(name)
        if not category:
            raise CategoryNotFoundError(name)
        return category

    @staticmethod
    def ensure_defaults(db: Session, names: Iterable[str]) -> List[Category]:
        """Create any of ``names`` that are missing; returns all of them"""
        repo = CategoryRepository(db)
        result: List[Category] = []
        with store_guard(db, "seed categories"):
            for name in names:
                category = repo.get_by_name(name)
                if category is None:
                    category = repo.create(Category(name=name), commit=False)
                    logger.info("Seeding category %s", name)
                result.append(category)
            db.commit()
        return result
