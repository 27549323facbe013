"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from domain.models import Database
from services import MealService


def get_database(request: Request) -> Database:
    """The store client the application was created with"""
    return request.app.state.database


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db_session)):
            # Use db session here
            pass
    """
    with get_database(request).session() as db:
        yield db


def get_meal_service(request: Request) -> Generator[MealService, None, None]:
    """MealService bound to a request-scoped session"""
    with get_database(request).session() as db:
        yield MealService(db)
