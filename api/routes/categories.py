"""Meal category routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db_session
from domain.schemas.category_schemas import CategoryCreate, CategoryResponse
from services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])
logger = logging.getLogger("mealtrack.api.categories")


@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db_session)):
    """List all meal categories"""
    return [CategoryResponse.model_validate(c) for c in CategoryService.list_categories(db)]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db_session)):
    """Create a category; 409 if the name is taken"""
    category = CategoryService.create_category(db, payload.name)
    return CategoryResponse.model_validate(category)
