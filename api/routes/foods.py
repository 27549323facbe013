"""Food catalog routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db_session
from domain.schemas.food_schemas import FoodCreate, FoodUpdate, FoodResponse
from services.food_service import FoodService

router = APIRouter(prefix="/foods", tags=["Foods"])
logger = logging.getLogger("mealtrack.api.foods")


@router.get("", response_model=List[FoodResponse])
def list_foods(db: Session = Depends(get_db_session)):
    """List every food in the catalog"""
    foods = FoodService.list_foods(db)
    return [FoodResponse.model_validate(f) for f in foods]


@router.get("/{food_id}", response_model=FoodResponse)
def get_food(food_id: int, db: Session = Depends(get_db_session)):
    """Get a single food"""
    return FoodResponse.model_validate(FoodService.get_food(db, food_id))


@router.post("", response_model=FoodResponse, status_code=status.HTTP_201_CREATED)
def create_food(payload: FoodCreate, db: Session = Depends(get_db_session)):
    """
    Add a food to the catalog.

    Accepts either ``{"name": ..., "calories": ...}`` or the same fields
    wrapped as ``{"food": {...}}``.
    """
    food = FoodService.create_food(db, payload.name, payload.calories)
    return FoodResponse.model_validate(food)


@router.patch("/{food_id}", response_model=FoodResponse)
def update_food(food_id: int, payload: FoodUpdate, db: Session = Depends(get_db_session)):
    """
    Partially update a food.

    An empty name keeps the current name, so
    ``{"food": {"name": "", "calories": 1000}}`` only changes calories.
    """
    food = FoodService.update_food(db, food_id, payload)
    return FoodResponse.model_validate(food)


@router.delete("/{food_id}")
def delete_food(food_id: int, db: Session = Depends(get_db_session)):
    """Delete a food; 404 if it does not exist, 409 if meals reference it"""
    FoodService.delete_food(db, food_id)
    return {"status": "ok", "removed": food_id}
