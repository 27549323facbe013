"""Meal log routes"""

from fastapi import APIRouter, Depends, status
import logging
from typing import List

from api.dependencies import get_meal_service
from domain.dates import date_from_parts
from domain.schemas.meal_schemas import (
    MealCreateRequest,
    MealResponse,
    MealSummary,
    MealView,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("mealtrack.api.meals")


@router.get("/{category}/{year}/{month}/{day}", response_model=List[MealView])
def get_meals_for_day(
    category: str,
    year: str,
    month: str,
    day: str,
    service: MealService = Depends(get_meal_service),
):
    """
    Meals logged under a category on one day, with food name and calories.

    Months are 1-based: ``/meals/breakfast/2017/5/1`` is May 1st 2017.
    Returns an empty list when nothing was logged.
    """
    meals = service.find_by_category_and_date(category, date_from_parts(year, month, day))
    logger.info("Returning %d meals for %s %s/%s/%s", len(meals), category, year, month, day)
    return meals


@router.get("/{category}/{year}/{month}/{day}/summary", response_model=MealSummary)
def get_meal_summary(
    category: str,
    year: str,
    month: str,
    day: str,
    service: MealService = Depends(get_meal_service),
):
    """Meal count and total calories for a category on one day"""
    return service.summarize(category, date_from_parts(year, month, day))


@router.post("", response_model=List[MealResponse], status_code=status.HTTP_201_CREATED)
def create_meals(
    payload: MealCreateRequest, service: MealService = Depends(get_meal_service)
):
    """
    Log a meal: one row per food id, all with the same category and date.

    Example body: ``{"food_ids": "1,2", "category": "lunch", "date": "2017/5/1"}``.
    The whole batch is rejected if the category or any food is unknown.
    """
    meals = service.create_meals(payload.food_ids, payload.category, payload.date)
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: int, service: MealService = Depends(get_meal_service)):
    """Get a single meal row"""
    return MealResponse.model_validate(service.get_meal(meal_id))


@router.delete("/{meal_id}")
def delete_meal(meal_id: int, service: MealService = Depends(get_meal_service)):
    """Delete a single meal row; 404 if it does not exist"""
    service.delete_meal(meal_id)
    return {"status": "ok", "removed": meal_id}
