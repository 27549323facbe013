"""Schemas for the meal log: batch writes, joined views and summaries"""

from datetime import date as Date, datetime
from typing import Any, List, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class MealCreateRequest(BaseModel):
    """
    Log one meal made of several foods.

    The body may be the bare fields or wrapped as ``{"meal": {...}}``, and the
    ids may be sent as ``food_ids`` or ``foodIds``. They may be a list of ints
    or a comma-delimited string such as ``"1,2,5"``; either way they reach the
    service as a list of ints.
    """

    food_ids: List[int] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("food_ids", "foodIds"),
        description="Foods eaten, in order",
    )
    category: str = Field(..., min_length=1, description="Category name, e.g. 'lunch'")
    date: Union[Date, str, List[Union[int, str]]] = Field(
        ..., description="Day eaten: '2017-05-01', '2017/5/1', '5/1/2017' or [2017, 5, 1]"
    )

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("meal"), dict):
            return data["meal"]
        return data

    @field_validator("food_ids", mode="before")
    @classmethod
    def split_food_ids(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        if isinstance(v, int) and not isinstance(v, bool):
            return [v]
        return v


class MealResponse(BaseModel):
    """A stored meal log row, with its category name"""

    id: int
    food_id: int
    category_id: int
    category: str
    date: Date
    created_at: datetime

    model_config = {"from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def from_meal(cls, data: Any) -> Any:
        # ORM rows carry the category as a relationship
        if isinstance(data, dict):
            return data
        return {
            "id": data.id,
            "food_id": data.food_id,
            "category_id": data.category_id,
            "category": data.category.name,
            "date": data.date,
            "created_at": data.created_at,
        }


class MealView(BaseModel):
    """Meal row joined with its food and category"""

    id: int
    food_id: int
    category_id: int
    date: Date
    food_name: str
    calories: int
    category_name: str
    created_at: datetime

    model_config = {"from_attributes": True}


class MealSummary(BaseModel):
    """Raw calorie total for one category on one day"""

    category: str
    date: Date
    meal_count: int
    total_calories: int
