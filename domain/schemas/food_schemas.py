"""Schemas for the food catalog"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def _unwrap_food(data: Any) -> Any:
    # Clients may post {"food": {...}} or the bare fields
    if isinstance(data, dict) and isinstance(data.get("food"), dict):
        return data["food"]
    return data


class FoodCreate(BaseModel):
    """Schema for creating a new food"""

    name: str = Field(..., min_length=1, description="Food name, e.g. 'burrito'")
    calories: int = Field(..., ge=0, description="Calories per serving")

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        return _unwrap_food(data)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class FoodUpdate(BaseModel):
    """Partial update; blank or missing fields leave the stored value alone"""

    name: Optional[str] = Field(None, description="New name; empty keeps the current one")
    calories: Optional[int] = Field(None, ge=0, description="New calorie count")

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        data = _unwrap_food(data)
        # Form-style payloads send "" for untouched calories
        if isinstance(data, dict) and data.get("calories") == "":
            data = {**data, "calories": None}
        return data

    def changes(self) -> dict:
        """Fields that should actually be written"""
        out: dict[str, Any] = {}
        if self.name is not None and self.name.strip():
            out["name"] = self.name.strip()
        if self.calories is not None:
            out["calories"] = self.calories
        return out


class FoodResponse(BaseModel):
    """Schema for food response"""

    id: int
    name: str
    calories: int
    created_at: datetime

    model_config = {"from_attributes": True}
