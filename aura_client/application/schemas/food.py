"""Pydantic v2 schemas (DTOs) for the food endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from aura_client.domain.entities import DEFAULT_CALORIE_GOAL, MealType


class MealSchema(BaseModel):
    id: int
    name: str
    calories: float = 0.0
    proteins: float = 0.0
    fats: float = 0.0
    carbs: float = 0.0
    meal_type: MealType | None = None
    eaten_at: datetime | None = None
    ai_analysis: str | None = None

    @field_validator("meal_type", mode="before")
    @classmethod
    def _unknown_meal_type_as_none(cls, value: object) -> object:
        # Unknown types ("brunch") decode as None.
        if isinstance(value, str) and value not in {t.value for t in MealType}:
            return None
        return value


class DailySummarySchema(BaseModel):
    date: str | None = None
    total_calories: float
    total_proteins: float
    total_fats: float
    total_carbs: float
    meals: list[MealSchema] | None = None
    ai_advice: str | None = None
    calorie_goal: int = DEFAULT_CALORIE_GOAL


class ManualMealRequest(BaseModel):
    """JSON body of ``POST /food/manual``."""

    name: str = Field(..., min_length=1)
    calories: float = Field(default=0.0, ge=0)
    proteins: float = Field(default=0.0, ge=0)
    fats: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    meal_type: MealType = MealType.SNACK


class DinnerIdeasSchema(BaseModel):
    ideas: str
    calories_remaining: float = 0.0


class ScannedProductSchema(BaseModel):
    name: str
    calories: float = 0.0
    proteins: float = 0.0
    fats: float = 0.0
    carbs: float = 0.0
    serving_size: str | None = None
    ingredients_summary: str | None = None
