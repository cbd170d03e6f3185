"""Domain entities for food logging."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

DEFAULT_CALORIE_GOAL = 2200


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass
class Meal:
    """A logged meal with its macro breakdown."""

    id: int
    name: str
    calories: float = 0.0
    proteins: float = 0.0
    fats: float = 0.0
    carbs: float = 0.0
    meal_type: MealType | None = None
    eaten_at: datetime | None = None
    ai_analysis: str | None = None


@dataclass
class DailySummary:
    """Today's totals as computed by the backend."""

    total_calories: float = 0.0
    total_proteins: float = 0.0
    total_fats: float = 0.0
    total_carbs: float = 0.0
    date: str | None = None
    meals: list[Meal] = field(default_factory=list)
    ai_advice: str | None = None
    calorie_goal: int = DEFAULT_CALORIE_GOAL

    @property
    def meals_count(self) -> int:
        return len(self.meals)

    def calorie_progress(self, goal: int | None = None) -> float:
        """Share of the calorie goal eaten so far, clamped to [0, 1]."""
        target = self.calorie_goal if goal is None else goal
        if target <= 0:
            return 0.0
        return max(0.0, min(self.total_calories / target, 1.0))


@dataclass
class DinnerIdeas:
    ideas: str
    calories_remaining: float = 0.0


@dataclass
class ScannedProduct:
    """Nutrition facts read from a photographed product label."""

    name: str
    calories: float = 0.0
    proteins: float = 0.0
    fats: float = 0.0
    carbs: float = 0.0
    serving_size: str | None = None
    ingredients_summary: str | None = None
