"""Application service (use case) for the food log screen."""

import asyncio
import logging
from dataclasses import dataclass, field

from aura_client.application.interfaces import FoodApi
from aura_client.application.schemas import ManualMealRequest
from aura_client.application.services.preferences_service import PreferencesService
from aura_client.application.services.result import Result, capture
from aura_client.domain.entities import (
    DEFAULT_CALORIE_GOAL,
    DailySummary,
    DinnerIdeas,
    Meal,
    MealType,
    ScannedProduct,
)

logger = logging.getLogger(__name__)

ADD_MEAL_FAILED_MESSAGE = "Could not add meal"
SCAN_FAILED_MESSAGE = "Could not analyze product"


@dataclass
class FoodState:
    summary: DailySummary | None = None
    meals: list[Meal] = field(default_factory=list)
    dinner_ideas: DinnerIdeas | None = None


class FoodService:
    """Today's totals, meal history and meal logging. Depends on the FoodApi port (DI).

    Reads degrade to None / [] on failure. Logging a meal returns a Result so
    the screen can show why it failed; a successful log refreshes the day.
    """

    def __init__(
        self,
        api: FoodApi,
        preferences: PreferencesService | None = None,
        default_calorie_goal: int = DEFAULT_CALORIE_GOAL,
    ):
        self._api = api
        self._preferences = preferences
        self._default_goal = default_calorie_goal
        self.state = FoodState()

    async def refresh(self) -> FoodState:
        summary, meals = await asyncio.gather(
            capture(self._api.get_today_summary(), operation="Load today's summary"),
            capture(self._api.get_meal_history(), operation="Load meal history"),
        )
        self.state.summary = summary.value
        self.state.meals = meals.value_or([])
        return self.state

    @property
    def calorie_goal(self) -> int:
        """Preference override, then the backend's goal, then the default."""
        if self._preferences is not None:
            override = self._preferences.calorie_goal_override
            if override is not None:
                return override
        if self.state.summary is not None and self.state.summary.calorie_goal > 0:
            return self.state.summary.calorie_goal
        return self._default_goal

    @property
    def calorie_progress(self) -> float:
        if self.state.summary is None:
            return 0.0
        return self.state.summary.calorie_progress(self.calorie_goal)

    async def add_manual_meal(
        self,
        name: str,
        calories: float,
        proteins: float = 0.0,
        fats: float = 0.0,
        carbs: float = 0.0,
        meal_type: MealType = MealType.SNACK,
    ) -> Result[Meal]:
        request = ManualMealRequest(
            name=name.strip(),
            calories=calories,
            proteins=proteins,
            fats=fats,
            carbs=carbs,
            meal_type=meal_type,
        )
        result = await capture(
            self._api.add_manual_meal(request),
            operation="Add manual meal",
            failure_message=ADD_MEAL_FAILED_MESSAGE,
        )
        if result.ok:
            await self.refresh()
        return result

    async def analyze_photo(
        self, image: bytes, meal_type: MealType = MealType.SNACK
    ) -> Result[Meal]:
        result = await capture(
            self._api.analyze_food_photo(image, meal_type), operation="Analyze food photo"
        )
        if result.ok:
            await self.refresh()
        return result

    async def scan_product(self, image: bytes) -> Result[ScannedProduct]:
        return await capture(
            self._api.scan_product(image),
            operation="Scan product label",
            failure_message=SCAN_FAILED_MESSAGE,
        )

    async def delete_meal(self, meal_id: int) -> None:
        await capture(self._api.delete_meal(meal_id), operation="Delete meal")
        await self.refresh()

    async def load_dinner_ideas(self) -> DinnerIdeas | None:
        result = await capture(self._api.get_dinner_ideas(), operation="Load dinner ideas")
        self.state.dinner_ideas = result.value
        return self.state.dinner_ideas
