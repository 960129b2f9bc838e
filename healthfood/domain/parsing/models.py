"""
Domain models for parsed AI responses.

Typed records produced by the extractors. Every field has a safe
default so a record built with no arguments is the "nothing parsed"
fallback for its extractor.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RECIPE_TITLE = "Recipe"


class ParseMode(str, Enum):
    """Which extractor a raw response is meant for."""

    RECIPE = "recipe"
    MEAL_PLAN = "meal_plan"
    HEALTH_ANALYSIS = "health_analysis"
    FOOD_VALIDATION = "food_validation"


class MealType(str, Enum):
    """Meal slot within a plan day, declared in canonical order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def label(self) -> str:
        """Heading label as the model writes it (e.g. "Breakfast")."""
        return self.value.capitalize()


class _ParsedRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using the public camelCase field names."""
        return self.model_dump(by_alias=True, mode="json")


class ParsedRecipe(_ParsedRecord):
    """
    Recipe recovered from a recipe generation response.

    Example:
        >>> recipe = ParsedRecipe(title="Tomato Soup", ingredients=["tomato"])
        >>> recipe.to_payload()["nutritionalInfo"]
        {}
    """

    title: str = DEFAULT_RECIPE_TITLE
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    nutritional_info: Dict[str, int] = Field(default_factory=dict, alias="nutritionalInfo")
    health_benefits: List[str] = Field(default_factory=list, alias="healthBenefits")


class ParsedMeal(_ParsedRecord):
    """Single meal of a plan day."""

    type: MealType
    title: str
    description: str = ""


class ParsedMealPlanDay(_ParsedRecord):
    """Meals found under one "Day N" heading, in canonical meal order."""

    day: str
    meals: List[ParsedMeal] = Field(default_factory=list)


class ParsedMealPlan(_ParsedRecord):
    days: List[ParsedMealPlanDay] = Field(default_factory=list)


class ParsedHealthAnalysis(_ParsedRecord):
    """
    Health analysis recovered from an image or report analysis response.

    Attributes:
        findings: Narrative of what was observed
        recommendations: General recommendations
        diet_recommendations: Dietary recommendations (JSON: dietRecommendations)
    """

    findings: str = ""
    recommendations: List[str] = Field(default_factory=list)
    diet_recommendations: List[str] = Field(default_factory=list, alias="dietRecommendations")


class FoodValidationResult(_ParsedRecord):
    """Answer to the "is this a food image?" prompt."""

    is_food: bool = Field(False, alias="isFood")
    explanation: str = ""
