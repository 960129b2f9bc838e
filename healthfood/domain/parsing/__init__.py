"""Best-effort extraction of typed records from AI text responses."""

from healthfood.domain.parsing.models import (
    DEFAULT_RECIPE_TITLE,
    FoodValidationResult,
    MealType,
    ParsedHealthAnalysis,
    ParsedMeal,
    ParsedMealPlan,
    ParsedMealPlanDay,
    ParsedRecipe,
    ParseMode,
)
from healthfood.domain.parsing.sections import (
    extract_list_items,
    find_section,
    locate_section,
)
from healthfood.domain.parsing.recipe_parser import parse_recipe
from healthfood.domain.parsing.meal_plan_parser import parse_meal_plan
from healthfood.domain.parsing.health_analysis_parser import parse_health_analysis
from healthfood.domain.parsing.food_validation_parser import parse_food_validation
from healthfood.domain.parsing.service import parse_response

__all__ = [
    "DEFAULT_RECIPE_TITLE",
    "FoodValidationResult",
    "MealType",
    "ParsedHealthAnalysis",
    "ParsedMeal",
    "ParsedMealPlan",
    "ParsedMealPlanDay",
    "ParsedRecipe",
    "ParseMode",
    "extract_list_items",
    "find_section",
    "locate_section",
    "parse_recipe",
    "parse_meal_plan",
    "parse_health_analysis",
    "parse_food_validation",
    "parse_response",
]
