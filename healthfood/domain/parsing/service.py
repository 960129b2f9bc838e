"""
Parse dispatcher.

Routes a raw response to the extractor for the caller's task mode.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from healthfood.domain.parsing.food_validation_parser import parse_food_validation
from healthfood.domain.parsing.health_analysis_parser import parse_health_analysis
from healthfood.domain.parsing.meal_plan_parser import parse_meal_plan
from healthfood.domain.parsing.models import (
    FoodValidationResult,
    ParsedHealthAnalysis,
    ParsedMealPlan,
    ParsedRecipe,
    ParseMode,
)
from healthfood.domain.parsing.recipe_parser import parse_recipe
from healthfood.domain.shared.errors import UnknownParseModeError

ParseResult = Union[ParsedRecipe, ParsedMealPlan, ParsedHealthAnalysis, FoodValidationResult]

PARSERS: Dict[ParseMode, Callable[[str], ParseResult]] = {
    ParseMode.RECIPE: parse_recipe,
    ParseMode.MEAL_PLAN: parse_meal_plan,
    ParseMode.HEALTH_ANALYSIS: parse_health_analysis,
    ParseMode.FOOD_VALIDATION: parse_food_validation,
}


def resolve_mode(mode: Union[ParseMode, str]) -> ParseMode:
    """
    Normalize a mode given as enum or string value.

    Raises:
        UnknownParseModeError: If the string is not a ParseMode value
    """
    if isinstance(mode, ParseMode):
        return mode
    try:
        return ParseMode(str(mode).strip().lower())
    except ValueError as exc:
        valid = ", ".join(m.value for m in ParseMode)
        raise UnknownParseModeError(f"Unknown parse mode: {mode!r} (expected one of: {valid})") from exc


def parse_response(
    raw_response: str, mode: Union[ParseMode, str] = ParseMode.RECIPE
) -> ParseResult:
    """
    Parse a raw AI response with the extractor for `mode`.

    Only an invalid `mode` raises; malformed responses yield the
    extractor's default record.

    Example:
        >>> parse_response("## Day 1\\n### Lunch\\n**Salad**", "meal_plan").days[0].day
        'Day 1'
    """
    return PARSERS[resolve_mode(mode)](raw_response)
