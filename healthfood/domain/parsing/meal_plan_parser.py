"""
Meal plan extraction from meal plan generation responses.

The response is split twice: into day blocks at `# Day N` / `## Day N`
headings, then into meal blocks at `## <Meal>` / `### <Meal>` headings
inside each day.

Meal block boundaries follow the canonical meal order, not the order of
the text: a meal block ends at the first *other* meal type (scanned
Breakfast, Lunch, Dinner, Snack) whose heading appears after it. A day
written out of order (Dinner before Lunch) therefore gets its Breakfast
block stretched over Dinner up to the Lunch heading.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

import structlog

from healthfood.domain.parsing.models import (
    MealType,
    ParsedMeal,
    ParsedMealPlan,
    ParsedMealPlanDay,
)
from healthfood.domain.parsing.sections import ensure_text, preview_text
from healthfood.metrics.parsing import (
    record_field_default,
    record_parse_failed,
    record_parse_success,
    time_parse,
)

logger = structlog.get_logger(__name__)

PARSER_NAME = "meal_plan"

MEAL_ORDER: tuple[MealType, ...] = (
    MealType.BREAKFAST,
    MealType.LUNCH,
    MealType.DINNER,
    MealType.SNACK,
)

_DAY_RE = re.compile(r"^[ \t]*#{1,2}[ \t]+Day[ \t]+(\d+)", re.MULTILINE | re.IGNORECASE)
_MEAL_HEADING_RES: Dict[MealType, re.Pattern[str]] = {
    meal_type: re.compile(
        r"^[ \t]*#{2,3}[ \t]+" + re.escape(meal_type.label),
        re.MULTILINE | re.IGNORECASE,
    )
    for meal_type in MEAL_ORDER
}
# Heading plus the rest of the label word and a trailing colon ("### Snacks:")
_MEAL_MARKER_RES: Dict[MealType, re.Pattern[str]] = {
    meal_type: re.compile(pattern.pattern + r"\w*[ \t]*:?", pattern.flags)
    for meal_type, pattern in _MEAL_HEADING_RES.items()
}
_EMPHASIS_RE = re.compile(r"\*\*+(.*?)\*\*+|_+(.*?)_+")
_EMPHASIS_MARKS = "*_ \t"


def split_days(text: str) -> List[tuple[str, str]]:
    """
    Cut the response into (day number, day block) pairs.

    Each block runs from its heading to the next day heading or the end
    of the text.
    """
    matches = list(_DAY_RE.finditer(text))
    days: List[tuple[str, str]] = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        days.append((match.group(1), text[match.start() : end]))
    return days


def _meal_block(day_block: str, meal_type: MealType) -> Optional[str]:
    heading = _MEAL_HEADING_RES[meal_type].search(day_block)
    if heading is None:
        return None

    end = len(day_block)
    for other in MEAL_ORDER:
        if other is meal_type:
            continue
        following = _MEAL_HEADING_RES[other].search(day_block, heading.end())
        if following is not None:
            end = following.start()
            break
    return day_block[heading.start() : end]


def parse_meal(meal_block: str, meal_type: MealType) -> ParsedMeal:
    """
    Title is the first `**bold**` or `_italic_` span (fallback: the meal
    label); description is whatever follows it, heading removed.
    """
    emphasis = _EMPHASIS_RE.search(meal_block)
    if emphasis is not None:
        title = (emphasis.group(1) or emphasis.group(2) or "").strip(_EMPHASIS_MARKS)
        title = title or meal_type.label
        description = meal_block[emphasis.end() :]
    else:
        title = meal_type.label
        description = meal_block

    description = _MEAL_MARKER_RES[meal_type].sub("", description, count=1).strip()
    return ParsedMeal(type=meal_type, title=title, description=description)


def parse_day(day_number: str, day_block: str) -> ParsedMealPlanDay:
    meals: List[ParsedMeal] = []
    for meal_type in MEAL_ORDER:
        block = _meal_block(day_block, meal_type)
        if block is None:
            continue
        meals.append(parse_meal(block, meal_type))
    return ParsedMealPlanDay(day=f"Day {day_number}", meals=meals)


def _extract_meal_plan(raw_response: str) -> ParsedMealPlan:
    text = ensure_text(raw_response)

    day_blocks = split_days(text)
    if not day_blocks:
        record_field_default(PARSER_NAME, "days")
        return ParsedMealPlan()

    days = [parse_day(number, block) for number, block in day_blocks]
    for day in days:
        if not day.meals:
            logger.debug("No meal headings found for day", day=day.day)
    return ParsedMealPlan(days=days)


def parse_meal_plan(raw_response: str) -> ParsedMealPlan:
    """
    Parse a meal plan generation response.

    Never raises: any unexpected error is logged and an empty plan is
    returned.

    Args:
        raw_response: Model completion text

    Returns:
        ParsedMealPlan, `days` empty when no day heading was found

    Example:
        >>> plan = parse_meal_plan("## Day 1\\n### Breakfast\\n**Oatmeal**")
        >>> plan.days[0].meals[0].title
        'Oatmeal'
    """
    with time_parse(PARSER_NAME):
        try:
            plan = _extract_meal_plan(raw_response)
        except Exception as e:
            logger.warning(
                "Meal plan parsing failed, returning empty plan",
                error=str(e),
                error_type=type(e).__name__,
                raw_preview=preview_text(raw_response),
            )
            record_parse_failed(PARSER_NAME, error=type(e).__name__)
            return ParsedMealPlan()

    record_parse_success(PARSER_NAME)
    logger.debug(
        "Meal plan parsed",
        days=len(plan.days),
        meals=sum(len(day.meals) for day in plan.days),
    )
    return plan
