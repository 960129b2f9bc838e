"""
Recipe extraction from recipe generation responses.

Expected (but not required) response shape:

    # Tomato Soup
    ## Ingredients
    - 4 tomatoes
    ## Instructions
    1. Boil
    ## Nutritional Information
    Calories: 120 kcal
    ## Health Benefits
    - Rich in vitamin C
"""

from __future__ import annotations

import re
from typing import Dict, List

import structlog

from healthfood.domain.parsing.models import DEFAULT_RECIPE_TITLE, ParsedRecipe
from healthfood.domain.parsing.sections import (
    ensure_text,
    extract_list_items,
    locate_section,
    preview_text,
)
from healthfood.metrics.parsing import (
    record_field_default,
    record_parse_failed,
    record_parse_success,
    time_parse,
)

logger = structlog.get_logger(__name__)

PARSER_NAME = "recipe"

INGREDIENTS_SECTION = "Ingredients"
INSTRUCTIONS_SECTION = "Instructions"
NUTRITION_SECTION = "Nutritional Information"
HEALTH_BENEFITS_SECTION = "Health Benefits"

_TITLE_RE = re.compile(
    r"^[ \t]*(?:#[ \t]+(.*)|Title:[ \t]*(.*))$",
    re.MULTILINE | re.IGNORECASE,
)
# "Protein: 15 g", "- **Calories:** 120 kcal"; unit stays on the same line
_NUTRIENT_RE = re.compile(r"\b(\w+)\**[ \t]*:\**[ \t]*(\d+)(?:[ \t]*([A-Za-z]+))?")


def extract_title(text: str) -> str:
    """First non-empty `# ` heading or `Title:` line, else "Recipe"."""
    for match in _TITLE_RE.finditer(text):
        title = (match.group(1) or match.group(2) or "").strip()
        if title:
            return title
    return DEFAULT_RECIPE_TITLE


def extract_nutrition(section: str) -> Dict[str, int]:
    """
    Parse `name: amount [unit]` pairs.

    Keys are lower-cased; a repeated key keeps its last value. Only digit
    runs count as amounts, so a pair without a number is skipped and a
    decimal keeps its integer part.

    Example:
        >>> extract_nutrition("Protein: 15 g\\nCarbs: 30")
        {'protein': 15, 'carbs': 30}
    """
    nutrition: Dict[str, int] = {}
    for match in _NUTRIENT_RE.finditer(section):
        key = match.group(1).lower()
        nutrition[key] = int(match.group(2))
    return nutrition


def _list_field(text: str, section_name: str, field: str) -> List[str]:
    items = extract_list_items(locate_section(text, section_name))
    if not items:
        record_field_default(PARSER_NAME, field)
    return items


def _extract_recipe(raw_response: str) -> ParsedRecipe:
    text = ensure_text(raw_response)

    nutritional_info = extract_nutrition(locate_section(text, NUTRITION_SECTION))
    if not nutritional_info:
        record_field_default(PARSER_NAME, "nutritionalInfo")

    return ParsedRecipe(
        title=extract_title(text),
        ingredients=_list_field(text, INGREDIENTS_SECTION, "ingredients"),
        instructions=_list_field(text, INSTRUCTIONS_SECTION, "instructions"),
        nutritional_info=nutritional_info,
        health_benefits=_list_field(text, HEALTH_BENEFITS_SECTION, "healthBenefits"),
    )


def parse_recipe(raw_response: str) -> ParsedRecipe:
    """
    Parse a recipe generation response.

    Never raises: any unexpected error is logged and the default recipe
    (title "Recipe", everything else empty) is returned.

    Args:
        raw_response: Model completion text

    Returns:
        ParsedRecipe with per-field defaults where nothing was found

    Example:
        >>> recipe = parse_recipe("# Tomato Soup\\n## Ingredients\\n- tomato")
        >>> recipe.title, recipe.ingredients
        ('Tomato Soup', ['tomato'])
    """
    with time_parse(PARSER_NAME):
        try:
            recipe = _extract_recipe(raw_response)
        except Exception as e:
            logger.warning(
                "Recipe parsing failed, returning defaults",
                error=str(e),
                error_type=type(e).__name__,
                raw_preview=preview_text(raw_response),
            )
            record_parse_failed(PARSER_NAME, error=type(e).__name__)
            return ParsedRecipe()

    record_parse_success(PARSER_NAME)
    logger.debug(
        "Recipe parsed",
        title=recipe.title,
        ingredients=len(recipe.ingredients),
        instructions=len(recipe.instructions),
        nutrients=len(recipe.nutritional_info),
        health_benefits=len(recipe.health_benefits),
    )
    return recipe
