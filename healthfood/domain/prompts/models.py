"""
Option sets accepted by the prompt builders.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class WeightGoal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class DietType(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    NON_VEGETARIAN = "non-vegetarian"


class HealthAnalysisType(str, Enum):
    """Kind of medical document being analyzed."""

    XRAY = "xray"
    MRI = "mri"
    CT = "ct"
    REPORT = "report"


_GOAL_TITLES = {
    WeightGoal.LOSE: "Weight Loss",
    WeightGoal.GAIN: "Weight Gain",
    WeightGoal.MAINTAIN: "Weight Maintenance",
}


def option_value(option: Union[Enum, str]) -> str:
    """Plain string for an enum member or free-text option."""
    if isinstance(option, Enum):
        return str(option.value)
    return str(option).strip()


def build_meal_plan_title(goal: Union[WeightGoal, str], diet_type: Union[DietType, str]) -> str:
    """
    Display title for a generated plan.

    Example:
        >>> build_meal_plan_title(WeightGoal.LOSE, DietType.VEGETARIAN)
        'Weight Loss Vegetarian Plan'
    """
    goal_value = option_value(goal).lower()
    try:
        goal_title = _GOAL_TITLES[WeightGoal(goal_value)]
    except ValueError:
        goal_title = goal_value.capitalize()

    diet = option_value(diet_type)
    diet_title = diet[:1].upper() + diet[1:]
    return " ".join(part for part in (goal_title, diet_title, "Plan") if part)
