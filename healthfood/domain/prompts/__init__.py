"""Prompts for the Health & Food AI generation tasks."""

from healthfood.domain.prompts.builders import (
    create_system_prompt,
    build_food_validation_messages,
    build_recipe_from_image_messages,
    build_recipe_from_ingredients_messages,
    build_meal_plan_messages,
    build_health_analysis_messages,
    build_health_report_analysis_messages,
)
from healthfood.domain.prompts.models import (
    DietType,
    HealthAnalysisType,
    WeightGoal,
    build_meal_plan_title,
)

__all__ = [
    "create_system_prompt",
    "build_food_validation_messages",
    "build_recipe_from_image_messages",
    "build_recipe_from_ingredients_messages",
    "build_meal_plan_messages",
    "build_health_analysis_messages",
    "build_health_report_analysis_messages",
    "DietType",
    "HealthAnalysisType",
    "WeightGoal",
    "build_meal_plan_title",
]
