"""
Prompts for the Health & Food AI tasks.

Each builder returns the complete chat message list for one generation
request: a system message built by `create_system_prompt` and a user
message with the task (plus the image, for image tasks).

The format guides name the headings the extractors in
`healthfood.domain.parsing` look for, so well-behaved responses parse
completely.
"""

from typing import Any, Union

from healthfood.domain.prompts.models import (
    DietType,
    HealthAnalysisType,
    WeightGoal,
    option_value,
)

Message = dict[str, Any]


# ═══════════════════════════════════════════════════════════
# SYSTEM PROMPT
# ═══════════════════════════════════════════════════════════


def create_system_prompt(task: str) -> str:
    """Build the shared expert-assistant system prompt for a task.

    Args:
        task: What the model has to do, phrased to follow "Your task is to"

    Returns:
        System prompt text
    """
    return (
        "You are an expert AI assistant specializing in nutrition, food, cooking, "
        "and health analysis.\n"
        f"Your task is to {task}.\n"
        "Provide accurate, helpful, and detailed information.\n"
        "Format your response in a clean, structured way that's easy to read."
    )


# ═══════════════════════════════════════════════════════════
# RESPONSE FORMAT GUIDES
# ═══════════════════════════════════════════════════════════

RECIPE_FORMAT_GUIDE = """Use this markdown layout:
# <Recipe title>
## Ingredients
- <quantity> <ingredient>
## Instructions
1. <step>
## Nutritional Information
Calories: <number> kcal
Protein: <number> g
Carbs: <number> g
Fat: <number> g
## Health Benefits
- <benefit>"""

MEAL_PLAN_FORMAT_GUIDE = """Use this markdown layout for every day:
## Day <number>
### Breakfast
**<Meal title>**
<Short recipe: ingredients and instructions>
### Lunch
...
### Dinner
...
### Snack
..."""

HEALTH_ANALYSIS_FORMAT_GUIDE = """Use this markdown layout:
## Findings
<What you observe>
## Recommendations
- <recommendation>
## Dietary Recommendations
- <dietary recommendation>"""

MEDICAL_DISCLAIMER = (
    "Note: This is for educational purposes only and not a substitute for "
    "professional medical advice."
)


# ═══════════════════════════════════════════════════════════
# MESSAGE HELPERS
# ═══════════════════════════════════════════════════════════


def _text_part(text: str) -> dict[str, str]:
    return {"type": "text", "text": text}


def _image_part(image_base64: str) -> dict[str, str]:
    return {"type": "image", "image": image_base64}


def _messages(task: str, user_content: Union[str, list[dict[str, str]]]) -> list[Message]:
    return [
        {"role": "system", "content": create_system_prompt(task)},
        {"role": "user", "content": user_content},
    ]


# ═══════════════════════════════════════════════════════════
# TASK MESSAGE BUILDERS
# ═══════════════════════════════════════════════════════════


def build_food_validation_messages(image_base64: str) -> list[Message]:
    """Ask whether an image shows food (answer starts with YES or NO)."""
    return _messages(
        "analyze food images and determine if they contain food items",
        [
            _text_part(
                'Is this a food image? Please respond with "YES" if it contains food, '
                'or "NO" if it does not contain food. Then provide a brief explanation '
                "of what you see in the image."
            ),
            _image_part(image_base64),
        ],
    )


def build_recipe_from_image_messages(image_base64: str) -> list[Message]:
    """Ask for a recipe recreating the dish in an image."""
    return _messages(
        "generate detailed recipes based on food images",
        [
            _text_part(
                "Create a detailed recipe based on this food image. Include title, "
                "ingredients with measurements, step-by-step instructions, nutritional "
                "information, and health benefits of key ingredients.\n\n"
                f"{RECIPE_FORMAT_GUIDE}"
            ),
            _image_part(image_base64),
        ],
    )


def build_recipe_from_ingredients_messages(ingredients: str) -> list[Message]:
    """Ask for a recipe using the given ingredients (free text, comma separated)."""
    return _messages(
        "generate creative and delicious recipes based on provided ingredients",
        f"Create a detailed recipe using these ingredients: {ingredients.strip()}. "
        "Include title, complete ingredients list with measurements, step-by-step "
        "instructions, nutritional information, and health benefits of key "
        f"ingredients.\n\n{RECIPE_FORMAT_GUIDE}",
    )


def build_meal_plan_messages(
    goal: Union[WeightGoal, str],
    diet_type: Union[DietType, str],
    restrictions: str = "",
) -> list[Message]:
    """Ask for a 7-day meal plan.

    Args:
        goal: Weight goal (lose, maintain, gain)
        diet_type: Diet followed (vegetarian, vegan, non-vegetarian)
        restrictions: Free-text restrictions or preferences

    Returns:
        List of message dicts for the generation service
    """
    restrictions_text = restrictions.strip() or "none"
    return _messages(
        "create personalized meal plans based on weight goals and dietary preferences",
        f"Create a 7-day meal plan for someone who wants to {option_value(goal)} weight. "
        f"They follow a {option_value(diet_type)} diet. Additional restrictions or "
        f"preferences: {restrictions_text}. Include breakfast, lunch, dinner, and snacks "
        "for each day. For each meal, provide a brief recipe with ingredients and "
        "instructions. Also include nutritional information and health benefits.\n\n"
        f"{MEAL_PLAN_FORMAT_GUIDE}",
    )


def build_health_analysis_messages(
    image_base64: str, analysis_type: Union[HealthAnalysisType, str]
) -> list[Message]:
    """Ask for an analysis of a medical image (x-ray, MRI, CT...)."""
    return _messages(
        "analyze medical images and health reports to provide insights and dietary "
        "recommendations",
        [
            _text_part(
                f"Analyze this {option_value(analysis_type)} image. Provide a detailed "
                "explanation of what you observe, potential health implications, and "
                "dietary recommendations based on the findings. "
                f"{MEDICAL_DISCLAIMER}\n\n{HEALTH_ANALYSIS_FORMAT_GUIDE}"
            ),
            _image_part(image_base64),
        ],
    )


def build_health_report_analysis_messages(report_text: str) -> list[Message]:
    """Ask for dietary recommendations from a health report's text."""
    return _messages(
        "analyze health reports and provide dietary recommendations",
        "Analyze this health report and provide dietary recommendations based on the "
        f"findings. Report details: {report_text.strip()}. {MEDICAL_DISCLAIMER}\n\n"
        f"{HEALTH_ANALYSIS_FORMAT_GUIDE}",
    )
