"""
Shared fixtures for parser tests.

Sample responses mirror what the generation service returns for each
task, including the sloppy variants (missing headings, mixed heading
ranks) the extractors have to tolerate.
"""

from typing import Iterator

import pytest

from healthfood.metrics import reset_all


# ═══════════════════════════════════════════════════════════
# ISOLATION
# ═══════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def clean_metrics(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh metrics registry, metrics on, for every test."""
    monkeypatch.setenv("PARSER_METRICS_ENABLED", "1")
    reset_all()
    yield
    reset_all()


# ═══════════════════════════════════════════════════════════
# RAW RESPONSE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def tomato_soup_response() -> str:
    """Minimal well-formed recipe response."""
    return (
        "# Tomato Soup\n"
        "## Ingredients\n"
        "- tomato\n"
        "- salt\n"
        "## Instructions\n"
        "1. Boil\n"
        "2. Blend\n"
        "## Nutritional Information\n"
        "calories: 120 kcal\n"
        "## Health Benefits\n"
        "- vitamin C"
    )


@pytest.fixture
def verbose_recipe_response() -> str:
    """Chatty recipe response with prose between the lists."""
    return (
        "Sure! Here's a recipe inspired by your photo.\n\n"
        "# Mediterranean Quinoa Bowl\n\n"
        "A bright, protein-packed bowl ready in 25 minutes.\n\n"
        "## Ingredients\n"
        "For the bowl:\n"
        "- 1 cup quinoa, rinsed\n"
        "- 1 cucumber, diced\n"
        "-   \n"
        "- 100 g feta cheese\n\n"
        "## Instructions\n"
        "1. Cook the quinoa in 2 cups of water for 15 minutes.\n"
        "2. Dice the vegetables while the quinoa cooks.\n"
        "Tip: let the quinoa cool slightly.\n"
        "3. Combine everything and top with feta.\n\n"
        "## Nutritional Information (per serving)\n"
        "- **Calories:** 420 kcal\n"
        "- **Protein:** 16 g\n"
        "- **Carbs:** 52 g\n"
        "- **Fat:** 17 g\n\n"
        "## Health Benefits\n"
        "- Quinoa is a complete protein.\n"
        "- Cucumber keeps you hydrated.\n\n"
        "Enjoy your meal!"
    )


@pytest.fixture
def two_day_plan_response() -> str:
    """Day 1 with breakfast only, Day 2 without meal headings."""
    return (
        "Here is your plan.\n\n"
        "## Day 1\n"
        "### Breakfast\n"
        "**Oatmeal**\n"
        "Rolled oats cooked in almond milk, topped with berries.\n\n"
        "## Day 2\n"
        "Rest day: eat intuitively.\n"
    )


@pytest.fixture
def full_day_plan_response() -> str:
    """One complete day with all four meals and mixed emphasis styles."""
    return (
        "# Day 1\n"
        "## Breakfast\n"
        "**Greek Yogurt Parfait**\n"
        "Yogurt layered with granola and honey.\n"
        "### Lunch\n"
        "_Chickpea Salad_ - chickpeas, tomatoes, parsley, lemon dressing.\n"
        "### Dinner\n"
        "**Baked Salmon** with roasted asparagus.\n"
        "### Snack\n"
        "A handful of almonds.\n"
        "# Day 2\n"
        "### Lunch\n"
        "**Lentil Soup**\n"
        "Red lentils simmered with carrots.\n"
    )


@pytest.fixture
def health_analysis_response() -> str:
    return (
        "## Findings\n"
        "Mild inflammation observed.\n\n"
        "## Recommendations\n"
        "- Follow up with your physician in 2 weeks\n"
        "- Stay hydrated\n"
    )
