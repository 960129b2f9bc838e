"""Interpretation of the YES/NO food image validation answer."""

from __future__ import annotations

import re

import structlog

from healthfood.domain.parsing.models import FoodValidationResult
from healthfood.domain.parsing.sections import ensure_text, preview_text
from healthfood.metrics.parsing import record_parse_failed, record_parse_success, time_parse

logger = structlog.get_logger(__name__)

PARSER_NAME = "food_validation"

# Leading answer word, tolerating markdown emphasis/quotes ("**YES**.", "No -")
_ANSWER_RE = re.compile(r"^[\s*_\"'`#>]*(yes|no)\b[\s*_\"'`]*[.,:;!\-–]*\s*", re.IGNORECASE)


def _extract_food_validation(raw_response: str) -> FoodValidationResult:
    text = ensure_text(raw_response)

    answer = _ANSWER_RE.match(text)
    if answer is not None:
        return FoodValidationResult(
            is_food=answer.group(1).lower() == "yes",
            explanation=text[answer.end() :].strip(),
        )

    # No leading answer word: any upper-case YES counts as a positive answer
    return FoodValidationResult(is_food="YES" in text, explanation=text.strip())


def parse_food_validation(raw_response: str) -> FoodValidationResult:
    """
    Parse the food image validation answer.

    Example:
        >>> parse_food_validation("YES. A bowl of pasta with basil.").is_food
        True
    """
    with time_parse(PARSER_NAME):
        try:
            result = _extract_food_validation(raw_response)
        except Exception as e:
            logger.warning(
                "Food validation parsing failed, treating image as non-food",
                error=str(e),
                error_type=type(e).__name__,
                raw_preview=preview_text(raw_response),
            )
            record_parse_failed(PARSER_NAME, error=type(e).__name__)
            return FoodValidationResult()

    record_parse_success(PARSER_NAME)
    return result
