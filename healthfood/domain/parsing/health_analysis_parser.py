"""
Health analysis extraction from medical image / report analysis responses.
"""

from __future__ import annotations

from typing import Optional

import structlog

from healthfood.domain.parsing.models import ParsedHealthAnalysis
from healthfood.domain.parsing.sections import (
    ensure_text,
    extract_list_items,
    find_section,
    first_paragraph,
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

PARSER_NAME = "health_analysis"

FINDINGS_SECTION = "Findings"
RECOMMENDATIONS_SECTION = "Recommendations"
# Checked in order, first heading present wins
DIET_SECTIONS = ("Dietary Recommendations", "Dietary", "Diet")


def _diet_section(text: str) -> str:
    for name in DIET_SECTIONS:
        section: Optional[str] = find_section(text, name)
        if section is not None:
            return section
    return ""


def _extract_health_analysis(raw_response: str) -> ParsedHealthAnalysis:
    text = ensure_text(raw_response)

    findings = locate_section(text, FINDINGS_SECTION).strip()
    if not findings:
        record_field_default(PARSER_NAME, "findings")
        findings = first_paragraph(text)

    recommendations = extract_list_items(locate_section(text, RECOMMENDATIONS_SECTION))
    if not recommendations:
        record_field_default(PARSER_NAME, "recommendations")

    diet_recommendations = extract_list_items(_diet_section(text))
    if not diet_recommendations:
        record_field_default(PARSER_NAME, "dietRecommendations")

    return ParsedHealthAnalysis(
        findings=findings,
        recommendations=recommendations,
        diet_recommendations=diet_recommendations,
    )


def parse_health_analysis(raw_response: str) -> ParsedHealthAnalysis:
    """
    Parse a health analysis response.

    Findings come from a "Findings" section or, when there is none, from
    the first paragraph of the response.

    Args:
        raw_response: Model completion text

    Returns:
        ParsedHealthAnalysis; all-empty when parsing failed
    """
    with time_parse(PARSER_NAME):
        try:
            analysis = _extract_health_analysis(raw_response)
        except Exception as e:
            logger.warning(
                "Health analysis parsing failed, returning defaults",
                error=str(e),
                error_type=type(e).__name__,
                raw_preview=preview_text(raw_response),
            )
            record_parse_failed(PARSER_NAME, error=type(e).__name__)
            return ParsedHealthAnalysis()

    record_parse_success(PARSER_NAME)
    logger.debug(
        "Health analysis parsed",
        findings_chars=len(analysis.findings),
        recommendations=len(analysis.recommendations),
        diet_recommendations=len(analysis.diet_recommendations),
    )
    return analysis
