"""
Unit tests for section and list primitives.
"""

import time

import pytest

from healthfood.domain.parsing.sections import (
    ensure_text,
    extract_list_items,
    find_section,
    first_paragraph,
    locate_section,
    preview_text,
)
from healthfood.domain.shared.errors import ParsingError


class TestLocateSection:
    """Test heading-delimited section lookup."""

    def test_section_ends_at_next_same_rank_heading(self) -> None:
        """Should stop at the next ## heading."""
        text = "## Ingredients\n- tomato\n## Instructions\n1. Boil"
        assert locate_section(text, "Ingredients").strip() == "- tomato"

    def test_section_runs_to_end_of_text(self) -> None:
        """Should run to end when no heading follows."""
        text = "## Instructions\n1. Boil\n2. Blend"
        assert locate_section(text, "Instructions").strip() == "1. Boil\n2. Blend"

    def test_case_insensitive_heading(self) -> None:
        """Should match heading regardless of case."""
        text = "## INGREDIENTS\n- salt"
        assert locate_section(text, "Ingredients").strip() == "- salt"

    def test_top_level_heading_accepted(self) -> None:
        """Should accept # as well as ##."""
        text = "# Findings\nAll clear.\n# Recommendations\n- rest"
        assert locate_section(text, "Findings").strip() == "All clear."

    def test_top_level_section_includes_lower_rank_headings(self) -> None:
        """Should not close a # section at a ## heading."""
        text = "# Findings\nOverview\n## Detail\nMore\n# Other\nx"
        section = locate_section(text, "Findings")
        assert "## Detail" in section
        assert "More" in section
        assert "Other" not in section

    def test_sub_level_section_closed_by_top_level_heading(self) -> None:
        """Should close a ## section at a # heading."""
        text = "## Ingredients\n- salt\n# Next Recipe\n- sugar"
        assert extract_list_items(locate_section(text, "Ingredients")) == ["salt"]

    def test_third_rank_heading_does_not_close_section(self) -> None:
        """Should keep ### headings inside the section."""
        text = "## Instructions\n### Prep\n1. Chop\n### Cook\n2. Fry"
        assert extract_list_items(locate_section(text, "Instructions")) == ["Chop", "Fry"]

    def test_missing_section_is_empty(self) -> None:
        """Should return empty string, never fail."""
        assert locate_section("no headings here", "Ingredients") == ""
        assert locate_section("", "Ingredients") == ""

    def test_heading_with_suffix(self) -> None:
        """Should match headings that extend the name."""
        text = "## Nutritional Information (per serving)\nCalories: 300"
        assert "Calories: 300" in locate_section(text, "Nutritional Information")

    def test_name_must_end_on_word_boundary(self) -> None:
        """Should not match a longer word sharing the prefix."""
        text = "## Dietitian notes\n- eat greens"
        assert find_section(text, "Diet") is None

    def test_name_is_literal(self) -> None:
        """Should escape regex characters in the name."""
        text = "## Tips (optional)\n- rest\n## Other\n"
        assert extract_list_items(locate_section(text, "Tips (optional)")) == ["rest"]

    def test_heading_must_start_line(self) -> None:
        """Should ignore ## inside a sentence."""
        text = "Use ## Ingredients as header\n- salt"
        assert find_section(text, "Ingredients") is None

    def test_first_matching_heading_wins(self) -> None:
        """Should use the first occurrence."""
        text = "## Ingredients\n- a\n## Ingredients\n- b"
        assert extract_list_items(locate_section(text, "Ingredients")) == ["a"]


class TestFindSection:
    """Test absent vs empty distinction."""

    def test_absent_is_none(self) -> None:
        """Should return None when heading is missing."""
        assert find_section("## Other\ntext", "Diet") is None

    def test_present_but_empty(self) -> None:
        """Should return empty body for heading directly followed by another."""
        assert find_section("## Diet\n## Other\n- x", "Diet") == "\n"

    def test_heading_with_long_padding(self) -> None:
        """Should scan a heading padded with spaces in linear time."""
        text = "# a" + " " * 50_000 + "b\n## Ingredients\n- x"

        start = time.perf_counter()
        section = find_section(text, "Ingredients")
        elapsed = time.perf_counter() - start

        assert section == "\n- x"
        assert elapsed < 1.0

    def test_trailing_spaces_after_heading(self) -> None:
        """Should ignore whitespace after the heading text."""
        assert find_section("## Diet   \n- less salt", "Diet") == "\n- less salt"


class TestExtractListItems:
    """Test list item extraction."""

    def test_dash_and_numbered_items(self) -> None:
        """Should collect both marker styles in order."""
        section = "- first\n2. second\n- third"
        assert extract_list_items(section) == ["first", "second", "third"]

    def test_prose_lines_skipped(self) -> None:
        """Should ignore lines without a marker."""
        section = "Intro text\n- item\nmore prose\n10. last"
        assert extract_list_items(section) == ["item", "last"]

    def test_indented_items(self) -> None:
        """Should strip surrounding whitespace."""
        assert extract_list_items("   -   spaced item   \n\t3.\tTabbed") == [
            "spaced item",
            "Tabbed",
        ]

    def test_empty_items_dropped(self) -> None:
        """Should discard markers with no content."""
        assert extract_list_items("-\n1.\n-   \n- real") == ["real"]

    def test_marker_without_space(self) -> None:
        """Should accept items glued to the marker."""
        assert extract_list_items("-salt\n1.Boil") == ["salt", "Boil"]

    def test_only_leading_marker_removed(self) -> None:
        """Should keep inner numbers and dashes."""
        assert extract_list_items("1. Add 2. cups - sifted") == ["Add 2. cups - sifted"]

    def test_other_bullets_not_items(self) -> None:
        """Should not treat * bullets or bare numbers as items."""
        assert extract_list_items("* star\n1) paren\n42 apples") == []

    def test_empty_section(self) -> None:
        """Should return empty list."""
        assert extract_list_items("") == []


class TestFirstParagraph:
    """Test findings fallback helper."""

    def test_stops_at_blank_line(self) -> None:
        """Should return text before first blank line."""
        assert first_paragraph("Line one\nline two\n\nSecond paragraph") == "Line one\nline two"

    def test_whitespace_only_blank_line(self) -> None:
        """Should treat whitespace-only lines as blank."""
        assert first_paragraph("First\n   \nSecond") == "First"

    def test_leading_blank_lines_ignored(self) -> None:
        """Should skip blank lines before the first paragraph."""
        assert first_paragraph("\n\nFirst\n\nSecond") == "First"

    def test_crlf_blank_line(self) -> None:
        """Should split on Windows line endings."""
        assert first_paragraph("Intro line\r\n\r\nSecond para") == "Intro line"
        assert first_paragraph("Intro line\r\n  \r\nSecond para") == "Intro line"

    def test_empty_text(self) -> None:
        """Should return empty string."""
        assert first_paragraph("") == ""


class TestDiagnostics:
    """Test helpers used by the extractor boundaries."""

    def test_preview_truncates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should cut long responses to the configured size."""
        monkeypatch.setenv("PARSER_LOG_PREVIEW_CHARS", "5")
        assert preview_text("abcdefgh") == "abcde..."
        assert preview_text("abc") == "abc"

    def test_preview_non_text(self) -> None:
        """Should describe non-string input without failing."""
        assert preview_text(None) == "None"

    def test_ensure_text_rejects_non_string(self) -> None:
        """Should raise ParsingError for non-text input."""
        with pytest.raises(ParsingError):
            ensure_text(b"bytes")

    def test_ensure_text_passthrough(self) -> None:
        """Should return strings unchanged."""
        assert ensure_text("ok") == "ok"
