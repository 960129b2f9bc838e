"""
Section and list primitives shared by every extractor.

A section is the text between a `#`/`##` heading and the next heading of
equal-or-higher rank. `#` outranks `##`; deeper headings (`###`) never
close a section.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

from healthfood.config import get_log_preview_chars
from healthfood.domain.shared.errors import ParsingError

_HEADING_RE = re.compile(r"^[ \t]*(#{1,2})[ \t]+(.*)$", re.MULTILINE)
_LIST_ITEM_RE = re.compile(r"^(?:-|\d+\.)\s*(.*)$")
_PARAGRAPH_BREAK_RE = re.compile(r"\r?\n[ \t\r]*\n")


def _heading_matches(heading_text: str, name: str) -> bool:
    pattern = re.escape(name.strip()) + r"(?!\w)"
    return re.match(pattern, heading_text, re.IGNORECASE) is not None


def find_section(text: str, name: str) -> Optional[str]:
    """Locate a named section.

    Args:
        text: Raw response
        name: Heading label, matched case-insensitively as a prefix of
            the heading text ("Ingredients" matches "## Ingredients:")

    Returns:
        Section body (may be empty) or None when no heading matches
    """
    headings = list(_HEADING_RE.finditer(text))
    for index, heading in enumerate(headings):
        if not _heading_matches(heading.group(2).strip(), name):
            continue
        rank = len(heading.group(1))
        end = len(text)
        for following in headings[index + 1 :]:
            if len(following.group(1)) <= rank:
                end = following.start()
                break
        return text[heading.end() : end]
    return None


def locate_section(text: str, name: str) -> str:
    """Like find_section, but an absent section is just empty text."""
    return find_section(text, name) or ""


def extract_list_items(section: str) -> List[str]:
    """Collect `-` bullets and `N.` items in order, markers stripped.

    Lines without a list marker are skipped, as are items left empty
    once the marker is removed.
    """
    items: List[str] = []
    for line in section.splitlines():
        match = _LIST_ITEM_RE.match(line.strip())
        if not match:
            continue
        item = match.group(1).strip()
        if item:
            items.append(item)
    return items


def first_paragraph(text: str) -> str:
    """Text up to the first blank line, trimmed."""
    return _PARAGRAPH_BREAK_RE.split(text.strip(), maxsplit=1)[0].strip()


def preview_text(raw: Any) -> str:
    """Truncated raw response for diagnostic logs."""
    limit = get_log_preview_chars()
    text = raw if isinstance(raw, str) else repr(raw)
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def ensure_text(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ParsingError(f"RAW_RESPONSE_NOT_TEXT: {type(raw).__name__}")
    return raw
