"""
Domain exceptions.

Typed exceptions for explicit error handling.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# PARSING EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ParsingError(DomainError):
    """
    AI response could not be parsed.

    Raised inside the extractors when:
    - Raw response is not text
    - A structural assumption about the response breaks

    Never leaves an extractor: the public parse functions catch it at
    their boundary and return the all-defaults record.

    Example:
        >>> raise ParsingError("RAW_RESPONSE_NOT_TEXT")
    """

    pass


class UnknownParseModeError(DomainError, ValueError):
    """
    Requested parse mode does not exist.

    Raised by the dispatcher for caller mistakes (mode string typo),
    never for malformed AI output.

    Example:
        >>> raise UnknownParseModeError("Unknown parse mode: 'recipes'")
    """

    pass
