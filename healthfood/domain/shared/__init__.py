"""Shared domain primitives."""

from healthfood.domain.shared.errors import (
    DomainError,
    ParsingError,
    UnknownParseModeError,
)

__all__ = ["DomainError", "ParsingError", "UnknownParseModeError"]
