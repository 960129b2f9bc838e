"""In-process parse metrics."""

from healthfood.metrics.core import registry, MetricsRegistry
from healthfood.metrics.parsing import (
    record_parse_success,
    record_parse_failed,
    record_field_default,
    time_parse,
    snapshot,
    reset_all,
)

__all__ = [
    "registry",
    "MetricsRegistry",
    "record_parse_success",
    "record_parse_failed",
    "record_field_default",
    "time_parse",
    "snapshot",
    "reset_all",
]
