"""Instrumentation helpers for AI response parsing.

Metrics (all tagged with `parser`: recipe|meal_plan|health_analysis|food_validation):
* Counter parse_requests_total{parser,status}   status: success|failed
* Counter parse_errors_total{parser,error}      error: exception class name
* Counter parse_field_default_total{parser,field}
* Histogram parse_latency_ms{parser}

Recording is skipped entirely when PARSER_METRICS_ENABLED is off.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from healthfood.config import metrics_enabled

from .core import registry, RegistrySnapshot

REQUESTS_TOTAL = "parse_requests_total"
FIELD_DEFAULT_TOTAL = "parse_field_default_total"
LATENCY_MS = "parse_latency_ms"


def record_parse_success(parser: str) -> None:
    if not metrics_enabled():
        return
    registry.counter(REQUESTS_TOTAL, parser=parser, status="success").inc()


def record_parse_failed(parser: str, *, error: str) -> None:
    """Count a parse that fell back to the all-defaults record."""
    if not metrics_enabled():
        return
    registry.counter(REQUESTS_TOTAL, parser=parser, status="failed").inc()
    registry.counter("parse_errors_total", parser=parser, error=error).inc()


def record_field_default(parser: str, field: str) -> None:
    """Count a single field that yielded nothing and kept its default."""
    if not metrics_enabled():
        return
    registry.counter(FIELD_DEFAULT_TOTAL, parser=parser, field=field).inc()


def record_latency_ms(parser: str, ms: float) -> None:
    if not metrics_enabled():
        return
    registry.histogram(LATENCY_MS, parser=parser).observe(ms)


@contextmanager
def time_parse(parser: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        record_latency_ms(parser, (time.perf_counter() - start) * 1000.0)


def snapshot() -> RegistrySnapshot:  # pragma: no cover - passthrough
    return registry.snapshot()


def reset_all() -> None:
    """Reset every metric (test utility)."""
    registry.reset()
