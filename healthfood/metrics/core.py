"""In-memory metrics store for the parsers.

Counters and latency histograms are keyed by metric name plus tags
(`parser`, `status`, `field`, `error`). One registry lock guards every
update; snapshots are plain dicts for tests and debug dumps. There is
no exporter.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from threading import Lock
from typing import Deque, Dict, List, Tuple, TypedDict

MetricKey = Tuple[str, Tuple[Tuple[str, str], ...]]

LATENCY_WINDOW = 1000  # most recent samples kept per histogram


def _metric_key(name: str, tags: Dict[str, str]) -> MetricKey:
    return name, tuple(sorted(tags.items()))


@dataclass
class Counter:
    name: str
    tags: Dict[str, str]
    lock: Lock = field(repr=False)
    value: int = 0

    def inc(self, amount: int = 1) -> None:
        with self.lock:
            self.value += amount


@dataclass
class Histogram:
    name: str
    tags: Dict[str, str]
    lock: Lock = field(repr=False)
    samples: Deque[float] = field(default_factory=lambda: deque(maxlen=LATENCY_WINDOW))

    def observe(self, value: float) -> None:
        with self.lock:
            self.samples.append(value)


class CounterSnap(TypedDict):
    name: str
    tags: Dict[str, str]
    value: int


class HistogramSnap(TypedDict):
    name: str
    tags: Dict[str, str]
    count: int
    avg: float
    min: float
    max: float


class RegistrySnapshot(TypedDict):
    counters: List[CounterSnap]
    histograms: List[HistogramSnap]


class MetricsRegistry:
    def __init__(self) -> None:
        self._lock = Lock()
        self._counters: Dict[MetricKey, Counter] = {}
        self._histograms: Dict[MetricKey, Histogram] = {}

    def counter(self, name: str, **tags: str) -> Counter:
        key = _metric_key(name, tags)
        with self._lock:
            if key not in self._counters:
                self._counters[key] = Counter(name=name, tags=tags, lock=self._lock)
            return self._counters[key]

    def histogram(self, name: str, **tags: str) -> Histogram:
        key = _metric_key(name, tags)
        with self._lock:
            if key not in self._histograms:
                self._histograms[key] = Histogram(name=name, tags=tags, lock=self._lock)
            return self._histograms[key]

    def counter_value(self, name: str, **tags: str) -> int:
        """Current value of a counter, 0 if it was never incremented."""
        with self._lock:
            counter = self._counters.get(_metric_key(name, tags))
            return counter.value if counter is not None else 0

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._histograms.clear()

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            counters: List[CounterSnap] = [
                {"name": c.name, "tags": dict(c.tags), "value": c.value}
                for c in self._counters.values()
            ]
            histograms: List[HistogramSnap] = [
                _summarize(h.name, h.tags, list(h.samples)) for h in self._histograms.values()
            ]
        return {"counters": counters, "histograms": histograms}


def _summarize(name: str, tags: Dict[str, str], samples: List[float]) -> HistogramSnap:
    if not samples:
        return {"name": name, "tags": dict(tags), "count": 0, "avg": 0.0, "min": 0.0, "max": 0.0}
    return {
        "name": name,
        "tags": dict(tags),
        "count": len(samples),
        "avg": sum(samples) / len(samples),
        "min": min(samples),
        "max": max(samples),
    }


registry = MetricsRegistry()
