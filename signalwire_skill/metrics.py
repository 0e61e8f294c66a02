from __future__ import annotations

import time
from contextlib import contextmanager


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def inc(self, n: int = 1) -> None:
        self.value += n

    def reset(self) -> None:
        self.value = 0


class Gauge:
    def __init__(self) -> None:
        self.value = 0

    def set(self, v: int) -> None:
        self.value = v


class Timer:
    def __init__(self) -> None:
        self.last_ms: float | None = None
        self._start: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> float | None:
        if self._start is None:
            return None
        self.last_ms = (time.perf_counter() - self._start) * 1000
        self._start = None
        return self.last_ms

    @contextmanager
    def time(self):  # noqa: ANN201
        self.start()
        try:
            yield self
        finally:
            self.stop()


documents_loaded = Gauge()
lookups_total = Counter()
lookup_misses_total = Counter()
activation_checks_total = Counter()
activations_total = Counter()
bundle_load_ms = Timer()


def snapshot() -> dict[str, float | int | None]:
    """Return the current metric values keyed by name."""
    return {
        "documents_loaded": documents_loaded.value,
        "lookups_total": lookups_total.value,
        "lookup_misses_total": lookup_misses_total.value,
        "activation_checks_total": activation_checks_total.value,
        "activations_total": activations_total.value,
        "bundle_load_ms": bundle_load_ms.last_ms,
    }
