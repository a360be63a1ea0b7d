"""Prometheus metrics for the practice-plan service.

Metrics:
    plan_requests_total          Counter by status (success/error)
    plan_latency_seconds         Histogram of end-to-end plan generation latency
    plan_tokens_total            Counter of LLM tokens by direction (input/output)

Usage::

    from infrastructure.metrics import LatencyTimer, record_plan_request

    with LatencyTimer() as t:
        result = planner.create_plan(assessment)
    record_plan_request(status="success", latency_seconds=t.elapsed)
"""

from __future__ import annotations

import time

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_REGISTRY = CollectorRegistry()

plan_requests_total = Counter(
    "gpp_plan_requests_total",
    "Total /api/generate-plan requests by status",
    ["status"],
    registry=_REGISTRY,
)

plan_latency_seconds = Histogram(
    "gpp_plan_latency_seconds",
    "End-to-end /api/generate-plan latency in seconds",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0],
    registry=_REGISTRY,
)

plan_tokens_total = Counter(
    "gpp_plan_tokens_total",
    "LLM tokens consumed by plan generation",
    ["direction"],
    registry=_REGISTRY,
)


def record_plan_request(*, status: str, latency_seconds: float | None = None) -> None:
    """Record a completed plan request.

    Args:
        status: ``"success"`` or ``"error"``.
        latency_seconds: End-to-end wall-clock time in seconds. ``None``
            when the request failed before generation started.
    """
    plan_requests_total.labels(status=status).inc()
    if latency_seconds is not None:
        plan_latency_seconds.observe(latency_seconds)


def record_plan_tokens(*, input_tokens: int, output_tokens: int) -> None:
    """Add token usage from one generation call."""
    plan_tokens_total.labels(direction="input").inc(input_tokens)
    plan_tokens_total.labels(direction="output").inc(output_tokens)


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
    """
    return generate_latest(_REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    Usage::

        with LatencyTimer() as t:
            result = run_pipeline()
        record_plan_request(status="success", latency_seconds=t.elapsed)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: object) -> None:
        """Stop timing and record elapsed."""
        self.elapsed = time.perf_counter() - self._start
