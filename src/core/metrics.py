"""Prometheus metrics for the Loan Decision Gateway.

Business Metrics:
- loan_decision_total: Decisions by outcome
- loan_decision_rejections_total: Rejected decisions by error code
- loan_approved_amount: Approved loan amounts
- loan_approved_period_months: Approved loan periods

Technical Metrics:
- loan_decision_latency_seconds: Decision request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

decision_total = Counter(
    "loan_decision_total",
    "Total number of loan decisions made",
    ["outcome"],  # approved, rejected
)

decision_rejections = Counter(
    "loan_decision_rejections_total",
    "Rejected loan decisions by error code",
    ["reason"],
)

approved_amount = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

approved_period = Histogram(
    "loan_approved_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 30, 36, 42, 48, 54, 60],
)


# =============================================================================
# Technical Metrics
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision request latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_approval(loan_amount: int, loan_period: int) -> None:
    """Record an approved decision."""
    decision_total.labels(outcome="approved").inc()
    approved_amount.observe(loan_amount)
    approved_period.observe(loan_period)


def record_rejection(reason: str) -> None:
    """Record a rejected decision with its error code."""
    decision_total.labels(outcome="rejected").inc()
    decision_rejections.labels(reason=reason).inc()


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
