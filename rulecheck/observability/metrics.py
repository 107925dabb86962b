"""
Prometheus metrics collection for rulecheck

This module provides metrics instrumentation for monitoring
validation outcomes, failing rules and validation latency.
"""
import os
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from typing import Optional


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation runs counter
validations_total = Counter(
    name="rulecheck_validations_total",
    documentation="Total number of validation runs",
    labelnames=["status"],  # status: passed, failed
    registry=REGISTRY,
)

# Failing rules counter
rule_failures_total = Counter(
    name="rulecheck_rule_failures_total",
    documentation="Total number of failed rule evaluations",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Unknown rule names counter
unknown_rules_total = Counter(
    name="rulecheck_unknown_rules_total",
    documentation="Total number of rule tokens skipped because the rule is not registered",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Predicate errors counter
predicate_errors_total = Counter(
    name="rulecheck_predicate_errors_total",
    documentation="Total number of predicates that raised instead of returning a result",
    labelnames=["rule"],
    registry=REGISTRY,
)

# Validation duration histogram
validation_duration_seconds = Histogram(
    name="rulecheck_validation_duration_seconds",
    documentation="Time spent in one validation run in seconds",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Lazy import: avoids port binding on import
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


# =======================
# CONTEXT MANAGERS
# =======================

class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        """
        Initialize duration tracker

        Args:
            histogram: Prometheus Histogram metric
            **labels: Label values for the metric (omit for unlabelled histograms)
        """
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        metric = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = metric.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


# =======================
# VALIDATION HELPERS
# =======================

def record_validation(passed: bool) -> None:
    """Record the outcome of one validation run."""
    increment_counter(validations_total, 1, status="passed" if passed else "failed")


def record_rule_failure(rule: str) -> None:
    increment_counter(rule_failures_total, 1, rule=rule)


def record_unknown_rule(rule: str) -> None:
    increment_counter(unknown_rules_total, 1, rule=rule)


def record_predicate_error(rule: str) -> None:
    increment_counter(predicate_errors_total, 1, rule=rule)
