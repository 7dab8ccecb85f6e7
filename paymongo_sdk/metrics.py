"""
Prometheus metrics for PayMongo API calls

Series live on the default prometheus_client registry; the host application
exposes it.
"""

import logging
import time

from prometheus_client import Counter, Histogram

from .exceptions import APIError

logger = logging.getLogger("paymongo_sdk.metrics")

REQUEST_COUNT = Counter(
    "paymongo_sdk_requests_total",
    "PayMongo API calls by operation and HTTP status (0 when no response arrived)",
    ["endpoint", "code"],
)

REQUEST_LATENCY = Histogram(
    "paymongo_sdk_request_latency_seconds",
    "PayMongo API call duration in seconds",
    ["endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

API_ERRORS = Counter(
    "paymongo_sdk_api_errors_total",
    "Entries of the PayMongo errors array, by provider error code",
    ["endpoint", "error_code"],
)


def metrics_request(endpoint: str, code: int, started: float) -> None:
    """
    Count one call and observe its duration

    Args:
        endpoint: Operation name, e.g. ``create_checkout``
        code: HTTP status, or 0 when the transport failed
        started: ``time.time()`` taken before the call
    """
    try:
        REQUEST_COUNT.labels(endpoint=endpoint, code=str(code)).inc()
        REQUEST_LATENCY.labels(endpoint=endpoint).observe(time.time() - started)
    except Exception as e:
        logger.debug("Failed to record metrics for %s: %s", endpoint, e)


def metrics_api_error(endpoint: str, error: APIError) -> None:
    codes = [detail.code for detail in error.errors] or ["none"]
    try:
        for code in codes:
            API_ERRORS.labels(endpoint=endpoint, error_code=code).inc()
    except Exception as e:
        logger.debug("Failed to record API error metrics for %s: %s", endpoint, e)
