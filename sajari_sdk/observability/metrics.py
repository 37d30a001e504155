"""Prometheus metrics for SDK calls.

Provides metrics instrumentation for:
- RPC latency and counts per method
- Batch sizes and per-item failures for Multi operations
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

RPC_REQUEST_DURATION = Histogram(
    "sajari_rpc_duration_seconds",
    "RPC duration in seconds",
    ["method", "status"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

RPC_REQUEST_TOTAL = Counter(
    "sajari_rpc_requests_total",
    "Total RPCs issued",
    ["method", "status"],
)

BATCH_SIZE = Histogram(
    "sajari_batch_size",
    "Number of items in a batch call",
    ["operation"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

BATCH_ITEM_ERRORS = Counter(
    "sajari_batch_item_errors_total",
    "Items in batch calls that returned a non-OK status",
    ["operation"],
)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get the content type for metrics output."""
    return CONTENT_TYPE_LATEST


def track_rpc_request(
    method: str,
    duration: float,
    success: bool = True,
) -> None:
    """Track RPC metrics.

    Args:
        method: Fully qualified RPC method name.
        duration: Call duration in seconds.
        success: Whether the call succeeded at the transport level.
    """
    status = "success" if success else "error"

    RPC_REQUEST_DURATION.labels(method=method, status=status).observe(duration)
    RPC_REQUEST_TOTAL.labels(method=method, status=status).inc()


def track_batch(
    operation: str,
    size: int,
    failed: int = 0,
) -> None:
    """Track batch call metrics.

    Args:
        operation: Batch operation name (add, get, delete, ...).
        size: Number of items sent.
        failed: Number of items with a non-OK status.
    """
    BATCH_SIZE.labels(operation=operation).observe(size)
    if failed:
        BATCH_ITEM_ERRORS.labels(operation=operation).inc(failed)
