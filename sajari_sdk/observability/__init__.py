"""Observability module for client-side metrics."""

from sajari_sdk.observability.metrics import (
    get_metrics,
    track_batch,
    track_rpc_request,
)

__all__ = [
    "get_metrics",
    "track_batch",
    "track_rpc_request",
]
