"""
Shared Test Fixtures

Factories and metric helpers used across all test layers.

Structure:
    - eventmaster_fixtures.py: Event/topic/DC factories, metric readers
"""

from .eventmaster_fixtures import (
    make_event_id,
    make_event,
    make_seeded_store,
    sample_value,
    grpc_count,
    grpc_latency_count,
    http_count,
)

__all__ = [
    "make_event_id",
    "make_event",
    "make_seeded_store",
    "sample_value",
    "grpc_count",
    "grpc_latency_count",
    "http_count",
]
