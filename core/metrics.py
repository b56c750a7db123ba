#!/usr/bin/env python3
"""
Gateway Metrics

Process-wide request metrics for the gRPC and HTTP front ends.

A single GatewayMetrics is created at startup and handed to every component
that records metrics. It owns its own CollectorRegistry so tests can build
isolated instances without colliding on the global default registry.
"""

import time
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

# Milliseconds
LATENCY_BUCKETS = (1, 2.5, 5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000)

SUCCESS = "0"
FAILURE = "1"


def ms_since(start: float) -> float:
    """Elapsed milliseconds since a time.monotonic() reading."""
    return (time.monotonic() - start) * 1000.0


class RequestMetrics:
    """Latency histogram plus success/failure counter for one transport"""

    def __init__(self, transport: str, label: str, registry: CollectorRegistry, namespace: str):
        self.latencies = Histogram(
            f"{transport}_request_latency_ms",
            f"Latency of {transport} requests in milliseconds",
            [label],
            namespace=namespace,
            buckets=LATENCY_BUCKETS,
            registry=registry,
        )
        self.responses = Counter(
            f"{transport}_responses",
            f"{transport} responses by {label} and error flag",
            [label, "error"],
            namespace=namespace,
            registry=registry,
        )

    def observe(self, name: str, elapsed_ms: float):
        self.latencies.labels(name).observe(elapsed_ms)

    def success(self, name: str):
        self.responses.labels(name, SUCCESS).inc()

    def failure(self, name: str):
        self.responses.labels(name, FAILURE).inc()


class GatewayMetrics:
    """Metrics registry shared by both front ends"""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: Optional[CollectorRegistry] = None, namespace: str = "eventmaster"):
        self.registry = registry or CollectorRegistry()
        self.namespace = namespace
        self.grpc = RequestMetrics("grpc", "method", self.registry, namespace)
        self.http = RequestMetrics("http", "route", self.registry, namespace)

    def export(self) -> bytes:
        """Render the registry in the Prometheus text exposition format"""
        return generate_latest(self.registry)
