#!/usr/bin/env python3
"""
Core Module for the Event Gateway

Shared infrastructure used by the eventmaster service.

COMPONENTS:
    - config/: Environment-driven gateway and logging settings
    - logger.py: Service logger setup (console, file, JSON)
    - metrics.py: Prometheus request metrics for both front ends
    - grpc_client_base.py: Base class for gRPC clients

USAGE:
    from core.config import get_settings
    from core.metrics import GatewayMetrics

    settings = get_settings()
    metrics = GatewayMetrics()
"""

__version__ = "1.0.0"
