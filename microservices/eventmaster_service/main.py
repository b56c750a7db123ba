"""
Eventmaster Service - Main Application

Hosts both front ends of the event gateway in one process: the FastAPI app
serves the HTML pages, /health and /metrics, and its lifespan starts and
stops the gRPC server.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import Response
import uvicorn

from core.config import GatewayConfig, get_settings
from core.logger import setup_service_logger
from core.metrics import GatewayMetrics

from .event_store import EventStore, InMemoryEventStore
from .grpc_server import EventMasterServicer, create_grpc_server
from .ui_routes import create_templates, create_ui_router

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[EventStore] = None,
    metrics: Optional[GatewayMetrics] = None,
    config: Optional[GatewayConfig] = None,
) -> FastAPI:
    """
    Build the gateway application.

    Args:
        store: Event store to serve, defaults to an InMemoryEventStore
        metrics: Shared metrics registry, created when not given
        config: Settings, defaults to the global settings

    Returns:
        FastAPI app; app.state carries store, metrics, config and, while
        running, the gRPC server and its bound port
    """
    config = config or get_settings()
    store = store or InMemoryEventStore()
    metrics = metrics or GatewayMetrics()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start the gRPC front end alongside the HTTP one"""
        grpc_server = None
        servicer = None
        try:
            if config.grpc_enabled:
                servicer = EventMasterServicer(
                    store, metrics, config.stream_buffer_size, config.stream_workers
                )
                grpc_server, port = create_grpc_server(
                    servicer, config.grpc_address, config.grpc_max_workers
                )
                grpc_server.start()
                app.state.grpc_server = grpc_server
                app.state.grpc_port = port
                logger.info(f"✅ gRPC server listening on port {port}")

            logger.info(f"[{config.service_name}] Service started on port {config.http_port}")
            yield

        finally:
            logger.info(f"[{config.service_name}] Shutting down...")
            if grpc_server is not None:
                grpc_server.stop(grace=5).wait()
                logger.info("gRPC server stopped")
            if servicer is not None:
                servicer.close()

    app = FastAPI(
        title="Eventmaster Service",
        description="Event gateway: gRPC and HTML front ends over an event store",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.metrics = metrics
    app.state.config = config

    @app.get("/health")
    async def health_check():
        """Liveness check; does not touch the store"""
        return {
            "status": "healthy",
            "service": config.service_name,
            "version": "1.0.0",
            "timestamp": datetime.utcnow().isoformat(),
        }

    @app.get("/metrics")
    async def metrics_endpoint():
        """Prometheus scrape endpoint"""
        return Response(content=metrics.export(), media_type=GatewayMetrics.content_type)

    app.include_router(create_ui_router(store, metrics, create_templates(config.templates_dir)))

    return app


# ==================== Entry point ====================

if __name__ == "__main__":
    settings = get_settings()
    setup_service_logger(settings.service_name, settings.logging)
    uvicorn.run(
        create_app(config=settings),
        host=settings.http_host,
        port=settings.http_port,
        log_level="debug" if settings.debug else "info",
    )
