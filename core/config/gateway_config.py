#!/usr/bin/env python3
"""Gateway configuration

Listen addresses and runtime knobs for the event gateway: the HTTP form
front end, the gRPC front end and the streaming hand-off buffer.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from .logging_config import LoggingConfig

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


_DEFAULT_TEMPLATES_DIR = str(
    Path(__file__).resolve().parents[2] / "microservices" / "eventmaster_service" / "templates"
)


@dataclass
class GatewayConfig:
    """Event gateway settings"""

    service_name: str = "eventmaster_service"
    environment: str = "development"
    debug: bool = False

    # ===========================================
    # HTTP (form front end, /metrics, /health)
    # ===========================================
    http_host: str = "0.0.0.0"
    http_port: int = 8090

    # ===========================================
    # gRPC front end
    # ===========================================
    grpc_enabled: bool = True
    grpc_host: str = "0.0.0.0"
    grpc_port: int = 50052
    grpc_max_workers: int = 10

    # Max event ids buffered between the store and a GetEventIDs stream
    stream_buffer_size: int = 1000
    # Max GetEventIDs store scans running at once
    stream_workers: int = 10

    templates_dir: str = _DEFAULT_TEMPLATES_DIR

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def grpc_address(self) -> str:
        return f"{self.grpc_host}:{self.grpc_port}"

    @classmethod
    def from_env(cls) -> 'GatewayConfig':
        """Load gateway configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            service_name=os.getenv("SERVICE_NAME", "eventmaster_service"),
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),

            http_host=os.getenv("HTTP_HOST", "0.0.0.0"),
            http_port=_int(os.getenv("HTTP_PORT", "8090"), 8090),

            grpc_enabled=_bool(os.getenv("GRPC_ENABLED", "true")),
            grpc_host=os.getenv("GRPC_HOST", "0.0.0.0"),
            grpc_port=_int(os.getenv("GRPC_PORT", "50052"), 50052),
            grpc_max_workers=_int(os.getenv("GRPC_MAX_WORKERS", "10"), 10),

            stream_buffer_size=_int(os.getenv("STREAM_BUFFER_SIZE", "1000"), 1000),
            stream_workers=_int(os.getenv("STREAM_WORKERS", "10"), 10),
            templates_dir=os.getenv("TEMPLATES_DIR", _DEFAULT_TEMPLATES_DIR),

            logging=LoggingConfig.from_env(),
        )
