#!/usr/bin/env python3
"""
Base gRPC Client

Shared connection handling for gRPC clients: lazy, thread-safe channel
creation, keepalive options, and tenacity retries for idempotent calls.
"""

import grpc
import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

logger = logging.getLogger(__name__)

# Status codes worth retrying; anything else is the server's final answer
RETRYABLE_CODES = (grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED)


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, grpc.RpcError) and error.code() in RETRYABLE_CODES


class BaseGRPCClient(ABC):
    """gRPC client base class"""

    def __init__(self, host: str = 'localhost', port: Optional[int] = None,
                 lazy_connect: bool = True, enable_retry: bool = True, timeout: Optional[float] = 30.0):
        """
        Args:
            host: Server host
            port: Server port, defaults to default_port()
            lazy_connect: Open the channel on first call instead of now
            enable_retry: Retry idempotent calls on UNAVAILABLE / DEADLINE_EXCEEDED
            timeout: Per-call deadline in seconds
        """
        self.host = host
        self.port = port or self.default_port()
        self.address = f'{self.host}:{self.port}'
        self.enable_retry = enable_retry
        self.timeout = timeout

        self.channel = None
        self.stub = None
        self._connect_lock = threading.Lock()
        self._connected = False

        if not lazy_connect:
            self._ensure_connected()

    def _ensure_connected(self):
        """Open the channel once (thread-safe lazy connect)"""
        if self._connected and self.channel is not None:
            return

        with self._connect_lock:
            # Double-check after acquiring lock
            if self._connected and self.channel is not None:
                return

            logger.debug(f"[{self.service_name()}] Connecting to {self.address}...")

            options = [
                ('grpc.max_receive_message_length', 100 * 1024 * 1024),  # 100MB
                ('grpc.max_send_message_length', 100 * 1024 * 1024),     # 100MB
                ('grpc.keepalive_time_ms', 30000),
                ('grpc.keepalive_timeout_ms', 10000),
                ('grpc.http2.max_pings_without_data', 0),
                ('grpc.keepalive_permit_without_calls', 1),
            ]

            self.channel = grpc.insecure_channel(self.address, options=options)
            self.stub = self._create_stub()
            self._connected = True
            logger.debug(f"[{self.service_name()}] Connected successfully to {self.address}")

    @abstractmethod
    def _create_stub(self):
        """Create the service stub for self.channel"""

    @abstractmethod
    def service_name(self) -> str: ...

    @abstractmethod
    def default_port(self) -> int: ...

    def _call(self, func, *args, **kwargs):
        """Single RPC attempt"""
        self._ensure_connected()
        return func(*args, timeout=self.timeout, **kwargs)

    def _call_with_retry(self, func, *args, **kwargs):
        """RPC call retried on transient failures; only for idempotent calls"""
        if not self.enable_retry:
            return self._call(func, *args, **kwargs)

        @retry(
            stop=stop_after_attempt(3),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception(_is_retryable),
            reraise=True
        )
        def _retry_wrapper():
            return self._call(func, *args, **kwargs)

        try:
            return _retry_wrapper()
        except grpc.RpcError as e:
            logger.error(f"[{self.service_name()}] RPC failed: {e.code()} - {e.details()}")
            raise

    def close(self):
        """Close the channel"""
        if self.channel is not None:
            self.channel.close()
            self.channel = None
            self._connected = False
            logger.debug(f"[{self.service_name()}] Connection closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
