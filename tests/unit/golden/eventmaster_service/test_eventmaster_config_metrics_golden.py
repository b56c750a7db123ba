"""
Gateway Config and Metrics Golden Tests

🔒 GOLDEN: These tests document environment-driven settings, logger setup
   and the Prometheus exposition of request metrics.

Usage:
    pytest tests/unit/golden -v
"""
import dataclasses
import json
import logging

import pytest

from core.config import GatewayConfig, LoggingConfig
from core.logger import JSONFormatter, setup_service_logger
from core.metrics import GatewayMetrics

pytestmark = [pytest.mark.unit, pytest.mark.golden]


class TestGatewayConfigChar:
    """Characterization: GatewayConfig"""

    def test_defaults(self):
        config = GatewayConfig()
        assert config.http_port == 8090
        assert config.grpc_port == 50052
        assert config.grpc_enabled is True
        assert config.stream_buffer_size == 1000
        assert config.templates_dir.endswith("templates")

    def test_grpc_address(self):
        assert GatewayConfig(grpc_host="127.0.0.1", grpc_port=6000).grpc_address == "127.0.0.1:6000"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HTTP_PORT", "9000")
        monkeypatch.setenv("GRPC_PORT", "7000")
        monkeypatch.setenv("GRPC_ENABLED", "false")
        monkeypatch.setenv("STREAM_BUFFER_SIZE", "10")
        monkeypatch.setenv("STREAM_WORKERS", "3")
        monkeypatch.setenv("DEBUG", "true")

        config = GatewayConfig.from_env()

        assert config.http_port == 9000
        assert config.grpc_port == 7000
        assert config.grpc_enabled is False
        assert config.stream_buffer_size == 10
        assert config.stream_workers == 3
        assert config.debug is True

    def test_bad_port_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("HTTP_PORT", "not-a-port")
        assert GatewayConfig.from_env().http_port == 8090


class TestLoggingChar:
    """Characterization: service logger setup"""

    def test_logging_config_holds_only_logger_settings(self):
        assert set(dataclasses.asdict(LoggingConfig())) == {
            "log_level", "log_format", "log_file", "enable_console", "enable_structured",
        }

    def test_logging_config_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FILE", "/tmp/eventmaster.log")
        monkeypatch.setenv("LOG_CONSOLE", "false")
        monkeypatch.setenv("ENABLE_STRUCTURED_LOGGING", "true")

        config = LoggingConfig.from_env()

        assert config.log_level == "WARNING"
        assert config.log_file == "/tmp/eventmaster.log"
        assert config.enable_console is False
        assert config.enable_structured is True

    def test_json_formatter_fields(self):
        record = logging.LogRecord("eventmaster.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
        payload = json.loads(JSONFormatter("eventmaster").format(record))

        assert payload["service"] == "eventmaster"
        assert payload["level"] == "INFO"
        assert payload["message"] == "hello world"
        assert payload["logger"] == "eventmaster.test"

    def test_setup_does_not_duplicate_handlers(self):
        root = logging.getLogger()
        config = LoggingConfig(log_level="INFO", enable_console=True)
        try:
            setup_service_logger("eventmaster", config)
            logger = setup_service_logger("eventmaster", config)

            marked = [h for h in root.handlers if getattr(h, "_service_handler", False)]
            assert len(marked) == 1
            assert logger.name == "eventmaster"
        finally:
            for handler in list(root.handlers):
                if getattr(handler, "_service_handler", False):
                    root.removeHandler(handler)


class TestGatewayMetricsChar:
    """Characterization: GatewayMetrics exposition"""

    def test_instances_do_not_share_state(self):
        first, second = GatewayMetrics(), GatewayMetrics()
        first.grpc.success("AddEvent")

        assert first.registry.get_sample_value(
            "eventmaster_grpc_responses_total", {"method": "AddEvent", "error": "0"}) == 1
        assert second.registry.get_sample_value(
            "eventmaster_grpc_responses_total", {"method": "AddEvent", "error": "0"}) is None

    def test_export_contains_both_transports(self, metrics):
        metrics.grpc.failure("AddEvent")
        metrics.grpc.observe("AddEvent", 3.0)
        metrics.http.success("ui_main")
        metrics.http.observe("ui_main", 12.0)

        text = metrics.export().decode("utf-8")

        assert 'eventmaster_grpc_responses_total{error="1",method="AddEvent"} 1.0' in text
        assert 'eventmaster_http_responses_total{error="0",route="ui_main"} 1.0' in text
        assert 'eventmaster_grpc_request_latency_ms_count{method="AddEvent"} 1.0' in text
        assert 'eventmaster_http_request_latency_ms_bucket{le="25.0",route="ui_main"} 1.0' in text
