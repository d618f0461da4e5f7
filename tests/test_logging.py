# tests/test_logging.py

import structlog

from core.logging import add_correlation_id, add_service_info, correlation_id_var, setup_logging


class TestProcessors:

    def test_correlation_id_added_inside_request(self):
        token = correlation_id_var.set("req-7")
        try:
            event = add_correlation_id(None, "info", {"event": "box_score_built"})
        finally:
            correlation_id_var.reset(token)

        assert event["correlation_id"] == "req-7"

    def test_no_correlation_id_outside_request(self):
        event = add_correlation_id(None, "info", {"event": "stats_api_starting"})
        assert "correlation_id" not in event

    def test_service_name_tagged(self):
        processor = add_service_info("pickup-stats-engine")
        assert processor(None, "info", {})["service"] == "pickup-stats-engine"


class TestSetupLogging:

    def test_console_renderer(self):
        setup_logging(log_level="debug", json_format=False)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self):
        setup_logging(log_level="WARNING", json_format=True)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
