"""Tests for structlog configuration."""

import json

import structlog

from protectron.shared.logging import setup_logging


class TestSetupLogging:
    def test_json_output(self, capsys, reset_structlog):
        setup_logging("INFO", "json")
        structlog.get_logger().info("assessment_classified", compliance_score=63)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "assessment_classified"
        assert record["compliance_score"] == 63
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys, reset_structlog):
        setup_logging("WARNING", "json")
        logger = structlog.get_logger()
        logger.info("dropped")
        logger.warning("kept")

        out = capsys.readouterr().out
        assert "dropped" not in out
        assert "kept" in out

    def test_context_vars_merged(self, capsys, reset_structlog):
        setup_logging("INFO", "json")
        structlog.contextvars.bind_contextvars(request_id="req-123")
        try:
            structlog.get_logger().info("http_request")
        finally:
            structlog.contextvars.clear_contextvars()

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["request_id"] == "req-123"

    def test_console_output(self, capsys, reset_structlog):
        setup_logging("DEBUG", "console")
        structlog.get_logger().debug("certificate_verified", cert_id="CERT-1")
        assert "certificate_verified" in capsys.readouterr().out
