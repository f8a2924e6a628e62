"""Unit tests for infrastructure probes.

Tests that infrastructure probes correctly capture backend events
following the Domain Oriented Observability pattern.
"""

from unittest.mock import MagicMock

import structlog

from infrastructure.observability import ObservationContext
from infrastructure.observability.probes import DefaultBackendClientProbe


class TestBackendClientProbe:
    """Tests for BackendClientProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultBackendClientProbe()
        assert probe._logger is not None

    def test_default_probe_accepts_custom_logger(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)
        assert probe._logger is mock_logger

    def test_query_completed_logs_debug(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.query_completed(table="domains", status_code=200, row_count=1)

        mock_logger.debug.assert_called_once_with(
            "backend_query_completed",
            table="domains",
            status_code=200,
            row_count=1,
        )

    def test_query_rejected_logs_error(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.query_rejected(table="tenants", status_code=401, body="Invalid API key")

        mock_logger.error.assert_called_once_with(
            "backend_query_rejected",
            table="tenants",
            status_code=401,
            body="Invalid API key",
        )

    def test_connection_failed_logs_error_type(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.connection_failed(table="domains", error=TimeoutError("timed out"))

        mock_logger.error.assert_called_once_with(
            "backend_connection_failed",
            table="domains",
            error="timed out",
            error_type="TimeoutError",
        )

    def test_invalid_response_without_error(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.invalid_response(table="domains")

        mock_logger.error.assert_called_once_with(
            "backend_invalid_response", table="domains", error=None
        )

    def test_client_closed_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.client_closed()

        mock_logger.info.assert_called_once_with("backend_client_closed")

    def test_access_token_rejected_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultBackendClientProbe(logger=mock_logger)

        probe.access_token_rejected(status_code=401)

        mock_logger.info.assert_called_once_with(
            "backend_access_token_rejected", status_code=401
        )

    def test_with_context_includes_context_metadata(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        context = ObservationContext(request_id="req-9").with_extra(region="sa-east-1")
        probe = DefaultBackendClientProbe(logger=mock_logger).with_context(context)

        probe.client_closed()

        mock_logger.info.assert_called_once_with(
            "backend_client_closed", request_id="req-9", region="sa-east-1"
        )


class TestObservationContext:
    def test_as_dict_omits_unset_fields(self):
        assert ObservationContext(user_id="u1").as_dict() == {"user_id": "u1"}

    def test_with_tenant_keeps_other_fields(self):
        context = ObservationContext(request_id="req-1").with_tenant("t1")

        assert context.as_dict() == {"request_id": "req-1", "tenant_id": "t1"}
