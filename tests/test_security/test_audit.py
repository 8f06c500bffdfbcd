"""Tests for authendpoint.security.audit module."""

import logging

from authendpoint.security.audit import SecurityEvent, log_security_event


def test_failed_event_logs_warning_with_structured_data(caplog):
    with caplog.at_level(logging.INFO, logger="authendpoint.security"):
        log_security_event(
            SecurityEvent.INVALID_REDIRECT,
            username="alice",
            tenant_domain="abc.com",
            path="/commonauth",
            success=False,
            details={"reason": "malformed_url"},
        )

    [record] = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == (
        "event=invalid_redirect username=alice tenant_domain=abc.com "
        "path=/commonauth success=false reason=malformed_url"
    )
    assert record.security_data["event"] == "invalid_redirect"
    assert record.security_data["details"] == {"reason": "malformed_url"}
    assert "timestamp" in record.security_data


def test_empty_fields_are_omitted(caplog):
    with caplog.at_level(logging.INFO, logger="authendpoint.security"):
        log_security_event(SecurityEvent.TENANT_RESOLUTION_FAILED, ip_address=None)

    [record] = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "event=tenant_resolution_failed"
    assert "ip" not in record.security_data
