"""Security event audit logging for authendpoint.

This module provides standardized logging for the decisions the endpoint
helpers make on untrusted input:
- Rejected redirect targets
- Tenant resolution failures

Security considerations:
- Never log passwords, tokens or full redirect URLs at warning level
- Use structured logging for easy parsing and analysis
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any

# Security logger - configure handler in application
security_logger = logging.getLogger("authendpoint.security")


class SecurityEvent(Enum):
    """Security event types for audit logging."""

    INVALID_REDIRECT = "invalid_redirect"
    TENANT_RESOLUTION_FAILED = "tenant_resolution_failed"


def log_security_event(
    event: SecurityEvent,
    *,
    username: str | None = None,
    tenant_domain: str | None = None,
    ip_address: str | None = None,
    path: str | None = None,
    success: bool = True,
    details: dict[str, Any] | None = None,
) -> None:
    """Log a security event.

    Creates a structured warning on the ``authendpoint.security`` logger. The
    full record is attached as the ``security_data`` extra so handlers can
    emit JSON.

    Args:
        event: The type of security event
        username: Local username (if known)
        tenant_domain: Tenant the request belongs to (if known)
        ip_address: Client IP address
        path: Request path (if applicable)
        success: Whether the event represents a successful action
        details: Additional event-specific details

    Examples:
        log_security_event(
            SecurityEvent.INVALID_REDIRECT,
            ip_address="192.168.1.1",
            success=False,
            details={"reason": "unsafe_scheme"},
        )
    """
    log_data: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event.value,
        "success": success,
    }
    message_parts = [f"event={event.value}"]

    for key, value in (
        ("username", username),
        ("tenant_domain", tenant_domain),
        ("ip", ip_address),
        ("path", path),
    ):
        if value:
            log_data[key] = value
            message_parts.append(f"{key}={value}")

    if not success:
        message_parts.append("success=false")
    if details:
        log_data["details"] = details
        for key, value in details.items():
            message_parts.append(f"{key}={value}")

    message = " ".join(message_parts)

    # Every event records a rejection
    security_logger.warning(message, extra={"security_data": log_data})
