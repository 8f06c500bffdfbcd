"""authendpoint security utilities.

This package provides the checks applied to untrusted input on the login path:
- Redirect URL scheme screening and structural validation
- Query string sanitization
- Security event audit logging

Usage:
    from authendpoint.security import (
        is_scheme_safe_url,
        is_valid_url,
        get_safe_redirect_url,
        clean_error_messages,
        SecurityEvent,
        log_security_event,
    )
"""

from authendpoint.security.audit import SecurityEvent, log_security_event
from authendpoint.security.query import (
    AUTH_FAILURE,
    ERROR_CODE,
    RESERVED_QUERY_KEYS,
    clean_error_messages,
)
from authendpoint.security.redirect import (
    get_safe_redirect_url,
    is_scheme_safe_url,
    is_valid_url,
)

__all__ = [
    "AUTH_FAILURE",
    "ERROR_CODE",
    "RESERVED_QUERY_KEYS",
    "clean_error_messages",
    "is_scheme_safe_url",
    "is_valid_url",
    "get_safe_redirect_url",
    "SecurityEvent",
    "log_security_event",
]
