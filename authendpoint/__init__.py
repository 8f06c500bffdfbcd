"""authendpoint package root.

String-level decision helpers for an authentication endpoint:
- Qualified username parsing (`parse_user`)
- Redirect URL validation (`is_scheme_safe_url`, `is_valid_url`)
- Query string sanitization (`clean_error_messages`)
- Custom page key and redirect composition (`build_config_key`,
  `build_redirect_url`)

Conventions:
- Every routine takes its configuration explicitly; `DEFAULT_CONFIG` is used
  when none is passed.
- Absent or malformed input yields None, False or "" rather than an exception.
"""

from __future__ import annotations

__version__ = "0.1.0"

from authendpoint.config import DEFAULT_CONFIG, EndpointConfig, build_config
from authendpoint.errors import (
    AuthEndpointError,
    ConfigurationError,
    TenantResolutionError,
)
from authendpoint.identity import UserIdentity, parse_user
from authendpoint.pages import (
    build_config_key,
    build_error_redirect_url,
    build_redirect_url,
)
from authendpoint.security import (
    clean_error_messages,
    get_safe_redirect_url,
    is_scheme_safe_url,
    is_valid_url,
)
from authendpoint.tenant import (
    RequestTenantResolver,
    StaticTenantResolver,
    TenantResolver,
    build_tenant_base_url,
)

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "EndpointConfig",
    "build_config",
    "AuthEndpointError",
    "ConfigurationError",
    "TenantResolutionError",
    "UserIdentity",
    "parse_user",
    "build_config_key",
    "build_error_redirect_url",
    "build_redirect_url",
    "clean_error_messages",
    "get_safe_redirect_url",
    "is_scheme_safe_url",
    "is_valid_url",
    "RequestTenantResolver",
    "StaticTenantResolver",
    "TenantResolver",
    "build_tenant_base_url",
]
