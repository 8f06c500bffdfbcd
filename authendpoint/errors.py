"""Exception types for authendpoint.

Absent or malformed inputs never raise: the string routines resolve them to
``None``, ``False`` or ``""``. Only configuration problems escape to callers:

- ConfigurationError: the endpoint configuration itself is unusable
- TenantResolutionError: the tenant base URL could not be determined
"""


class AuthEndpointError(Exception):
    """Base class for all authendpoint errors."""


class ConfigurationError(AuthEndpointError, ValueError):
    """Raised when an EndpointConfig value is invalid."""


class TenantResolutionError(AuthEndpointError):
    """Raised when the current tenant's base URL cannot be resolved.

    Propagated from ``is_valid_url``; the scheme-safety check never depends on
    a resolver and therefore never raises it.
    """
