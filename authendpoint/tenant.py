"""Tenant base URL resolution.

`is_valid_url` resolves relative redirect targets against the base URL of
the tenant serving the current request. That lookup is injected as a
`TenantResolver` rather than read from a global, so callers decide where the
tenant comes from:

- StaticTenantResolver: a fixed tenant (background jobs, tests)
- RequestTenantResolver: the tenant of an incoming Starlette request
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from starlette.requests import Request

from authendpoint.config import DEFAULT_CONFIG, EndpointConfig
from authendpoint.errors import TenantResolutionError

logger = logging.getLogger("authendpoint.tenant")

# Tenant domains are host-like names; anything else cannot appear in a URL path
_TENANT_DOMAIN_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9._-]{0,253})$")


class TenantResolver(Protocol):
    """Capability returning the current tenant's base URL."""

    def base_url(self) -> str: ...


def build_tenant_base_url(
    config: EndpointConfig,
    tenant_domain: str | None = None,
) -> str:
    """Build the base URL a tenant's pages are served under.

    Args:
        config: Supplies the server URL and tenant path prefix
        tenant_domain: Tenant to qualify with; None or the super tenant
                       yields the bare server URL

    Returns:
        Base URL ending in "/".

    Raises:
        TenantResolutionError: If `tenant_domain` is not a valid domain name.

    Examples:
        >>> build_tenant_base_url(EndpointConfig())
        'https://localhost:9443/'
        >>> build_tenant_base_url(EndpointConfig(), "abc.com")
        'https://localhost:9443/t/abc.com/'

    """
    server_url = config.server_url.rstrip("/")
    if not tenant_domain or tenant_domain == config.super_tenant_domain:
        return f"{server_url}/"

    if not _TENANT_DOMAIN_RE.match(tenant_domain):
        raise TenantResolutionError(f"Invalid tenant domain: {tenant_domain!r}")

    return f"{server_url}{config.tenant_path_prefix}{tenant_domain}/"


class StaticTenantResolver:
    """Resolve a fixed tenant's base URL."""

    def __init__(
        self,
        config: EndpointConfig = DEFAULT_CONFIG,
        tenant_domain: str | None = None,
    ) -> None:
        self.config = config
        self.tenant_domain = tenant_domain

    def base_url(self) -> str:
        return build_tenant_base_url(self.config, self.tenant_domain)


class RequestTenantResolver:
    """Resolve the base URL of the tenant serving a Starlette request.

    The tenant is looked up in order:
    1. `request.state.tenant_domain`, when upstream middleware set it
    2. A tenant path prefix such as ``/t/abc.com/...``
    3. The super tenant

    Usage:
        resolver = RequestTenantResolver(request, config)
        if is_valid_url(redirect_to, resolver):
            ...
    """

    def __init__(
        self, request: Request, config: EndpointConfig = DEFAULT_CONFIG
    ) -> None:
        self.request = request
        self.config = config

    def tenant_domain(self) -> str:
        """Return the tenant domain carried by the request."""
        state_tenant = getattr(self.request.state, "tenant_domain", None)
        if state_tenant is not None:
            if not isinstance(state_tenant, str) or not state_tenant.strip():
                raise TenantResolutionError(
                    f"Unusable tenant domain on request state: {state_tenant!r}"
                )
            return state_tenant.strip()

        prefix = self.config.tenant_path_prefix
        path = self.request.url.path
        if path.startswith(prefix):
            tenant, _, _ = path[len(prefix):].partition("/")
            if not tenant:
                raise TenantResolutionError(f"Empty tenant in request path: {path!r}")
            return tenant

        return self.config.super_tenant_domain

    def base_url(self) -> str:
        tenant = self.tenant_domain()
        logger.debug("Resolved tenant %s for %s", tenant, self.request.url.path)
        return build_tenant_base_url(self.config, tenant)
