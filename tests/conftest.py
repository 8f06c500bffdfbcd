from __future__ import annotations

import pytest
from starlette.requests import Request

from authendpoint.config import EndpointConfig
from authendpoint.errors import TenantResolutionError
from authendpoint.tenant import StaticTenantResolver

TENANT_DOMAIN = "abc.com"


@pytest.fixture
def config() -> EndpointConfig:
    return EndpointConfig()


@pytest.fixture
def resolver(config: EndpointConfig) -> StaticTenantResolver:
    """Resolver for a tenant other than the super tenant."""
    return StaticTenantResolver(config, TENANT_DOMAIN)


class FailingResolver:
    def base_url(self) -> str:
        raise TenantResolutionError("tenant service unavailable")


@pytest.fixture
def failing_resolver() -> FailingResolver:
    return FailingResolver()


def _make_request(path: str, query_string: bytes = b"") -> Request:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "https",
        "path": path,
        "raw_path": path.encode("ascii"),
        "root_path": "",
        "query_string": query_string,
        "headers": [],
        "server": ("localhost", 9443),
        "client": ("127.0.0.1", 1234),
    }

    async def receive() -> dict:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, receive)


@pytest.fixture
def make_request():
    """Build Starlette requests from a bare ASGI scope."""
    return _make_request
