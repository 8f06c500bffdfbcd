"""Configuration utilities for authendpoint.

Provides the immutable configuration snapshot passed into every routine and a
helper to build one from a `.env` file plus the process environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from starlette.config import Config

from authendpoint.errors import ConfigurationError

DEFAULT_DOMAIN_SEPARATOR = "/"
DEFAULT_TENANT_COMBINER = "@"
DEFAULT_SUPER_TENANT_DOMAIN = "carbon.super"
DEFAULT_PRIMARY_DOMAIN = "PRIMARY"
DEFAULT_SERVER_URL = "https://localhost:9443"
DEFAULT_TENANT_PATH_PREFIX = "/t/"


@dataclass(frozen=True)
class EndpointConfig:
    """Process-wide settings for the authentication endpoint helpers.

    Attributes:
        domain_separator: Character between user-store domain and username
        tenant_combiner: Character between username and tenant domain
        super_tenant_domain: Tenant assumed when a username names none
        primary_domain: User store callers may assume when none is named
        server_url: Public base URL of the deployment (no trailing slash needed)
        tenant_path_prefix: Path prefix that introduces a tenant in URLs

    Raises:
        ConfigurationError: If a separator is not a single character, both
            separators are the same, a required name is empty, or
            server_url is not an absolute http(s) URL.

    """

    domain_separator: str = DEFAULT_DOMAIN_SEPARATOR
    tenant_combiner: str = DEFAULT_TENANT_COMBINER
    super_tenant_domain: str = DEFAULT_SUPER_TENANT_DOMAIN
    primary_domain: str = DEFAULT_PRIMARY_DOMAIN
    server_url: str = DEFAULT_SERVER_URL
    tenant_path_prefix: str = DEFAULT_TENANT_PATH_PREFIX

    def __post_init__(self) -> None:
        for name in ("domain_separator", "tenant_combiner"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationError(
                    f"{name} must be a single character, got {value!r}"
                )
        if self.domain_separator == self.tenant_combiner:
            raise ConfigurationError(
                "domain_separator and tenant_combiner must differ"
            )
        for name in ("super_tenant_domain", "primary_domain", "server_url"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")
        try:
            server = urlsplit(self.server_url)
            scheme = server.scheme.lower()
            absolute = bool(server.netloc) and scheme in ("http", "https")
        except ValueError:
            absolute = False
        if not absolute:
            raise ConfigurationError(
                f"server_url must be an absolute http(s) URL, got {self.server_url!r}"
            )
        prefix = self.tenant_path_prefix
        if not prefix.startswith("/") or not prefix.endswith("/"):
            raise ConfigurationError(
                f"tenant_path_prefix must start and end with '/', "
                f"got {prefix!r}"
            )


DEFAULT_CONFIG = EndpointConfig()


def build_config(env_file: str | None = None) -> EndpointConfig:
    """Build an EndpointConfig from a `.env` file and the environment.

    Resolution order per key:
    1. Environment variables
    2. Values in `env_file` (if the file exists)
    3. Built-in defaults

    Args:
        env_file: Optional path to a .env file. A missing file is not an
                  error; only environment variables are used then.

    Returns:
        EndpointConfig: A validated, immutable configuration snapshot.

    Keys:
        AUTH_DOMAIN_SEPARATOR, AUTH_TENANT_COMBINER, AUTH_SUPER_TENANT_DOMAIN,
        AUTH_PRIMARY_DOMAIN, AUTH_SERVER_URL, AUTH_TENANT_PATH_PREFIX

    """
    if env_file is not None and Path(env_file).exists():
        config = Config(env_file)
    else:
        config = Config()

    return EndpointConfig(
        domain_separator=config(
            "AUTH_DOMAIN_SEPARATOR", cast=str, default=DEFAULT_DOMAIN_SEPARATOR
        ),
        tenant_combiner=config(
            "AUTH_TENANT_COMBINER", cast=str, default=DEFAULT_TENANT_COMBINER
        ),
        super_tenant_domain=config(
            "AUTH_SUPER_TENANT_DOMAIN", cast=str, default=DEFAULT_SUPER_TENANT_DOMAIN
        ),
        primary_domain=config(
            "AUTH_PRIMARY_DOMAIN", cast=str, default=DEFAULT_PRIMARY_DOMAIN
        ),
        server_url=config("AUTH_SERVER_URL", cast=str, default=DEFAULT_SERVER_URL),
        tenant_path_prefix=config(
            "AUTH_TENANT_PATH_PREFIX", cast=str, default=DEFAULT_TENANT_PATH_PREFIX
        ),
    )
