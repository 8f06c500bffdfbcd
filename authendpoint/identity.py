"""Qualified username parsing.

A qualified username carries up to three identity parts:

    <user store domain><domain separator><username><tenant combiner><tenant>

e.g. ``WSO2.COM/alice@abc.com`` with the default separators. Both the
user store part and the tenant part are optional.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from authendpoint.config import DEFAULT_CONFIG, EndpointConfig


@dataclass(frozen=True)
class UserIdentity:
    """Identity parts recovered from a qualified username.

    Attributes:
        username: Local username (empty string on degenerate input)
        tenant_domain: Tenant the user belongs to, never empty-by-omission
        user_store_domain: User store the name was qualified with, or None

    """

    username: str
    tenant_domain: str
    user_store_domain: str | None = None

    def qualified_name(self, config: EndpointConfig = DEFAULT_CONFIG) -> str:
        """Reassemble the fully-qualified form of this identity."""
        name = self.username
        if self.user_store_domain is not None:
            name = f"{self.user_store_domain}{config.domain_separator}{name}"
        return f"{name}{config.tenant_combiner}{self.tenant_domain}"

    def with_primary_domain(
        self, config: EndpointConfig = DEFAULT_CONFIG
    ) -> UserIdentity:
        """Return a copy with the primary user store filled in when absent."""
        if self.user_store_domain is not None:
            return self
        return replace(self, user_store_domain=config.primary_domain)

    def is_super_tenant(self, config: EndpointConfig = DEFAULT_CONFIG) -> bool:
        return self.tenant_domain == config.super_tenant_domain


def parse_user(
    raw: str | None,
    config: EndpointConfig = DEFAULT_CONFIG,
) -> UserIdentity | None:
    """Split a qualified username into its identity parts.

    The tenant is taken from after the *last* tenant combiner, so usernames
    that are themselves email addresses keep their own ``@``. The user store
    is taken from before the *first* domain separator.

    Args:
        raw: Username as typed or as carried in a request parameter
        config: Separators and the super tenant name to assume

    Returns:
        UserIdentity, or None when `raw` is None.

    Examples:
        >>> parse_user("WSO2.COM/alice@abc.com")
        UserIdentity(username='alice', tenant_domain='abc.com', user_store_domain='WSO2.COM')
        >>> parse_user("alice")
        UserIdentity(username='alice', tenant_domain='carbon.super', user_store_domain=None)
        >>> parse_user(None) is None
        True

    Note:
        The user store is never defaulted here. Callers that want the
        primary domain applied use `UserIdentity.with_primary_domain`.

    """
    if raw is None:
        return None

    remainder, combiner, tenant_domain = raw.rpartition(config.tenant_combiner)
    if not combiner:
        remainder = raw
        tenant_domain = config.super_tenant_domain

    separator_char = config.domain_separator
    user_store_domain, separator, username = remainder.partition(separator_char)
    if not separator:
        return UserIdentity(username=remainder, tenant_domain=tenant_domain)

    return UserIdentity(
        username=username,
        tenant_domain=tenant_domain,
        user_store_domain=user_store_domain,
    )
