from __future__ import annotations

import pytest

from authendpoint.config import EndpointConfig
from authendpoint.identity import UserIdentity, parse_user

USERNAME = "TestUser"
USERSTORE_NAME = "WSO2.COM"
TENANT_DOMAIN = "abc.com"
SUPER_TENANT_DOMAIN = "carbon.super"
PRIMARY_DOMAIN = "PRIMARY"


def test_parse_user_none_input() -> None:
    assert parse_user(None) is None


@pytest.mark.parametrize(
    ("raw", "tenant_domain", "user_store_domain"),
    [
        (f"{PRIMARY_DOMAIN}/{USERNAME}", SUPER_TENANT_DOMAIN, PRIMARY_DOMAIN),
        (f"{USERSTORE_NAME}/{USERNAME}", SUPER_TENANT_DOMAIN, USERSTORE_NAME),
        (f"{USERNAME}@{TENANT_DOMAIN}", TENANT_DOMAIN, None),
        (f"{USERSTORE_NAME}/{USERNAME}@{TENANT_DOMAIN}", TENANT_DOMAIN, USERSTORE_NAME),
        (USERNAME, SUPER_TENANT_DOMAIN, None),
    ],
)
def test_parse_user(raw: str, tenant_domain: str, user_store_domain: str | None) -> None:
    user = parse_user(raw)
    assert user is not None
    assert user.username == USERNAME
    assert user.tenant_domain == tenant_domain
    assert user.user_store_domain == user_store_domain


def test_tenant_is_taken_after_last_combiner() -> None:
    user = parse_user("alice@mail.com@abc.com")
    assert user == UserIdentity("alice@mail.com", "abc.com")


def test_user_store_is_taken_before_first_separator() -> None:
    user = parse_user("STORE/team/alice")
    assert user == UserIdentity("team/alice", SUPER_TENANT_DOMAIN, "STORE")


def test_separator_only_remainder_yields_empty_username() -> None:
    user = parse_user("/@abc.com")
    assert user == UserIdentity("", "abc.com", "")


def test_custom_separators() -> None:
    config = EndpointConfig(domain_separator="\\", tenant_combiner="#")
    user = parse_user("store\\user#tenant", config)
    assert user == UserIdentity("user", "tenant", "store")


def test_custom_super_tenant() -> None:
    config = EndpointConfig(super_tenant_domain="root")
    assert parse_user("alice", config).tenant_domain == "root"


def test_qualified_name_round_trip() -> None:
    user = parse_user(f"{USERSTORE_NAME}/{USERNAME}@{TENANT_DOMAIN}")
    assert user.qualified_name() == f"{USERSTORE_NAME}/{USERNAME}@{TENANT_DOMAIN}"
    assert parse_user(user.qualified_name()) == user


def test_qualified_name_without_user_store() -> None:
    user = parse_user(USERNAME)
    assert user.qualified_name() == f"{USERNAME}@{SUPER_TENANT_DOMAIN}"
    assert parse_user(user.qualified_name()) == user


def test_with_primary_domain_fills_only_missing_store() -> None:
    assert parse_user(USERNAME).with_primary_domain().user_store_domain == PRIMARY_DOMAIN
    user = parse_user(f"{USERSTORE_NAME}/{USERNAME}")
    assert user.with_primary_domain() is user


def test_is_super_tenant() -> None:
    assert parse_user(USERNAME).is_super_tenant() is True
    assert parse_user(f"{USERNAME}@{TENANT_DOMAIN}").is_super_tenant() is False
