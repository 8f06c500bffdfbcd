"""Query string sanitization for outbound redirects.

The login flow signals failures to its own pages through two internal query
parameters. Those markers must be stripped before a query string is echoed
back to a client or forwarded to a custom page.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger("authendpoint.security.query")

AUTH_FAILURE = "authFailure"
ERROR_CODE = "errorCode"

RESERVED_QUERY_KEYS = frozenset({AUTH_FAILURE, ERROR_CODE})


def clean_error_messages(
    query: str | None,
    reserved_keys: Iterable[str] = RESERVED_QUERY_KEYS,
) -> str:
    """Remove internal error parameters from a query string.

    Args:
        query: Raw query string without the leading "?" (may be None)
        reserved_keys: Parameter names to drop

    Returns:
        The query string with reserved parameters and empty segments removed,
        surviving parameters in their original order. Empty string for None.

    Examples:
        >>> clean_error_messages("authFailure=true&x=abcd&y=abz")
        'x=abcd&y=abz'
        >>> clean_error_messages("authFailure=true&errorCode=17900")
        ''
    """
    if query is None:
        return ""

    reserved = frozenset(reserved_keys)
    kept = []
    for token in query.split("&"):
        if not token:
            continue
        key = token.partition("=")[0]
        if key in reserved:
            logger.debug("Dropped reserved query parameter %s", key)
            continue
        kept.append(token)

    return "&".join(kept)
