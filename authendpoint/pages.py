"""Custom login page helpers.

Applications may replace the default login pages with their own. Their
locations are stored under per-application keys and reached through redirects
that forward the original request's query string.
"""

from __future__ import annotations

from authendpoint.security.query import clean_error_messages


def build_config_key(app_name: str, relative_path: str) -> str:
    """Build the lookup key of an application's custom page.

    Examples:
        >>> build_config_key("GlobalTrotters", "login")
        'GlobalTrotters-login'
    """
    return f"{app_name}-{relative_path}"


def build_redirect_url(context: str | None, query: str | None) -> str | None:
    """Append a query string to a custom page location.

    Args:
        context: Custom page path or URL, possibly with its own query
        query: Query string without the leading "?"

    Returns:
        The combined URL, `context` unchanged when there is no query, or None
        when `context` is None.

    Examples:
        >>> build_redirect_url("custom-page", "k1=v1&k2=v2")
        'custom-page?k1=v1&k2=v2'
        >>> build_redirect_url("custom-page?test=xyz", "k1=v1")
        'custom-page?test=xyz&k1=v1'
    """
    if context is None:
        return None
    if not query:
        return context

    joiner = "&" if "?" in context else "?"
    return f"{context}{joiner}{query}"


def build_error_redirect_url(context: str | None, query: str | None) -> str | None:
    """Forward a request's query string to a custom page without error markers."""
    return build_redirect_url(context, clean_error_messages(query))
