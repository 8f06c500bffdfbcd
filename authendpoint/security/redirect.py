"""Redirect and callback URL validation for authendpoint.

This module prevents open redirect and script injection through redirect
targets carried in login requests. Two independent checks are provided:

- `is_scheme_safe_url`: dependency-free screen for dangerous schemes anywhere
  in the string (javascript:, vbscript:, data:, file:, ftp:)
- `is_valid_url`: strict structural check of the absolute URL, resolving
  relative targets against the current tenant's base URL

Security considerations:
- Both checks fail closed: null, blank or unparseable input is unsafe
- Schemes can be smuggled inside query values or path segments
  (``/x?url=javascript:...``, ``path/ftp:user@host``), so the scheme screen
  scans the whole string rather than its prefix
- Browsers ignore tabs and newlines inside a scheme (``java\\tscript:``)
"""

from __future__ import annotations

import ipaddress
import logging
import re
from urllib.parse import unquote, urljoin, urlsplit

from authendpoint.errors import TenantResolutionError
from authendpoint.security.audit import SecurityEvent, log_security_event
from authendpoint.tenant import TenantResolver

logger = logging.getLogger("authendpoint.security.redirect")

UNSAFE_SCHEMES = ("javascript", "vbscript", "data", "file", "ftp")
ALLOWED_SCHEMES = frozenset({"http", "https"})

# Scheme tokens at a word boundary, so "metadata:" does not match "data:"
_UNSAFE_SCHEME_RE = re.compile(r"\b(?:" + "|".join(UNSAFE_SCHEMES) + r"):")

# Characters browsers drop while parsing a scheme
_IGNORED_CHARS_RE = re.compile(r"[\t\r\n]")

# Characters that are never legal anywhere in a URI
_ILLEGAL_URI_CHARS_RE = re.compile(r"[\x00-\x1f\x7f\"<>\\^`{|}]")

_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_HOSTNAME_RE = re.compile(
    r"^[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?"
    r"(?:\.[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?)*\.?$"
)

_NULL_LITERAL = "null"

# Percent-decoding passes applied before the scheme scan
MAX_DECODES = 2


def _decoded_forms(candidate: str, max_decodes: int = MAX_DECODES) -> list[str]:
    """Return `candidate` and up to `max_decodes` successively percent-decoded forms."""
    forms = [candidate]
    for _ in range(max_decodes):
        decoded = _IGNORED_CHARS_RE.sub("", unquote(forms[-1]))
        if decoded == forms[-1]:
            break
        forms.append(decoded)
    return forms


def is_scheme_safe_url(url: str | None) -> bool:
    """Check that a URL carries no disallowed scheme anywhere in it.

    Args:
        url: Candidate redirect target (may be None)

    Returns:
        True if no disallowed scheme was found, False otherwise.

    Examples:
        >>> is_scheme_safe_url("https://example.com/home")
        True
        >>> is_scheme_safe_url("a.com/page")
        True
        >>> is_scheme_safe_url("javascript:alert(1)")
        False
        >>> is_scheme_safe_url("http://example.com/x?url=javascript:alert(1)")
        False

    Security notes:
        - The literal string "null" (any case) is rejected; it is what
          string concatenation of a missing value upstream produces
        - Up to two percent-decoded forms are scanned as well, catching
          ``javascript%3A`` and ``javascript%253A`` in query values
    """
    if url is None or not isinstance(url, str):
        return False

    candidate = url.strip().lower()
    if not candidate or candidate == _NULL_LITERAL:
        return False

    candidate = _IGNORED_CHARS_RE.sub("", candidate)
    for form in _decoded_forms(candidate):
        match = _UNSAFE_SCHEME_RE.search(form)
        if match:
            logger.debug("Rejected URL with disallowed scheme %r", match.group(0))
            return False

    return True


def _has_malformed_scheme(relative: str) -> bool:
    """Check whether a scheme-less reference still has a colon in its first segment.

    ``ht tp://host`` fails scheme parsing and would otherwise be treated as a
    relative path.
    """
    first_segment = re.split(r"[/?#]", relative, maxsplit=1)[0]
    return ":" in first_segment


def _is_valid_host(hostname: str, bracketed: bool = False) -> bool:
    if bracketed or ":" in hostname:
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return False
        return True
    return bool(_HOSTNAME_RE.match(hostname))


def _absolute_url_error(absolute: str) -> str | None:
    """Return why an absolute URL is structurally invalid, or None if it is valid."""
    if _ILLEGAL_URI_CHARS_RE.search(absolute):
        return "illegal character"
    if _BAD_PERCENT_RE.search(absolute):
        return "malformed percent-encoding"

    try:
        parts = urlsplit(absolute)
        # Accessing .port validates it
        parts.port
    except ValueError:
        return "unparseable"

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return "scheme not allowed"
    if not parts.netloc or any(c.isspace() for c in parts.netloc):
        return "malformed authority"
    bracketed = parts.netloc.rpartition("@")[2].startswith("[")
    if not parts.hostname or not _is_valid_host(parts.hostname, bracketed):
        return "malformed host"

    return None


def is_valid_url(url: str | None, resolver: TenantResolver) -> bool:
    """Check that a URL is a well-formed http(s) redirect target.

    Relative targets are resolved against the current tenant's base URL before
    being checked.

    Args:
        url: Candidate redirect target (may be None)
        resolver: Supplies the current tenant's base URL

    Returns:
        True if the (resolved) URL is structurally valid, False otherwise.

    Raises:
        TenantResolutionError: If the resolver cannot determine the base URL.

    Examples:
        >>> resolver = StaticTenantResolver(EndpointConfig())
        >>> is_valid_url("/authenticationendpoint/login.do?sp=app", resolver)
        True
        >>> is_valid_url("https:// www.example.org/", resolver)
        False
        >>> is_valid_url("javascript:alert(document.domain)", resolver)
        False

    Note:
        Whitespace in the scheme or host makes a URL invalid. Whitespace in the
        path or query alone does not.
        Only plain spaces are trimmed from the ends; control characters
        anywhere, including leading or trailing CR/LF, make a URL invalid.
    """
    if url is None or not isinstance(url, str) or not url.strip():
        return False

    # urljoin silently drops CR/LF/tab, so check the raw value before resolving
    if _ILLEGAL_URI_CHARS_RE.search(url):
        logger.debug("Rejected URL with illegal characters %r", url)
        return False

    candidate = url.strip(" ")

    try:
        scheme = urlsplit(candidate).scheme
    except ValueError:
        logger.debug("Rejected unparseable URL %r", candidate)
        return False

    if scheme:
        absolute = candidate
    else:
        if _has_malformed_scheme(candidate):
            logger.debug("Rejected URL with malformed scheme %r", candidate)
            return False
        absolute = urljoin(resolver.base_url(), candidate)

    error = _absolute_url_error(absolute)
    if error is not None:
        logger.debug("Rejected URL %r: %s", candidate, error)
        return False

    return True


def get_safe_redirect_url(
    url: str | None,
    resolver: TenantResolver,
    fallback: str = "/",
    *,
    ip_address: str | None = None,
    path: str | None = None,
) -> str:
    """Get a safe redirect URL, with fallback.

    Returns `url`, with surrounding spaces trimmed, when it passes both the
    scheme screen and the structural check, otherwise `fallback`. The returned
    string is exactly the one that was checked. Rejections are recorded as
    `SecurityEvent.INVALID_REDIRECT`.

    Args:
        url: The URL to validate (may be None)
        resolver: Supplies the current tenant's base URL
        fallback: Safe URL to return if validation fails (default: "/")
        ip_address: Client IP address, for the audit record
        path: Request path, for the audit record

    Returns:
        The validated URL if safe, otherwise the fallback URL.

    Raises:
        TenantResolutionError: If the resolver cannot determine the base URL.

    """
    if not url:
        return fallback

    candidate = url.strip(" ")
    if not is_scheme_safe_url(candidate):
        reason = "unsafe_scheme"
    else:
        try:
            valid = is_valid_url(candidate, resolver)
        except TenantResolutionError as exc:
            log_security_event(
                SecurityEvent.TENANT_RESOLUTION_FAILED,
                ip_address=ip_address,
                path=path,
                success=False,
                details={"error": str(exc)},
            )
            raise
        if valid:
            return candidate
        reason = "malformed_url"

    log_security_event(
        SecurityEvent.INVALID_REDIRECT,
        ip_address=ip_address,
        path=path,
        success=False,
        details={"reason": reason},
    )
    return fallback
