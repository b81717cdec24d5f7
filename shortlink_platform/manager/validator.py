"""
URL validation for the Shortlink Platform.

Two entry points:
    - validate_for_creation(url): gate for new submissions
    - validate_for_redirect(url): re-check of a stored URL right before it is
      placed in a Location header

Rules (both):
    - Must be a non-empty, non-whitespace string
    - ASCII only (code points <= 127); non-ASCII cannot appear unescaped in a
      redirect header, and we never percent-encode on the caller's behalf
    - Must parse as an absolute URL: http/https scheme, a host, a numeric port
      if one is given, and no whitespace or control characters

Both functions fail closed: any exception while parsing means "invalid".
No network access is performed.
"""

from urllib.parse import urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})


def _is_ascii(url: str) -> bool:
    return all(ord(ch) <= 127 for ch in url)


def _has_forbidden_chars(url: str) -> bool:
    # whitespace and C0/DEL control characters
    return any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url)


def _is_absolute_http_url(url: str) -> bool:
    parts = urlsplit(url)
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return False
    if not parts.netloc or not parts.hostname:
        return False
    # .port raises ValueError for non-numeric or out-of-range ports
    return parts.port is None or parts.port > 0


def _check(url: object) -> bool:
    if not isinstance(url, str) or not url.strip():
        return False
    if not _is_ascii(url):
        return False
    if _has_forbidden_chars(url):
        return False
    try:
        return _is_absolute_http_url(url)
    except Exception:
        return False


def validate_for_creation(url: object) -> bool:
    """
    Return True if `url` may be stored as a new short link destination.

    Examples:
        >>> validate_for_creation("https://example.com/path?q=1")
        True
        >>> validate_for_creation("ftp://example.com")
        False
        >>> validate_for_creation("https://example.com/café")
        False
    """
    return _check(url)


def validate_for_redirect(url: object) -> bool:
    """
    Return True if a stored URL is still safe to redirect to.

    Runs at resolution time, not only at creation, so rows written directly to
    the store (or under older rules) degrade to an "unsafe" outcome instead of
    a failing redirect.
    """
    return _check(url)
