"""
URL Validation Utilities

Validates the base URL given on the command line before a crawl starts.
"""

import re
from typing import Tuple
from urllib.parse import urlparse


_DOMAIN_PATTERN = re.compile(
    r'^[a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?(\.[a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?)*$'
)


def validate_url(url: str) -> Tuple[bool, str, str]:
    """
    Validate and normalize a crawl base URL.

    Routes are appended to the base URL verbatim, so a trailing slash is
    removed to avoid ``//`` in page URLs.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, normalized_url, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "", "URL cannot be empty"

    url = url.strip()

    try:
        parsed = urlparse(url)
    except ValueError as e:
        return False, "", f"URL validation error: {e}"

    if parsed.scheme not in ('http', 'https'):
        return False, "", "URL must use HTTP or HTTPS protocol"

    if not parsed.netloc:
        return False, "", "URL must have a valid domain"

    # Port and credentials are not part of the domain check
    if not _DOMAIN_PATTERN.match(parsed.hostname or ""):
        return False, "", "Invalid domain format"

    return True, url.rstrip('/'), ""
