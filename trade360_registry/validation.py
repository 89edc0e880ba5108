"""
Client settings validation.

Checks return a ``ConfigurationError`` value instead of raising, so the
registry can cache the outcome of the first validation per name.
"""

from typing import Optional

import httpx

from trade360_common.config import ClientSettings
from trade360_common.errors import ConfigurationError, InvalidBaseUrlError, MissingCredentialsError

ALLOWED_SCHEMES = ("http", "https")


def validate_base_url(base_url: Optional[str]) -> Optional[InvalidBaseUrlError]:
    """Absolute http(s) URL with a host, or the error describing why not."""
    if base_url is None or not base_url.strip():
        return InvalidBaseUrlError("Base URL is not configured")

    try:
        url = httpx.URL(base_url.strip())
    except httpx.InvalidURL as exc:
        return InvalidBaseUrlError("Base URL is not a valid URL", {"base_url": base_url, "error": str(exc)})

    if url.scheme not in ALLOWED_SCHEMES:
        return InvalidBaseUrlError(
            "Base URL must use http or https",
            {"base_url": base_url, "scheme": url.scheme}
        )
    if not url.host:
        return InvalidBaseUrlError("Base URL has no host", {"base_url": base_url})
    return None


def validate_client_settings(settings: ClientSettings,
                             requires_credentials: bool) -> Optional[ConfigurationError]:
    """Validate settings for a client role; ``None`` means valid."""
    error = validate_base_url(settings.base_url)
    if error is not None:
        return error
    if requires_credentials and settings.credentials is None:
        return MissingCredentialsError()
    return None
