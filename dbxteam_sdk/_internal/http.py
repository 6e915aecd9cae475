"""Shared HTTP client configuration."""

import httpx

from dbxteam_sdk._version import __version__

DEFAULT_API_URL = "https://api.dropboxapi.com"
DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    access_token: str,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.Client:
    """Create the authenticated transport used by ``TeamClient``.

    Args:
        access_token: Team access token, sent as a bearer credential.
        timeout: Request timeout in seconds, applied to every phase.
        base_url: API host. Route paths are resolved against it.

    Returns:
        An httpx.Client owned by the caller.
    """
    headers = {
        "Authorization": f"Bearer {access_token}",
        "User-Agent": f"dbxteam-sdk/{__version__}",
    }
    return httpx.Client(timeout=timeout, base_url=base_url or DEFAULT_API_URL, headers=headers)
