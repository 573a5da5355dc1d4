"""Shared HTTP client utilities: one reusable httpx client."""

import httpx

DEFAULT_TIMEOUT = 15.0

# Module-level shared client (created lazily, closed on app shutdown)
_client: httpx.AsyncClient | None = None


def get_shared_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=timeout)
    return _client


async def close_shared_client() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None


def plain_headers(api_key: str) -> dict[str, str]:
    """Build standard Plain API request headers."""
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
