"""Visual Crossing timeline adapter.

Encapsulates upstream API details and error normalization.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from . import MalformedResponse, MissingApiKey, NetworkError, ProviderError

JSON_CONTENT_TYPE = "application/json"


def build_timeline_url(base_url: str, location: str) -> str:
    # Encode every reserved character so "City/Region" stays one path segment.
    return f"{base_url.rstrip('/')}/{quote(location, safe='')}"


def _raise_for_response(resp: httpx.Response) -> dict:
    content_type = resp.headers.get("content-type", "")
    if JSON_CONTENT_TYPE not in content_type:
        # Plain-text bodies carry the provider's error message (bad key, unknown place).
        text = resp.text.strip()
        raise ProviderError(text or "Invalid API response", {"status_code": resp.status_code})

    try:
        data = resp.json()
    except ValueError as exc:
        raise MalformedResponse(f"Invalid JSON from provider: {exc}", {"status_code": resp.status_code}) from exc

    if not resp.is_success:
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message.strip():
            message = "Unable to fetch weather data"
        raise ProviderError(message, {"status_code": resp.status_code})

    if not isinstance(data, dict):
        raise MalformedResponse("Provider returned a non-object JSON body", {"status_code": resp.status_code})
    return data


async def fetch_timeline(
    *,
    api_key: str | None,
    location: str,
    base_url: str,
    timeout_s: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[int, dict]:
    """Return the HTTP status and the validated JSON object of a timeline lookup."""
    if not api_key:
        raise MissingApiKey("VISUALCROSSING_API_KEY is not set")

    params = {"unitGroup": "metric", "key": api_key, "contentType": "json"}
    url = build_timeline_url(base_url, location)
    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            resp = await client.get(url, params=params)
    except httpx.RequestError as exc:
        raise NetworkError(str(exc) or type(exc).__name__, {"location": location}) from exc
    return resp.status_code, _raise_for_response(resp)
