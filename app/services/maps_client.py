"""Google Maps Platform client: country (Geocoding) and time zone lookups."""

import logging
import re
import time
import traceback

import httpx

from app.core.config import settings
from app.core.geo import Coordinate

logger = logging.getLogger(__name__)


class RemoteLookupError(Exception):
    """A Maps lookup failed (transport, HTTP status, API status or response shape)."""

    status_code = 502

    def __init__(self, lookup: str, message: str, **detail):
        super().__init__(f"{lookup} lookup failed: {message}")
        self.lookup = lookup
        self.detail = {"error": "google_error", "lookup": lookup, "message": message, **detail}


class RemoteLookupTimeout(RemoteLookupError):
    status_code = 504

    def __init__(self, lookup: str, message: str, **detail):
        super().__init__(lookup, message, **detail)
        self.detail["error"] = "google_timeout"


def _redact_api_key(url: str) -> str:
    """Remove API key from URL for safe logging."""
    return re.sub(r'key=[^&]+', 'key=REDACTED', str(url))


def new_client() -> httpx.AsyncClient:
    """AsyncClient with the configured per-request timeout."""
    return httpx.AsyncClient(timeout=settings.maps_request_timeout)


async def _call_google_api(client: httpx.AsyncClient, lookup: str, url: str, params: dict) -> dict:
    """
    Call a Google Maps web service with logging and error handling.

    Returns parsed JSON on success.
    Raises RemoteLookupError (or RemoteLookupTimeout) on failure.
    """
    full_url = httpx.URL(url, params=params)
    safe_url = _redact_api_key(str(full_url))

    logger.info(f"Calling Google Maps API: {safe_url}")

    try:
        response = await client.get(url, params=params)
    except httpx.TimeoutException:
        logger.error(
            f"Google API timeout: url={safe_url}\n"
            f"Traceback:\n{traceback.format_exc()}"
        )
        raise RemoteLookupTimeout(lookup, "Google Maps API request timed out")
    except httpx.RequestError as e:
        logger.error(
            f"Google API request error: url={safe_url}, error={_redact_api_key(str(e))}\n"
            f"Traceback:\n{traceback.format_exc()}"
        )
        raise RemoteLookupError(lookup, _redact_api_key(str(e)))

    response_text = response.text
    truncated_body = response_text[:500] if response_text else "(empty)"

    logger.info(
        f"Google API response: status={response.status_code}, "
        f"body_preview={truncated_body}"
    )

    if response.status_code != 200:
        logger.error(
            f"Google API HTTP error: url={safe_url}, "
            f"status={response.status_code}, body={truncated_body}"
        )
        raise RemoteLookupError(
            lookup, f"HTTP {response.status_code}",
            status=response.status_code, body=truncated_body,
        )

    try:
        data = response.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError
        logger.error(f"Google API returned non-JSON body: url={safe_url}, body={truncated_body}")
        raise RemoteLookupError(lookup, "Response body is not JSON", body=truncated_body)

    # Google reports logical failures (REQUEST_DENIED, OVER_QUERY_LIMIT, ...) with HTTP 200
    status = data.get("status", "UNKNOWN_ERROR") if isinstance(data, dict) else "UNKNOWN_ERROR"
    if status != "OK":
        error_msg = data.get("error_message", status) if isinstance(data, dict) else status
        logger.error(
            f"Google API logical error: lookup={lookup}, status={status}, "
            f"error_message={error_msg}"
        )
        raise RemoteLookupError(lookup, error_msg, status=status)

    return data


async def resolve_country(client: httpx.AsyncClient, coordinate: Coordinate) -> str:
    """
    Resolve the country display name for a coordinate.

    Uses reverse geocoding filtered to `result_type=country` and returns the
    top result's `formatted_address` (e.g. "United Kingdom").
    """
    params = {
        "latlng": coordinate.as_param(),
        "result_type": "country",
        "key": settings.google_maps_api_key,
    }
    data = await _call_google_api(client, "country", settings.geocode_url, params)

    results = data.get("results")
    top = results[0] if isinstance(results, list) and results else None
    name = top.get("formatted_address") if isinstance(top, dict) else None
    if not isinstance(name, str) or not name:
        logger.error(f"Geocoding returned no country name for {coordinate.as_param()}")
        raise RemoteLookupError("country", "No country name in geocoding response")

    logger.info(f"Resolved country: {coordinate.as_param()} -> {name}")
    return name


async def resolve_timezone(
    client: httpx.AsyncClient,
    coordinate: Coordinate,
    timestamp: int | None = None,
) -> str:
    """
    Resolve the IANA time zone id (e.g. "Europe/London") for a coordinate.

    `timestamp` is the Unix time the lookup is made for; defaults to now.
    """
    if timestamp is None:
        timestamp = int(time.time())
    params = {
        "location": coordinate.as_param(),
        "timestamp": timestamp,
        "key": settings.google_maps_api_key,
    }
    data = await _call_google_api(client, "timezone", settings.timezone_url, params)

    time_zone_id = data.get("timeZoneId")
    if not isinstance(time_zone_id, str) or not time_zone_id:
        logger.error(f"Time zone response missing timeZoneId for {coordinate.as_param()}")
        raise RemoteLookupError("timezone", "No timeZoneId in time zone response")

    logger.info(
        f"Resolved time zone: {coordinate.as_param()} -> {time_zone_id} "
        f"({data.get('timeZoneName')})"
    )
    return time_zone_id
