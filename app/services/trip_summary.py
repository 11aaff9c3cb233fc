"""Compose country, time zone and distance lookups into a TripSummary."""

import asyncio
import logging

from app.core.geo import Coordinate, checked_distance_km
from app.core.timezones import current_utc_offset, format_gmt_label, parse_utc_offset
from app.schemas.trip import Distance, Location, TimeDiff, TripEndpoint, TripSummary
from app.services import maps_client

logger = logging.getLogger(__name__)


def compose_trip_summary(
    origin_country: str,
    dest_country: str,
    origin_offset: int,
    dest_offset: int,
    origin: Coordinate,
    destination: Coordinate,
    distance: float,
) -> TripSummary:
    """Build the response from resolved names, whole-hour offsets and distance in km."""
    return TripSummary(
        start=TripEndpoint(
            country=origin_country,
            timezone=format_gmt_label(origin_offset),
            location=Location(lat=origin.lat, lng=origin.lng),
        ),
        end=TripEndpoint(
            country=dest_country,
            timezone=format_gmt_label(dest_offset),
            location=Location(lat=destination.lat, lng=destination.lng),
        ),
        distance=Distance(value=round(distance)),
        time_diff=TimeDiff(value=abs(dest_offset - origin_offset)),
    )


async def get_distance_and_time(origin: Coordinate, destination: Coordinate) -> TripSummary:
    """
    Resolve countries and time zones for both coordinates and compose a TripSummary.

    Distance is computed locally. The four Maps lookups run concurrently and
    are all awaited even when one fails; the first failure (in issue order)
    is then raised, so a partial summary is never returned.

    Raises:
        CoordinateError: coordinates do not yield a finite distance.
        RemoteLookupError: any lookup failed.
        FormatError: a returned zone id could not be turned into an offset.
    """
    distance = checked_distance_km(origin, destination)

    async with maps_client.new_client() as client:
        results = await asyncio.gather(
            maps_client.resolve_country(client, origin),
            maps_client.resolve_country(client, destination),
            maps_client.resolve_timezone(client, origin),
            maps_client.resolve_timezone(client, destination),
            return_exceptions=True,
        )

    for result in results:
        if isinstance(result, BaseException):
            raise result

    origin_country, dest_country, origin_tz, dest_tz = results
    origin_offset = parse_utc_offset(current_utc_offset(origin_tz))
    dest_offset = parse_utc_offset(current_utc_offset(dest_tz))

    summary = compose_trip_summary(
        origin_country,
        dest_country,
        origin_offset,
        dest_offset,
        origin,
        destination,
        distance,
    )
    logger.info(f"Trip summary: {summary.model_dump()}")
    return summary
