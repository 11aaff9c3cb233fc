"""Schemas for the distance and time-difference endpoint."""

from typing import Any, Literal

from pydantic import BaseModel


class Location(BaseModel):
    lat: float
    lng: float


class TripEndpoint(BaseModel):
    """One side of a trip: country name, GMT label and echoed coordinates."""
    country: str
    timezone: str
    location: Location


class Distance(BaseModel):
    value: int
    units: Literal["km"] = "km"


class TimeDiff(BaseModel):
    value: int
    units: Literal["hours"] = "hours"


class TripSummary(BaseModel):
    """
    Composed result for two coordinates.

    Example:
    ```json
    {
      "start": {"country": "France", "timezone": "GMT+2", "location": {"lat": 48.85, "lng": 2.35}},
      "end": {"country": "Japan", "timezone": "GMT+9", "location": {"lat": 35.68, "lng": 139.69}},
      "distance": {"value": 9713, "units": "km"},
      "time_diff": {"value": 7, "units": "hours"}
    }
    ```
    """
    start: TripEndpoint
    end: TripEndpoint
    distance: Distance
    time_diff: TimeDiff


class ErrorEnvelope(BaseModel):
    """Body returned instead of a TripSummary when any lookup fails."""
    errors: dict[str, Any]
