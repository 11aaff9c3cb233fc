"""Distance and time-difference endpoint."""

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.core.geo import LAT_MAX, LAT_MIN, LNG_MAX, LNG_MIN, Coordinate, CoordinateError
from app.core.timezones import FormatError
from app.schemas.trip import ErrorEnvelope, TripSummary
from app.services.maps_client import RemoteLookupError
from app.services.trip_summary import get_distance_and_time

logger = logging.getLogger(__name__)

router = APIRouter(tags=["trips"])


def _error_response(status_code: int, detail: dict) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(errors=detail).model_dump(),
    )


@router.get(
    "/get_distance_and_time",
    response_model=TripSummary,
    responses={
        422: {"model": ErrorEnvelope},
        502: {"model": ErrorEnvelope},
        504: {"model": ErrorEnvelope},
    },
)
async def get_distance_and_time_endpoint(
    lat1: float = Query(..., ge=LAT_MIN, le=LAT_MAX, description="Origin latitude (-90 to 90)"),
    lng1: float = Query(..., ge=LNG_MIN, le=LNG_MAX, description="Origin longitude (-180 to 180)"),
    lat2: float = Query(..., ge=LAT_MIN, le=LAT_MAX, description="Destination latitude (-90 to 90)"),
    lng2: float = Query(..., ge=LNG_MIN, le=LNG_MAX, description="Destination longitude (-180 to 180)"),
):
    """
    Return countries, GMT offsets, great-circle distance and time difference
    for two coordinates.

    Example curl:
    ```bash
    curl "http://localhost:8000/api/get_distance_and_time?lat1=37.7749&lng1=-122.4194&lat2=51.5074&lng2=-0.1278"
    ```

    Any failed lookup returns `{"errors": {...}}` with 502 (504 on timeout);
    no partial result is returned.
    """
    origin = Coordinate(lat=lat1, lng=lng1)
    destination = Coordinate(lat=lat2, lng=lng2)

    try:
        return await get_distance_and_time(origin, destination)
    except CoordinateError as e:
        logger.warning(f"Rejected coordinates: {e}")
        return _error_response(422, {"error": "invalid_coordinates", "message": str(e)})
    except RemoteLookupError as e:
        logger.error(f"Trip lookup failed: {e}")
        return _error_response(e.status_code, e.detail)
    except FormatError as e:
        logger.error(f"Offset parsing failed: {e}")
        return _error_response(502, {"error": "offset_format", "message": str(e)})
