"""Geo utilities: coordinates and great-circle distance (Haversine)."""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.071

# Coordinate bounds for validation
LAT_MIN, LAT_MAX = -90.0, 90.0
LNG_MIN, LNG_MAX = -180.0, 180.0


class CoordinateError(ValueError):
    """Raised when coordinates do not yield a usable distance."""


@dataclass(frozen=True)
class Coordinate:
    """A (lat, lng) pair in degrees."""
    lat: float
    lng: float

    def as_param(self) -> str:
        """Render as the `lat,lng` form the Maps web services expect (never scientific notation)."""
        return f"{_fixed(self.lat)},{_fixed(self.lng)}"


def _fixed(degrees: float) -> str:
    """Fixed-point, 7 decimals (~1 cm), trailing zeros dropped: 1e-05 -> '0.00001'."""
    text = f"{degrees:.7f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Compute great-circle distance between two coordinates in kilometers.
    Uses the Haversine formula on a sphere of radius EARTH_RADIUS_KM.
    """
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = phi2 - phi1
    dlambda = math.radians(b.lng - a.lng)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def checked_distance_km(a: Coordinate, b: Coordinate) -> float:
    """Like distance_km, but raise CoordinateError instead of returning NaN."""
    d = distance_km(a, b)
    if math.isnan(d):
        raise CoordinateError(f"Distance undefined for {a.as_param()} -> {b.as_param()}")
    return d
