from app.schemas.trip import Distance, ErrorEnvelope, Location, TimeDiff, TripEndpoint, TripSummary

__all__ = [
    "Distance",
    "ErrorEnvelope",
    "Location",
    "TimeDiff",
    "TripEndpoint",
    "TripSummary",
]
