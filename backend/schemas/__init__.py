# Schemas package
from .health import HealthResponse
from .locations import (
    DistanceRequest,
    DistanceResponse,
    LocationCreate,
    LocationResponse,
    LocationSummary,
    LocationUpdate,
)

__all__ = [
    "DistanceRequest",
    "DistanceResponse",
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationSummary",
    "LocationUpdate",
]
