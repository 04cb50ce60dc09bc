# Location registry: errors, validation, geo math, registry service
from registry.errors import BackendUnavailable, DuplicateName, InvalidInput, NotFound, RegistryError
from registry.location_registry import DistanceResult, LocationRegistry

__all__ = [
    "BackendUnavailable",
    "DistanceResult",
    "DuplicateName",
    "InvalidInput",
    "LocationRegistry",
    "NotFound",
    "RegistryError",
]
