"""Normalize and validate location fields (shared by schemas and the registry)."""
import math
from typing import Any

from registry.errors import InvalidInput

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0


def normalize_name(value: Any) -> str:
    """Strip and lowercase a location name. Raises InvalidInput if missing or empty."""
    if value is None or not isinstance(value, str):
        raise InvalidInput("name is required")
    name = value.strip().lower()
    if not name:
        raise InvalidInput("name is required")
    return name


def _parse_coordinate(value: Any, field: str, limit: float) -> float:
    """Parse a number or numeric string and check it lies in [-limit, limit]."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(f"{field} is required")
    # bool is an int subclass; true/false is never a coordinate.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidInput(f"{field} must be a number")
    try:
        number = float(value)
    except ValueError:
        raise InvalidInput(f"{field} must be a number") from None
    if not math.isfinite(number):
        raise InvalidInput(f"{field} must be a finite number")
    if not -limit <= number <= limit:
        raise InvalidInput(f"{field} must be between {-limit:g} and {limit:g}")
    return number


def parse_latitude(value: Any) -> float:
    return _parse_coordinate(value, "latitude", LATITUDE_LIMIT)


def parse_longitude(value: Any) -> float:
    return _parse_coordinate(value, "longitude", LONGITUDE_LIMIT)


def clean_optional_text(value: Any, field: str) -> str | None:
    """Optional free-form text: blank becomes None; integers (e.g. zip codes) become strings."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise InvalidInput(f"{field} must be text")
    s = value.strip()
    return s if s else None
