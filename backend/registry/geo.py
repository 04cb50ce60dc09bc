"""Great-circle distance (haversine)."""
import math

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MI = 3958.8


def haversine(lat1: float, lon1: float, lat2: float, lon2: float, radius: float = EARTH_RADIUS_MI) -> float:
    """
    Distance between two points given in degrees, in the unit of `radius`.

    a = sin²(Δlat/2) + cos(lat1)·cos(lat2)·sin²(Δlon/2); d = 2·R·asin(√a)
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push a a hair above 1 for antipodal points.
    return 2 * radius * math.asin(math.sqrt(min(1.0, a)))


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    return haversine(lat1, lon1, lat2, lon2, EARTH_RADIUS_MI)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    return haversine(lat1, lon1, lat2, lon2, EARTH_RADIUS_KM)


def format_miles(miles: float) -> str:
    """Display form used by the client, e.g. '1.42 miles'."""
    return f"{miles:.2f} miles"
