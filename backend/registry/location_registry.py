"""Location registry: CRUD, name lookup and distance queries over saved locations."""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.location import Location
from registry.errors import BackendUnavailable, DuplicateName, InvalidInput, NotFound
from registry.geo import format_miles, haversine_km, haversine_miles
from registry.validation import clean_optional_text, normalize_name, parse_latitude, parse_longitude
from repositories import location_repository as repo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceResult:
    """Two resolved locations and the great-circle distance between them."""

    origin: Location
    destination: Location
    miles: float
    kilometers: float

    @property
    def text(self) -> str:
        return format_miles(self.miles)


def _clean_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize a (possibly partial) set of location fields."""
    unknown = set(fields) - set(repo.UPDATABLE_FIELDS)
    if unknown:
        raise InvalidInput(f"Unknown field(s): {', '.join(sorted(unknown))}")
    cleaned: dict[str, Any] = {}
    for key, value in fields.items():
        if key == "name":
            cleaned[key] = normalize_name(value)
        elif key == "latitude":
            cleaned[key] = parse_latitude(value)
        elif key == "longitude":
            cleaned[key] = parse_longitude(value)
        else:
            cleaned[key] = clean_optional_text(value, key)
    return cleaned


class LocationRegistry:
    """
    Owns saved locations: enforces case-insensitive name uniqueness, validates
    coordinates and answers name lookups and pairwise distance queries.

    Holds no state besides the injected session; every call reads and writes
    through the database.
    """

    def __init__(self, session: Session):
        self._session = session

    @contextmanager
    def _backend(self, action: str) -> Iterator[None]:
        """Surface database failures as BackendUnavailable (no retries)."""
        try:
            yield
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Database error during %s: %s", action, e)
            raise BackendUnavailable(f"Database error during {action}") from e

    def create(
        self,
        name: Any,
        latitude: Any,
        longitude: Any,
        landmark: Any = None,
        zip_code: Any = None,
    ) -> Location:
        """Insert a new location. Raises InvalidInput or DuplicateName."""
        fields = _clean_fields(
            {
                "name": name,
                "latitude": latitude,
                "longitude": longitude,
                "landmark": landmark,
                "zip_code": zip_code,
            }
        )
        with self._backend("create"):
            if repo.get_location_by_name(self._session, fields["name"]) is not None:
                raise DuplicateName(fields["name"])
            try:
                loc = repo.create_location(self._session, **fields)
            except IntegrityError as e:
                # A concurrent insert took the name between the check and the commit.
                self._session.rollback()
                raise DuplicateName(fields["name"]) from e
        logger.info("Created location %s (%s)", loc.name, loc.id)
        return loc

    def list_all(self) -> list[Location]:
        """Return every saved location (order not guaranteed to callers)."""
        with self._backend("list"):
            return repo.list_locations(self._session)

    def get(self, identifier: str) -> Location:
        """Return a location by id. Raises NotFound."""
        with self._backend("get"):
            loc = repo.get_location(self._session, identifier)
        if loc is None:
            raise NotFound.for_id(identifier)
        return loc

    def find_by_name(self, name: Any) -> Location:
        """Exact, case-insensitive lookup by name. Raises NotFound."""
        normalized = normalize_name(name)
        with self._backend("find_by_name"):
            loc = repo.get_location_by_name(self._session, normalized)
        if loc is None:
            raise NotFound.for_names([normalized])
        logger.debug("Resolved location name %s -> %s", normalized, loc.id)
        return loc

    def update(self, identifier: str, fields: dict[str, Any]) -> Location:
        """
        Apply only the supplied fields. name/latitude/longitude cannot be cleared;
        landmark/zip_code set to None are cleared. A rename must keep names unique.
        """
        changes = _clean_fields(fields)
        with self._backend("update"):
            loc = repo.get_location(self._session, identifier)
            if loc is None:
                raise NotFound.for_id(identifier)
            current_name = loc.name
            new_name = changes.get("name")
            if new_name is not None and new_name != current_name:
                other = repo.get_location_by_name(self._session, new_name)
                if other is not None and other.id != identifier:
                    raise DuplicateName(new_name)
            try:
                updated = repo.update_location(self._session, identifier, changes)
            except IntegrityError as e:
                self._session.rollback()
                raise DuplicateName(new_name or current_name) from e
        if updated is None:
            raise NotFound.for_id(identifier)
        logger.info("Updated location %s (%s): %s", updated.name, updated.id, sorted(changes))
        return updated

    def delete(self, identifier: str) -> None:
        """Permanently remove a location. Raises NotFound for unknown ids."""
        with self._backend("delete"):
            deleted = repo.delete_location(self._session, identifier)
        if not deleted:
            raise NotFound.for_id(identifier)
        logger.info("Deleted location %s", identifier)

    def distance(self, name1: Any, name2: Any) -> DistanceResult:
        """Great-circle distance between two named locations. NotFound lists every missing name."""
        first = normalize_name(name1)
        second = normalize_name(name2)
        with self._backend("distance"):
            origin = repo.get_location_by_name(self._session, first)
            destination = repo.get_location_by_name(self._session, second)
        missing = [n for n, loc in ((first, origin), (second, destination)) if loc is None]
        if missing:
            raise NotFound.for_names(missing)
        miles = haversine_miles(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
        km = haversine_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
        logger.debug("Distance %s -> %s: %.4f mi", first, second, miles)
        return DistanceResult(origin=origin, destination=destination, miles=miles, kilometers=km)
