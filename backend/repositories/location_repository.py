"""Location repository: list, get, create, update, delete."""
import uuid
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.location import Location

UPDATABLE_FIELDS = ("name", "latitude", "longitude", "landmark", "zip_code")


def list_locations(session: Session) -> list[Location]:
    """Return all locations."""
    result = session.execute(select(Location).order_by(Location.name))
    return list(result.scalars().all())


def get_location(session: Session, location_id: str) -> Optional[Location]:
    """Return a location by id or None."""
    return session.get(Location, location_id)


def get_location_by_name(session: Session, name: str) -> Optional[Location]:
    """Return location by (already normalized) name or None."""
    return session.execute(
        select(Location).where(Location.name == name)
    ).scalar_one_or_none()


def create_location(
    session: Session,
    *,
    name: str,
    latitude: float,
    longitude: float,
    landmark: str | None = None,
    zip_code: str | None = None,
    location_id: str | None = None,
) -> Location:
    """Create a location, commit, and return it. Id is generated if not provided."""
    loc = Location(
        id=location_id or str(uuid.uuid4()),
        name=name,
        latitude=latitude,
        longitude=longitude,
        landmark=landmark,
        zip_code=zip_code,
    )
    session.add(loc)
    session.commit()
    session.refresh(loc)
    return loc


def update_location(session: Session, location_id: str, fields: dict[str, Any]) -> Optional[Location]:
    """Apply the given fields to a location. Returns updated location or None if not found."""
    loc = get_location(session, location_id)
    if loc is None:
        return None
    for key, value in fields.items():
        if key not in UPDATABLE_FIELDS:
            raise ValueError(f"Location field '{key}' cannot be updated")
        setattr(loc, key, value)
    session.commit()
    session.refresh(loc)
    return loc


def count_locations(session: Session) -> int:
    """Return the number of locations."""
    result = session.execute(select(func.count()).select_from(Location))
    return result.scalar() or 0


def delete_location(session: Session, location_id: str) -> bool:
    """Delete a location by id. Returns True if deleted, False if not found."""
    loc = get_location(session, location_id)
    if loc is None:
        return False
    session.delete(loc)
    session.commit()
    return True
