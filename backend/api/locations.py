"""Location API routes."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from db import get_db
from models.location import Location
from registry import DuplicateName, InvalidInput, LocationRegistry, NotFound
from schemas.locations import (
    DistanceRequest,
    DistanceResponse,
    LocationCreate,
    LocationResponse,
    LocationSummary,
    LocationUpdate,
)

router = APIRouter(prefix="/locations", tags=["locations"])


def get_registry(db: Session = Depends(get_db)) -> LocationRegistry:
    """FastAPI dependency: registry bound to the request's DB session."""
    return LocationRegistry(db)


def _location_to_response(loc: Location) -> LocationResponse:
    """Build LocationResponse from model instance."""
    return LocationResponse(
        id=loc.id,
        name=loc.name,
        latitude=loc.latitude,
        longitude=loc.longitude,
        landmark=loc.landmark,
        zipCode=loc.zip_code,
    )


def _location_to_summary(loc: Location) -> LocationSummary:
    return LocationSummary(
        name=loc.name,
        landmark=loc.landmark or "N/A",
        zipCode=loc.zip_code or "N/A",
    )


@router.get("", response_model=list[LocationResponse])
def list_locations(registry: LocationRegistry = Depends(get_registry)) -> list[LocationResponse]:
    """List all locations."""
    return [_location_to_response(loc) for loc in registry.list_all()]


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    registry: LocationRegistry = Depends(get_registry),
) -> LocationResponse:
    """Create a new location. Name is lowercased and must be unique."""
    try:
        loc = registry.create(
            name=body.name,
            latitude=body.latitude,
            longitude=body.longitude,
            landmark=body.landmark,
            zip_code=body.zipCode,
        )
    except DuplicateName as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except InvalidInput as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    return _location_to_response(loc)


@router.get("/search", response_model=LocationResponse)
def search_location(
    name: str = Query(..., min_length=1),
    registry: LocationRegistry = Depends(get_registry),
) -> LocationResponse:
    """Exact, case-insensitive lookup by name."""
    try:
        loc = registry.find_by_name(name)
    except InvalidInput as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _location_to_response(loc)


@router.post("/distance", response_model=DistanceResponse)
def location_distance(
    body: DistanceRequest,
    registry: LocationRegistry = Depends(get_registry),
) -> DistanceResponse:
    """Great-circle distance in miles between two saved locations."""
    try:
        result = registry.distance(body.location1, body.location2)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return DistanceResponse(
        from_=_location_to_summary(result.origin),
        to=_location_to_summary(result.destination),
        distance=result.text,
        distanceMiles=result.miles,
        distanceKm=result.kilometers,
    )


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: str, registry: LocationRegistry = Depends(get_registry)) -> LocationResponse:
    """Get a location by id."""
    try:
        return _location_to_response(registry.get(location_id))
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{location_id}", response_model=LocationResponse)
@router.patch("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: str,
    body: LocationUpdate,
    registry: LocationRegistry = Depends(get_registry),
) -> LocationResponse:
    """Update only the fields sent in the body. Renaming must keep names unique."""
    try:
        loc = registry.update(location_id, body.changes())
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicateName as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except InvalidInput as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    return _location_to_response(loc)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: str, registry: LocationRegistry = Depends(get_registry)) -> None:
    """Delete a location by id."""
    try:
        registry.delete(location_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
