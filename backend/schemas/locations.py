"""Pydantic schemas for location API."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, computed_field, field_validator

from registry.validation import clean_optional_text, normalize_name, parse_latitude, parse_longitude


class _LocationFields(BaseModel):
    """Shared validators: same normalization the registry applies."""

    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def _name(cls, v: Any) -> str:
        return normalize_name(v)

    @field_validator("latitude", mode="before", check_fields=False)
    @classmethod
    def _latitude(cls, v: Any) -> float:
        return parse_latitude(v)

    @field_validator("longitude", mode="before", check_fields=False)
    @classmethod
    def _longitude(cls, v: Any) -> float:
        return parse_longitude(v)

    @field_validator("landmark", "zipCode", mode="before", check_fields=False)
    @classmethod
    def _optional_text(cls, v: Any, info: ValidationInfo) -> str | None:
        return clean_optional_text(v, info.field_name)


class LocationCreate(_LocationFields):
    """Payload for creating a location. Name is stored lowercased."""

    name: str
    latitude: float
    longitude: float
    landmark: str | None = None
    zipCode: str | None = None


class LocationUpdate(_LocationFields):
    """Payload for updating a location (all fields optional; only sent fields change).

    Unknown keys (including id) are ignored: the identifier never changes.
    """

    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    landmark: str | None = None
    zipCode: str | None = None

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by model attribute name."""
        sent = self.model_dump(exclude_unset=True)
        if "zipCode" in sent:
            sent["zip_code"] = sent.pop("zipCode")
        return sent


class LocationResponse(BaseModel):
    """Location in API responses. Also exposes the id as `_id`, which the globe client uses."""

    id: str
    name: str
    latitude: float
    longitude: float
    landmark: str | None = None
    zipCode: str | None = None

    @computed_field(alias="_id")
    @property
    def legacy_id(self) -> str:
        return self.id


class LocationSummary(BaseModel):
    """Display fields for one end of a distance query."""

    name: str
    landmark: str = "N/A"
    zipCode: str = "N/A"


class DistanceRequest(BaseModel):
    """Payload for POST /locations/distance."""

    location1: str = Field(..., min_length=1)
    location2: str = Field(..., min_length=1)

    @field_validator("location1", "location2", mode="before")
    @classmethod
    def _names(cls, v: Any) -> str:
        return normalize_name(v)


class DistanceResponse(BaseModel):
    """Distance between two saved locations; 'distance' is the display text."""

    model_config = ConfigDict(populate_by_name=True)

    from_: LocationSummary = Field(..., alias="from")
    to: LocationSummary
    distance: str
    distanceMiles: float
    distanceKm: float
