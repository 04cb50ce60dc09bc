"""Location model for DB persistence."""
import uuid

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Location(Base):
    """Location table: id, name, latitude, longitude, landmark, zip_code."""

    __tablename__ = "location"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    # Stored lowercased, so this unique constraint is the case-insensitive uniqueness guarantee.
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    landmark: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(32), nullable=True)
