"""SQLAlchemy declarative base and models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB models."""
    pass
