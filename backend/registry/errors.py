"""Typed error kinds raised by the location registry."""


class RegistryError(Exception):
    """Base class for registry failures."""


class InvalidInput(RegistryError, ValueError):
    """A required field is missing or a value is malformed/out of range.

    Also a ValueError so pydantic validators can raise it directly.
    """


class DuplicateName(RegistryError):
    """Another location already uses this (normalized) name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Location with name '{name}' already exists")


class NotFound(RegistryError):
    """No location matches the given identifier or name(s)."""

    def __init__(self, message: str, *, names: list[str] | None = None, identifier: str | None = None):
        self.names = names or []
        self.identifier = identifier
        super().__init__(message)

    @classmethod
    def for_names(cls, names: list[str]) -> "NotFound":
        quoted = ", ".join(f"'{n}'" for n in names)
        noun = "Location" if len(names) == 1 else "Locations"
        return cls(f"{noun} not found: {quoted}", names=names)

    @classmethod
    def for_id(cls, identifier: str) -> "NotFound":
        return cls("Location not found", identifier=identifier)


class BackendUnavailable(RegistryError):
    """The persistence layer failed or could not be reached."""
