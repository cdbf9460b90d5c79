"""Errors surfaced to the user when a city load fails."""

from __future__ import annotations


class BiotopeMapError(Exception):
    """Base class for user-facing failures."""

    kind = "error"


class EmptyInput(BiotopeMapError):
    """The city name was blank."""

    kind = "empty_input"

    def __init__(self) -> None:
        super().__init__("Enter a city name")


class CityNotFound(BiotopeMapError):
    """The place search returned no results."""

    kind = "city_not_found"

    def __init__(self, name: str) -> None:
        super().__init__(f"City not found: {name}")
        self.name = name


class TransportFailure(BiotopeMapError):
    """A network or response-parsing error from an external service."""

    kind = "transport_failure"

    def __init__(self, service: str, cause: Exception) -> None:
        super().__init__(f"{service} request failed: {cause}")
        self.service = service


class StaleLoad(BiotopeMapError):
    """A newer city load started before this one finished."""

    kind = "stale_load"

    def __init__(self, name: str) -> None:
        super().__init__(f"Load of {name!r} was superseded by a newer request")
        self.name = name
