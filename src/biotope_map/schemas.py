"""
Domain models for the biotope map.

Pydantic models for data from external APIs and internal processing.
Datasources normalize API responses to these; renderers turn them into
JSON-serializable view models the map page draws.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Taxonomy
# =============================================================================


class Category(StrEnum):
    """Coarse taxonomic bucket assigned by keyword heuristic."""

    BIRD = "Bird"
    MAMMAL = "Mammal"
    PLANT = "Plant"
    FUNGI = "Fungi"
    INSECT = "Insect"
    AMPHIBIAN = "Amphibian"
    REPTILE = "Reptile"
    OTHER = "Other"


# =============================================================================
# Observations
# =============================================================================


class Observation(BaseModel):
    """One iNaturalist sighting, with derived category and biotope once classified."""

    id: int | None = None
    species_label: str = "Unknown"
    coordinates: tuple[float, float] | None = Field(
        default=None, description="(longitude, latitude), GeoJSON order"
    )
    photo_url: str | None = None
    wikipedia_url: str | None = None
    url: str | None = None
    is_threatened: bool = False
    is_invasive: bool = False

    # Derived; set by analysis.classify.annotate
    category: Category | None = None
    biotope: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    @property
    def longitude(self) -> float | None:
        return self.coordinates[0] if self.coordinates else None

    @property
    def latitude(self) -> float | None:
        return self.coordinates[1] if self.coordinates else None


class ObservationBatch(BaseModel):
    """Raw first page of an observation search."""

    results: list[dict[str, Any]] = Field(default_factory=list)
    total_results: int = 0

    @property
    def truncated(self) -> bool:
        """True when the API reports more matches than were returned."""
        return self.total_results > len(self.results)


# =============================================================================
# Geographic
# =============================================================================


class CityLocation(BaseModel):
    """A geocoded city name."""

    name: str
    display_name: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


# =============================================================================
# Filtering
# =============================================================================

_TRUTHY = frozenset({"1", "true", "on", "yes"})


class FilterState(BaseModel):
    """Current category selection and threatened/invasive toggles."""

    model_config = ConfigDict(frozen=True)

    categories: frozenset[Category] = frozenset()
    threatened_only: bool = False
    invasive_only: bool = False

    @classmethod
    def from_query(cls, query: Mapping[str, Sequence[str]]) -> FilterState:
        """
        Build a filter state from parsed query parameters.

        Expects the shape returned by ``urllib.parse.parse_qs``: repeated
        ``category`` values plus ``threatened`` / ``invasive`` flags.
        Unknown category names are ignored.
        """
        valid = {c.value for c in Category}
        categories = frozenset(
            Category(value) for value in query.get("category", []) if value in valid
        )
        return cls(
            categories=categories,
            threatened_only=_flag(query, "threatened"),
            invasive_only=_flag(query, "invasive"),
        )


def _flag(query: Mapping[str, Sequence[str]], name: str) -> bool:
    values = query.get(name, [])
    return bool(values) and values[-1].strip().lower() in _TRUTHY


# =============================================================================
# View models
# =============================================================================


class MarkerView(BaseModel):
    """A map marker with its popup."""

    latitude: float
    longitude: float
    category: Category
    popup_html: str


class SidebarEntry(BaseModel):
    """One list item in the sidebar."""

    html: str


class MapView(BaseModel):
    """Markers and sidebar entries for one render pass."""

    markers: list[MarkerView] = Field(default_factory=list)
    sidebar: list[SidebarEntry] = Field(default_factory=list)


class CitySummary(BaseModel):
    """City-level overview, computed once per load from the unfiltered set."""

    city: str
    display_name: str | None = None
    challenges: str
    biotopes: list[str]
    observation_count: int
    total_results: int
    truncated: bool = False
    html: str = ""


class ViewModel(BaseModel):
    """Everything the page needs to redraw the map, sidebar and summary."""

    city: str | None = None
    center: tuple[float, float] | None = Field(default=None, description="(latitude, longitude)")
    zoom: int | None = None
    summary: CitySummary | None = None
    markers: list[MarkerView] = Field(default_factory=list)
    sidebar: list[SidebarEntry] = Field(default_factory=list)
    fetched_count: int = 0
    shown_count: int = 0
    truncated: bool = False
    generation: int = 0
