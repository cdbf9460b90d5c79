"""
Application state and the two UI handlers.

``AppState`` is the only mutable state in the process: the current city, the
raw observation list of the last successful load, and its summary. Handlers
take it explicitly:

- ``load_city``: geocode, fetch, classify, replace state, render
- ``refilter``: re-render the in-memory list with a new filter (no network)

Loads may overlap (one request thread each). Every load claims a generation
number before going to the network; only the newest generation may commit,
older ones raise ``StaleLoad`` instead of overwriting newer state.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from biotope_map.analysis.classify import annotate, merged_biotopes
from biotope_map.analysis.filters import apply_filters
from biotope_map.datasources.inaturalist import (
    DEFAULT_RADIUS_KM,
    fetch_observations,
    parse_observation,
)
from biotope_map.datasources.nominatim import resolve_city
from biotope_map.errors import EmptyInput, StaleLoad
from biotope_map.reference.geography import CITY_ZOOM
from biotope_map.renderers.city_summary import build_city_summary
from biotope_map.renderers.observation_map import build_map_view
from biotope_map.schemas import CityLocation, CitySummary, FilterState, Observation, ViewModel

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Observations and summary of the last successful load."""

    city: CityLocation | None = None
    observations: list[Observation] = field(default_factory=list)
    summary: CitySummary | None = None
    generation: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def render(state: AppState, filter_state: FilterState) -> ViewModel:
    """Pure render pass: current state + filter -> view model."""
    shown = apply_filters(state.observations, filter_state)
    map_view = build_map_view(shown)
    city = state.city
    return ViewModel(
        city=city.name if city else None,
        center=(city.latitude, city.longitude) if city else None,
        zoom=CITY_ZOOM if city else None,
        summary=state.summary,
        markers=map_view.markers,
        sidebar=map_view.sidebar,
        fetched_count=len(state.observations),
        shown_count=len(map_view.markers),
        truncated=state.summary.truncated if state.summary else False,
        generation=state.generation,
    )


def refilter(state: AppState, filter_state: FilterState) -> ViewModel:
    """Handle a filter-control change."""
    with state.lock:
        return render(state, filter_state)


def load_city(
    state: AppState,
    name: str,
    filter_state: FilterState | None = None,
    *,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> ViewModel:
    """
    Handle the load-city action.

    The previous state is kept until the new city has been resolved and its
    observations fetched, so any failure leaves the current view intact.

    Raises:
        EmptyInput: ``name`` is blank.
        CityNotFound: The place search found nothing.
        TransportFailure: Either external call failed.
        StaleLoad: A newer load started while this one was in flight.
    """
    city_name = (name or "").strip()
    if not city_name:
        raise EmptyInput()

    with state.lock:
        state.generation += 1
        generation = state.generation

    logger.info("Loading %r (generation %d)", city_name, generation)
    city = resolve_city(city_name)
    batch = fetch_observations(city.latitude, city.longitude, radius_km)

    observations = [annotate(parse_observation(raw)) for raw in batch.results]
    summary = build_city_summary(
        city_name,
        merged_biotopes(city_name, observations),
        observation_count=len(observations),
        total_results=batch.total_results,
        display_name=city.display_name,
    )

    with state.lock:
        if generation != state.generation:
            logger.info("Discarding stale load of %r (generation %d)", city_name, generation)
            raise StaleLoad(city_name)
        state.city = city
        state.observations = observations
        state.summary = summary
        view = render(state, filter_state or FilterState())

    logger.info(
        "Loaded %r: %d observations, %d shown", city_name, view.fetched_count, view.shown_count
    )
    return view
