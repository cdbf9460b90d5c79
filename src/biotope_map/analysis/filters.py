"""Apply the user's filter selection to an observation list."""

from __future__ import annotations

from collections.abc import Iterable

from biotope_map.analysis.classify import annotate
from biotope_map.schemas import FilterState, Observation


def matches(observation: Observation, filter_state: FilterState) -> bool:
    """True if an annotated observation passes every active filter."""
    if not observation.has_coordinates:
        return False
    if filter_state.categories and observation.category not in filter_state.categories:
        return False
    if filter_state.threatened_only and not observation.is_threatened:
        return False
    return not (filter_state.invasive_only and not observation.is_invasive)


def apply_filters(
    observations: Iterable[Observation],
    filter_state: FilterState,
) -> list[Observation]:
    """
    Annotate each observation and keep those that pass ``filter_state``.

    Input order is preserved. Observations without coordinates are never
    returned. Safe to call repeatedly on the same list.
    """
    return [obs for obs in observations if matches(annotate(obs), filter_state)]
