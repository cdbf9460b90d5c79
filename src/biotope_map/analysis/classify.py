"""Keyword classification of species labels.

Maps a free-text species label to a coarse ``Category`` and a habitat
guess using the ordered tables in ``reference/biotopes.py``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TypeVar

from biotope_map.reference.biotopes import (
    BIOTOPE_KEYWORDS,
    CATEGORY_KEYWORDS,
    CITY_BIOTOPES,
    FALLBACK_BIOTOPE,
    GENERIC_CITY_BIOTOPES,
)
from biotope_map.schemas import Category, Observation

T = TypeVar("T")


def _first_match(table: Iterable[tuple[re.Pattern[str], T]], text: str | None, default: T) -> T:
    """Return the result of the first pattern found in ``text``."""
    if not text:
        return default
    for pattern, result in table:
        if pattern.search(text):
            return result
    return default


def classify_category(species_label: str | None) -> Category:
    """Taxonomic bucket for a species label; ``Other`` when nothing matches."""
    return _first_match(CATEGORY_KEYWORDS, species_label, Category.OTHER)


def infer_biotope(species_label: str | None) -> str:
    """Habitat guess for a species label, or the generic urban/mixed fallback."""
    return _first_match(BIOTOPE_KEYWORDS, species_label, FALLBACK_BIOTOPE)


def city_biotopes(city_name: str) -> list[str]:
    """Five curated habitats for a recognized city, else five generic ones."""
    for city in CITY_BIOTOPES:
        if city.matches(city_name):
            return list(city.biotopes)
    return list(GENERIC_CITY_BIOTOPES)


def annotate(observation: Observation) -> Observation:
    """Attach (or refresh) ``category`` and ``biotope``; returns the same object."""
    observation.category = classify_category(observation.species_label)
    observation.biotope = infer_biotope(observation.species_label)
    return observation


def merged_biotopes(city_name: str, observations: Iterable[Observation]) -> list[str]:
    """
    Curated city biotopes followed by every distinct observed biotope.

    Order is first-seen; duplicates (including observed biotopes that repeat
    a curated one) appear once. Observations are annotated as a side effect.
    """
    merged = dict.fromkeys(city_biotopes(city_name))
    for obs in observations:
        merged.setdefault(annotate(obs).biotope or FALLBACK_BIOTOPE)
    return list(merged)
