"""Keyword tables and curated habitat lists.

Each table is an ordered tuple of ``(pattern, result)`` pairs; the first
pattern that matches wins. Keyword vocabularies overlap between groups
("grass snake", "owl butterfly"), so the order is part of the contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from biotope_map.schemas import Category


def _keywords(*words: str) -> re.Pattern[str]:
    return re.compile("|".join(words), re.IGNORECASE)


CATEGORY_KEYWORDS: tuple[tuple[re.Pattern[str], Category], ...] = (
    (_keywords("bird", "sparrow", "grebe", "eagle", "owl", "pigeon", "crow"), Category.BIRD),
    (_keywords("fox", "deer", "rabbit", "wolf", "cat", "dog", "squirrel"), Category.MAMMAL),
    (_keywords("tree", "plant", "flower", "grass", "shrub", "oak", "maple"), Category.PLANT),
    (_keywords("mushroom", "fungi", "toadstool"), Category.FUNGI),
    (_keywords("bee", "butterfly", "ant", "fly", "insect", "dragonfly"), Category.INSECT),
    (_keywords("frog", "toad", "salamander"), Category.AMPHIBIAN),
    (_keywords("snake", "lizard", "turtle"), Category.REPTILE),
)

FALLBACK_BIOTOPE = "Urban areas and mixed habitats"

BIOTOPE_KEYWORDS: tuple[tuple[re.Pattern[str], str], ...] = (
    # aquatic birds
    (_keywords("grebe", "duck", "heron", "swan"), "Freshwater lakes and wetlands with reeds"),
    # urban birds
    (_keywords("robin", "sparrow", "crow", "owl", "pigeon"), "Woodlands, urban parks and gardens"),
    # trees
    (
        _keywords("oak", "maple", "pine", "fir"),
        "Deciduous or coniferous forests, urban green spaces",
    ),
    (_keywords("frog", "toad", "salamander"), "Ponds, wetlands, and marshy areas"),
    # pollinators
    (_keywords("bee", "butterfly", "dragonfly"), "Flower-rich meadows and open habitats"),
    (_keywords("mushroom", "fungi", "toadstool"), "Forests with decaying wood and leaf litter"),
)


@dataclass(frozen=True)
class CityBiotopes:
    """Curated habitats for a city recognized by any of its name variants."""

    names: tuple[str, ...]
    biotopes: tuple[str, ...]

    def matches(self, city_name: str) -> bool:
        """Case-insensitive substring match on any name variant."""
        city = city_name.lower()
        return any(name in city for name in self.names)


CITY_BIOTOPES: tuple[CityBiotopes, ...] = (
    CityBiotopes(
        names=("lucerne", "luzern"),
        biotopes=(
            "Alpine forests",
            "Reuss River wetlands",
            "Lake Luzern shoreline habitats",
            "Floodplain meadows",
            "Urban parks and gardens",
        ),
    ),
)

GENERIC_CITY_BIOTOPES: tuple[str, ...] = (
    "Forests",
    "Wetlands",
    "Rivers",
    "Meadows",
    "Urban green spaces",
)
