"""
Tests for keyword classification of species labels.
"""

from __future__ import annotations

import pytest

from biotope_map.analysis.classify import (
    annotate,
    city_biotopes,
    classify_category,
    infer_biotope,
    merged_biotopes,
)
from biotope_map.reference.biotopes import FALLBACK_BIOTOPE, GENERIC_CITY_BIOTOPES
from biotope_map.schemas import Category, Observation

LUCERNE_BIOTOPES = [
    "Alpine forests",
    "Reuss River wetlands",
    "Lake Luzern shoreline habitats",
    "Floodplain meadows",
    "Urban parks and gardens",
]


class TestClassifyCategory:
    """Test taxonomic bucket assignment."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("House Sparrow", Category.BIRD),
            ("Great Crested Grebe", Category.BIRD),
            ("Red Fox", Category.MAMMAL),
            ("Red Squirrel", Category.MAMMAL),
            ("English Oak", Category.PLANT),
            ("Oyster Mushroom", Category.FUNGI),
            ("Honey Bee", Category.INSECT),
            ("Common Frog", Category.AMPHIBIAN),
            ("Alpine Salamander", Category.AMPHIBIAN),
            ("Sand Lizard", Category.REPTILE),
        ],
    )
    def test_keyword_groups(self, label: str, expected: Category) -> None:
        assert classify_category(label) == expected

    def test_case_insensitive(self) -> None:
        assert classify_category("SPARROWHAWK") == Category.BIRD
        assert classify_category("red fox") == Category.MAMMAL

    def test_unmatched_is_other(self) -> None:
        assert classify_category("Common Carp") == Category.OTHER

    @pytest.mark.parametrize("label", ["", None])
    def test_empty_is_other(self, label: str | None) -> None:
        assert classify_category(label) == Category.OTHER

    def test_plant_before_reptile(self) -> None:
        """'grass' is checked before 'snake'."""
        assert classify_category("Grass Snake") == Category.PLANT

    def test_bird_before_insect(self) -> None:
        assert classify_category("Owl Butterfly") == Category.BIRD

    def test_fungi_before_insect(self) -> None:
        assert classify_category("Fly Agaric Mushroom") == Category.FUNGI


class TestInferBiotope:
    """Test habitat guesses."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Mallard Duck", "Freshwater lakes and wetlands with reeds"),
            ("Grebe", "Freshwater lakes and wetlands with reeds"),
            ("European Robin", "Woodlands, urban parks and gardens"),
            ("Scots Pine", "Deciduous or coniferous forests, urban green spaces"),
            ("Common Toad", "Ponds, wetlands, and marshy areas"),
            ("Peacock Butterfly", "Flower-rich meadows and open habitats"),
            ("Oyster Mushroom", "Forests with decaying wood and leaf litter"),
        ],
    )
    def test_keyword_groups(self, label: str, expected: str) -> None:
        assert infer_biotope(label) == expected

    def test_aquatic_before_urban_birds(self) -> None:
        """'heron' wins over 'owl' inside the same label."""
        assert infer_biotope("Heron Owl") == "Freshwater lakes and wetlands with reeds"

    def test_fallback(self) -> None:
        assert infer_biotope("Red Fox") == FALLBACK_BIOTOPE
        assert FALLBACK_BIOTOPE == "Urban areas and mixed habitats"

    @pytest.mark.parametrize("label", ["", None])
    def test_empty_uses_fallback(self, label: str | None) -> None:
        assert infer_biotope(label) == FALLBACK_BIOTOPE

    def test_deterministic(self) -> None:
        assert infer_biotope("Mute Swan") == infer_biotope("Mute Swan")


class TestCityBiotopes:
    """Test curated and generic city habitat lists."""

    @pytest.mark.parametrize("city", ["Lucerne", "LUZERN", "Stadt Luzern", "lucerne, switzerland"])
    def test_lucerne_variants(self, city: str) -> None:
        assert city_biotopes(city) == LUCERNE_BIOTOPES

    def test_other_city_generic(self) -> None:
        result = city_biotopes("Zurich")
        assert result == list(GENERIC_CITY_BIOTOPES)
        assert result == ["Forests", "Wetlands", "Rivers", "Meadows", "Urban green spaces"]

    @pytest.mark.parametrize("city", ["Lucerne", "Berlin", ""])
    def test_always_five(self, city: str) -> None:
        assert len(city_biotopes(city)) == 5

    def test_returns_fresh_list(self) -> None:
        first = city_biotopes("Lucerne")
        first.append("Extra")
        assert len(city_biotopes("Lucerne")) == 5


class TestAnnotate:
    """Test attaching derived fields."""

    def test_sets_category_and_biotope(self) -> None:
        obs = Observation(species_label="Great Crested Grebe")
        result = annotate(obs)
        assert result is obs
        assert obs.category == Category.BIRD
        assert obs.biotope == "Freshwater lakes and wetlands with reeds"

    def test_unknown_label(self) -> None:
        obs = annotate(Observation())
        assert obs.category == Category.OTHER
        assert obs.biotope == FALLBACK_BIOTOPE


class TestMergedBiotopes:
    """Test union of curated and observed biotopes."""

    def test_curated_first_then_observed_in_order(self) -> None:
        observations = [
            Observation(species_label="Mute Swan"),
            Observation(species_label="Common Toad"),
            Observation(species_label="Mallard Duck"),
        ]
        result = merged_biotopes("Lucerne", observations)
        assert result == [
            *LUCERNE_BIOTOPES,
            "Freshwater lakes and wetlands with reeds",
            "Ponds, wetlands, and marshy areas",
        ]

    def test_no_observations(self) -> None:
        assert merged_biotopes("Berlin", []) == list(GENERIC_CITY_BIOTOPES)

    def test_includes_observations_without_coordinates(self) -> None:
        obs = Observation(species_label="Oyster Mushroom", coordinates=None)
        result = merged_biotopes("Berlin", [obs])
        assert "Forests with decaying wood and leaf litter" in result
