"""
Tests for the filter engine.
"""

from __future__ import annotations

from biotope_map.analysis.filters import apply_filters, matches
from biotope_map.schemas import Category, FilterState, Observation


def make_obs(
    species: str,
    *,
    threatened: bool = False,
    invasive: bool = False,
    coords: tuple[float, float] | None = (8.3, 47.0),
) -> Observation:
    return Observation(
        species_label=species,
        is_threatened=threatened,
        is_invasive=invasive,
        coordinates=coords,
    )


class TestApplyFilters:
    """Test inclusion rules."""

    def test_empty_selection_passes_all_located(self) -> None:
        observations = [make_obs("Red Fox"), make_obs("House Sparrow"), make_obs("Common Carp")]
        result = apply_filters(observations, FilterState())
        assert result == observations

    def test_category_selection(self) -> None:
        fox = make_obs("Red Fox")
        sparrow = make_obs("House Sparrow")
        result = apply_filters([fox, sparrow], FilterState(categories=frozenset({Category.BIRD})))
        assert result == [sparrow]

    def test_multiple_categories(self) -> None:
        fox = make_obs("Red Fox")
        sparrow = make_obs("House Sparrow")
        oak = make_obs("English Oak")
        state = FilterState(categories=frozenset({Category.BIRD, Category.PLANT}))
        assert apply_filters([fox, sparrow, oak], state) == [sparrow, oak]

    def test_threatened_only_excludes_non_threatened(self) -> None:
        safe = make_obs("Great Crested Grebe", threatened=False, invasive=True)
        result = apply_filters([safe], FilterState(threatened_only=True))
        assert result == []

    def test_invasive_only(self) -> None:
        native = make_obs("Red Fox")
        introduced = make_obs("Grey Squirrel", invasive=True)
        result = apply_filters([native, introduced], FilterState(invasive_only=True))
        assert result == [introduced]

    def test_missing_coordinates_never_included(self) -> None:
        obs = make_obs("Red Fox", coords=None)
        assert apply_filters([obs], FilterState()) == []
        assert obs.category == Category.MAMMAL  # still annotated

    def test_fox_and_grebe_scenario(self) -> None:
        observations = [
            make_obs("Red Fox", coords=(8.3, 47.0)),
            make_obs("Grebe", threatened=True, coords=(8.31, 47.01)),
        ]
        result = apply_filters(observations, FilterState(threatened_only=True))

        assert len(result) == 1
        assert result[0].species_label == "Grebe"
        assert result[0].category == Category.BIRD
        assert result[0].biotope == "Freshwater lakes and wetlands with reeds"

    def test_idempotent(self) -> None:
        observations = [make_obs("Red Fox"), make_obs("Grebe", threatened=True)]
        state = FilterState(threatened_only=True)
        assert apply_filters(observations, state) == apply_filters(observations, state)

    def test_refreshes_derived_fields(self) -> None:
        obs = make_obs("House Sparrow")
        obs.category = Category.REPTILE
        obs.biotope = "stale"
        apply_filters([obs], FilterState())
        assert obs.category == Category.BIRD
        assert obs.biotope == "Woodlands, urban parks and gardens"


class TestMatches:
    """Test the single-observation predicate."""

    def test_all_filters_combined(self) -> None:
        obs = make_obs("Grey Squirrel", threatened=True, invasive=True)
        obs.category = Category.MAMMAL
        state = FilterState(
            categories=frozenset({Category.MAMMAL}),
            threatened_only=True,
            invasive_only=True,
        )
        assert matches(obs, state) is True

    def test_wrong_category(self) -> None:
        obs = make_obs("Grey Squirrel")
        obs.category = Category.MAMMAL
        assert matches(obs, FilterState(categories=frozenset({Category.BIRD}))) is False
