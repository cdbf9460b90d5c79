"""City overview panel: challenges, habitats and observation counts."""

from __future__ import annotations

from biotope_map.renderers import render_template
from biotope_map.schemas import CitySummary

CHALLENGES = "Urbanization, habitat fragmentation, invasive species, climate change impacts."
NO_OBSERVATIONS = "No biodiversity observations found in this city."


def build_city_summary(
    city_name: str,
    biotopes: list[str],
    observation_count: int,
    total_results: int | None = None,
    display_name: str | None = None,
) -> CitySummary:
    """Build the summary for one successful load.

    ``biotopes`` is the merged curated + observed list for the unfiltered
    fetch. ``total_results`` is what the API reported; when it exceeds
    ``observation_count`` the panel says the list was truncated. ``display_name``
    is the geocoder's full place name, shown as the panel heading.
    """
    total = observation_count if total_results is None else max(total_results, observation_count)
    truncated = total > observation_count

    html = render_template(
        "city_summary.html.j2",
        display_name=display_name,
        challenges=CHALLENGES,
        biotopes=biotopes,
        observation_count=observation_count,
        total_results=total,
        truncated=truncated,
        no_observations=NO_OBSERVATIONS,
    ).strip()

    return CitySummary(
        city=city_name,
        display_name=display_name,
        challenges=CHALLENGES,
        biotopes=biotopes,
        observation_count=observation_count,
        total_results=total,
        truncated=truncated,
        html=html,
    )
