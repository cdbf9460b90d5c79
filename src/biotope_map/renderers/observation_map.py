"""Map markers, popups and sidebar entries for filtered observations."""

from __future__ import annotations

from collections.abc import Iterable

from biotope_map.renderers import render_template
from biotope_map.schemas import Category, MapView, MarkerView, Observation, SidebarEntry


def build_popup_html(obs: Observation) -> str:
    """Species label, optional photo, Wikipedia link and source record link."""
    return render_template(
        "popup.html.j2",
        species=obs.species_label,
        photo_url=obs.photo_url,
        wikipedia_url=obs.wikipedia_url,
        url=obs.url,
    ).strip()


def build_sidebar_html(obs: Observation) -> str:
    """Species label, biotope and optional Wikipedia link."""
    return render_template(
        "sidebar_entry.html.j2",
        species=obs.species_label,
        biotope=obs.biotope,
        wikipedia_url=obs.wikipedia_url,
    ).strip()


def build_map_view(observations: Iterable[Observation]) -> MapView:
    """
    Build one marker and one sidebar entry per observation.

    Observations are expected to be filtered and annotated already; any
    without coordinates are skipped.
    """
    view = MapView()
    for obs in observations:
        if obs.latitude is None or obs.longitude is None:
            continue
        view.markers.append(
            MarkerView(
                latitude=obs.latitude,
                longitude=obs.longitude,
                category=obs.category or Category.OTHER,
                popup_html=build_popup_html(obs),
            )
        )
        view.sidebar.append(SidebarEntry(html=build_sidebar_html(obs)))
    return view
