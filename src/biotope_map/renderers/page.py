"""Full map page: controls, Leaflet map, sidebar and summary panel."""

from __future__ import annotations

from biotope_map.errors import StaleLoad
from biotope_map.reference.geography import (
    CITY_ZOOM,
    DEFAULT_CENTER,
    TILE_ATTRIBUTION,
    TILE_MAX_ZOOM,
    TILE_URL,
)
from biotope_map.renderers import render_template
from biotope_map.schemas import Category, ViewModel

# One checkbox per category
FILTER_CATEGORIES = list(Category)


def build_page_html(
    initial_view: ViewModel | None = None,
    *,
    interactive: bool = True,
    title: str = "City Biotope Map",
) -> str:
    """
    Render the complete HTML page.

    With ``interactive=True`` the page talks to the ``/api`` endpoints of the
    local server; otherwise it only draws ``initial_view`` (static snapshot).
    """
    return render_template(
        "base.html.j2",
        title=title,
        interactive=interactive,
        categories=[c.value for c in FILTER_CATEGORIES],
        initial_view=initial_view.model_dump(mode="json") if initial_view else None,
        default_center=list(DEFAULT_CENTER),
        default_zoom=CITY_ZOOM,
        tile_url=TILE_URL,
        tile_attribution=TILE_ATTRIBUTION,
        tile_max_zoom=TILE_MAX_ZOOM,
        stale_kind=StaleLoad.kind,
    )
