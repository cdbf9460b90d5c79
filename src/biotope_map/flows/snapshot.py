"""
Prefect flow for exporting a static map page for one city.

The page embeds a single view model (one filter state), so it can be opened
from disk or published without the local server.

Run locally:
    python -m biotope_map.flows.snapshot Lucerne
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from biotope_map import explorer
from biotope_map.config import get_settings
from biotope_map.renderers.page import build_page_html
from biotope_map.schemas import FilterState, ViewModel


@task(name="load-city")
def load_view(city: str, filter_state: FilterState, radius_km: float) -> ViewModel:
    """Geocode, fetch and render the city into a view model."""
    return explorer.load_city(explorer.AppState(), city, filter_state, radius_km=radius_km)


@task(name="build-html")
def build_html(view: ViewModel) -> str:
    """Render the static page around the view model."""
    title = f"{view.city} Biotope Map" if view.city else "City Biotope Map"
    return build_page_html(view, interactive=False, title=title)


@task(name="write-site")
def write_site(html: str, output: Path) -> Path:
    """Write HTML to the output path, creating parent directories."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        f.write(html)
    return output


@flow(name="city-snapshot", log_prints=True)
def snapshot_city(
    city: str,
    filter_state: FilterState | None = None,
    output: Path | None = None,
    radius_km: float | None = None,
) -> dict[str, Any]:
    """
    Export a static map page for ``city``.

    Returns a summary dict with the output path and observation counts.
    """
    settings = get_settings()
    filter_state = filter_state or FilterState()
    output = output or Path(settings.site_dir) / "index.html"
    radius = settings.radius_km if radius_km is None else radius_km

    print(f"Loading observations for {city!r} ({radius} km)...")
    view = load_view(city, filter_state, radius)
    print(f"Fetched {view.fetched_count} observations, {view.shown_count} match the filters")
    if view.truncated and view.summary:
        print(f"Results truncated: API reported {view.summary.total_results} matches")

    html = build_html(view)
    path = write_site(html, output)
    print(f"Wrote {path}")

    return {
        "city": view.city,
        "output": str(path),
        "fetched": view.fetched_count,
        "shown": view.shown_count,
        "truncated": view.truncated,
    }


if __name__ == "__main__":
    snapshot_city(" ".join(sys.argv[1:]) or "Lucerne")
