"""Pure rendering functions: structured data -> view models and HTML.

All renderers follow the same pattern:
  - Input: schemas models or plain lists (from analysis/ or explorer)
  - Output: a pydantic view model or an HTML string
  - No side effects, no I/O, no Prefect decorators

Public API:
  - observation_map: build_popup_html, build_sidebar_html, build_map_view
  - city_summary: build_city_summary
  - page: build_page_html

HTML fragments come from Jinja2 templates in ``templates/`` with autoescape
on, so species labels and URLs from the API are escaped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
