"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: pydantic models or dataclasses (from analysis/ and reference/)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - dashboard: build_dashboard_html, build_dashboard_error_html
  - satellites: build_satellites_html

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments; CSS lives in ``templates/base.html.j2``.
3. Wire into ``flows/build.py`` and add tests.
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
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
