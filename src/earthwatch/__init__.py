"""Earthwatch - Earth-observation dashboard for preset city coordinates.

Architecture::

    datasources/   External APIs (NASA POWER daily point, Open-Meteo satellite radiation)
    analysis/      Payload normalization (DashboardSnapshot), orbit model, selection sequencing
    reference/     Static catalogs (preset locations, satellites)
    renderers/     Pure data -> HTML (dashboard panel, satellite table)
    flows/         Prefect orchestration (fetch runs both requests concurrently, build renders site)
    services/      Shared utilities (HTTP session)

Data flow: datasources -> analysis -> renderers -> site/

Extension points - see each package's docstring:
  - New data source:   datasources/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"

from earthwatch.config import Settings
from earthwatch.schemas import DashboardSnapshot

__all__ = ["DashboardSnapshot", "Settings", "__version__"]
