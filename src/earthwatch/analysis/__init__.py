"""Domain logic over fetched payloads.

Dependency rule: analysis/ imports datasource constants and models only.
It never fetches data or produces HTML.

Modules:
  - dashboard: NASA POWER + satellite radiation -> DashboardSnapshot
  - orbits: globe marker and circular orbit placement in scene units
  - selection: drops results of superseded location selections
"""

from earthwatch.analysis.dashboard import build_snapshot
from earthwatch.analysis.selection import SelectionToken, SelectionTracker

__all__ = ["SelectionToken", "SelectionTracker", "build_snapshot"]
