"""
Prefect flows for the dashboard pipeline.

Flows:
- fetch: Request NASA POWER and satellite radiation concurrently, normalize into a snapshot
- build: Render the dashboard panels for preset locations into a static page

Usage (local):
    python -m earthwatch.flows.fetch
    python -m earthwatch.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m earthwatch.flows.build
"""
