"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, requested variables
    └── {feature}.py      # Fetch functions (one per endpoint)

Sources:
  - nasa_power: daily point parameters (temperature, humidity, wind, surface radiation)
  - radiation: hourly satellite-derived radiation from Open-Meteo

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write fetch functions that return parsed JSON::

       from earthwatch.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into ``flows/fetch.py`` as a ``@task`` submitted from ``fetch_location_data``.

5. Add tests in ``tests/test_{name}.py``.
"""
