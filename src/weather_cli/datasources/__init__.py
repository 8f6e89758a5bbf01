"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, credential checks
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return validated ``weather_cli.schemas`` models and raise the
typed errors from ``weather_cli.exceptions``; they never retry.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``openweather/`` for the reference implementation.

2. Write fetch functions on top of the shared session::

       from weather_cli.services.http import session

       def fetch_something(lat, lon) -> WeatherRecord:
           resp = session.get(API_URL, params={...})
           ...
           return WeatherRecord.model_validate(resp.json())

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
