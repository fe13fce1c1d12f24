"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - macaulay/  Macaulay Library taxonomy lookup and photo search
  - pages/     Link-card metadata from arbitrary HTML pages

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``pages/`` for a minimal example, ``macaulay/`` for a richer one.

2. Write fetch functions that return dataclasses or pydantic models::

       from macaulay_bot.services.http import session

       def fetch_something(term) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
