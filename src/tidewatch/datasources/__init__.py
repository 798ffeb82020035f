"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, low-level request helper
    └── {feature}.py      # Operations (one per endpoint/concept)

- coops/      NOAA CO-OPS tides & currents (data getter + metadata API)
- astronomy/  Sun and moon positions (astral library, no network)
"""
