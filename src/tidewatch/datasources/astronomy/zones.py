"""Local calendar days for astronomical events.

Events are grouped by the calendar day at the observer, not the UTC day, so
one record never mixes two local evenings. Stations publish their offset
from UTC in hours; without one, the offset is estimated from longitude.
"""

from __future__ import annotations

from datetime import timedelta, timezone


def local_zone(lon: float, utc_offset_hours: float | None = None) -> timezone:
    """Fixed-offset zone for a location (15 degrees of longitude per hour)."""
    if utc_offset_hours is None:
        utc_offset_hours = round(lon / 15)
    return timezone(timedelta(hours=utc_offset_hours))
