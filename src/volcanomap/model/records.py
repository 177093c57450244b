"""Volcano records and raw-row validation."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

# Column names of the source table
COL_NAME = "Volcano Name"
COL_COUNTRY = "Country"
COL_LOCATION = "Location"
COL_LATITUDE = "Latitude"
COL_LONGITUDE = "Longitude"
COL_ELEVATION = "Elevation (m)"
COL_TYPE = "TypeCategory"
COL_STATUS = "Status"

COLUMNS = (
    COL_NAME, COL_COUNTRY, COL_LOCATION, COL_LATITUDE,
    COL_LONGITUDE, COL_ELEVATION, COL_TYPE, COL_STATUS,
)


@dataclass(frozen=True)
class VolcanoRecord:
    """One validated point of the dataset."""
    name: str
    country: str
    location: str
    lat: float
    lon: float
    elevation: float
    type: str
    status: str = ""


def _parse_finite(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    # float() accepts "nan" and "inf"; those are not usable coordinates
    if not math.isfinite(value):
        return None
    return value


def parse_row(row: Mapping[str, Optional[str]]) -> Optional[VolcanoRecord]:
    """
    Build a record from a raw row of string fields.

    Returns None when latitude, longitude or elevation do not parse to finite
    numbers, or when the type trims to an empty string.
    """
    lat = _parse_finite(row.get(COL_LATITUDE))
    lon = _parse_finite(row.get(COL_LONGITUDE))
    elevation = _parse_finite(row.get(COL_ELEVATION))
    volcano_type = (row.get(COL_TYPE) or "").strip()

    if lat is None or lon is None or elevation is None or not volcano_type:
        return None

    return VolcanoRecord(
        name=row.get(COL_NAME) or "",
        country=row.get(COL_COUNTRY) or "",
        location=row.get(COL_LOCATION) or "",
        lat=lat,
        lon=lon,
        elevation=elevation,
        type=volcano_type,
        status=row.get(COL_STATUS) or "",
    )


def validate_rows(rows: Iterable[Mapping[str, Optional[str]]]) -> list[VolcanoRecord]:
    """Parse all rows, silently dropping the malformed ones (dataset order is kept)."""
    records: list[VolcanoRecord] = []
    dropped = 0
    for row in rows:
        record = parse_row(row)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug(f"Dropped {dropped} malformed rows.")
    return records
