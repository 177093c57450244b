"""
Extent Tracker
==============
Computes the geographic and elevation value ranges of the dataset.

Every other component (projection, colour scale, legend) is parameterized by
the resulting Extent, which is computed once at load time.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from volcanomap.model.records import VolcanoRecord

DEFAULT_LAT_RANGE: tuple[float, float] = (-60.0, 60.0)
DEFAULT_LON_RANGE: tuple[float, float] = (-180.0, 180.0)
DEFAULT_ELEVATION_RANGE: tuple[float, float] = (0.0, 1.0)

# Geographic ranges narrower than this are widened by the same amount on both sides
MIN_GEO_SPAN: float = 1.0


@dataclass(frozen=True)
class Extent:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    min_elevation: float
    max_elevation: float


def _widen(lo: float, hi: float) -> tuple[float, float]:
    if hi - lo < MIN_GEO_SPAN:
        return lo - MIN_GEO_SPAN, hi + MIN_GEO_SPAN
    return lo, hi


def compute_extent(records: Iterable[VolcanoRecord]) -> Extent:
    """
    Single pass over the records tracking running min/max of every field.

    Empty input falls back to lat [-60, 60], lon [-180, 180] and elevation
    [0, 1]. Latitude and longitude spans under one degree are widened by one
    degree on each side; elevation is left as found, even when min == max.
    """
    min_lat, max_lat = math.inf, -math.inf
    min_lon, max_lon = math.inf, -math.inf
    min_elev, max_elev = math.inf, -math.inf

    for r in records:
        if r.lat < min_lat: min_lat = r.lat
        if r.lat > max_lat: max_lat = r.lat
        if r.lon < min_lon: min_lon = r.lon
        if r.lon > max_lon: max_lon = r.lon
        if r.elevation < min_elev: min_elev = r.elevation
        if r.elevation > max_elev: max_elev = r.elevation

    if not (math.isfinite(min_lat) and math.isfinite(max_lat)):
        min_lat, max_lat = DEFAULT_LAT_RANGE
    if not (math.isfinite(min_lon) and math.isfinite(max_lon)):
        min_lon, max_lon = DEFAULT_LON_RANGE
    if not (math.isfinite(min_elev) and math.isfinite(max_elev)):
        min_elev, max_elev = DEFAULT_ELEVATION_RANGE

    min_lat, max_lat = _widen(min_lat, max_lat)
    min_lon, max_lon = _widen(min_lon, max_lon)

    return Extent(
        min_lat=min_lat,
        max_lat=max_lat,
        min_lon=min_lon,
        max_lon=max_lon,
        min_elevation=min_elev,
        max_elevation=max_elev,
    )
