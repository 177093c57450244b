"""
Linear Projector
================
Bidirectional affine transform between geographic coordinates (lon, lat) and
map-local pixel coordinates.

The map rectangle is shrunk by an inner margin on all sides; longitude grows to
the right and latitude grows towards the top (pixel y decreases).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from volcanomap.config import MAP_INNER_MARGIN
from volcanomap.model.extent import Extent

if TYPE_CHECKING:
    import numpy.typing as npt

# Spans below this would divide by (almost) zero
DEGENERATE_SPAN: float = 1e-6


def _guarded_range(lo: float, hi: float) -> tuple[float, float]:
    if abs(hi - lo) < DEGENERATE_SPAN:
        return lo - 1.0, hi + 1.0
    return lo, hi


@dataclass(frozen=True)
class Projector:
    """
    Pure function of the extent and the map size.

    Args:
        extent: Dataset extent; only the geographic ranges are used.
        map_width: Width of the map rectangle in pixels.
        map_height: Height of the map rectangle in pixels.
        inner_margin: Margin between the map border and the projected area.
    """
    extent: Extent
    map_width: float
    map_height: float
    inner_margin: float = MAP_INNER_MARGIN

    # ---- bounds ----

    @property
    def left(self) -> float:
        return self.inner_margin

    @property
    def right(self) -> float:
        return self.map_width - self.inner_margin

    @property
    def top(self) -> float:
        return self.inner_margin

    @property
    def bottom(self) -> float:
        return self.map_height - self.inner_margin

    @property
    def lon_range(self) -> tuple[float, float]:
        """Longitude range actually mapped (widened locally if degenerate)."""
        return _guarded_range(self.extent.min_lon, self.extent.max_lon)

    @property
    def lat_range(self) -> tuple[float, float]:
        """Latitude range actually mapped (widened locally if degenerate)."""
        return _guarded_range(self.extent.min_lat, self.extent.max_lat)

    # ---- forward ----

    def to_pixel(self, lon: float, lat: float) -> tuple[float, float]:
        """Geographic -> map-local pixel coordinates."""
        lon0, lon1 = self.lon_range
        lat0, lat1 = self.lat_range
        x = self.left + (lon - lon0) / (lon1 - lon0) * (self.right - self.left)
        y = self.bottom + (lat - lat0) / (lat1 - lat0) * (self.top - self.bottom)
        return x, y

    def to_pixel_many(
        self,
        lons: npt.ArrayLike,
        lats: npt.ArrayLike
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Vectorized `to_pixel` for arrays of coordinates."""
        lon0, lon1 = self.lon_range
        lat0, lat1 = self.lat_range
        lons = np.asarray(lons, dtype=np.float64)
        lats = np.asarray(lats, dtype=np.float64)
        xs = self.left + (lons - lon0) / (lon1 - lon0) * (self.right - self.left)
        ys = self.bottom + (lats - lat0) / (lat1 - lat0) * (self.top - self.bottom)
        return xs, ys

    # ---- inverse ----

    def to_geo(self, x: float, y: float) -> tuple[float, float]:
        """Map-local pixel -> geographic coordinates (inverse of `to_pixel`)."""
        lon0, lon1 = self.lon_range
        lat0, lat1 = self.lat_range
        lon = lon0 + (x - self.left) / (self.right - self.left) * (lon1 - lon0)
        lat = lat0 + (y - self.bottom) / (self.top - self.bottom) * (lat1 - lat0)
        return lon, lat
