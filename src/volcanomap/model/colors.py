"""
Colour Scale
============
Maps elevation onto a colour interpolated between a low and a high endpoint.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from volcanomap.config import COLOR_HIGH, COLOR_LOW
from volcanomap.model.extent import Extent


def clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


@dataclass(frozen=True)
class Color:
    """RGBA colour with 0-255 float channels (rounded only when drawn)."""
    r: float
    g: float
    b: float
    a: float = 255.0

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse '#RRGGBB' or '#RRGGBBAA'."""
        s = value.lstrip('#')
        if len(s) not in (6, 8):
            raise ValueError(f"Expected '#RRGGBB' or '#RRGGBBAA', got '{value}'.")
        channels = [int(s[i:i + 2], 16) for i in range(0, len(s), 2)]
        return cls(*(float(c) for c in channels))

    def blend(self, other: Color, t: float) -> Color:
        """Linear mix towards `other`; `t` is clamped into [0, 1]."""
        t = clamp01(t)
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )

    def to_rgba(self) -> tuple[int, int, int, int]:
        return round(self.r), round(self.g), round(self.b), round(self.a)

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba()
        return f"#{r:02X}{g:02X}{b:02X}"


@dataclass(frozen=True)
class ColorScale:
    """
    Elevation -> colour.

    Elevations outside the extent are not rejected; the blend factor is
    clamped so the result always lies between the two endpoints. A zero-width
    elevation range maps everything to the low endpoint.
    """
    min_elevation: float
    max_elevation: float
    low: Color = field(default_factory=lambda: Color.from_hex(COLOR_LOW))
    high: Color = field(default_factory=lambda: Color.from_hex(COLOR_HIGH))

    @classmethod
    def from_extent(cls, extent: Extent) -> ColorScale:
        return cls(min_elevation=extent.min_elevation, max_elevation=extent.max_elevation)

    def normalize(self, elevation: float) -> float:
        """Position of `elevation` in the range; may fall outside [0, 1]."""
        span = self.max_elevation - self.min_elevation
        if span == 0.0:
            return 0.0
        return (elevation - self.min_elevation) / span

    def color_at(self, t: float) -> Color:
        """Colour at fraction `t` of the gradient (clamped)."""
        return self.low.blend(self.high, t)

    def color_for(self, elevation: float) -> Color:
        return self.color_at(self.normalize(elevation))
