"""
Layout Engine
=============
Derives the map rectangle and the three panel rectangles from the viewport size.

Why is this file needed?
------------------------
1. Responsiveness: The map must keep a strict 2:1 aspect ratio while the
   fixed-width filter sidebar (left) and detail panel (right) and the legend
   band (top) take their share of the window.
2. Hit testing: The interaction resolver and the painter must agree on where
   everything is, so both read the same LayoutGeometry.

The computation is a pure function of the viewport size and LayoutSettings;
calling it twice with the same input yields identical geometry.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from volcanomap import config


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in viewport pixels (y grows downwards)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def contains(self, px: float, py: float) -> bool:
        """Inclusive on all four edges."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def intersects(self, other: Rect) -> bool:
        """True when the interiors overlap (touching edges do not count)."""
        return (
            self.left < other.right and other.left < self.right
            and self.top < other.bottom and other.top < self.bottom
        )


@dataclass(frozen=True)
class LayoutSettings:
    legend_height: float = config.LEGEND_HEIGHT
    outer_margin: float = config.OUTER_MARGIN
    inner_pad: float = config.INNER_PAD
    sidebar_width: float = config.SIDEBAR_WIDTH
    info_width: float = config.INFO_WIDTH
    gutter: float = config.LEGEND_GUTTER
    label_allowance: float = config.LABEL_ALLOWANCE
    min_map_height: float = config.MIN_MAP_HEIGHT
    min_available_width: float = config.MIN_AVAILABLE_WIDTH
    info_gap: float = config.INFO_GAP
    sidebar_gap: float = config.SIDEBAR_GAP


@dataclass(frozen=True)
class LayoutGeometry:
    viewport_width: float
    viewport_height: float
    map_rect: Rect
    legend_rect: Rect
    filter_panel_rect: Rect
    info_panel_rect: Rect
    glyph_size: int

    @property
    def panels(self) -> tuple[Rect, Rect, Rect, Rect]:
        return self.map_rect, self.legend_rect, self.filter_panel_rect, self.info_panel_rect


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def glyph_base_size(map_height: float) -> int:
    """Glyph size grows with the map: round(h / 120) clamped into [6, 20]."""
    size = _round_half_up(map_height / config.GLYPH_SIZE_DIVISOR)
    return max(config.GLYPH_SIZE_MIN, min(config.GLYPH_SIZE_MAX, size))


def compute_map_size(
    viewport_width: float,
    viewport_height: float,
    settings: LayoutSettings = LayoutSettings()
) -> tuple[float, float]:
    """
    Map width/height under the 2:1 constraint.

    Returns:
        (map_width, map_height) with map_width == 2 * map_height.
    """
    s = settings
    available_h = viewport_height - s.legend_height - 2 * s.outer_margin - s.gutter
    max_map_h = max(s.min_map_height, available_h - 2 * s.inner_pad - s.label_allowance)
    available_w = max(
        s.min_available_width,
        viewport_width - s.sidebar_width - s.info_width - 2 * s.outer_margin - s.inner_pad
    )

    map_w = min(available_w, 2 * max_map_h)
    map_h = min(map_w / 2, max_map_h)
    map_w = 2 * map_h

    # Re-clamp against the raw available height (the floors above can overshoot it)
    map_w = max(0.0, min(map_w, available_w, 2 * available_h))
    map_h = map_w / 2
    return map_w, map_h


def compute_layout(
    viewport_width: float,
    viewport_height: float,
    settings: LayoutSettings = LayoutSettings()
) -> LayoutGeometry:
    """Compute all rectangles for a viewport of the given size."""
    s = settings
    map_w, map_h = compute_map_size(viewport_width, viewport_height, s)

    # Vertical: centre the map block (map + padding + label room) below the legend
    block_h = map_h + 2 * s.inner_pad + s.label_allowance
    band_top = s.legend_height + s.outer_margin + s.gutter
    band_bottom = viewport_height - s.outer_margin
    map_y = band_top + (band_bottom - band_top - block_h) / 2

    # Horizontal: centre the map between the sidebar and the detail panel
    available_w = viewport_width - s.sidebar_width - s.info_width - 2 * s.outer_margin - s.inner_pad
    map_x = s.outer_margin + s.sidebar_width + s.inner_pad + max(0.0, (available_w - map_w) / 2)

    map_rect = Rect(map_x, map_y, map_w, map_h)
    legend_rect = Rect(
        s.outer_margin,
        s.outer_margin,
        viewport_width - 2 * s.outer_margin,
        s.legend_height - 2 * s.outer_margin,
    )
    filter_panel_rect = Rect(s.outer_margin, map_y, s.sidebar_width - s.sidebar_gap, block_h)
    info_panel_rect = Rect(
        map_rect.right + s.info_gap,
        map_y,
        s.info_width - s.info_gap,
        block_h,
    )

    return LayoutGeometry(
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        map_rect=map_rect,
        legend_rect=legend_rect,
        filter_panel_rect=filter_panel_rect,
        info_panel_rect=info_panel_rect,
        glyph_size=glyph_base_size(map_h),
    )
