"""
Interaction State
=================
Resolves, for one pointer position, what the next render pass shows: which
records are visible under the type filter, which single record is hovered,
where the crosshair sits, and which filter row is under the pointer.

Nothing here remembers previous frames; every result is recomputed from the
pointer, the filter and the layout.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from volcanomap import config
from volcanomap.model.glyphs import FALLBACK_KIND, GlyphKind, GlyphTable
from volcanomap.model.layout import LayoutGeometry, Rect
from volcanomap.model.projection import Projector
from volcanomap.model.records import VolcanoRecord

ALL_TYPES_LABEL = "All Types"

Pointer = tuple[float, float]


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class FilterState:
    """Either all types (type_name is None) or exactly one type of the dataset."""
    type_name: Optional[str] = None

    @property
    def is_all(self) -> bool:
        return self.type_name is None

    @property
    def label(self) -> str:
        return ALL_TYPES_LABEL if self.type_name is None else self.type_name

    def matches(self, record: VolcanoRecord) -> bool:
        return self.type_name is None or record.type == self.type_name


ALL_TYPES = FilterState()


@dataclass(frozen=True)
class HoverState:
    record: VolcanoRecord
    local_x: float
    local_y: float
    x: float
    y: float
    glyph_kind: GlyphKind


@dataclass(frozen=True)
class Crosshair:
    """Pointer clamped to the map, in map-local pixels, with its geographic readout."""
    local_x: float
    local_y: float
    lon: float
    lat: float


@dataclass(frozen=True)
class InteractionResult:
    visible: tuple[VolcanoRecord, ...]
    hover: Optional[HoverState] = None
    crosshair: Optional[Crosshair] = None
    hovered_filter_row: Optional[int] = None


# ------------------------------------------------------------------------------
# Filter
# ------------------------------------------------------------------------------
def filter_options(glyph_table: GlyphTable) -> tuple[FilterState, ...]:
    """Rows of the filter list: "All Types" first, then every type in table order."""
    return (ALL_TYPES,) + tuple(FilterState(t) for t in glyph_table)


def visible_records(
    records: Sequence[VolcanoRecord],
    filter_state: FilterState
) -> tuple[VolcanoRecord, ...]:
    if filter_state.is_all:
        return tuple(records)
    return tuple(r for r in records if filter_state.matches(r))


def filter_row_rect(layout: LayoutGeometry, index: int) -> Rect:
    """Rectangle of the index-th filter row, in viewport pixels."""
    panel = layout.filter_panel_rect
    return Rect(
        panel.x,
        panel.y + config.PANEL_HEADER_HEIGHT + index * config.FILTER_ROW_HEIGHT,
        panel.width,
        config.FILTER_ROW_HEIGHT,
    )


def filter_row_at(layout: LayoutGeometry, n_options: int, x: float, y: float) -> Optional[int]:
    """
    Index of the filter row under (x, y), or None.

    Only points inside the filter panel count; rows overflowing the panel are
    not clickable. Row edges are inclusive, so a shared edge belongs to the
    upper row.
    """
    if not layout.filter_panel_rect.contains(x, y):
        return None
    for index in range(n_options):
        if filter_row_rect(layout, index).contains(x, y):
            return index
    return None


def apply_filter_click(
    filter_state: FilterState,
    options: Sequence[FilterState],
    layout: LayoutGeometry,
    x: float,
    y: float
) -> FilterState:
    """Filter transition for a click; clicks that miss every row keep the current state."""
    index = filter_row_at(layout, len(options), x, y)
    if index is None:
        return filter_state
    return options[index]


# ------------------------------------------------------------------------------
# Hover & crosshair
# ------------------------------------------------------------------------------
def hit_radius(glyph_size: float) -> float:
    return max(config.HIT_RADIUS_MIN, glyph_size * config.HIT_RADIUS_FACTOR)


def hit_test(
    pointer: Pointer,
    visible: Sequence[VolcanoRecord],
    layout: LayoutGeometry,
    projector: Projector,
    glyph_table: GlyphTable
) -> Optional[HoverState]:
    """
    Record under the pointer.

    When several hit radii overlap the pointer, the LAST record in dataset
    order wins (not the nearest one); it is also the one painted on top.
    """
    if not visible:
        return None

    px, py = pointer
    local_xs, local_ys = projector.to_pixel_many(
        [r.lon for r in visible], [r.lat for r in visible]
    )
    global_xs = layout.map_rect.x + local_xs
    global_ys = layout.map_rect.y + local_ys
    distances = np.hypot(global_xs - px, global_ys - py)

    hits = np.flatnonzero(distances < hit_radius(layout.glyph_size))
    if hits.size == 0:
        return None

    i = int(hits[-1])
    record = visible[i]
    return HoverState(
        record=record,
        local_x=float(local_xs[i]),
        local_y=float(local_ys[i]),
        x=float(global_xs[i]),
        y=float(global_ys[i]),
        glyph_kind=glyph_table.get(record.type, FALLBACK_KIND),
    )


def compute_crosshair(
    pointer: Pointer,
    layout: LayoutGeometry,
    projector: Projector
) -> Optional[Crosshair]:
    """Crosshair for a pointer over the map, None elsewhere."""
    px, py = pointer
    map_rect = layout.map_rect
    if not map_rect.contains(px, py):
        return None
    # A map narrower than its inner margins has no invertible projection
    if projector.right <= projector.left or projector.bottom <= projector.top:
        return None

    local_x = min(max(px - map_rect.x, 0.0), map_rect.width)
    local_y = min(max(py - map_rect.y, 0.0), map_rect.height)
    lon, lat = projector.to_geo(local_x, local_y)
    return Crosshair(local_x=local_x, local_y=local_y, lon=lon, lat=lat)


def resolve(
    pointer: Optional[Pointer],
    filter_state: FilterState,
    layout: LayoutGeometry,
    projector: Projector,
    records: Sequence[VolcanoRecord],
    glyph_table: GlyphTable,
    n_filter_options: int = 0
) -> InteractionResult:
    """
    Resolve visibility and hover for the current pointer and filter.

    Args:
        pointer: Pointer in viewport pixels, or None when it left the window.
        filter_state: Active type filter.
        layout: Current layout geometry.
        projector: Projector matching the layout's map rectangle.
        records: All records in dataset order.
        glyph_table: Type -> glyph kind table of the dataset.
        n_filter_options: Number of filter rows, for row highlighting.
    """
    visible = visible_records(records, filter_state)
    if pointer is None:
        return InteractionResult(visible=visible)

    hover: Optional[HoverState] = None
    if layout.map_rect.contains(*pointer):
        hover = hit_test(pointer, visible, layout, projector, glyph_table)

    # Stale hover from before a filter change
    if hover is not None and not filter_state.matches(hover.record):
        hover = None

    return InteractionResult(
        visible=visible,
        hover=hover,
        crosshair=compute_crosshair(pointer, layout, projector),
        hovered_filter_row=filter_row_at(layout, n_filter_options, *pointer),
    )
