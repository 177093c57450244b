"""
Application State (Data Model)
==============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the dataset, its extent and glyph table, the
   current layout, the pointer and the filter in one place.
2. Explicit transitions: Every input event (resize, pointer move, click) is a
   method returning a NEW AppState with the interaction re-resolved. No
   component reads or writes ambient state.
3. Decoupling: The view reads from this object and replaces it; the model
   never touches Qt.

Classes:
    AppState: The immutable state container.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from volcanomap.model.colors import ColorScale
from volcanomap.model.extent import Extent, compute_extent
from volcanomap.model.glyphs import FALLBACK_KIND, GlyphKind, GlyphTable, build_glyph_table
from volcanomap.model.interaction import (
    ALL_TYPES, FilterState, InteractionResult, Pointer,
    apply_filter_click, filter_options, resolve,
)
from volcanomap.model.layout import LayoutGeometry, LayoutSettings, compute_layout
from volcanomap.model.projection import Projector
from volcanomap.model.records import VolcanoRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """
    Everything one render pass needs.

    Records, extent, glyph table and colour scale are fixed at load time;
    layout and projector follow the viewport; interaction follows the pointer
    and the filter.
    """
    records: tuple[VolcanoRecord, ...]
    extent: Extent
    glyph_table: GlyphTable
    options: tuple[FilterState, ...]
    color_scale: ColorScale
    layout: LayoutGeometry
    projector: Projector
    settings: LayoutSettings = field(default_factory=LayoutSettings)
    pointer: Optional[Pointer] = None
    filter: FilterState = ALL_TYPES
    interaction: InteractionResult = field(default_factory=lambda: InteractionResult(visible=()))

    @classmethod
    def from_records(
        cls,
        records: Sequence[VolcanoRecord],
        viewport_width: float,
        viewport_height: float,
        settings: LayoutSettings = LayoutSettings()
    ) -> AppState:
        """Compute the load-time data once and lay out the initial viewport."""
        records = tuple(records)
        extent = compute_extent(records)
        glyph_table = build_glyph_table(records)
        layout = compute_layout(viewport_width, viewport_height, settings)
        logger.info(
            f"Dataset: {len(records)} records, {len(glyph_table)} types, "
            f"lat [{extent.min_lat:g}, {extent.max_lat:g}], lon [{extent.min_lon:g}, {extent.max_lon:g}], "
            f"elevation [{extent.min_elevation:g}, {extent.max_elevation:g}] m"
        )
        state = cls(
            records=records,
            extent=extent,
            glyph_table=glyph_table,
            options=filter_options(glyph_table),
            color_scale=ColorScale.from_extent(extent),
            layout=layout,
            projector=cls._projector_for(extent, layout),
            settings=settings,
        )
        return state._resolved()

    # ---- queries ----

    @property
    def visible(self) -> tuple[VolcanoRecord, ...]:
        return self.interaction.visible

    def glyph_for(self, record: VolcanoRecord) -> GlyphKind:
        return self.glyph_table.get(record.type, FALLBACK_KIND)

    # ---- transitions ----

    def with_viewport(self, width: float, height: float) -> AppState:
        """Resize: new layout and projector, interaction re-resolved."""
        layout = compute_layout(width, height, self.settings)
        logger.debug(f"Layout for {width:g}x{height:g}: map {layout.map_rect}")
        return replace(
            self,
            layout=layout,
            projector=self._projector_for(self.extent, layout),
        )._resolved()

    def with_pointer(self, pointer: Optional[Pointer]) -> AppState:
        """Pointer move/drag, or None when the pointer left the window."""
        return replace(self, pointer=pointer)._resolved()

    def with_filter(self, filter_state: FilterState) -> AppState:
        if filter_state not in self.options:
            raise ValueError(f"Type '{filter_state.label}' does not occur in the dataset.")
        if filter_state != self.filter:
            logger.info(f"Filter: {filter_state.label}")
        return replace(self, filter=filter_state)._resolved()

    def with_click(self, x: float, y: float) -> AppState:
        """Click: may switch the filter (filter rows only); always re-resolves hover."""
        filter_state = apply_filter_click(self.filter, self.options, self.layout, x, y)
        return replace(self, pointer=(x, y)).with_filter(filter_state)

    # ---- helpers ----

    @staticmethod
    def _projector_for(extent: Extent, layout: LayoutGeometry) -> Projector:
        return Projector(
            extent=extent,
            map_width=layout.map_rect.width,
            map_height=layout.map_rect.height,
        )

    def _resolved(self) -> AppState:
        interaction = resolve(
            self.pointer,
            self.filter,
            self.layout,
            self.projector,
            self.records,
            self.glyph_table,
            n_filter_options=len(self.options),
        )
        return replace(self, interaction=interaction)
