"""
Map Canvas
==========
The single widget that paints the whole scene and turns Qt input events into
AppState transitions.

Every handler computes the next state and schedules exactly one repaint; there
is no timer or animation loop.
"""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from volcanomap.model.records import VolcanoRecord
from volcanomap.model.state import AppState
from volcanomap.view.widgets.scene_painter import paint_scene

logger = logging.getLogger(__name__)


class MapCanvas(QWidget):
    # Emits the hovered VolcanoRecord, or None
    hover_changed = Signal(object)
    # Emits the new FilterState
    filter_changed = Signal(object)

    def __init__(self, records: Sequence[VolcanoRecord], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        # Moves arrive with and without a pressed button (move + drag)
        self.setMouseTracking(True)
        self.setMinimumSize(640, 420)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

        self.state: AppState = AppState.from_records(records, max(1, self.width()), max(1, self.height()))

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    def set_state(self, new_state: AppState) -> None:
        """Swap in the next state, notify listeners, and request one repaint."""
        old_state = self.state
        self.state = new_state

        old_hover = old_state.interaction.hover
        new_hover = new_state.interaction.hover
        old_record = old_hover.record if old_hover else None
        new_record = new_hover.record if new_hover else None
        if new_record is not old_record:
            logger.debug(f"Hover: {new_record.name if new_record else None}")
            self.hover_changed.emit(new_record)

        if new_state.filter != old_state.filter:
            logger.debug(f"Filter changed, {len(new_state.visible)} visible")
            self.filter_changed.emit(new_state.filter)

        self.update()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.set_state(self.state.with_viewport(size.width(), size.height()))
        super().resizeEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.set_state(self.state.with_pointer((pos.x(), pos.y())))

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.set_state(self.state.with_click(pos.x(), pos.y()))

    def leaveEvent(self, event) -> None:
        self.set_state(self.state.with_pointer(None))
        super().leaveEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            paint_scene(painter, self.state)
        finally:
            painter.end()
