"""
Main Application Window
=======================
The primary GUI container: the map canvas plus a status bar.

Why is this file needed?
------------------------
1. Layout: It hosts the canvas, which fills the whole window and resizes
   with it.
2. Routing: It listens to the canvas signals and reflects the filter and the
   hovered volcano in the status bar.
"""
import os
from typing import Optional, Sequence

from PySide6.QtWidgets import QMainWindow, QLabel

from volcanomap.config import VISIBLE_APP_NAME
from volcanomap.model.interaction import FilterState
from volcanomap.model.records import VolcanoRecord
from volcanomap.view.widgets.map_canvas import MapCanvas


class MainWindow(QMainWindow):
    def __init__(self, records: Sequence[VolcanoRecord], data_path: Optional[str] = None) -> None:
        super().__init__()
        title = VISIBLE_APP_NAME
        if data_path:
            title = f"{VISIBLE_APP_NAME} - {os.path.basename(data_path)}"
        self.setWindowTitle(title)
        self.resize(1400, 900)

        # --- CENTRAL: the map canvas ---
        self.canvas = MapCanvas(records, self)
        self.setCentralWidget(self.canvas)

        # --- STATUS BAR ---
        self.lbl_filter = QLabel()
        self.statusBar().addPermanentWidget(self.lbl_filter)

        # --- SIGNAL CONNECTIONS ---
        self.canvas.filter_changed.connect(self.on_filter_changed)
        self.canvas.hover_changed.connect(self.on_hover_changed)

        self.on_filter_changed(self.canvas.state.filter)

    def on_filter_changed(self, filter_state: FilterState) -> None:
        n_visible = len(self.canvas.state.visible)
        n_total = len(self.canvas.state.records)
        self.lbl_filter.setText(f"{filter_state.label}: {n_visible} / {n_total} volcanoes")

    def on_hover_changed(self, record: Optional[VolcanoRecord]) -> None:
        if record is None:
            self.statusBar().clearMessage()
        else:
            self.statusBar().showMessage(f"{record.name} ({record.country})")
