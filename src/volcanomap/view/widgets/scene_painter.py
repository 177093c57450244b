"""
Scene Painter
=============
Paints one frame of the map view from an AppState: legend (top), filter list
(left), map with glyphs/hover/crosshair (centre) and detail panel (right).

All geometry comes from the state's LayoutGeometry, so what is painted here is
exactly what the interaction resolver hit-tests against.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QLinearGradient, QPainter, QPen

from volcanomap import config
from volcanomap.model.colors import Color
from volcanomap.model.details import detail_fields
from volcanomap.model.interaction import filter_row_rect
from volcanomap.model.layout import Rect
from volcanomap.model.state import AppState
from volcanomap.view.widgets.glyph_painter import paint_glyph, qcolor

PAD = config.PANEL_PAD

WHITE = Color.from_hex("#FFFFFF")


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def _font(point_size: float, bold: bool = False) -> QFont:
    font = QFont()
    font.setPointSizeF(point_size)
    font.setBold(bold)
    return font


def _text(
    painter: QPainter,
    rect: QRectF,
    text: str,
    color: str = config.COLOR_TEXT,
    size: float = 12,
    bold: bool = False,
    align: Qt.AlignmentFlag = Qt.AlignLeft | Qt.AlignVCenter
) -> None:
    painter.setPen(QColor(color))
    painter.setFont(_font(size, bold))
    painter.drawText(rect, align, text)


# ------------------------------------------------------------------------------
# Frame
# ------------------------------------------------------------------------------

def paint_scene(painter: QPainter, state: AppState) -> None:
    layout = state.layout
    painter.fillRect(QRectF(0, 0, layout.viewport_width, layout.viewport_height), QColor(config.COLOR_BACKGROUND))

    paint_legend(painter, state)
    paint_filter_panel(painter, state)
    paint_map(painter, state)
    paint_info_panel(painter, state)


# ------------------------------------------------------------------------------
# Legend
# ------------------------------------------------------------------------------

def paint_legend(painter: QPainter, state: AppState) -> None:
    rect = state.layout.legend_rect
    x0 = rect.x + PAD
    y0 = rect.y

    _text(painter, QRectF(x0, y0, 200, 20), "Legend", size=14, bold=True)

    # Elevation gradient
    _text(painter, QRectF(x0, y0 + 20, 220, 18), "Colour (Elevation):", size=11)
    bar_w = max(0.0, min(240.0, rect.width / 2 - 40))
    bar = QRectF(x0, y0 + 40, bar_w, 14)
    gradient = QLinearGradient(bar.topLeft(), bar.topRight())
    gradient.setColorAt(0.0, qcolor(state.color_scale.low))
    gradient.setColorAt(1.0, qcolor(state.color_scale.high))
    painter.fillRect(bar, QBrush(gradient))

    extent = state.extent
    labels = QRectF(x0, bar.bottom() + 4, bar_w, 14)
    _text(painter, labels, f"{extent.min_elevation:g} m (low)", size=8,
          align=Qt.AlignLeft | Qt.AlignTop)
    _text(painter, labels, f"{extent.max_elevation:g} m (high)", size=8,
          align=Qt.AlignRight | Qt.AlignTop)

    # Glyph key, three columns
    gx0 = x0 + bar_w + 30
    _text(painter, QRectF(gx0, y0 + 20, 220, 18), "Glyphs (Type):", size=11)
    columns = 3
    item_h = 28.0
    item_w = max(110.0, (rect.right - gx0 - PAD) / columns)
    fill = qcolor(WHITE)
    for index, (type_name, kind) in enumerate(state.glyph_table.items()):
        col, row = index % columns, index // columns
        gx = gx0 + col * item_w
        gy = y0 + 40 + row * item_h
        paint_glyph(painter, kind, gx + 8, gy + 8, state.layout.glyph_size * 0.8, fill, state.color_scale)
        _text(painter, QRectF(gx + 22, gy, item_w - 24, 16), type_name, size=9)


# ------------------------------------------------------------------------------
# Filter list
# ------------------------------------------------------------------------------

def paint_filter_panel(painter: QPainter, state: AppState) -> None:
    panel = state.layout.filter_panel_rect
    glyph_size = state.layout.glyph_size * 0.6

    painter.save()
    painter.setClipRect(_qrect(panel))
    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor(config.COLOR_PANEL))
    painter.drawRoundedRect(_qrect(panel), 6, 6)
    _text(painter, QRectF(panel.x + PAD, panel.y + 8, panel.width - PAD, 20), "Filter by Type", size=12, bold=True)

    for index, option in enumerate(state.options):
        row = _qrect(filter_row_rect(state.layout, index))
        active = option == state.filter
        painter.setPen(Qt.NoPen)
        if active:
            painter.setBrush(QColor(config.COLOR_ACTIVE_ROW))
            painter.drawRoundedRect(row, 4, 4)
        elif index == state.interaction.hovered_filter_row:
            painter.setBrush(QColor(config.COLOR_HOVER_ROW))
            painter.drawRoundedRect(row, 4, 4)

        text_color = config.COLOR_ACTIVE_TEXT if active else config.COLOR_TEXT
        icon_x = row.x() + PAD + 10
        icon_y = row.center().y()
        if option.is_all:
            painter.setPen(Qt.NoPen)
            painter.setBrush(QColor(text_color))
            painter.drawRoundedRect(
                QRectF(icon_x - glyph_size / 2, icon_y - glyph_size / 2, glyph_size, glyph_size), 2, 2
            )
        else:
            kind = state.glyph_table[option.type_name]
            paint_glyph(painter, kind, icon_x, icon_y, glyph_size, QColor(text_color), state.color_scale)

        text_rect = row.adjusted(PAD + 26, 0, -4, 0)
        _text(painter, text_rect, option.label, color=text_color, size=10)

    painter.restore()


# ------------------------------------------------------------------------------
# Map
# ------------------------------------------------------------------------------

def paint_map(painter: QPainter, state: AppState) -> None:
    map_rect = state.layout.map_rect
    glyph_size = state.layout.glyph_size
    scale = state.color_scale

    _text(painter, QRectF(map_rect.x, map_rect.y - 34, map_rect.width + config.INFO_WIDTH, 26),
          config.MAP_TITLE, size=14, bold=True, align=Qt.AlignLeft | Qt.AlignBottom)

    painter.save()
    painter.translate(map_rect.x, map_rect.y)
    local = QRectF(0, 0, map_rect.width, map_rect.height)
    painter.fillRect(local, QColor(config.COLOR_MAP))
    painter.setPen(QPen(QColor(config.COLOR_MAP_BORDER), 1))
    painter.setBrush(Qt.NoBrush)
    painter.drawRect(local)

    visible = state.visible
    if visible:
        xs, ys = state.projector.to_pixel_many([r.lon for r in visible], [r.lat for r in visible])
        for record, x, y in zip(visible, xs, ys):
            fill = qcolor(scale.color_for(record.elevation))
            paint_glyph(painter, state.glyph_for(record), float(x), float(y), glyph_size, fill, scale)

    hover = state.interaction.hover
    if hover is not None:
        bright = scale.color_for(hover.record.elevation).blend(WHITE, config.HOVER_WHITEN)
        paint_glyph(painter, hover.glyph_kind, hover.local_x, hover.local_y,
                    glyph_size * config.HOVER_SCALE, qcolor(bright), scale)

    _paint_crosshair(painter, state)
    painter.restore()


def _paint_crosshair(painter: QPainter, state: AppState) -> None:
    """Crosshair lines and the Lon (below) / Lat (left, rotated) readouts, in map-local coordinates."""
    crosshair = state.interaction.crosshair
    if crosshair is None:
        return
    map_w = state.layout.map_rect.width
    map_h = state.layout.map_rect.height
    mx, my = crosshair.local_x, crosshair.local_y

    painter.setPen(QPen(QColor(config.COLOR_CROSSHAIR), 1))
    painter.drawLine(QPointF(mx, 0), QPointF(mx, map_h))
    painter.drawLine(QPointF(0, my), QPointF(map_w, my))

    label_w, label_h = 110.0, 20.0
    _readout(painter, QRectF(mx - label_w / 2, map_h + 12 - label_h / 2, label_w, label_h),
             f"Lon: {crosshair.lon:.4f}°")

    painter.save()
    painter.translate(-(label_h / 2 + 2), my)
    painter.rotate(90)
    _readout(painter, QRectF(-label_w / 2, -label_h / 2, label_w, label_h), f"Lat: {crosshair.lat:.4f}°")
    painter.restore()


def _readout(painter: QPainter, rect: QRectF, text: str) -> None:
    painter.setPen(QPen(QColor("#222222"), 1))
    painter.setBrush(QColor(config.COLOR_FIELD_BOX))
    painter.drawRoundedRect(rect, 4, 4)
    _text(painter, rect, text, size=9, align=Qt.AlignCenter)


# ------------------------------------------------------------------------------
# Detail panel
# ------------------------------------------------------------------------------

def paint_info_panel(painter: QPainter, state: AppState) -> None:
    panel = state.layout.info_panel_rect
    hover = state.interaction.hover

    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor(config.COLOR_PANEL))
    painter.drawRoundedRect(_qrect(panel), 6, 6)
    _text(painter, QRectF(panel.x + PAD, panel.y + 8, panel.width - 2 * PAD, 20),
          "Volcano Details", size=12, bold=True)

    fields = detail_fields(hover.record if hover is not None else None)
    start_y = config.PANEL_HEADER_HEIGHT
    gap = 8.0
    available_h = panel.height - start_y - PAD
    box_h = max(28.0, (available_h - gap * (len(fields) - 1)) / len(fields))
    box_w = panel.width - 2 * PAD

    for i, f in enumerate(fields):
        box = QRectF(panel.x + PAD, panel.y + start_y + i * (box_h + gap), box_w, box_h)
        painter.setPen(QPen(QColor(config.COLOR_MAP_BORDER), 1))
        painter.setBrush(QColor(config.COLOR_FIELD_BOX))
        painter.drawRoundedRect(box, 6, 6)

        _text(painter, QRectF(box.x() + 8, box.y() + 4, box_w - 16, 14), f.label,
              color=config.COLOR_MUTED_TEXT, size=8, align=Qt.AlignLeft | Qt.AlignTop)
        if hover is not None:
            _text(painter, QRectF(box.x() + 8, box.y() + 18, box_w - 16, max(14.0, box_h - 20)), f.value,
                  size=10, bold=True, align=Qt.AlignLeft | Qt.AlignTop)
