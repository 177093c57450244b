"""
Glyph Painter
Draws the nine volcano glyphs with a QPainter, centred on a point.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen, QPolygonF

from volcanomap.model.colors import Color, ColorScale
from volcanomap.model.glyphs import GlyphKind


def qcolor(color: Color) -> QColor:
    r, g, b, a = color.to_rgba()
    return QColor(r, g, b, a)


def _centered_rect(painter: QPainter, cx: float, cy: float, w: float, h: float, radius: float = 0.0) -> None:
    rect = QRectF(cx - w / 2, cy - h / 2, w, h)
    if radius > 0:
        painter.drawRoundedRect(rect, radius, radius)
    else:
        painter.drawRect(rect)


def _triangle(painter: QPainter, *points: tuple[float, float]) -> None:
    painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in points]))


def paint_glyph(
    painter: QPainter,
    kind: GlyphKind,
    x: float,
    y: float,
    size: float,
    fill: QColor,
    scale: ColorScale
) -> None:
    """
    Paint one glyph centred on (x, y).

    Args:
        painter: Active painter; its state is restored afterwards.
        kind: Glyph kind of the volcano type.
        x, y: Centre in the painter's current coordinates.
        size: Base glyph size in pixels.
        fill: Fill colour (ignored by the stratovolcano tiers, which use the scale).
        scale: Elevation colour scale, for the tiered stratovolcano glyph.
    """
    s = float(size)
    painter.save()
    painter.translate(x, y)
    painter.setPen(Qt.NoPen)
    painter.setBrush(fill)

    match kind:
        case GlyphKind.CALDERA:
            painter.drawEllipse(QPointF(0.0, 0.0), s / 2, s / 2)

        case GlyphKind.CONE:
            _triangle(painter, (-s * 0.9, s * 0.8), (s * 0.9, s * 0.8), (0.0, -s * 1.1))

        case GlyphKind.CRATER_SYSTEM:
            # three stepped bars, narrowing downwards
            h = s * 0.12
            for i in range(3):
                w = s * (1.0 - i * 0.20)
                _centered_rect(painter, 0.0, -s * 0.28 + i * (h + 1.5), w, h, 3)

        case GlyphKind.MAAR:
            # four-point star
            painter.save()
            painter.rotate(45)
            _centered_rect(painter, 0.0, 0.0, s * 0.18, s * 0.8, 2)
            painter.restore()
            _centered_rect(painter, 0.0, 0.0, s * 0.18, s * 0.8, 2)
            painter.save()
            painter.rotate(90)
            _centered_rect(painter, 0.0, 0.0, s * 0.14, s * 0.6, 2)
            painter.restore()

        case GlyphKind.OTHER:
            painter.rotate(45)
            _centered_rect(painter, 0.0, 0.0, s * 0.6, s * 0.6)

        case GlyphKind.SHIELD:
            painter.drawEllipse(QPointF(0.0, s * 0.06), s * 0.6, s * 0.25)

        case GlyphKind.STRATOVOLCANO:
            lo, hi = scale.min_elevation, scale.max_elevation
            tiers = (
                (s * 0.35, s * 0.90, scale.color_for(lo + (hi - lo) * 0.33)),
                (s * 0.05, s * 0.65, scale.color_for(lo + (hi - lo) * 0.66)),
                (-s * 0.18, s * 0.35, scale.color_for(hi * 0.9)),
            )
            for cy, w, color in tiers:
                painter.setBrush(qcolor(color))
                _centered_rect(painter, 0.0, cy, w, s * 0.18, 2)

        case GlyphKind.SUBGLACIAL:
            _centered_rect(painter, 0.0, 0.0, s * 0.9, s * 0.9)

        case GlyphKind.SUBMARINE:
            _triangle(painter, (-s * 0.8, s * 0.5), (s * 0.8, s * 0.5), (0.0, -s * 0.8))
            wave = QPainterPath(QPointF(-s * 0.7, s * 0.65))
            wave.quadTo(QPointF(0.0, s * 0.55), QPointF(s * 0.7, s * 0.65))
            pen = QPen(qcolor(scale.color_at(0.25)))
            pen.setWidthF(max(1.0, s * 0.06))
            painter.setPen(pen)
            painter.setBrush(Qt.NoBrush)
            painter.drawPath(wave)

    painter.restore()
