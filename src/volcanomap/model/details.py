"""Field formatting for the detail panel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from volcanomap.model.records import VolcanoRecord

PLACEHOLDER = "—"

# (attribute, label) in display order
DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "Name"),
    ("country", "Country"),
    ("location", "Location"),
    ("lat", "Latitude"),
    ("lon", "Longitude"),
    ("elevation", "Elevation"),
    ("type", "Type"),
    ("status", "Status"),
)


@dataclass(frozen=True)
class DetailField:
    label: str
    value: str


def format_coordinate(value: float) -> str:
    return f"{value:.4f}"


def format_elevation(value: float) -> str:
    # 1000.0 -> "1000 m", 12.5 -> "12.5 m"
    return f"{value:g} m"


def detail_fields(record: Optional[VolcanoRecord]) -> list[DetailField]:
    """Label/value pairs of the detail panel; all placeholders when nothing is hovered."""
    fields: list[DetailField] = []
    for attr, label in DETAIL_FIELDS:
        if record is None:
            fields.append(DetailField(label, PLACEHOLDER))
            continue

        value = getattr(record, attr)
        if attr in ("lat", "lon"):
            text = format_coordinate(value)
        elif attr == "elevation":
            text = format_elevation(value)
        else:
            text = value or PLACEHOLDER
        fields.append(DetailField(label, text))
    return fields
