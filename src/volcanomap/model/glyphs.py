"""
Type Classifier
===============
Maps the free-text volcano type of the source table onto the fixed set of
nine glyph kinds drawn on the map.

Matching is a case-insensitive substring test against an ORDERED rule table;
the first rule with a matching keyword wins. Order matters: "Shield/Crater"
contains both "shield" and "crater" and resolves to CRATER_SYSTEM because that
rule comes first.
"""
from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from volcanomap.model.records import VolcanoRecord


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class GlyphKind(StrEnum):
    CALDERA = "caldera"
    CONE = "cone"
    CRATER_SYSTEM = "crater system"
    MAAR = "maar"
    OTHER = "other"
    SHIELD = "shield"
    STRATOVOLCANO = "stratovolcano"
    SUBGLACIAL = "subglacial"
    SUBMARINE = "submarine"


# ------------------------------------------------------------------------------
# Rules
# ------------------------------------------------------------------------------
CLASSIFICATION_RULES: tuple[tuple[tuple[str, ...], GlyphKind], ...] = (
    (("caldera",), GlyphKind.CALDERA),
    (("cone", "cinder"), GlyphKind.CONE),
    (("crater system", "crater"), GlyphKind.CRATER_SYSTEM),
    (("maar", "maars"), GlyphKind.MAAR),
    (("other", "unknown", "others"), GlyphKind.OTHER),
    (("shield",), GlyphKind.SHIELD),
    (("stratov", "strato", "composite"), GlyphKind.STRATOVOLCANO),
    (("subglacial",), GlyphKind.SUBGLACIAL),
    (("submarine", "seamount"), GlyphKind.SUBMARINE),
)

FALLBACK_KIND = GlyphKind.OTHER

GlyphTable = Mapping[str, GlyphKind]


def classify(type_string: str) -> GlyphKind:
    """Resolve a raw type string to its glyph kind (first matching rule wins)."""
    t = type_string.lower()
    for keywords, kind in CLASSIFICATION_RULES:
        if any(k in t for k in keywords):
            return kind
    return FALLBACK_KIND


def distinct_types(records: Iterable[VolcanoRecord]) -> list[str]:
    """Sorted distinct type strings present in the dataset."""
    return sorted({r.type for r in records})


def build_glyph_table(records: Iterable[VolcanoRecord]) -> GlyphTable:
    """
    Classify every distinct type once.

    Returns a read-only `type -> GlyphKind` mapping, iterated in sorted type
    order (the order used by the legend and the filter list).
    """
    return MappingProxyType({t: classify(t) for t in distinct_types(records)})
