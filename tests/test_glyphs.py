import types

import pytest

from helpers import make_record
from volcanomap.model.glyphs import GlyphKind, build_glyph_table, classify


@pytest.mark.parametrize("type_string, expected", [
    ("Caldera", GlyphKind.CALDERA),
    ("Cinder cone", GlyphKind.CONE),
    ("Pyroclastic cones", GlyphKind.CONE),
    ("Crater rows", GlyphKind.CRATER_SYSTEM),
    ("Crater System", GlyphKind.CRATER_SYSTEM),
    ("Maars", GlyphKind.MAAR),
    ("Unknown", GlyphKind.OTHER),
    ("Others", GlyphKind.OTHER),
    ("Shield volcano", GlyphKind.SHIELD),
    ("Stratovolcano", GlyphKind.STRATOVOLCANO),
    ("Composite volcano", GlyphKind.STRATOVOLCANO),
    ("Subglacial volcano", GlyphKind.SUBGLACIAL),
    ("Submarine volcano", GlyphKind.SUBMARINE),
    ("Seamount", GlyphKind.SUBMARINE),
    ("Lava dome", GlyphKind.OTHER),
    ("", GlyphKind.OTHER),
])
def test_classify(type_string, expected):
    assert classify(type_string) is expected


def test_classify_is_case_insensitive():
    assert classify("STRATOVOLCANO") is classify("stratovolcano") is GlyphKind.STRATOVOLCANO


def test_rule_order_crater_before_shield():
    assert classify("Shield/Crater") is GlyphKind.CRATER_SYSTEM


def test_rule_order_caldera_first():
    # "Caldera" precedes every other rule, including "cone" and "submarine"
    assert classify("Submarine caldera") is GlyphKind.CALDERA
    assert classify("Caldera with cones") is GlyphKind.CALDERA


def test_classify_is_deterministic():
    assert all(classify("Shield/Crater") is GlyphKind.CRATER_SYSTEM for _ in range(5))


def test_glyph_table_is_sorted_and_read_only():
    records = [
        make_record(type="Stratovolcano"),
        make_record(type="Caldera"),
        make_record(type="Stratovolcano"),
        make_record(type="Maars"),
    ]
    table = build_glyph_table(records)
    assert list(table) == ["Caldera", "Maars", "Stratovolcano"]
    assert table["Maars"] is GlyphKind.MAAR
    assert isinstance(table, types.MappingProxyType)
    with pytest.raises(TypeError):
        table["Caldera"] = GlyphKind.OTHER


def test_empty_glyph_table():
    assert len(build_glyph_table([])) == 0
