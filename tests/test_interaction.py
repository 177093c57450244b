import pytest

from helpers import make_record
from volcanomap.model.extent import Extent
from volcanomap.model.glyphs import GlyphKind, build_glyph_table
from volcanomap.model.interaction import (
    ALL_TYPES, FilterState, apply_filter_click, filter_options, filter_row_at, hit_test,
    hit_radius, resolve, visible_records,
)
from volcanomap.model.layout import compute_layout
from volcanomap.model.projection import Projector

WORLD = Extent(
    min_lat=-60.0, max_lat=60.0,
    min_lon=-180.0, max_lon=180.0,
    min_elevation=0.0, max_elevation=5000.0,
)

# 1400x900: map at (200, 272), 868 x 434; filter panel at (12, 272), 176 wide
LAYOUT = compute_layout(1400, 900)
PROJECTOR = Projector(extent=WORLD, map_width=LAYOUT.map_rect.width, map_height=LAYOUT.map_rect.height)


def global_xy(lon: float, lat: float) -> tuple[float, float]:
    x, y = PROJECTOR.to_pixel(lon, lat)
    return LAYOUT.map_rect.x + x, LAYOUT.map_rect.y + y


@pytest.fixture
def dataset():
    return [
        make_record("Near", lat=0.0, lon=0.0, type="Stratovolcano"),
        make_record("Later", lat=0.0, lon=0.5, type="Stratovolcano"),
        make_record("Caldera", lat=30.0, lon=90.0, type="Caldera"),
        make_record("Far", lat=-40.0, lon=-120.0, type="Shield volcano"),
    ]


def _resolve(pointer, records, filter_state=ALL_TYPES):
    table = build_glyph_table(records)
    return resolve(pointer, filter_state, LAYOUT, PROJECTOR, records, table,
                   n_filter_options=len(filter_options(table)))


def test_layout_assumptions():
    assert (LAYOUT.map_rect.x, LAYOUT.map_rect.y) == (200.0, 272.0)
    assert LAYOUT.glyph_size == 6
    assert hit_radius(LAYOUT.glyph_size) == 8.0


def test_hit_radius_grows_with_glyph_size():
    assert hit_radius(6) == 8.0
    assert hit_radius(10) == pytest.approx(12.0)


def test_visible_records_follow_filter(dataset):
    assert visible_records(dataset, ALL_TYPES) == tuple(dataset)
    assert [r.name for r in visible_records(dataset, FilterState("Caldera"))] == ["Caldera"]


def test_hover_picks_record_under_pointer(dataset):
    result = _resolve(global_xy(90.0, 30.0), dataset)
    assert result.hover is not None
    assert result.hover.record.name == "Caldera"
    assert result.hover.glyph_kind is GlyphKind.CALDERA
    assert (result.hover.x, result.hover.y) == pytest.approx(global_xy(90.0, 30.0))


def test_overlapping_hits_last_write_wins(dataset):
    # Pointer exactly on "Near"; "Later" is ~1 px away and comes later in dataset order
    result = _resolve(global_xy(0.0, 0.0), dataset)
    assert result.hover is not None
    assert result.hover.record.name == "Later"


def test_no_hover_away_from_glyphs(dataset):
    x, y = global_xy(0.0, 0.0)
    result = _resolve((x, y + 50), dataset)
    assert result.hover is None
    assert result.crosshair is not None


def test_pointer_outside_map_has_no_hover_or_crosshair(dataset):
    _, y = global_xy(0.0, 0.0)
    result = _resolve((LAYOUT.map_rect.x - 5, y), dataset)
    assert result.hover is None
    assert result.crosshair is None


def test_no_hover_outside_map_even_within_hit_radius():
    # lon -189 lies outside the projected extent: the glyph centre sits 0.7 px left of the map
    edge = make_record("Edge", lat=0.0, lon=-189.0, type="Caldera")
    x, y = global_xy(edge.lon, edge.lat)
    assert x < LAYOUT.map_rect.x
    assert hit_test((x, y), [edge], LAYOUT, PROJECTOR, build_glyph_table([edge])) is not None

    result = _resolve((x, y), [edge])
    assert result.hover is None
    assert result.crosshair is None

    # on the map edge the pointer is on the map and still within the radius
    inside = _resolve((LAYOUT.map_rect.x, y), [edge])
    assert inside.hover is not None
    assert inside.hover.record == edge


def test_no_pointer(dataset):
    result = _resolve(None, dataset)
    assert result.visible == tuple(dataset)
    assert result.hover is None and result.crosshair is None


def test_hover_respects_filter(dataset):
    result = _resolve(global_xy(0.0, 0.0), dataset, FilterState("Caldera"))
    assert result.hover is None
    assert [r.name for r in result.visible] == ["Caldera"]


def test_filter_without_matches_never_hovers(dataset):
    empty = FilterState("Maars")
    for lon, lat in [(0.0, 0.0), (90.0, 30.0), (-120.0, -40.0)]:
        result = _resolve(global_xy(lon, lat), dataset, empty)
        assert result.visible == ()
        assert result.hover is None


def test_crosshair_reads_back_coordinates(dataset):
    result = _resolve(global_xy(45.0, -20.0), dataset)
    assert result.crosshair is not None
    assert (result.crosshair.lon, result.crosshair.lat) == pytest.approx((45.0, -20.0))


def test_crosshair_on_map_edge(dataset):
    m = LAYOUT.map_rect
    result = _resolve((m.right, m.bottom), dataset)
    assert result.crosshair is not None
    assert (result.crosshair.local_x, result.crosshair.local_y) == (m.width, m.height)


# ---- filter list ----

def test_filter_row_at():
    panel = LAYOUT.filter_panel_rect
    x = panel.x + 50
    assert filter_row_at(LAYOUT, 3, x, panel.y + 36 + 10) == 0
    assert filter_row_at(LAYOUT, 3, x, panel.y + 36 + 32 + 10) == 1
    # shared edge belongs to the upper row
    assert filter_row_at(LAYOUT, 3, x, panel.y + 36 + 32) == 0
    # header and rows past the option count
    assert filter_row_at(LAYOUT, 3, x, panel.y + 10) is None
    assert filter_row_at(LAYOUT, 3, x, panel.y + 36 + 3 * 32 + 10) is None
    # outside the panel
    assert filter_row_at(LAYOUT, 3, panel.right + 5, panel.y + 36 + 10) is None


def test_hovered_filter_row(dataset):
    panel = LAYOUT.filter_panel_rect
    result = _resolve((panel.x + 20, panel.y + 36 + 32 + 5), dataset)
    assert result.hovered_filter_row == 1
    assert result.hover is None


def test_filter_click_transitions(dataset):
    options = filter_options(build_glyph_table(dataset))
    assert options[0] is ALL_TYPES
    assert [o.type_name for o in options[1:]] == ["Caldera", "Shield volcano", "Stratovolcano"]

    panel = LAYOUT.filter_panel_rect
    row_y = lambda i: panel.y + 36 + i * 32 + 16  # noqa: E731
    x = panel.x + 20

    state = apply_filter_click(ALL_TYPES, options, LAYOUT, x, row_y(0))
    assert state == ALL_TYPES
    state = apply_filter_click(state, options, LAYOUT, x, row_y(1))
    assert state == FilterState("Caldera")
    state = apply_filter_click(state, options, LAYOUT, x, row_y(3))
    assert state == FilterState("Stratovolcano")
    state = apply_filter_click(state, options, LAYOUT, x, row_y(0))
    assert state.is_all


def test_click_elsewhere_keeps_filter(dataset):
    options = filter_options(build_glyph_table(dataset))
    current = FilterState("Caldera")
    assert apply_filter_click(current, options, LAYOUT, *global_xy(0.0, 0.0)) == current
    assert apply_filter_click(current, options, LAYOUT, 5.0, 5.0) == current
