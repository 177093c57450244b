import pytest

from helpers import make_record
from volcanomap.model.glyphs import GlyphKind
from volcanomap.model.interaction import ALL_TYPES, FilterState
from volcanomap.model.state import AppState


def global_xy(state: AppState, lon: float, lat: float) -> tuple[float, float]:
    x, y = state.projector.to_pixel(lon, lat)
    return state.layout.map_rect.x + x, state.layout.map_rect.y + y


def filter_row_center(state: AppState, index: int) -> tuple[float, float]:
    panel = state.layout.filter_panel_rect
    return panel.x + 20, panel.y + 36 + index * 32 + 16


@pytest.fixture
def state(records) -> AppState:
    return AppState.from_records(records, 1400, 900)


def test_initial_state(state, records):
    assert state.filter == ALL_TYPES
    assert state.visible == tuple(records)
    assert state.interaction.hover is None
    assert [o.label for o in state.options] == [
        "All Types", "Caldera", "Cinder cone", "Shield volcano", "Stratovolcano", "Submarine volcano",
    ]
    assert state.glyph_for(records[0]) is GlyphKind.STRATOVOLCANO


def test_pointer_move_hovers(state):
    new_state = state.with_pointer(global_xy(state, 14.999, 37.748))
    assert new_state.interaction.hover is not None
    assert new_state.interaction.hover.record.name == "Etna"
    # transitions return new states
    assert state.interaction.hover is None


def test_pointer_leaving_clears_hover(state):
    hovered = state.with_pointer(global_xy(state, 14.999, 37.748))
    assert hovered.with_pointer(None).interaction.hover is None


def test_click_on_filter_row(state):
    new_state = state.with_click(*filter_row_center(state, 1))
    assert new_state.filter == FilterState("Caldera")
    assert [r.name for r in new_state.visible] == ["Krakatau"]

    back = new_state.with_click(*filter_row_center(state, 0))
    assert back.filter.is_all
    assert len(back.visible) == len(state.records)


def test_click_on_map_keeps_filter(state):
    filtered = state.with_filter(FilterState("Stratovolcano"))
    clicked = filtered.with_click(*global_xy(state, 14.999, 37.748))
    assert clicked.filter == FilterState("Stratovolcano")
    assert clicked.interaction.hover.record.name == "Etna"


def test_filter_change_invalidates_hover(state):
    hovered = state.with_pointer(global_xy(state, 14.999, 37.748))
    filtered = hovered.with_filter(FilterState("Caldera"))
    assert filtered.interaction.hover is None


def test_unknown_filter_is_rejected(state):
    with pytest.raises(ValueError):
        state.with_filter(FilterState("Lava dome"))


def test_resize_recomputes_layout_and_hover(state):
    pointer = global_xy(state, 14.999, 37.748)
    hovered = state.with_pointer(pointer)
    resized = hovered.with_viewport(800, 600)
    assert resized.layout.map_rect.width < state.layout.map_rect.width
    assert resized.projector.map_width == resized.layout.map_rect.width
    # same pointer, new layout: Etna has moved away from under it
    assert resized.interaction.hover is None or resized.interaction.hover.record.name != "Etna"
    assert resized.with_pointer(global_xy(resized, 14.999, 37.748)).interaction.hover.record.name == "Etna"


def test_single_record_scenario():
    record = make_record(lat=0.0, lon=0.0, elevation=1000.0, type="Stratovolcano")
    state = AppState.from_records([record], 1400, 900)
    assert (state.extent.min_lat, state.extent.max_lat) == (-1.0, 1.0)
    assert state.glyph_table["Stratovolcano"] is GlyphKind.STRATOVOLCANO
    assert global_xy(state, 0.0, 0.0) == pytest.approx(state.layout.map_rect.center)
    assert state.with_pointer(state.layout.map_rect.center).interaction.hover.record == record


def test_empty_dataset():
    state = AppState.from_records([], 1400, 900)
    assert state.options == (ALL_TYPES,)
    assert state.visible == ()
    assert state.with_pointer(state.layout.map_rect.center).interaction.hover is None
    assert state.color_scale.min_elevation == 0.0
    assert state.color_scale.max_elevation == 1.0
