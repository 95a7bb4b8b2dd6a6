"""End-to-end tests: SegmentDisplay rendering through the registered kind renderers."""

from __future__ import annotations

import pytest

from segdisplay.display import SegmentDisplay
from segdisplay.engine.geometry import BoundingBox
from segdisplay.engine.registry import RendererRegistry
from segdisplay.surface.grid import GridSurface
from tests.conftest import MIN_BOX, SYMBOL_BOX

SEVEN_BOX = BoundingBox(lines=7, cols=10)


def _lit_runs(surface: GridSurface, paints) -> list:
    return [op for op in surface.ops if op.op == "fill_run" and op.paint == paints.lit]


class TestConstruction:
    @pytest.mark.parametrize("name", ["seven", "seven_dp", "colon", "symb", "7", "7.", ":"])
    def test_known_types(self, style, name):
        SegmentDisplay(type=name, style=style)

    @pytest.mark.parametrize("name", ["Seven", "eight", "", "symbol", "7 "])
    def test_unknown_type_fails_at_construction(self, style, name):
        with pytest.raises(ValueError, match="Unrecognised type name"):
            SegmentDisplay(type=name, style=style)

    def test_kind_without_renderer_fails(self, style):
        with pytest.raises(ValueError):
            SegmentDisplay(type="colon", style=style, registry=RendererRegistry())

    def test_declared_minimum_size(self, style):
        assert SegmentDisplay(style=style).min_size == (5, 6)
        assert (SegmentDisplay.lines, SegmentDisplay.cols) == (5, 6)


class TestSeven:
    def test_eight_in_minimum_box_lights_all_bars(self, render, paints):
        surface = render("seven", "8", MIN_BOX)
        fills = [op for op in surface.ops if op.op == "fill_run"]
        assert len(fills) == 7
        assert all(op.paint == paints.lit for op in fills)
        assert surface.cells_painted(paints.lit) == {
            (0, 2), (0, 3),
            (1, 0), (1, 1), (1, 4), (1, 5),
            (2, 2), (2, 3),
            (3, 0), (3, 1), (3, 4), (3, 5),
            (4, 2), (4, 3),
        }

    def test_one_lights_right_side_only(self, render, paints):
        surface = render("seven", "1", MIN_BOX)
        assert surface.cells_painted(paints.lit) == {(1, 4), (1, 5), (3, 4), (3, 5)}
        assert (0, 2) in surface.cells_painted(paints.unlit)

    @pytest.mark.parametrize("value", ["", "12", "x", "5."])
    def test_unknown_value_paints_bars_unlit(self, render, paints, value):
        surface = render("seven", value, SEVEN_BOX)
        assert surface.cells_painted(paints.lit) == set()
        assert len([op for op in surface.ops if op.op == "fill_run"]) > 0

    def test_erases_box_unlit_first(self, render, paints):
        surface = render("seven", "3", SEVEN_BOX)
        first = surface.ops[0]
        assert first.op == "erase_rect"
        assert first.paint == paints.unlit
        assert (first.lines, first.width) == (7, 10)


class TestSevenDecimalPoint:
    def test_dot_lights_decimal_point(self, render, paints):
        surface = render("seven_dp", "5.", SEVEN_BOX)
        lit = surface.cells_painted(paints.lit)
        assert {(6, 8), (6, 9)} <= lit
        # Digit still drawn in the narrowed band: A spans cols 2..5
        assert {(0, 2), (0, 5)} <= lit
        assert (0, 6) not in lit

    def test_no_dot_leaves_decimal_point_unlit(self, render, paints):
        surface = render("seven_dp", "5", SEVEN_BOX)
        lit = surface.cells_painted(paints.lit)
        assert (6, 8) not in lit
        assert (6, 8) in surface.cells_painted(paints.unlit)
        assert (0, 2) in lit

    def test_empty_value_lights_nothing(self, render, paints):
        surface = render("seven_dp", "", SEVEN_BOX)
        assert surface.cells_painted(paints.lit) == set()

    def test_dot_only(self, render, paints):
        surface = render("seven_dp", ".", SEVEN_BOX)
        assert surface.cells_painted(paints.lit) == {(6, 8), (6, 9)}

    def test_value_is_not_mutated_by_render(self, make_display):
        display = make_display("seven_dp", "7.", SEVEN_BOX)
        display.render(GridSurface(7, 10))
        assert display.value == "7."


class TestColon:
    def test_two_lit_dots(self, render, paints):
        surface = render("colon", "", MIN_BOX)
        assert surface.cells_painted(paints.lit) == {(1, 3), (1, 4), (3, 3), (3, 4)}

    def test_value_is_ignored(self, render):
        assert render("colon", "", SEVEN_BOX).ops == render("colon", "X", SEVEN_BOX).ops


class TestSymbol:
    def test_v_meets_at_bottom_centre(self, render, paints):
        surface = render("symb", "V", SYMBOL_BOX)
        lit = surface.cells_painted(paints.lit)
        assert {c for c in lit if c[0] == 8} == {(8, 4), (8, 5)}
        assert {(0, 0), (0, 9)} <= lit

    def test_unknown_glyph_only_erases(self, render):
        surface = render("symb", "?", SYMBOL_BOX)
        assert [op.op for op in surface.ops] == ["erase_rect"]

    def test_micro_aliases_render_identically(self, render):
        assert render("symb", "µ", SYMBOL_BOX).ops == render("symb", "μ", SYMBOL_BOX).ops

    def test_strokes_are_lit_only(self, render, paints):
        surface = render("symb", "W", SYMBOL_BOX)
        fills = [op for op in surface.ops if op.op == "fill_run"]
        assert fills
        assert all(op.paint == paints.lit for op in fills)


@pytest.mark.parametrize(
    "type_name,value",
    [("seven", "8"), ("seven_dp", "8."), ("colon", ""), ("symb", "V")],
)
def test_minimum_box_renders_every_kind(render, paints, type_name, value):
    surface = render(type_name, value, MIN_BOX)
    assert len(_lit_runs(surface, paints)) >= 1


@pytest.mark.parametrize(
    "type_name,value",
    [("seven", "4"), ("seven_dp", "2."), ("colon", ""), ("symb", "Ω")],
)
def test_render_is_idempotent(make_display, type_name, value):
    display = make_display(type_name, value, SYMBOL_BOX)
    first, second = GridSurface(9, 10), GridSurface(9, 10)
    display.render(first)
    display.render(second)
    assert first.ops == second.ops
    assert (first.cells == second.cells).all()


class TestLifecycle:
    def test_render_before_reshape_is_a_no_op(self, style):
        display = SegmentDisplay(type="seven", value="8", style=style)
        surface = GridSurface(5, 6)
        display.render(surface)
        assert surface.ops == []

    def test_reshape_recomputes_geometry(self, make_display):
        display = make_display("seven", "8", MIN_BOX)
        small = display.geometry
        display.reshape(SEVEN_BOX)
        assert display.geometry != small
        assert display.geometry.d_line == 6

    def test_set_value_requests_redraw_without_touching_geometry(self, style):
        calls = []
        display = SegmentDisplay(type="seven", style=style, on_redraw=lambda: calls.append(1))
        display.reshape(MIN_BOX)
        geometry = display.geometry
        display.render(GridSurface(5, 6))
        assert not display.needs_redraw

        display.set_value("3")
        assert display.value == "3"
        assert display.needs_redraw
        assert display.geometry is geometry
        assert len(calls) == 2

    def test_style_change_refreshes_paints(self, style, make_display):
        display = make_display("colon", "", MIN_BOX)
        style.update(lit="green")
        surface = GridSurface(5, 6)
        display.render(surface)
        assert display.paints.lit.bg == 2
        assert surface.paint_at(1, 3).bg == 2

    def test_close_stops_style_updates(self, style, make_display):
        display = make_display("colon", "", MIN_BOX)
        display.close()
        style.update(lit="blue")
        assert display.paints.lit.bg == 1

    def test_displays_do_not_share_state(self, make_display):
        a = make_display("seven", "1", MIN_BOX)
        b = make_display("seven", "2", SEVEN_BOX)
        a.set_value("9")
        assert b.value == "2"
        assert a.geometry != b.geometry
