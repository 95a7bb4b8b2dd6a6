"""Tests for configuration models, colours and the style provider."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from segdisplay.config import Settings
from segdisplay.models.display import DisplayKind, DisplayOptions
from segdisplay.models.style import StyleValues
from segdisplay.style import Pen, StyleProvider, resolve_paint_attributes
from segdisplay.utils.palette import colour_to_rgb, parse_colour


class TestDisplayKind:
    @pytest.mark.parametrize(
        "name,kind",
        [
            ("seven", DisplayKind.SEVEN),
            ("7", DisplayKind.SEVEN),
            ("seven_dp", DisplayKind.SEVEN_DP),
            ("7.", DisplayKind.SEVEN_DP),
            ("colon", DisplayKind.COLON),
            (":", DisplayKind.COLON),
            ("symb", DisplayKind.SYMBOL),
        ],
    )
    def test_names_and_aliases(self, name, kind):
        assert DisplayKind.from_name(name) is kind

    def test_names_are_case_exact(self):
        with pytest.raises(ValueError):
            DisplayKind.from_name("COLON")


class TestDisplayOptions:
    def test_defaults(self):
        options = DisplayOptions()
        assert options.kind is DisplayKind.SEVEN
        assert options.value == ""

    def test_invalid_type_is_validation_error(self):
        with pytest.raises(ValidationError, match="Unrecognised type name 'dial'"):
            DisplayOptions(type="dial")


class TestColours:
    @pytest.mark.parametrize(
        "value,expected",
        [("red", 1), ("hi-white", 15), (52, 52), ("52", 52), (" blue ", 4), (0, 0), (255, 255)],
    )
    def test_parse(self, value, expected):
        assert parse_colour(value) == expected

    @pytest.mark.parametrize("value", ["crimson", "", 256, -1, "300", True, 1.5])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError):
            parse_colour(value)

    @pytest.mark.parametrize(
        "index,rgb",
        [(1, (205, 0, 0)), (16, (0, 0, 0)), (52, (95, 0, 0)), (231, (255, 255, 255)), (232, (8, 8, 8)), (255, (238, 238, 238))],
    )
    def test_xterm_palette(self, index, rgb):
        assert colour_to_rgb(index) == rgb


class TestStyleValues:
    def test_defaults_are_red_on_dark_red(self):
        values = StyleValues()
        assert (values.lit, values.unlit) == (1, 52)

    def test_names_are_resolved(self):
        assert StyleValues(lit="green", unlit="8").lit == 2

    def test_bad_colour_rejected(self):
        with pytest.raises(ValidationError):
            StyleValues(lit="octarine")

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            StyleValues(lti="green")


class TestStyleProvider:
    def test_color_for(self, style):
        assert style.color_for("lit") == 1
        assert style.color_for("unlit") == 52
        with pytest.raises(KeyError):
            style.color_for("glow")

    def test_update_notifies_subscribers(self, style):
        seen = []
        style.subscribe(seen.append)
        style.update(unlit="black")
        assert [v.unlit for v in seen] == [0]

    def test_unchanged_update_is_silent(self, style):
        seen = []
        style.subscribe(seen.append)
        style.update(lit=1)
        assert seen == []

    def test_invalid_update_keeps_old_values(self, style):
        with pytest.raises(ValidationError):
            style.update(lit="nope")
        assert style.color_for("lit") == 1

    def test_misspelt_update_key_rejected(self, style):
        seen = []
        style.subscribe(seen.append)
        with pytest.raises(ValidationError):
            style.update(lti="green")
        assert style.color_for("lit") == 1
        assert seen == []

    def test_from_settings(self):
        provider = StyleProvider.from_settings(Settings(segdisplay_lit="cyan", segdisplay_unlit="17"))
        assert (provider.color_for("lit"), provider.color_for("unlit")) == (6, 17)


def test_resolve_paint_attributes_is_pure():
    values = StyleValues(lit=3, unlit=4)
    paints = resolve_paint_attributes(values)
    assert paints == resolve_paint_attributes(values)
    assert paints.lit == Pen(bg=3)
    assert paints.unlit == Pen(bg=4)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEGDISPLAY_LIT", "yellow")
    monkeypatch.setenv("SEGDISPLAY_TYPE", "colon")
    config = Settings()
    assert config.segdisplay_lit == "yellow"
    assert config.segdisplay_type == "colon"
