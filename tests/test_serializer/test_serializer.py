"""Tests for rebuilding CSS from segments."""

import pytest

from cssparts import Part, PartKind, Property, parse, to_css
from cssparts.serializer import part_to_css


class TestPassthrough:
    def test_plain_string(self):
        assert to_css("a { color: red; }") == "a { color: red; }"

    def test_empty_sequence(self):
        assert to_css([]) == ""


class TestPartRendering:
    def test_selector(self):
        assert part_to_css(Part(kind=PartKind.SELECTOR, value=".a > b")) == ".a > b"

    def test_url(self):
        assert part_to_css(Part(kind=PartKind.URL, value="img/x.png")) == "img/x.png"

    def test_variable(self):
        assert part_to_css(Part(kind=PartKind.VARIABLE, value="gap")) == "var(--gap)"

    def test_property(self):
        part = Part(kind=PartKind.PROPERTY, value=Property(name="gap", value="2px"))
        assert part_to_css(part) == "--gap: 2px"

    def test_property_without_declaration_value(self):
        part = Part(kind=PartKind.PROPERTY, value="gap: 2px")
        with pytest.raises(TypeError):
            part_to_css(part)


class TestRoundTrip:
    def test_selectors(self):
        css = "a, b { color: red; }"
        assert to_css(parse(css)) == css

    def test_variable(self):
        css = "div { width: var(--x); }"
        assert to_css(parse(css)) == css

    def test_root_block(self):
        css = ":root { --x: 1px; }"
        assert to_css(parse(css)) == css

    def test_url(self):
        css = "a { background: url('img/bg.png'); }"
        assert to_css(parse(css)) == css

    def test_property_spacing_is_normalized(self):
        assert to_css(parse(":root{--x:1px}")) == ":root{--x: 1px}"
