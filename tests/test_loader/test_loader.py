"""Tests for the JavaScript module renderer."""

import json

from cssparts import ParserConfig, PartKind, parse
from cssparts.loader import render_module, to_json


class TestToJson:
    def test_literals_and_parts(self):
        assert to_json(parse("div { width: var(--x); }")) == [
            {"type": 1, "value": "div"},
            " { width: ",
            {"type": 2, "value": "x"},
            "; }",
        ]

    def test_property_value(self):
        assert to_json(parse(":root { --x: 1px; }")) == [
            ":root { ",
            {"type": 3, "value": {"name": "x", "value": "1px"}},
            "; }",
        ]

    def test_escaped_variable(self):
        data = to_json(parse("svg[fill='var(--c)']"))
        assert data[1] == {"type": 2, "value": "c", "encode": True}

    def test_type_codes(self):
        assert [k.value for k in PartKind] == [1, 2, 3, 4]


class TestRenderModule:
    def test_module_text(self):
        assert render_module(":root { --x: 1px; }") == (
            'module.exports = [":root { ",'
            '{"type":3,"value":{"name":"x","value":"1px"}},"; }"]'
        )

    def test_escaped_variable_module(self):
        text = render_module("svg[fill='var(--c)']")
        assert text == (
            'module.exports = ["svg[fill=\'",'
            '{"type":2,"value":"c","encode":true},"\']"]'
        )

    def test_plain_css(self):
        text = render_module("@import x;")
        assert text == 'module.exports = ["@import x;"]'

    def test_payload_is_json(self):
        text = render_module("a { background: url(x.png); }")
        payload = json.loads(text[len("module.exports = "):])
        assert {"type": 4, "value": "x.png"} in payload

    def test_config_is_used(self):
        config = ParserConfig(enabled_kinds=frozenset({PartKind.URL}))
        text = render_module("a { background: url(x.png); }", config=config)
        assert '{"type":1' not in text
