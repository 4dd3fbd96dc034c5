"""Tests for line-level literal classification."""

from __future__ import annotations

import pytest

from cssvars.extract.classifier import (
    HEX_COLOR,
    HSL_COLOR,
    NAMED_COLOR,
    RGB_COLOR,
    Classification,
    classify_line,
    parse_property,
    should_skip,
)
from cssvars.models import Category


def _values(line: str, **kwargs) -> list[str]:
    return [item.value for item in classify_line(line, **kwargs)]


def test_hex_color_is_lowercased() -> None:
    assert classify_line("color: #FF0000;", "color") == [
        Classification(Category.COLOR, "#ff0000", "color")
    ]


def test_parse_property_reads_leading_identifier() -> None:
    assert parse_property("  margin-top: 4px;") == "margin-top"
    assert parse_property("}") == "unknown"
    assert parse_property(":root {") == "unknown"


@pytest.mark.parametrize(
    "line",
    [
        "  --brand: #ff0000;",
        "/* color: #ff0000; */",
        " * color: #ff0000;",
        "// color: #ff0000;",
        "background: var(--existing);",
        "border: 1px solid var(--cv-color-1);",
    ],
)
def test_skip_rules(line: str) -> None:
    assert should_skip(line)
    assert classify_line(line) == []


def test_hex_color_lengths() -> None:
    line = "background: #abc #abcd #aabbcc #aabbccdd #abcde;"
    assert _values(line) == ["#abc", "#abcd", "#aabbcc", "#aabbccdd"]


def test_functional_colors_collapse_whitespace() -> None:
    assert _values("color: rgb(10,  20,\t30);") == ["rgb(10, 20, 30)"]
    assert _values("color: rgba(0,0,0,0.5);") == ["rgba(0,0,0,0.5)"]
    assert _values("background: hsla(120, 50%, 25%, 0.3);") == ["hsla(120, 50%, 25%, 0.3)"]


def test_named_colors_require_color_property() -> None:
    assert _values("border-color: RED;") == ["red"]
    assert _values("box-shadow: 0 0 2px Black;") == ["black"]
    assert _values("content: 'red';") == []
    assert _values("font-family: Gray Sans;") == ["Gray Sans"]


def test_line_can_yield_several_categories_in_order() -> None:
    found = classify_line("border-left: 2px solid #333;")
    assert [(item.category, item.value) for item in found] == [
        (Category.COLOR, "#333"),
        (Category.SPACING, "2px"),
    ]
    assert all(item.property == "border-left" for item in found)


def test_spacing_values() -> None:
    assert _values("margin: 16px 1.5rem;") == ["16px", "1.5rem"]
    assert _values("width: 25%;") == ["25%"]
    assert _values("height: 40vh;") == ["40vh"]


@pytest.mark.parametrize(
    "line",
    [
        "padding: 100%;",
        "padding: 1px;",
        "padding: 0px;",
        "padding: 0.0rem;",
        "width: 50%;",
    ],
)
def test_trivial_lengths_are_excluded(line: str) -> None:
    assert classify_line(line) == []


def test_spacing_requires_layout_property() -> None:
    assert _values("letter-spacing: 2px;") == []
    assert _values("transition: opacity 300ms;") == []


def test_spacing_does_not_match_inside_tokens() -> None:
    assert _values("padding: a12px;") == []
    assert _values("padding: 12pxs;") == []


def test_font_family_value_is_trimmed() -> None:
    assert _values("  font-family:  'Inter', sans-serif ;") == ["'Inter', sans-serif"]
    assert _values("font-family: a;") == []


def test_categories_limit_recognition() -> None:
    line = "border-radius: 4px; color: #fff"
    assert _values(line, categories={Category.COLOR}) == ["#fff"]
    assert _values(line, categories={Category.SPACING}) == ["4px"]
    assert _values("font-family: Inter;", categories={Category.COLOR, Category.SPACING}) == []


@pytest.mark.parametrize(
    "line",
    [
        "color: #ABCDEF;",
        "color: RGB(1, 2, 3); background: rgb(1, 2, 3);",
        "outline: 2px dotted Teal;",
        "background: hsl(10, 20%, 30%) #FFF;",
    ],
)
def test_color_values_are_lowercase_and_match_one_pattern(line: str) -> None:
    colors = [item.value for item in classify_line(line) if item.category is Category.COLOR]
    assert colors
    for value in colors:
        assert value == value.lower()
        matching = [
            pattern
            for pattern in (HEX_COLOR, RGB_COLOR, HSL_COLOR, NAMED_COLOR)
            if pattern.fullmatch(value)
        ]
        assert len(matching) == 1
