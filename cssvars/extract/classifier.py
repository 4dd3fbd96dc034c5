"""Line-level recognition of color, spacing and font-family literals."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, List

from ..models import Category

UNKNOWN_PROPERTY = "unknown"

_SKIP_PREFIXES = ("--", "/*", "*", "//")
_VAR_REFERENCE = "var("

_PROPERTY = re.compile(r"^\s*([\w-]+)\s*:")

HEX_COLOR = re.compile(
    r"#(?:[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{4}|[0-9a-fA-F]{3})\b"
)
RGB_COLOR = re.compile(r"rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*(?:,\s*[\d.]+\s*)?\)")
HSL_COLOR = re.compile(
    r"hsla?\(\s*\d+\s*,\s*[\d.]+%\s*,\s*[\d.]+%\s*(?:,\s*[\d.]+\s*)?\)"
)
NAMED_COLORS = (
    "red", "blue", "green", "orange", "purple", "pink", "brown", "gray", "grey",
    "black", "white", "yellow", "cyan", "magenta", "navy", "teal", "olive",
    "maroon", "aqua", "lime", "silver", "fuchsia",
)
NAMED_COLOR = re.compile(r"\b(?:" + "|".join(NAMED_COLORS) + r")\b", re.IGNORECASE)
SPACING = re.compile(r"(?<![\w.])(\d+(?:\.\d+)?)(px|rem|em|vh|vw|%)(?!\w)")
FONT_FAMILY = re.compile(r"font-family\s*:\s*([^;]+)")

_COLOR_PROPERTY = re.compile(r"color|background|border|shadow|outline", re.IGNORECASE)
_SPACING_PROPERTY = re.compile(
    r"margin|padding|gap|width|height|top|left|right|bottom|border-radius|font-size",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")

ALL_CATEGORIES: AbstractSet[Category] = frozenset(Category)


@dataclass(frozen=True)
class Classification:
    """One literal recognised on a line."""

    category: Category
    value: str
    property: str


def parse_property(line: str) -> str:
    """Return the leading ``name:`` of a declaration line, or ``unknown``."""
    match = _PROPERTY.match(line)
    return match.group(1) if match else UNKNOWN_PROPERTY


def should_skip(line: str) -> bool:
    """Comments, custom property definitions and lines already using ``var()``."""
    stripped = line.strip()
    if stripped.startswith(_SKIP_PREFIXES):
        return True
    return _VAR_REFERENCE in line


def classify_line(
    line: str,
    property_name: str | None = None,
    categories: AbstractSet[Category] = ALL_CATEGORIES,
) -> List[Classification]:
    """Return every literal found on ``line``, colors first, then spacing, then fonts."""
    if should_skip(line):
        return []
    prop = property_name if property_name is not None else parse_property(line)

    found: List[Classification] = []
    if Category.COLOR in categories:
        found.extend(Classification(Category.COLOR, value, prop) for value in _colors(line, prop))
    if Category.SPACING in categories and _SPACING_PROPERTY.search(prop):
        found.extend(Classification(Category.SPACING, value, prop) for value in _spacing(line))
    if Category.FONT in categories:
        found.extend(Classification(Category.FONT, value, prop) for value in _fonts(line))
    return found


def _colors(line: str, prop: str) -> List[str]:
    values = [match.group(0).lower() for match in HEX_COLOR.finditer(line)]
    for pattern in (RGB_COLOR, HSL_COLOR):
        values.extend(_WHITESPACE.sub(" ", match.group(0)) for match in pattern.finditer(line))
    if _COLOR_PROPERTY.search(prop):
        values.extend(match.group(0).lower() for match in NAMED_COLOR.finditer(line))
    return values


def _spacing(line: str) -> List[str]:
    values: List[str] = []
    for match in SPACING.finditer(line):
        number, unit = match.group(1), match.group(2)
        if _is_trivial_length(float(number), unit):
            continue
        values.append(f"{number}{unit}")
    return values


def _is_trivial_length(magnitude: float, unit: str) -> bool:
    if magnitude == 0:
        return True
    if unit == "px" and magnitude == 1:
        return True
    return unit == "%" and magnitude in (50, 100)


def _fonts(line: str) -> List[str]:
    values: List[str] = []
    for match in FONT_FAMILY.finditer(line):
        value = match.group(1).strip()
        if len(value) > 2:
            values.append(value)
    return values
