"""Tests for selection and custom property naming."""

from __future__ import annotations

import pytest

from cssvars.models import Category, ExtractedValue, Occurrence
from cssvars.naming import NameCounters, assign_names, name_value, select_repeated


def _value(value: str, category: Category, count: int = 2) -> ExtractedValue:
    occurrences = [Occurrence("a.css", line, "prop") for line in range(1, count + 1)]
    return ExtractedValue(value=value, category=category, occurrences=occurrences)


def test_select_repeated_keeps_order_and_threshold() -> None:
    values = {
        "#111": _value("#111", Category.COLOR, 1),
        "16px": _value("16px", Category.SPACING, 3),
        "#222": _value("#222", Category.COLOR, 2),
    }

    assert list(select_repeated(values)) == ["16px", "#222"]
    assert list(select_repeated(values, 3)) == ["16px"]
    assert select_repeated(values, 4) == {}
    assert list(select_repeated(values, 1)) == ["#111", "16px", "#222"]


def test_select_repeated_rejects_threshold_below_one() -> None:
    with pytest.raises(ValueError):
        select_repeated({}, 0)


def test_white_and_black_do_not_consume_ordinals() -> None:
    result = assign_names(
        [
            _value("#ffffff", Category.COLOR),
            _value("#ff0000", Category.COLOR),
            _value("#000", Category.COLOR),
            _value("#00ff00", Category.COLOR),
        ]
    )

    assert [named.name for named in result.named] == [
        "--cv-color-white",
        "--cv-color-1",
        "--cv-color-black",
        "--cv-color-2",
    ]
    assert result.counters == NameCounters(color=2, spacing=0, font=0)


def test_white_name_is_handed_out_once() -> None:
    result = assign_names([_value("#fff", Category.COLOR), _value("#ffffff", Category.COLOR)])

    assert result.by_value == {"#fff": "--cv-color-white", "#ffffff": "--cv-color-1"}


def test_spacing_and_font_names_derive_from_value() -> None:
    result = assign_names(
        [
            _value("16px", Category.SPACING),
            _value("1.5rem", Category.SPACING),
            _value("25%", Category.SPACING),
            _value("'Helvetica Neue', Arial, sans-serif", Category.FONT),
        ],
        prefix="theme",
    )

    assert [named.name for named in result.named] == [
        "--theme-spacing-16px",
        "--theme-spacing-1-5rem",
        "--theme-spacing-25-",
        "--theme-font-helvetica-neue",
    ]
    assert result.counters == NameCounters(color=0, spacing=3, font=1)


def test_sanitized_collisions_keep_later_value_by_name() -> None:
    result = assign_names(
        [_value("'Inter', sans-serif", Category.FONT), _value("Inter, serif", Category.FONT)]
    )

    assert result.by_value == {
        "'Inter', sans-serif": "--cv-font-inter",
        "Inter, serif": "--cv-font-inter",
    }
    assert result.by_name == {"--cv-font-inter": "Inter, serif"}


def test_name_value_is_repeatable() -> None:
    entry = _value("#abcdef", Category.COLOR)
    counters = NameCounters(color=4)

    first = name_value(entry, "cv", counters)
    second = name_value(entry, "cv", counters)

    assert first == second == ("--cv-color-5", NameCounters(color=5))
    assert counters == NameCounters(color=4)


def test_selection_size_is_non_increasing_in_threshold() -> None:
    values = {
        str(count): _value(str(count), Category.SPACING, count) for count in (1, 2, 2, 3, 5)
    }
    sizes = [len(select_repeated(values, minimum)) for minimum in range(1, 7)]

    assert sizes == sorted(sizes, reverse=True)
