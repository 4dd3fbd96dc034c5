"""Selection of repeated literals and custom property name generation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import AbstractSet, Dict, Iterable, List, Mapping, Tuple

from .config import DEFAULT_PREFIX
from .models import Category, ExtractedValue, NamedValue

_WHITE = frozenset({"#fff", "#ffffff"})
_BLACK = frozenset({"#000", "#000000"})
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_QUOTES = re.compile(r"[\"']")
_WHITESPACE = re.compile(r"\s+")


def select_repeated(
    values: Mapping[str, ExtractedValue], minimum: int = 2
) -> Dict[str, ExtractedValue]:
    """Keep the values seen at least ``minimum`` times, preserving order."""
    if minimum < 1:
        raise ValueError(f"minimum must be at least 1 (got {minimum})")
    return {key: entry for key, entry in values.items() if entry.count >= minimum}


@dataclass(frozen=True)
class NameCounters:
    """Per-category ordinals consumed so far in one naming pass."""

    color: int = 0
    spacing: int = 0
    font: int = 0

    def get(self, category: Category) -> int:
        return getattr(self, category.value)

    def bump(self, category: Category) -> "NameCounters":
        return replace(self, **{category.value: self.get(category) + 1})


def name_value(
    entry: ExtractedValue,
    prefix: str,
    counters: NameCounters,
    taken: AbstractSet[str] = frozenset(),
) -> Tuple[str, NameCounters]:
    """Return the name for ``entry`` and the counters to use for the next value.

    ``taken`` holds names already handed out; it only matters for the white and
    black singletons.
    """
    value = entry.value
    if entry.category is Category.COLOR:
        lowered = value.lower()
        for shades, label in ((_WHITE, "white"), (_BLACK, "black")):
            special = f"--{prefix}-color-{label}"
            if lowered in shades and special not in taken:
                return special, counters
        ordinal = counters.get(Category.COLOR) + 1
        return f"--{prefix}-color-{ordinal}", counters.bump(Category.COLOR)

    if entry.category is Category.SPACING:
        slug = _NON_ALNUM.sub("-", value)
        return f"--{prefix}-spacing-{slug}", counters.bump(Category.SPACING)

    family = _QUOTES.sub("", value).split(",")[0].strip().lower()
    slug = _WHITESPACE.sub("-", family)
    return f"--{prefix}-font-{slug}", counters.bump(Category.FONT)


@dataclass
class NamingResult:
    """Outcome of naming every selected value in one run."""

    named: List[NamedValue] = field(default_factory=list)
    by_value: Dict[str, str] = field(default_factory=dict)
    by_name: Dict[str, str] = field(default_factory=dict)
    counters: NameCounters = field(default_factory=NameCounters)


def assign_names(
    selected: Iterable[ExtractedValue], prefix: str = DEFAULT_PREFIX
) -> NamingResult:
    """Name ``selected`` in order.

    Spacing and font names derive from the literal itself, so two literals that
    sanitize alike share one name; ``by_name`` then keeps the later literal.
    """
    result = NamingResult()
    counters = NameCounters()
    taken: set[str] = set()
    for entry in selected:
        name, counters = name_value(entry, prefix, counters, taken)
        taken.add(name)
        result.named.append(NamedValue(extracted=entry, name=name))
        result.by_value[entry.value] = name
        result.by_name[name] = entry.value
    result.counters = counters
    return result


__all__ = ["NameCounters", "NamingResult", "assign_names", "name_value", "select_repeated"]
