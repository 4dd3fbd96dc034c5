"""Cross-file aggregation of classified literals."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, Mapping

from ..logging import get_logger
from ..models import Category, ExtractedValue, Occurrence, SourceFile
from .classifier import ALL_CATEGORIES, Classification, classify_line, parse_property

logger = get_logger("extract")


class ValueAggregator:
    """Accumulates occurrences keyed by normalized literal value.

    Insertion order of the mapping is discovery order (file order, then line
    order), and the category of a value is fixed by its first occurrence.
    """

    def __init__(self, categories: AbstractSet[Category] = ALL_CATEGORIES) -> None:
        self._categories = frozenset(categories)
        self._values: Dict[str, ExtractedValue] = {}

    @property
    def values(self) -> Mapping[str, ExtractedValue]:
        return self._values

    def add(self, classification: Classification, file: str, line: int) -> ExtractedValue:
        entry = self._values.get(classification.value)
        if entry is None:
            entry = ExtractedValue(value=classification.value, category=classification.category)
            self._values[classification.value] = entry
        entry.occurrences.append(Occurrence(file=file, line=line, property=classification.property))
        return entry

    def add_source(self, source: SourceFile) -> int:
        """Classify every line of ``source``; return the number of literals recorded."""
        recorded = 0
        for line_number, line in enumerate(source.text.split("\n"), start=1):
            for classification in classify_line(line, parse_property(line), self._categories):
                self.add(classification, source.path, line_number)
                recorded += 1
        logger.debug("Recorded %d literal(s) in %s", recorded, source.path)
        return recorded


def aggregate(
    sources: Iterable[SourceFile], categories: AbstractSet[Category] = ALL_CATEGORIES
) -> Dict[str, ExtractedValue]:
    """Fold every source into one value -> ExtractedValue mapping."""
    aggregator = ValueAggregator(categories)
    for source in sources:
        aggregator.add_source(source)
    return dict(aggregator.values)
