"""Literal recognition and cross-file aggregation."""

from .aggregator import ValueAggregator, aggregate
from .classifier import Classification, classify_line, parse_property, should_skip

__all__ = [
    "Classification",
    "ValueAggregator",
    "aggregate",
    "classify_line",
    "parse_property",
    "should_skip",
]
