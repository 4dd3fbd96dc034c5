"""Core data models shared across css-to-vars components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Category(str, Enum):
    """Kind of literal recognised by the classifier."""

    COLOR = "color"
    SPACING = "spacing"
    FONT = "font"


class Scope(str, Enum):
    """Which categories a run extracts."""

    COLORS = "colors"
    SPACING = "spacing"
    ALL = "all"

    def categories(self) -> frozenset[Category]:
        if self is Scope.COLORS:
            return frozenset({Category.COLOR})
        if self is Scope.SPACING:
            return frozenset({Category.SPACING})
        return frozenset(Category)


@dataclass(frozen=True)
class Occurrence:
    """One site where a literal value was found."""

    file: str
    line: int
    property: str


@dataclass
class ExtractedValue:
    """A normalized literal and every place it was seen."""

    value: str
    category: Category
    occurrences: List[Occurrence] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.occurrences)


@dataclass(frozen=True)
class NamedValue:
    """A selected value paired with its generated custom property name."""

    extracted: ExtractedValue
    name: str

    @property
    def value(self) -> str:
        return self.extracted.value

    @property
    def category(self) -> Category:
        return self.extracted.category


@dataclass(frozen=True)
class SourceFile:
    """Stylesheet text keyed by the path it was read from."""

    path: str
    text: str


class FileStatus(str, Enum):
    UNMODIFIED = "unmodified"
    MODIFIED = "modified"
    WRITE_FAILED = "write_failed"


@dataclass
class FileOutcome:
    """Result of rewriting a single stylesheet."""

    path: str
    status: FileStatus
    replacements: int = 0
    written: bool = False
    error: Optional[str] = None


class RunStatus(str, Enum):
    NO_FILES = "no_files"
    NO_READABLE_FILES = "no_readable_files"
    NO_REPEATED_VALUES = "no_repeated_values"
    SUCCESS = "success"


@dataclass
class RunResult:
    """Everything a single invocation produced, for reporting."""

    status: RunStatus
    files: List[str] = field(default_factory=list)
    missing_paths: List[str] = field(default_factory=list)
    read_failures: Dict[str, str] = field(default_factory=dict)
    named: List[NamedValue] = field(default_factory=list)
    root_block: str = ""
    outcomes: List[FileOutcome] = field(default_factory=list)
    preview: bool = False
    min_occurrences: int = 2

    @property
    def total_replacements(self) -> int:
        # failed writes are reported separately and not counted as applied
        return sum(outcome.replacements for outcome in self.modified_files)

    @property
    def modified_files(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status is FileStatus.MODIFIED]

    @property
    def failed_writes(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status is FileStatus.WRITE_FAILED]
