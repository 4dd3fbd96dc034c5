"""Substitution of literal values with var() references."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

from ..logging import get_logger
from ..models import FileOutcome, FileStatus, SourceFile
from .root_block import ROOT_SELECTOR

logger = get_logger("rewriter")

PATTERN_SPECIALS = frozenset(".*+?^${}()|[]\\")

# A literal must not be glued to a longer token on either side.
_BEFORE = r"(?<![\w#.-])"
_AFTER = r"(?![\w%-])"

Writer = Callable[[Path, str], None]


def escape_literal(value: str) -> str:
    """Backslash-escape every regex metacharacter in ``value``."""
    return "".join(f"\\{char}" if char in PATTERN_SPECIALS else char for char in value)


def reference(name: str) -> str:
    return f"var({name})"


def _default_writer(path: Path, text: str) -> None:
    # newline="" keeps the line endings that were read
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


@dataclass
class RewriteResult:
    """Computed output for one file; identical in preview and write mode."""

    path: str
    text: str
    replacements: int

    @property
    def modified(self) -> bool:
        return self.replacements > 0


class LiteralRewriter:
    """Replaces every mapped literal with its ``var(--name)`` reference.

    Each literal is matched as its exact text. All literals are matched in one
    pass, longest first, so text inserted by a replacement is never scanned
    again.
    """

    def __init__(
        self,
        by_value: Mapping[str, str],
        root_block: str,
        writer: Writer | None = None,
    ) -> None:
        self._by_value = dict(by_value)
        self._root_block = root_block
        self._writer = writer or _default_writer
        self._pattern = self._compile()

    def _compile(self) -> Optional[re.Pattern[str]]:
        if not self._by_value:
            return None
        ordered = sorted(self._by_value, key=len, reverse=True)
        alternatives = [escape_literal(value) for value in ordered]
        return re.compile(f"{_BEFORE}(?:{'|'.join(alternatives)}){_AFTER}")

    def _substitute(self, match: re.Match[str]) -> str:
        return reference(self._by_value[match.group(0)])

    def rewrite(self, source: SourceFile) -> RewriteResult:
        if self._pattern is None:
            return RewriteResult(path=source.path, text=source.text, replacements=0)
        text, count = self._pattern.subn(self._substitute, source.text)
        if count and ROOT_SELECTOR not in text:
            text = f"{self._root_block}\n\n{text}"
        return RewriteResult(path=source.path, text=text, replacements=count)

    def apply(self, source: SourceFile, *, preview: bool = False) -> FileOutcome:
        """Rewrite ``source`` and persist it unless ``preview`` is set."""
        result = self.rewrite(source)
        if not result.modified:
            return FileOutcome(path=source.path, status=FileStatus.UNMODIFIED)
        if preview:
            logger.debug("Would update %s (%d replacements)", source.path, result.replacements)
            return FileOutcome(
                path=source.path, status=FileStatus.MODIFIED, replacements=result.replacements
            )
        try:
            self._writer(Path(source.path), result.text)
        except OSError as exc:
            logger.warning("Failed to write %s: %s", source.path, exc)
            return FileOutcome(
                path=source.path,
                status=FileStatus.WRITE_FAILED,
                replacements=result.replacements,
                error=str(exc),
            )
        logger.debug("Updated %s (%d replacements)", source.path, result.replacements)
        return FileOutcome(
            path=source.path,
            status=FileStatus.MODIFIED,
            replacements=result.replacements,
            written=True,
        )


__all__ = [
    "LiteralRewriter",
    "PATTERN_SPECIALS",
    "RewriteResult",
    "escape_literal",
    "reference",
]
