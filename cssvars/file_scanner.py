"""Stylesheet discovery and reading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .logging import get_logger
from .models import SourceFile

logger = get_logger("scanner")

STYLESHEET_SUFFIX = ".css"

_EXCLUDED_DIRS = {"node_modules"}


@dataclass
class ExcludeRule:
    """Glob from ``exclude_paths``; trailing ``/`` restricts it to directories."""

    pattern: str
    directory_only: bool
    has_slash: bool

    @classmethod
    def parse(cls, raw: str) -> "ExcludeRule | None":
        pattern = raw.strip().lstrip("/")
        if not pattern:
            return None
        directory_only = pattern.endswith("/")
        pattern = pattern.rstrip("/")
        return cls(pattern=pattern, directory_only=directory_only, has_slash="/" in pattern)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.has_slash:
            return fnmatchcase(rel_path, self.pattern)
        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


@dataclass
class DiscoveryResult:
    """Stylesheets found under the requested paths, in discovery order."""

    files: List[Path] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _is_stylesheet(path: Path) -> bool:
    return path.name.endswith(STYLESHEET_SUFFIX)


class CssFileScanner:
    """Expands files and directories into the stylesheets to process."""

    def __init__(self, exclude_paths: Sequence[str] = ()) -> None:
        self._rules = [rule for rule in map(ExcludeRule.parse, exclude_paths) if rule is not None]

    def discover(self, paths: Iterable[str]) -> DiscoveryResult:
        result = DiscoveryResult()
        seen: set[Path] = set()
        for raw in paths:
            path = Path(raw).expanduser().resolve()
            if not path.exists():
                logger.warning("Path not found: %s", raw)
                result.missing.append(raw)
                continue
            for found in self._expand(path):
                if found in seen:
                    continue
                seen.add(found)
                result.files.append(found)
        logger.debug("Discovered %d stylesheet(s)", len(result.files))
        return result

    def _expand(self, path: Path) -> Iterator[Path]:
        if path.is_file():
            if _is_stylesheet(path):
                yield path
            return
        if path.is_dir():
            yield from self._walk(path)

    def _walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            rel_dir = current.relative_to(root).as_posix() if current != root else ""

            kept = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS or _is_hidden(name):
                    continue
                if self._excluded(_join(rel_dir, name), is_dir=True):
                    continue
                kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                if _is_hidden(name) or not name.endswith(STYLESHEET_SUFFIX):
                    continue
                if self._excluded(_join(rel_dir, name), is_dir=False):
                    continue
                yield current / name

    def _excluded(self, rel_path: str, *, is_dir: bool) -> bool:
        return any(rule.matches(rel_path, is_dir) for rule in self._rules)


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name


def read_sources(files: Iterable[Path]) -> Tuple[List[SourceFile], Dict[str, str]]:
    """Read each file as UTF-8; unreadable files are returned as ``path -> error``."""
    sources: List[SourceFile] = []
    failures: Dict[str, str] = {}
    for path in files:
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s: %s", path, exc)
            failures[str(path)] = str(exc)
            continue
        sources.append(SourceFile(path=str(path), text=text))
    return sources, failures


__all__ = ["CssFileScanner", "DiscoveryResult", "ExcludeRule", "read_sources"]
