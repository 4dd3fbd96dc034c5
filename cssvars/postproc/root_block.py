"""Rendering of the generated :root declaration block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from ..config import DEFAULT_PREFIX
from ..models import Category

ROOT_SELECTOR = ":root"

_SECTION_TITLES: Tuple[Tuple[Category, str], ...] = (
    (Category.COLOR, "Colors"),
    (Category.SPACING, "Spacing"),
    (Category.FONT, "Fonts"),
)


@dataclass
class RootBlockBuilder:
    """Groups custom properties by category and renders them under ``:root``."""

    prefix: str = DEFAULT_PREFIX
    indent: str = "  "

    def build(self, variables: Mapping[str, str]) -> str:
        """Render ``name -> value`` pairs; names outside the prefix are dropped."""
        groups = self.group(variables)
        lines: List[str] = [f"{ROOT_SELECTOR} {{"]
        for category, title in _SECTION_TITLES:
            entries = groups[category]
            if not entries:
                continue
            lines.append(f"{self.indent}/* {title} */")
            lines.extend(f"{self.indent}{name}: {value};" for name, value in entries)
        lines.append("}")
        return "\n".join(lines)

    def group(self, variables: Mapping[str, str]) -> Dict[Category, List[Tuple[str, str]]]:
        groups: Dict[Category, List[Tuple[str, str]]] = {category: [] for category, _ in _SECTION_TITLES}
        for name, value in variables.items():
            for category, _ in _SECTION_TITLES:
                if f"-{self.prefix}-{category.value}" in name:
                    groups[category].append((name, value))
                    break
        return groups


def render_root_block(variables: Mapping[str, str], prefix: str = DEFAULT_PREFIX) -> str:
    return RootBlockBuilder(prefix=prefix).build(variables)


__all__ = ["ROOT_SELECTOR", "RootBlockBuilder", "render_root_block"]
