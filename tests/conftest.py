from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.css_tree import CssTreeBuilder


@pytest.fixture
def css_tree(tmp_path: Path) -> CssTreeBuilder:
    """Provide a stylesheet tree rooted under the pytest tmp_path."""
    return CssTreeBuilder(tmp_path)
