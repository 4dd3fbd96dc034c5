"""Tests for stylesheet discovery and reading."""

from __future__ import annotations

from pathlib import Path

from cssvars.file_scanner import CssFileScanner, ExcludeRule, read_sources


def _names(files: list[Path], root: Path) -> list[str]:
    return [path.relative_to(root.resolve()).as_posix() for path in files]


def test_discover_walks_directories_in_sorted_order(css_tree) -> None:
    css_tree.write(
        {
            "b.css": "a {}",
            "a.css": "a {}",
            "components/button.css": "a {}",
            "notes.txt": "not css",
            ".hidden.css": "a {}",
            ".cache/cached.css": "a {}",
            "node_modules/pkg/dist.css": "a {}",
        }
    )

    result = CssFileScanner().discover([str(css_tree.root)])

    assert _names(result.files, css_tree.root) == ["a.css", "b.css", "components/button.css"]
    assert result.missing == []


def test_discover_reports_missing_paths_and_continues(css_tree, tmp_path: Path) -> None:
    css_tree.write({"site.css": "a {}"})
    missing = str(tmp_path / "nope")

    result = CssFileScanner().discover([missing, str(css_tree.root)])

    assert result.missing == [missing]
    assert _names(result.files, css_tree.root) == ["site.css"]


def test_discover_accepts_files_and_skips_duplicates(css_tree) -> None:
    css_tree.write({"site.css": "a {}", "readme.md": "# hi"})
    site = str(css_tree.root / "site.css")

    result = CssFileScanner().discover([site, str(css_tree.root), str(css_tree.root / "readme.md")])

    assert _names(result.files, css_tree.root) == ["site.css"]


def test_discover_honours_exclude_paths(css_tree) -> None:
    css_tree.write(
        {
            "site.css": "a {}",
            "vendor/lib.css": "a {}",
            "dist/app.min.css": "a {}",
            "themes/dark/extra.css": "a {}",
        }
    )

    scanner = CssFileScanner(["vendor/", "*.min.css", "themes/dark"])
    result = scanner.discover([str(css_tree.root)])

    assert _names(result.files, css_tree.root) == ["site.css"]


def test_exclude_rule_directory_only() -> None:
    rule = ExcludeRule.parse("build/")

    assert rule is not None
    assert rule.matches("build", is_dir=True)
    assert not rule.matches("build", is_dir=False)
    assert ExcludeRule.parse("   ") is None


def test_read_sources_reports_undecodable_files(tmp_path: Path) -> None:
    good = tmp_path / "good.css"
    good.write_text("a { color: red; }\n", encoding="utf-8")
    bad = tmp_path / "bad.css"
    bad.write_bytes(b"\xff\xfe\xfa")

    sources, failures = read_sources([good, bad])

    assert [source.path for source in sources] == [str(good)]
    assert list(failures) == [str(bad)]
