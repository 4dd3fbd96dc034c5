"""Text and JSON rendering of run results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .models import RunResult, RunStatus

TOOL_NAME = "css-to-vars"
VERSION = "1.0.0"

MAX_LOCATIONS = 3


def relativize(path: str, cwd: Path | None = None) -> str:
    base = cwd or Path.cwd()
    try:
        return Path(path).relative_to(base).as_posix()
    except ValueError:
        return path


def render_text(result: RunResult, cwd: Path | None = None) -> str:
    lines: List[str] = [f"{TOOL_NAME} v{VERSION}", ""]
    for missing in result.missing_paths:
        lines.append(f"Error: Path not found: {missing}")
    for path, error in result.read_failures.items():
        lines.append(f"Error: Could not read {relativize(path, cwd)}: {error}")

    if result.status is RunStatus.NO_FILES:
        lines.append("No CSS files found in the specified paths.")
        return "\n".join(lines) + "\n"
    if result.status is RunStatus.NO_READABLE_FILES:
        lines.append(f"None of the {len(result.files)} CSS file(s) found could be read.")
        return "\n".join(lines) + "\n"

    lines.append(f"Scanned {len(result.files)} CSS file(s).")
    lines.append("")
    if result.status is RunStatus.NO_REPEATED_VALUES:
        lines.append(f"No repeated values found (min: {result.min_occurrences}).")
        return "\n".join(lines) + "\n"

    lines.append(f"Found {len(result.named)} repeated values:")
    lines.append("")
    for named in result.named:
        occurrences = named.extracted.occurrences
        lines.append(f"  {named.name}: {named.value} ({len(occurrences)} occurrences)")
        for occurrence in occurrences[:MAX_LOCATIONS]:
            location = relativize(occurrence.file, cwd)
            lines.append(f"     {location}:{occurrence.line} ({occurrence.property})")
        if len(occurrences) > MAX_LOCATIONS:
            lines.append(f"     ... and {len(occurrences) - MAX_LOCATIONS} more")
        lines.append("")

    lines.append("Generated :root block:")
    lines.append("")
    lines.append(result.root_block)
    lines.append("")

    if result.preview:
        lines.append("DRY RUN - no files were modified.")
        lines.append(
            f"{result.total_replacements} replacement(s) would be made in "
            f"{len(result.modified_files)} file(s). Remove --dry-run to apply changes."
        )
        return "\n".join(lines) + "\n"

    for outcome in result.modified_files:
        lines.append(f"  Updated {relativize(outcome.path, cwd)}")
    for outcome in result.failed_writes:
        lines.append(f"  Failed to write {relativize(outcome.path, cwd)}: {outcome.error}")
    lines.append("")
    lines.append(
        f"Done! {result.total_replacements} replacements across {len(result.files)} file(s)."
    )
    return "\n".join(lines) + "\n"


def build_payload(result: RunResult) -> Dict[str, Any]:
    if result.status is RunStatus.NO_FILES:
        return {"error": "No CSS files found", "files": 0, "variables": 0}
    if result.status is RunStatus.NO_READABLE_FILES:
        return {
            "error": "No readable CSS files",
            "files": len(result.files),
            "variables": 0,
            "readFailures": dict(result.read_failures),
        }
    if result.status is RunStatus.NO_REPEATED_VALUES:
        return {
            "files": len(result.files),
            "variables": 0,
            "message": "No repeated values found",
        }
    return {
        "files": len(result.files),
        "variables": len(result.named),
        "dryRun": result.preview,
        "extractions": [
            {
                "value": named.value,
                "variable": named.name,
                "type": named.category.value,
                "occurrences": named.extracted.count,
                "locations": [
                    {"file": o.file, "line": o.line, "property": o.property}
                    for o in named.extracted.occurrences
                ],
            }
            for named in result.named
        ],
        "rootBlock": result.root_block,
        "replacements": result.total_replacements,
        "updatedFiles": [o.path for o in result.modified_files],
        "failedWrites": {o.path: o.error for o in result.failed_writes},
        "missingPaths": list(result.missing_paths),
    }


def render_json(result: RunResult) -> str:
    return json.dumps(build_payload(result), indent=2)


__all__ = ["MAX_LOCATIONS", "TOOL_NAME", "VERSION", "build_payload", "render_json", "render_text"]
