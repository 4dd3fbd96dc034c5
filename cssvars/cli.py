"""CLI entrypoint for css-to-vars."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, ExtractionConfig, load_config
from .logging import configure_logging
from .models import RunStatus, Scope
from .orchestrator import Orchestrator
from .reporting import TOOL_NAME, VERSION, render_json, render_text

_FAILED_STATUSES = {RunStatus.NO_FILES, RunStatus.NO_READABLE_FILES}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description=(
            "Scan CSS files, find repeated hardcoded values, and refactor them "
            "into CSS custom properties."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="CSS files or directories to scan (defaults to current directory).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without writing files.",
    )
    parser.add_argument(
        "--min",
        dest="min_occurrences",
        type=int,
        default=None,
        metavar="N",
        help="Only extract values used N+ times (default: 2).",
    )
    parser.add_argument(
        "--scope",
        choices=[scope.value for scope in Scope],
        default=None,
        help="What to extract: colors, spacing, or all (default: all).",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help='Prefix for variable names (default: "cv").',
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .cssvars.yml file (defaults to ./.cssvars.yml when present).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _load_effective_config(args: argparse.Namespace) -> ExtractionConfig:
    config_path = args.config if args.config is not None else Path.cwd()
    if args.config is not None and not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    base = load_config(config_path)
    return base.with_overrides(
        min_occurrences=args.min_occurrences,
        scope=args.scope,
        prefix=args.prefix,
        preview_only=bool(args.dry_run),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for css-to-vars."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose), quiet=bool(args.json), log_file=args.log_file
        )
    except OSError as exc:
        parser.exit(2, f"{TOOL_NAME}: cannot open log file {args.log_file}: {exc}\n")

    try:
        config = _load_effective_config(args)
    except ConfigError as exc:
        parser.exit(2, f"{TOOL_NAME}: {exc}\n")

    result = Orchestrator(config).run(args.paths)

    if args.json:
        print(render_json(result))
    else:
        print(render_text(result), end="")

    if result.status in _FAILED_STATUSES or result.failed_writes:
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
