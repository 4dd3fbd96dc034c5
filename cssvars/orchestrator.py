"""Pipeline orchestration for a css-to-vars run."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import ExtractionConfig
from .extract import aggregate
from .file_scanner import CssFileScanner, read_sources
from .logging import get_logger
from .models import FileOutcome, RunResult, RunStatus, SourceFile
from .naming import assign_names, select_repeated
from .postproc.rewriter import LiteralRewriter, Writer
from .postproc.root_block import render_root_block

logger = get_logger("orchestrator")


class Orchestrator:
    """Runs discovery, extraction, naming and rewriting for one invocation.

    Every stylesheet is classified and aggregated before naming starts, since
    ordinals depend on the selection across all files.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        scanner: CssFileScanner | None = None,
        writer: Writer | None = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.scanner = scanner or CssFileScanner(self.config.exclude_paths)
        self._writer = writer

    def run(self, paths: Sequence[str]) -> RunResult:
        discovery = self.scanner.discover(paths or ["."])
        if not discovery.files:
            logger.debug("No CSS files found in the specified paths")
            return RunResult(
                status=RunStatus.NO_FILES,
                missing_paths=list(discovery.missing),
                preview=self.config.preview_only,
                min_occurrences=self.config.min_occurrences,
            )

        sources, failures = read_sources(discovery.files)
        result = self.run_sources(sources)
        result.files = [str(path) for path in discovery.files]
        result.missing_paths = list(discovery.missing)
        result.read_failures = failures
        if not sources and failures:
            logger.debug("None of the %d discovered file(s) could be read", len(failures))
            result.status = RunStatus.NO_READABLE_FILES
        return result

    def run_sources(self, sources: Iterable[SourceFile]) -> RunResult:
        """Run the pipeline over already-read stylesheets."""
        config = self.config
        sources = list(sources)
        result = RunResult(
            status=RunStatus.SUCCESS,
            files=[source.path for source in sources],
            preview=config.preview_only,
            min_occurrences=config.min_occurrences,
        )
        if not sources:
            result.status = RunStatus.NO_FILES
            return result

        values = aggregate(sources, config.scope.categories())
        selected = select_repeated(values, config.min_occurrences)
        logger.debug(
            "Selected %d of %d distinct value(s) at min=%d",
            len(selected),
            len(values),
            config.min_occurrences,
        )
        if not selected:
            result.status = RunStatus.NO_REPEATED_VALUES
            return result

        naming = assign_names(selected.values(), config.prefix)
        result.named = naming.named
        result.root_block = render_root_block(naming.by_name, config.prefix)

        rewriter = LiteralRewriter(naming.by_value, result.root_block, writer=self._writer)
        result.outcomes = self._rewrite(rewriter, sources)
        return result

    def _rewrite(self, rewriter: LiteralRewriter, sources: List[SourceFile]) -> List[FileOutcome]:
        outcomes: List[FileOutcome] = []
        for source in sources:
            outcomes.append(rewriter.apply(source, preview=self.config.preview_only))
        if self.config.preview_only:
            logger.debug("Preview only; no files were written")
        return outcomes


__all__ = ["Orchestrator"]
