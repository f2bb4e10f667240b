"""
Main analysis engine.

This module orchestrates an analysis run: every file is parsed and
traversed independently, then the per-file results are merged into
the dependency graph and the summary statistics.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Iterable, List, Optional, Sequence, Tuple, Union

from complexityscanner.analysis.aggregate import sort_functions, summarize
from complexityscanner.analysis.dependencies import extract_dependencies
from complexityscanner.analysis.functions import extract_functions
from complexityscanner.analysis.resolver import build_dependency_graph
from complexityscanner.config import AnalysisConfig, load_config
from complexityscanner.core.ast import AstNode
from complexityscanner.core.errors import AnalysisFailure, ParseError
from complexityscanner.core.models import (
    AnalysisReport,
    FunctionRecord,
    ParsedFile,
    SourceFile,
)
from complexityscanner.parsers import BaseParser, get_parser

logger = logging.getLogger(__name__)

FileInput = Union[SourceFile, Tuple[str, str]]


@dataclass
class FileAnalysis:
    """Everything derived from a single file before the batch is merged."""
    parsed: ParsedFile
    functions: List[FunctionRecord] = field(default_factory=list)
    specifiers: List[str] = field(default_factory=list)


def as_source_file(item: FileInput) -> SourceFile:
    if isinstance(item, SourceFile):
        return item
    name, text = item
    return SourceFile(name=name, text=text)


async def _settle(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _run_awaitable(awaitable: Awaitable[Any]) -> Any:
    """Drive a parser coroutine to completion from synchronous code."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(_settle(awaitable))
    # this thread already runs a loop; give the coroutine a fresh one
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, _settle(awaitable)).result()


class AnalysisEngine:
    """
    Runs the analysis pipeline over a batch of source files.

    The engine holds configuration only; every call builds its report
    from scratch, so one engine can serve concurrent callers.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[BaseParser] = None,
    ):
        self.config = config or AnalysisConfig()
        self._parser = parser

    def _resolve_parser(self) -> BaseParser:
        parser = self._parser or get_parser(self.config.parser)
        if not parser.available():
            raise AnalysisFailure(f"Parser '{parser.name}' is not available")
        return parser

    def _options_for(self, source: SourceFile):
        return replace(self.config.parse_options(), filename=source.name)

    def analyze(self, files: Iterable[FileInput]) -> AnalysisReport:
        """
        Analyze a batch of files.

        Never raises: parse errors become per-file diagnostics, anything
        that breaks the whole batch becomes a failed report.
        """
        try:
            sources = [as_source_file(f) for f in files]
            parser = self._resolve_parser()
            logger.debug("Analyzing %d file(s) with %s", len(sources), parser.name)

            if len(sources) > 1 and self.config.max_workers > 1:
                with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                    # map() keeps input order regardless of completion order
                    results = list(executor.map(lambda s: self._analyze_file(parser, s), sources))
            else:
                results = [self._analyze_file(parser, s) for s in sources]

            return self._build_report(results)
        except AnalysisFailure as exc:
            logger.error("Analysis failed: %s", exc)
            return AnalysisReport.failed(f"Analysis failed: {exc}")
        except Exception as exc:
            logger.exception("Analysis failed")
            return AnalysisReport.failed(f"Analysis failed: {exc}")

    async def analyze_async(self, files: Iterable[FileInput]) -> AnalysisReport:
        """Like :meth:`analyze`, awaiting coroutine parsers on the running loop."""
        try:
            sources = [as_source_file(f) for f in files]
            parser = self._resolve_parser()
            results = await asyncio.gather(
                *(self._analyze_file_async(parser, s) for s in sources)
            )
            return self._build_report(list(results))
        except AnalysisFailure as exc:
            logger.error("Analysis failed: %s", exc)
            return AnalysisReport.failed(f"Analysis failed: {exc}")
        except Exception as exc:
            logger.exception("Analysis failed")
            return AnalysisReport.failed(f"Analysis failed: {exc}")

    def analyze_source(self, text: str, filename: str = "input.js") -> AnalysisReport:
        """Analyze a single piece of source text."""
        return self.analyze([SourceFile(name=filename, text=text)])

    def _analyze_file(self, parser: BaseParser, source: SourceFile) -> FileAnalysis:
        try:
            result = parser.parse(source.text, self._options_for(source))
            if inspect.isawaitable(result):
                result = _run_awaitable(result)
        except AnalysisFailure:
            raise
        except Exception as exc:
            return self._failed_file(source, exc)
        return self._traverse(parser, source, result)

    async def _analyze_file_async(self, parser: BaseParser, source: SourceFile) -> FileAnalysis:
        options = self._options_for(source)
        try:
            if inspect.iscoroutinefunction(parser.parse):
                result = await parser.parse(source.text, options)
            else:
                result = await asyncio.to_thread(parser.parse, source.text, options)
                if inspect.isawaitable(result):
                    result = await result
        except AnalysisFailure:
            raise
        except Exception as exc:
            return self._failed_file(source, exc)
        return self._traverse(parser, source, result)

    def _failed_file(self, source: SourceFile, exc: Exception) -> FileAnalysis:
        message = exc.message if isinstance(exc, ParseError) else str(exc)
        logger.debug("Could not parse %s: %s", source.name, message)
        return FileAnalysis(parsed=ParsedFile(source=source, error=message or type(exc).__name__))

    def _traverse(self, parser: BaseParser, source: SourceFile, tree: AstNode) -> FileAnalysis:
        syntax = parser.syntax
        return FileAnalysis(
            parsed=ParsedFile(source=source, ast=tree),
            functions=extract_functions(tree, source.name, syntax, self.config.thresholds),
            specifiers=extract_dependencies(tree, syntax),
        )

    def _build_report(self, results: Sequence[FileAnalysis]) -> AnalysisReport:
        parsed = [r.parsed for r in results]
        diagnostics = [f"{p.name}: {p.error}" for p in parsed if p.error is not None]

        functions: List[FunctionRecord] = []
        for result in results:
            functions.extend(result.functions)
        functions = sort_functions(functions)

        graph = build_dependency_graph(
            [p.source for p in parsed],
            [(r.parsed.name, r.specifiers) for r in results if r.parsed.ok],
            default_extension=self.config.resolver.default_extension,
            index_name=self.config.resolver.index_name,
        )

        stats = summarize(functions, diagnostics, len(parsed), self.config.score)
        return AnalysisReport(
            parsed=parsed,
            functions=functions,
            edges=graph.edges,
            external_modules=graph.external_modules,
            stats=stats,
            diagnostics=diagnostics,
        )


def create_engine(config_path: Optional[str] = None, **kwargs) -> AnalysisEngine:
    """
    Create an analysis engine with configuration.

    Args:
        config_path: Optional path to a configuration file.
        **kwargs: Additional configuration options.

    Returns:
        Configured AnalysisEngine instance.
    """
    data = {}

    if config_path:
        data = load_config(config_path)

    data.update(kwargs)

    return AnalysisEngine(AnalysisConfig.from_dict(data))
