"""Core data structures, tree traversal and the analysis engine."""

from complexityscanner.core.ast import AstNode, SourceSpan, iter_nodes, walk
from complexityscanner.core.errors import (
    AnalysisFailure,
    ComplexityScannerError,
    ConfigError,
    ParseError,
    ParserUnavailableError,
)
from complexityscanner.core.models import (
    AnalysisReport,
    DependencyEdge,
    FunctionRecord,
    ParsedFile,
    SourceFile,
    Stats,
)
from complexityscanner.core.engine import AnalysisEngine

__all__ = [
    "AstNode",
    "SourceSpan",
    "iter_nodes",
    "walk",
    "AnalysisFailure",
    "ComplexityScannerError",
    "ConfigError",
    "ParseError",
    "ParserUnavailableError",
    "AnalysisReport",
    "DependencyEdge",
    "FunctionRecord",
    "ParsedFile",
    "SourceFile",
    "Stats",
    "AnalysisEngine",
]
