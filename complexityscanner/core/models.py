"""
Data structures produced by an analysis run.

This module defines the input file type, per-file parse results, the
per-function metrics, dependency edges and the final report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from complexityscanner.core.ast import AstNode


@dataclass(frozen=True)
class SourceFile:
    """A named chunk of source text supplied by the caller."""
    name: str
    text: str
    id: Optional[str] = None
    tag: Any = None

    @property
    def file_id(self) -> str:
        return self.id if self.id is not None else self.name


@dataclass(frozen=True)
class ParsedFile:
    """Outcome of parsing one file: a tree or an error message, never both."""
    source: SourceFile
    ast: Optional[AstNode] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.ast is None) == (self.error is None):
            raise ValueError("ParsedFile needs exactly one of ast or error")

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def ok(self) -> bool:
        return self.ast is not None

    def to_dict(self, include_ast: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.source.file_id,
            "name": self.source.name,
            "error": self.error,
        }
        if include_ast:
            data["ast"] = self.ast.to_dict() if self.ast is not None else None
        return data


@dataclass(frozen=True)
class FunctionRecord:
    """Metrics for one function-like node."""
    file: str
    name: str
    line_count: int
    parameter_count: int
    complexity: int
    max_nesting: int
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "name": self.name,
            "loc": self.line_count,
            "params": self.parameter_count,
            "cc": self.complexity,
            "nesting": self.max_nesting,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class DependencyEdge:
    """A direct reference from one file to a file key or an external module."""
    source: str
    target: str

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target}


@dataclass(frozen=True)
class ComplexityDistribution:
    simple: int = 0
    medium: int = 0
    complex: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"simple": self.simple, "medium": self.medium, "complex": self.complex}


@dataclass(frozen=True)
class Stats:
    files: int = 0
    total_functions: int = 0
    max_complexity: int = 0
    average_complexity: float = 0.0
    long_function_percentage: float = 0.0
    score: int = 0
    total_complexity: int = 0
    total_lines: int = 0
    average_parameters: float = 0.0
    distribution: ComplexityDistribution = field(default_factory=ComplexityDistribution)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": self.files,
            "total_funcs": self.total_functions,
            "max_cc": self.max_complexity,
            "avg_cc": self.average_complexity,
            "long_function_pct": self.long_function_percentage,
            "score": self.score,
            "total_cc": self.total_complexity,
            "total_loc": self.total_lines,
            "avg_params": self.average_parameters,
            "distribution": self.distribution.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisReport:
    """
    Everything one analysis run produced.

    Built fresh by every call; nothing here is shared between runs.
    """
    parsed: List[ParsedFile] = field(default_factory=list)
    functions: List[FunctionRecord] = field(default_factory=list)
    edges: List[DependencyEdge] = field(default_factory=list)
    external_modules: List[str] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)
    diagnostics: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, message: str) -> "AnalysisReport":
        """An empty report carrying a single batch-level diagnostic."""
        return cls(diagnostics=[message])

    @property
    def succeeded(self) -> bool:
        return bool(self.parsed) or not self.diagnostics

    def graph_nodes(self) -> List[Dict[str, Any]]:
        """Every node that appears on an edge, flagged project file or external."""
        external = set(self.external_modules)
        seen: Dict[str, None] = {}
        for edge in self.edges:
            seen.setdefault(edge.source, None)
            seen.setdefault(edge.target, None)
        return [{"name": name, "external": name in external} for name in seen]

    def to_dict(self, include_ast: bool = False) -> Dict[str, Any]:
        return {
            "parsed": [p.to_dict(include_ast=include_ast) for p in self.parsed],
            "functions": [f.to_dict() for f in self.functions],
            "edges": [e.to_dict() for e in self.edges],
            "ext_modules": list(self.external_modules),
            "graph_nodes": self.graph_nodes(),
            "stats": self.stats.to_dict(),
            "errors": list(self.diagnostics),
        }
