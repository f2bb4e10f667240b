"""
Module specifier normalization and dependency graph construction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from complexityscanner.core.models import DependencyEdge, SourceFile


SOURCE_EXTENSION = re.compile(r"\.(m?js|cjs|jsx|ts|tsx)$", re.IGNORECASE)


def normalize_module_name(name: str) -> str:
    """Drop the source extension and a leading ``./``; use forward slashes."""
    name = SOURCE_EXTENSION.sub("", name)
    if name.startswith("./"):
        name = name[2:]
    return name.replace("\\", "/")


def is_local_specifier(specifier: str) -> bool:
    return specifier.startswith(".") or "/" in specifier or "\\" in specifier


@dataclass
class DependencyGraph:
    """Edges in discovery order plus the ordered set of external modules."""
    edges: List[DependencyEdge] = field(default_factory=list)
    # dict keys double as an insertion-ordered set
    external: Dict[str, None] = field(default_factory=dict)

    @property
    def external_modules(self) -> List[str]:
        return list(self.external)

    def add_edge(self, source: str, target: str, external: bool = False) -> None:
        self.edges.append(DependencyEdge(source=source, target=target))
        if external:
            self.external.setdefault(target, None)


class ModuleResolver:
    """
    Resolves local specifiers against the files of one batch.

    Lookups try the exact normalized name, then the name with the default
    extension, then ``<name>/index`` with the default extension.
    """

    def __init__(
        self,
        files: Iterable[SourceFile],
        default_extension: str = ".js",
        index_name: str = "index",
    ):
        self.default_extension = default_extension
        self.index_name = index_name
        self.modules: Dict[str, SourceFile] = {
            normalize_module_name(f.name): f for f in files
        }

    def candidates(self, specifier: str) -> List[str]:
        cleaned = normalize_module_name(specifier)
        return [
            cleaned,
            normalize_module_name(cleaned + self.default_extension),
            normalize_module_name(f"{cleaned}/{self.index_name}{self.default_extension}"),
        ]

    def resolve(self, specifier: str) -> Optional[str]:
        """Key of the file a local specifier points at, if it is in the batch."""
        for candidate in self.candidates(specifier):
            target = self.modules.get(candidate)
            if target is not None:
                return normalize_module_name(target.name)
        return None


def build_dependency_graph(
    files: Sequence[SourceFile],
    references: Iterable[Tuple[str, Sequence[str]]],
    default_extension: str = ".js",
    index_name: str = "index",
) -> DependencyGraph:
    """
    Turn per-file raw specifiers into edges.

    Unresolved local specifiers are treated exactly like external modules:
    the edge points at the normalized specifier and it joins the external set.
    """
    resolver = ModuleResolver(files, default_extension=default_extension, index_name=index_name)
    graph = DependencyGraph()
    for file_name, specifiers in references:
        source = normalize_module_name(file_name)
        for raw in specifiers:
            if not raw:
                continue
            target = resolver.resolve(raw) if is_local_specifier(raw) else None
            if target is not None:
                graph.add_edge(source, target)
            else:
                graph.add_edge(source, normalize_module_name(raw), external=True)
    return graph
