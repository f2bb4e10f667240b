"""Analysis passes over parsed syntax trees."""

from complexityscanner.analysis.syntax import ESTREE, TREE_SITTER_JAVASCRIPT, SyntaxSpec
from complexityscanner.analysis.functions import ANONYMOUS, extract_functions, function_name
from complexityscanner.analysis.complexity import (
    NoteThresholds,
    cyclomatic_complexity,
    function_notes,
    max_nesting,
)
from complexityscanner.analysis.dependencies import extract_dependencies
from complexityscanner.analysis.resolver import (
    DependencyGraph,
    ModuleResolver,
    build_dependency_graph,
    normalize_module_name,
)
from complexityscanner.analysis.aggregate import (
    ScoreWeights,
    maintainability_score,
    sort_functions,
    summarize,
)

__all__ = [
    "ESTREE",
    "TREE_SITTER_JAVASCRIPT",
    "SyntaxSpec",
    "ANONYMOUS",
    "extract_functions",
    "function_name",
    "NoteThresholds",
    "cyclomatic_complexity",
    "function_notes",
    "max_nesting",
    "extract_dependencies",
    "DependencyGraph",
    "ModuleResolver",
    "build_dependency_graph",
    "normalize_module_name",
    "ScoreWeights",
    "maintainability_score",
    "sort_functions",
    "summarize",
]
