"""
Cyclomatic complexity and nesting depth of a function subtree.

Both passes walk the entire subtree rooted at the function node, so the
decision points of a nested function also count toward every enclosing
function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from complexityscanner.analysis.syntax import SyntaxSpec
from complexityscanner.core.ast import AstNode, walk


@dataclass(frozen=True)
class NoteThresholds:
    """Limits that attach advisory notes to a function."""
    high_complexity: int = 10
    medium_complexity: int = 5
    long_function: int = 60
    deep_nesting: int = 4


def cyclomatic_complexity(node: AstNode, syntax: SyntaxSpec) -> int:
    complexity = 1

    def visit(current: AstNode, _parent: Optional[AstNode]) -> None:
        nonlocal complexity
        if current.kind in syntax.switch_case_types:
            # default branch has no test and adds nothing
            if current.get(syntax.switch_test_field) is not None:
                complexity += 1
        elif current.kind in syntax.decision_types:
            complexity += 1
        if syntax.is_logical(current):
            complexity += 1

    walk(node, visit)
    return complexity


def max_nesting(node: AstNode, syntax: SyntaxSpec) -> int:
    """
    High-water mark of control-block nesting.

    The depth counter is bumped on entry to every block statement and is
    never decremented, so sibling blocks accumulate.
    """
    depth = 0
    max_depth = 0

    def visit(current: AstNode, _parent: Optional[AstNode]) -> None:
        nonlocal depth, max_depth
        if current.kind in syntax.nesting_types:
            depth += 1
            max_depth = max(max_depth, depth)

    walk(node, visit)
    return max_depth


def function_notes(
    complexity: int,
    line_count: int,
    nesting: int,
    thresholds: NoteThresholds,
) -> List[str]:
    notes = []
    if complexity >= thresholds.high_complexity:
        notes.append("High CC")
    elif complexity >= thresholds.medium_complexity:
        notes.append("Medium CC")
    if line_count >= thresholds.long_function:
        notes.append("Long")
    if nesting >= thresholds.deep_nesting:
        notes.append("Deep Nesting")
    return notes
