"""
Discovery and naming of function-like nodes.
"""

from __future__ import annotations

from typing import List, Optional

from complexityscanner.analysis.complexity import (
    NoteThresholds,
    cyclomatic_complexity,
    function_notes,
    max_nesting,
)
from complexityscanner.analysis.syntax import SyntaxSpec
from complexityscanner.core.ast import AstNode, walk
from complexityscanner.core.models import FunctionRecord


ANONYMOUS = "(anonymous)"


def function_name(node: AstNode, parent: Optional[AstNode], syntax: SyntaxSpec) -> str:
    """
    Best-effort name: own identifier, then the variable it is bound to,
    then the property key it is defined under.
    """
    if node.kind in syntax.method_types:
        if parent is None or parent.kind not in syntax.method_owner_types:
            return ANONYMOUS
        key = node.get(syntax.function_name_field)
        return syntax.identifier_name(key) or syntax.literal_value(key) or ANONYMOUS
    own = syntax.identifier_name(node.get(syntax.function_name_field))
    if own:
        return own
    if parent is None:
        return ANONYMOUS
    if parent.kind in syntax.binding_types:
        bound = syntax.identifier_name(parent.get(syntax.binding_name_field))
        if bound:
            return bound
    if parent.kind in syntax.property_types:
        key = parent.get(syntax.property_key_field)
        name = syntax.identifier_name(key) or syntax.literal_value(key)
        if name:
            return name
    return ANONYMOUS


def parameter_count(node: AstNode, syntax: SyntaxSpec) -> int:
    for field_name in syntax.parameter_fields:
        if node.get(field_name) is not None:
            return len(syntax.sequence(node, field_name))
    return 0


def line_count(node: AstNode) -> int:
    if node.span is None:
        return 0
    return node.span.line_count


def extract_functions(
    root: AstNode,
    file_name: str,
    syntax: SyntaxSpec,
    thresholds: Optional[NoteThresholds] = None,
) -> List[FunctionRecord]:
    """Build a :class:`FunctionRecord` for every function node under ``root``."""
    thresholds = thresholds or NoteThresholds()
    records: List[FunctionRecord] = []

    def visit(node: AstNode, parent: Optional[AstNode]) -> None:
        if node.kind not in syntax.function_types:
            return
        loc = line_count(node)
        cc = cyclomatic_complexity(node, syntax)
        nesting = max_nesting(node, syntax)
        records.append(
            FunctionRecord(
                file=file_name,
                name=function_name(node, parent, syntax),
                line_count=loc,
                parameter_count=parameter_count(node, syntax),
                complexity=cc,
                max_nesting=nesting,
                notes=tuple(function_notes(cc, loc, nesting, thresholds)),
            )
        )

    walk(root, visit)
    return records
