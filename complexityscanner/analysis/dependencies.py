"""
Raw module specifiers referenced by a file.

Recognizes static ``import ... from '<spec>'`` declarations and
``require('<spec>')`` calls with a string literal argument.
"""

from __future__ import annotations

from typing import List, Optional

from complexityscanner.analysis.syntax import SyntaxSpec
from complexityscanner.core.ast import AstNode, walk


def _loader_argument(node: AstNode, syntax: SyntaxSpec) -> Optional[str]:
    callee = node.get(syntax.callee_field)
    if syntax.identifier_name(callee) != syntax.loader_name:
        return None
    arguments = syntax.sequence(node, syntax.arguments_field)
    if not arguments:
        return None
    return syntax.string_value(arguments[0])


def extract_dependencies(root: AstNode, syntax: SyntaxSpec) -> List[str]:
    """Specifiers in traversal order; duplicates are kept."""
    specifiers: List[str] = []

    def visit(node: AstNode, _parent: Optional[AstNode]) -> None:
        if node.kind in syntax.import_types:
            value = syntax.string_value(node.get(syntax.import_source_field))
        elif node.kind in syntax.call_types:
            value = _loader_argument(node, syntax)
        else:
            return
        if value:
            specifiers.append(value)

    walk(root, visit)
    return specifiers
