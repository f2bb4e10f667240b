"""
Error-tolerant parser built on tree-sitter grammars.

Handles JavaScript, TypeScript and TSX. Requires the optional
``tree-sitter-languages`` package.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

try:
    from tree_sitter_languages import get_parser as get_grammar_parser
except Exception:  # pragma: no cover - optional dependency handling
    get_grammar_parser = None

from complexityscanner.analysis.syntax import TREE_SITTER_JAVASCRIPT, SyntaxSpec
from complexityscanner.core.ast import AstNode, SourceSpan
from complexityscanner.core.errors import ParseError, ParserUnavailableError
from complexityscanner.parsers import register_parser
from complexityscanner.parsers.base import BaseParser, ParseOptions

logger = logging.getLogger(__name__)


GRAMMARS_BY_EXTENSION = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

STRING_TYPES = {"string"}


def grammar_for(filename: Optional[str]) -> str:
    if not filename:
        return "javascript"
    return GRAMMARS_BY_EXTENSION.get(Path(filename).suffix.lower(), "javascript")


def _field_name(cursor) -> Optional[str]:
    # newer bindings expose a property, older ones a method
    if hasattr(cursor, "field_name"):
        return cursor.field_name
    return cursor.current_field_name()


def _text(source: bytes, node) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _add_field(fields: Dict[str, Any], name: str, value: Any) -> None:
    if name not in fields:
        fields[name] = value
    elif isinstance(fields[name], list):
        fields[name].append(value)
    else:
        fields[name] = [fields[name], value]


def convert_tree(node, source: bytes) -> AstNode:
    """Copy a tree-sitter node (and its named descendants) into an AstNode."""
    fields: Dict[str, Any] = {}
    children: List[AstNode] = []
    cursor = node.walk()
    if cursor.goto_first_child():
        while True:
            child = cursor.node
            name = _field_name(cursor)
            if child.is_named:
                converted = convert_tree(child, source)
                if name:
                    _add_field(fields, name, converted)
                else:
                    children.append(converted)
            elif name:
                # anonymous tokens such as operators
                fields[name] = child.type
            if not cursor.goto_next_sibling():
                break
    if children:
        fields["children"] = children
    if node.type in STRING_TYPES:
        fields["value"] = _text(source, node)[1:-1]
    elif node.named_child_count == 0:
        fields["text"] = _text(source, node)
    span = SourceSpan(
        start_line=node.start_point[0] + 1,
        start_column=node.start_point[1],
        end_line=node.end_point[0] + 1,
        end_column=node.end_point[1],
    )
    return AstNode(kind=node.type, fields=fields, span=span)


def first_error_line(root) -> int:
    stack = [root]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current.start_point[0] + 1
        stack.extend(reversed(current.children))
    return 0


@register_parser("tree-sitter")
class TreeSitterParser(BaseParser):
    """
    Parser producing trees in tree-sitter's node vocabulary.

    Tree-sitter always yields a tree; in strict (non-tolerant) mode a tree
    with error nodes is reported as a parse error.
    """

    name = "tree-sitter"

    @property
    def syntax(self) -> SyntaxSpec:
        return TREE_SITTER_JAVASCRIPT

    def available(self) -> bool:
        if get_grammar_parser is None:
            return False
        try:
            get_grammar_parser("javascript")
        except Exception as exc:
            logger.debug("tree-sitter grammars unusable: %s", exc)
            return False
        return True

    def parse(self, source: str, options: ParseOptions) -> AstNode:
        if get_grammar_parser is None:
            raise ParserUnavailableError(
                "tree-sitter-languages is not installed. "
                "Install with: pip install complexityscanner[treesitter]"
            )
        parser = get_grammar_parser(grammar_for(options.filename))
        data = source.encode("utf-8")
        tree = parser.parse(data)
        root = tree.root_node
        if root.has_error and not options.tolerant:
            line = first_error_line(root)
            raise ParseError(f"Line {line}: Syntax error", line=line)
        return convert_tree(root, data)
