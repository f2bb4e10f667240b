"""
Node-kind schemas understood by the analysis passes.

Each parser backend produces trees in its own vocabulary; a
:class:`SyntaxSpec` tells the passes which kinds and fields to look at.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from complexityscanner.core.ast import AstNode


@dataclass(frozen=True)
class SyntaxSpec:
    name: str
    function_types: set[str]
    function_name_field: str
    parameter_fields: tuple[str, ...]
    binding_types: set[str]
    binding_name_field: str
    property_types: set[str]
    property_key_field: str
    identifier_types: set[str]
    identifier_name_field: str
    literal_types: set[str]
    decision_types: set[str]
    switch_case_types: set[str]
    switch_test_field: str
    logical_types: set[str]
    logical_operators: set[str]
    nesting_types: set[str]
    import_types: set[str]
    import_source_field: str
    call_types: set[str]
    callee_field: str
    arguments_field: str
    sequence_types: set[str]
    loader_name: str = "require"
    # methods are named by their key only inside object literals
    method_types: set[str] = field(default_factory=set)
    method_owner_types: set[str] = field(default_factory=set)

    def identifier_name(self, node: Any) -> Optional[str]:
        if not isinstance(node, AstNode) or node.kind not in self.identifier_types:
            return None
        name = node.get(self.identifier_name_field)
        return name if isinstance(name, str) and name else None

    def literal_value(self, node: Any) -> Optional[str]:
        """Stringified value of a literal node, ``None`` for anything else."""
        if not isinstance(node, AstNode) or node.kind not in self.literal_types:
            return None
        value = node.get("value")
        if value is None:
            value = node.get("text")
        if value is None:
            return None
        return _stringify(value)

    def string_value(self, node: Any) -> Optional[str]:
        """Value of a string literal node, ``None`` for anything else."""
        if not isinstance(node, AstNode) or node.kind not in self.literal_types:
            return None
        value = node.get("value")
        return value if isinstance(value, str) else None

    def sequence(self, node: AstNode, field_name: str) -> List[AstNode]:
        """Children held by a field, unwrapping list-like wrapper nodes."""
        value = node.get(field_name)
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if isinstance(item, AstNode)]
        if isinstance(value, AstNode):
            if value.kind in self.sequence_types:
                return [item for item in value.get("children", []) if isinstance(item, AstNode)]
            return [value]
        return []

    def is_logical(self, node: AstNode) -> bool:
        return node.kind in self.logical_types and node.get("operator") in self.logical_operators


def _stringify(value: Any) -> str:
    # Mirror how JavaScript prints literal property keys.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


ESTREE = SyntaxSpec(
    name="estree",
    function_types={"FunctionDeclaration", "FunctionExpression", "ArrowFunctionExpression"},
    function_name_field="id",
    parameter_fields=("params",),
    binding_types={"VariableDeclarator"},
    binding_name_field="id",
    property_types={"Property"},
    property_key_field="key",
    identifier_types={"Identifier"},
    identifier_name_field="name",
    literal_types={"Literal"},
    decision_types={
        "IfStatement",
        "ForStatement",
        "ForInStatement",
        "ForOfStatement",
        "WhileStatement",
        "DoWhileStatement",
        "CatchClause",
        "ConditionalExpression",
    },
    switch_case_types={"SwitchCase"},
    switch_test_field="test",
    logical_types={"LogicalExpression"},
    logical_operators={"&&", "||"},
    nesting_types={
        "IfStatement",
        "ForStatement",
        "ForInStatement",
        "ForOfStatement",
        "WhileStatement",
        "DoWhileStatement",
        "SwitchStatement",
        "TryStatement",
    },
    import_types={"ImportDeclaration"},
    import_source_field="source",
    call_types={"CallExpression"},
    callee_field="callee",
    arguments_field="arguments",
    sequence_types=set(),
)


# Trees converted from tree-sitter keep leaf text under "text", string
# literal contents under "value", and unnamed children under "children".
TREE_SITTER_JAVASCRIPT = SyntaxSpec(
    name="tree-sitter-javascript",
    function_types={
        "function_declaration",
        "generator_function_declaration",
        "function",
        "function_expression",
        "generator_function",
        "arrow_function",
        "method_definition",
    },
    function_name_field="name",
    parameter_fields=("parameters", "parameter"),
    binding_types={"variable_declarator"},
    binding_name_field="name",
    property_types={"pair"},
    property_key_field="key",
    identifier_types={"identifier", "property_identifier"},
    identifier_name_field="text",
    literal_types={"string", "number"},
    decision_types={
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "catch_clause",
        "ternary_expression",
    },
    switch_case_types={"switch_case"},
    switch_test_field="value",
    logical_types={"binary_expression"},
    logical_operators={"&&", "||"},
    nesting_types={
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "switch_statement",
        "try_statement",
    },
    import_types={"import_statement"},
    import_source_field="source",
    call_types={"call_expression"},
    callee_field="function",
    arguments_field="arguments",
    sequence_types={"arguments", "formal_parameters"},
    method_types={"method_definition"},
    method_owner_types={"object"},
)
