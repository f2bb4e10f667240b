"""
Tests for the syntax tree model and the tree walker.
"""

import pytest

from complexityscanner.core.ast import AstNode, SourceSpan, iter_nodes, walk


def _sample_tree():
    return AstNode(
        "Program",
        {
            "body": [
                AstNode(
                    "ExpressionStatement",
                    {"expression": AstNode("Identifier", {"name": "a"})},
                ),
                AstNode("EmptyStatement"),
            ],
            "sourceType": "module",
        },
    )


class TestWalker:
    """Tests for depth-first traversal."""

    def test_visits_every_node_once_with_parent(self):
        """Each node is visited exactly once and receives its parent."""
        visited = []
        walk(_sample_tree(), lambda node, parent: visited.append(
            (node.kind, parent.kind if parent else None)
        ))

        assert visited == [
            ("Program", None),
            ("ExpressionStatement", "Program"),
            ("Identifier", "ExpressionStatement"),
            ("EmptyStatement", "Program"),
        ]

    def test_scalars_are_not_visited(self):
        """Strings, numbers and None terminate recursion."""
        node = AstNode("Literal", {"value": "x", "raw": "'x'", "regex": None, "n": 3})
        visited = [n for n, _ in iter_nodes(node)]
        assert visited == [node]

    def test_parent_seen_before_children(self, parse):
        """A parent is always visited before any of its children."""
        tree = parse("function f(a) { if (a) { return [a, a]; } }")
        seen = set()

        def visit(node, parent):
            if parent is not None:
                assert id(parent) in seen
            seen.add(id(node))

        walk(tree, visit)
        assert len(seen) > 5

    def test_walk_counts_identifiers(self, parse):
        """Walking a parsed tree reaches nested identifiers."""
        tree = parse("const total = price * qty + tax;")
        names = []
        walk(tree, lambda n, p: names.append(n.get("name")) if n.kind == "Identifier" else None)
        assert names == ["total", "price", "qty", "tax"]


class TestAstNode:
    """Tests for AstNode conversion."""

    def test_from_dict_reads_location(self):
        """ESTree loc metadata becomes a SourceSpan."""
        node = AstNode.from_dict({
            "type": "Identifier",
            "name": "x",
            "loc": {"start": {"line": 2, "column": 4}, "end": {"line": 2, "column": 5}},
            "range": [10, 11],
        })

        assert node.kind == "Identifier"
        assert node.get("name") == "x"
        assert node.span == SourceSpan(2, 4, 2, 5)
        assert "range" not in node.fields

    def test_untyped_mappings_stay_scalar(self):
        """Dictionaries without a type (regex metadata) are not nodes."""
        node = AstNode.from_dict({
            "type": "Literal",
            "regex": {"pattern": "a+", "flags": "g"},
        })
        assert node.get("regex") == {"pattern": "a+", "flags": "g"}
        assert list(node.child_nodes()) == []

    def test_to_dict_round_trip_shape(self):
        """to_dict restores the ESTree layout."""
        data = _sample_tree().to_dict()
        assert data["type"] == "Program"
        assert data["body"][0]["expression"] == {"type": "Identifier", "name": "a"}
        assert data["sourceType"] == "module"

    def test_span_rejects_end_before_start(self):
        """Location metadata must satisfy start <= end."""
        with pytest.raises(ValueError):
            SourceSpan(start_line=5, start_column=0, end_line=4, end_column=0)

    def test_span_line_count(self):
        """Line count is inclusive of both ends."""
        assert SourceSpan(3, 0, 7, 1).line_count == 5
