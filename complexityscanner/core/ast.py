"""
Syntax tree representation and traversal.

Every analysis pass is a visitor over :func:`walk`; nodes never hold a
reference to their parent, the walker hands it to the visitor instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SourceSpan:
    """Start/end position of a node (lines are 1-based)."""
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def __post_init__(self):
        if (self.end_line, self.end_column) < (self.start_line, self.start_column):
            raise ValueError(
                f"Span ends before it starts: {self.start_line}:{self.start_column}"
                f"-{self.end_line}:{self.end_column}"
            )

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": {"line": self.start_line, "column": self.start_column},
            "end": {"line": self.end_line, "column": self.end_column},
        }

    @classmethod
    def from_loc(cls, loc: Mapping[str, Any]) -> Optional["SourceSpan"]:
        start = loc.get("start") or {}
        end = loc.get("end") or {}
        if "line" not in start or "line" not in end:
            return None
        return cls(
            start_line=start["line"],
            start_column=start.get("column", 0),
            end_line=end["line"],
            end_column=end.get("column", 0),
        )


@dataclass
class AstNode:
    """
    A node of a parsed file.

    ``kind`` is the discriminant (``"IfStatement"``, ``"if_statement"``...).
    ``fields`` keeps the declaring order of the node; values are child nodes,
    lists of children, or plain scalars.
    """
    kind: str
    fields: Dict[str, Any] = field(default_factory=dict)
    span: Optional[SourceSpan] = None

    def __repr__(self) -> str:
        line = self.span.start_line if self.span else None
        return f"AstNode(kind={self.kind!r}, line={line})"

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def child_nodes(self) -> Iterator["AstNode"]:
        """Direct children in field order, arrays in array order."""
        for value in self.fields.values():
            if isinstance(value, AstNode):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, AstNode):
                        yield item

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind}
        for name, value in self.fields.items():
            data[name] = _export(value)
        if self.span is not None:
            data["loc"] = self.span.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AstNode":
        """Build a tree from ESTree-shaped dictionaries."""
        fields: Dict[str, Any] = {}
        span = None
        for name, value in data.items():
            if name == "type":
                continue
            if name == "loc":
                if isinstance(value, Mapping):
                    span = SourceSpan.from_loc(value)
                continue
            if name == "range":
                continue
            fields[name] = _import(value)
        return cls(kind=str(data["type"]), fields=fields, span=span)


def _import(value: Any) -> Any:
    if isinstance(value, Mapping) and "type" in value:
        return AstNode.from_dict(value)
    if isinstance(value, (list, tuple)):
        return [_import(item) for item in value]
    return value


def _export(value: Any) -> Any:
    if isinstance(value, AstNode):
        return value.to_dict()
    if isinstance(value, list):
        return [_export(item) for item in value]
    return value


Visitor = Callable[[AstNode, Optional[AstNode]], None]


def iter_nodes(root: AstNode) -> Iterator[Tuple[AstNode, Optional[AstNode]]]:
    """Yield ``(node, parent)`` pairs depth first, parents before children."""
    stack: List[Tuple[AstNode, Optional[AstNode]]] = [(root, None)]
    while stack:
        current, parent = stack.pop()
        yield current, parent
        stack.extend((child, current) for child in reversed(list(current.child_nodes())))


def walk(root: AstNode, visitor: Visitor) -> None:
    """Call ``visitor(node, parent)`` once for every node under ``root``."""
    for node, parent in iter_nodes(root):
        visitor(node, parent)
