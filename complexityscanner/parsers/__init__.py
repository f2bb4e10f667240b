"""
Parser backends that turn source text into syntax trees.
"""

from typing import Dict, List, Type

from complexityscanner.core.errors import ParserUnavailableError
from complexityscanner.parsers.base import BaseParser, ParseOptions

# Registry of available parsers
_parsers: Dict[str, Type[BaseParser]] = {}

ALIASES = {
    "estree": "esprima",
    "treesitter": "tree-sitter",
    "tree_sitter": "tree-sitter",
    "ts": "tree-sitter",
}


def register_parser(name: str):
    """Decorator to register a parser backend under a name."""
    def decorator(cls: Type[BaseParser]) -> Type[BaseParser]:
        _parsers[name.lower()] = cls
        return cls
    return decorator


def get_parser(name: str) -> BaseParser:
    """Get a parser instance by name or alias."""
    name = name.lower()
    name = ALIASES.get(name, name)
    if name not in _parsers:
        raise ParserUnavailableError(f"Unknown parser: {name}")
    return _parsers[name]()


def list_parsers() -> List[str]:
    """Names of all registered parsers."""
    return sorted(_parsers)


# Import parsers to register them
from complexityscanner.parsers.esprima_parser import EsprimaParser  # noqa: E402
from complexityscanner.parsers.treesitter_parser import TreeSitterParser  # noqa: E402

__all__ = [
    "BaseParser",
    "ParseOptions",
    "get_parser",
    "register_parser",
    "list_parsers",
    "EsprimaParser",
    "TreeSitterParser",
]
