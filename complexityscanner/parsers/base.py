"""
Base parser class for the parser backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Optional, Union

from complexityscanner.analysis.syntax import SyntaxSpec
from complexityscanner.core.ast import AstNode


@dataclass(frozen=True)
class ParseOptions:
    """
    What the engine asks of a parser.

    ``module`` selects strict module semantics (top-level ``import`` and
    ``export`` are legal); otherwise the source is parsed as a script.
    """
    module: bool = True
    tolerant: bool = True
    locations: bool = True
    comments: bool = True
    filename: Optional[str] = None


class BaseParser(ABC):
    """
    Turns source text into an :class:`AstNode` tree.

    ``parse`` raises :class:`~complexityscanner.core.errors.ParseError` for
    malformed input. Subclasses may implement it as a coroutine function;
    the engine awaits the result before traversal.
    """

    name: str = "base"

    @property
    @abstractmethod
    def syntax(self) -> SyntaxSpec:
        """Node-kind schema of the trees this parser produces."""

    @abstractmethod
    def parse(
        self, source: str, options: ParseOptions
    ) -> Union[AstNode, Awaitable[AstNode]]:
        """Parse ``source`` into a tree."""

    def available(self) -> bool:
        """Whether the backing library can be used."""
        return True
