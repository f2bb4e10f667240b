"""
ECMAScript parser backed by esprima.

Produces ESTree-shaped trees.
"""

from __future__ import annotations

import logging

import esprima
from esprima.error_handler import Error as EsprimaError

from complexityscanner.analysis.syntax import ESTREE, SyntaxSpec
from complexityscanner.core.ast import AstNode
from complexityscanner.core.errors import ParseError
from complexityscanner.parsers import register_parser
from complexityscanner.parsers.base import BaseParser, ParseOptions

logger = logging.getLogger(__name__)


@register_parser("esprima")
class EsprimaParser(BaseParser):
    """Parses ES2017 modules or scripts; no JSX, no TypeScript."""

    name = "esprima"

    @property
    def syntax(self) -> SyntaxSpec:
        return ESTREE

    def parse(self, source: str, options: ParseOptions) -> AstNode:
        config = {
            "loc": options.locations,
            "tolerant": options.tolerant,
            "comment": options.comments,
        }
        entry = esprima.parseModule if options.module else esprima.parseScript
        try:
            program = entry(source, config)
        except EsprimaError as exc:
            raise ParseError(str(exc), line=getattr(exc, "lineNumber", 0) or 0) from exc
        recovered = getattr(program, "errors", None)
        if recovered:
            logger.debug(
                "Tolerated %d error(s) in %s", len(recovered), options.filename or "<source>"
            )
        return AstNode.from_dict(program.toDict())
