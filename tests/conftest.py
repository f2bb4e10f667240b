"""
Shared fixtures for the complexity scanner tests.
"""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from complexityscanner.analysis.functions import extract_functions
from complexityscanner.analysis.syntax import ESTREE
from complexityscanner.parsers import EsprimaParser, ParseOptions


@pytest.fixture
def parse():
    """Parse JavaScript into an ESTree-shaped AstNode."""
    parser = EsprimaParser()

    def _parse(code, module=True):
        return parser.parse(code, ParseOptions(module=module))

    return _parse


@pytest.fixture
def functions(parse):
    """Extract function records from a JavaScript snippet."""

    def _functions(code, file_name="test.js"):
        return extract_functions(parse(code), file_name, ESTREE)

    return _functions


@pytest.fixture
def only_function(functions):
    """The single function record of a snippet."""

    def _only(code):
        records = functions(code)
        assert len(records) == 1
        return records[0]

    return _only
