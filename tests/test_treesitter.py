"""
Tests for the tree-sitter backend. Parsing tests skip when the grammars are not installed.
"""

import pytest

from complexityscanner.analysis.dependencies import extract_dependencies
from complexityscanner.analysis.functions import extract_functions
from complexityscanner.analysis.syntax import ESTREE
from complexityscanner.config import AnalysisConfig
from complexityscanner.core.engine import AnalysisEngine
from complexityscanner.core.errors import ParseError
from complexityscanner.parsers import EsprimaParser, ParseOptions, TreeSitterParser, get_parser
from complexityscanner.parsers.treesitter_parser import grammar_for


requires_grammars = pytest.mark.skipif(
    not TreeSitterParser().available(),
    reason="tree-sitter-languages not installed",
)


@pytest.fixture
def ts():
    parser = TreeSitterParser()

    def _parse(code, filename="test.js", tolerant=True):
        return parser.parse(code, ParseOptions(tolerant=tolerant, filename=filename))

    return _parse


def _functions(tree):
    return extract_functions(tree, "test.js", TreeSitterParser().syntax)


@requires_grammars
class TestTreeSitterParser:
    """Tests for metrics computed from tree-sitter trees."""

    def test_names_and_params(self, ts):
        code = """
function add(a, b) { return a + b; }
const double = x => x * 2;
const api = { load: function () {}, 'save-all': () => 1 };
"""
        records = _functions(ts(code))
        assert [(r.name, r.parameter_count) for r in records] == [
            ("add", 2),
            ("double", 1),
            ("load", 0),
            ("save-all", 0),
        ]

    def test_switch_and_logical(self, ts):
        code = """
function pick(x, y) {
  switch (x) {
    case 1: return y && x;
    case 2: return y || x;
    default: return 0;
  }
}
"""
        record = _functions(ts(code))[0]
        assert record.complexity == 5
        assert record.max_nesting == 1

    def test_dependencies(self, ts):
        code = "import a from './a';\nconst b = require('b');\nrequire(name);\n"
        assert extract_dependencies(ts(code), TreeSitterParser().syntax) == ["./a", "b"]

    def test_typescript(self, ts):
        code = "function f(a: number): string { return a > 0 ? 'pos' : 'neg'; }\n"
        record = _functions(ts(code, filename="f.ts"))[0]
        assert record.name == "f"
        assert record.complexity == 2

    def test_strict_mode_raises(self, ts):
        with pytest.raises(ParseError):
            ts("function (", tolerant=False)

    def test_tolerant_mode_returns_tree(self, ts):
        assert ts("function (", tolerant=True).kind == "program"

    def test_methods_match_estree(self, ts):
        """Object and class methods are recorded the same way by both backends."""
        code = """
const o = { d(x) { if (x) { return 1; } return 0; } };
class C { m(a) { return a ? 1 : 2; } }
function f() {}
"""
        expected = [("d", 2), ("(anonymous)", 2), ("f", 1)]
        estree = extract_functions(EsprimaParser().parse(code, ParseOptions()), "test.js", ESTREE)
        assert [(r.name, r.complexity) for r in estree] == expected
        assert [(r.name, r.complexity) for r in _functions(ts(code))] == expected

    def test_method_parameters(self, ts):
        record = _functions(ts("const api = { save(a, b) {} };"))[0]
        assert (record.name, record.parameter_count) == ("save", 2)

    def test_engine_with_tree_sitter(self):
        report = AnalysisEngine(AnalysisConfig(parser="tree-sitter")).analyze([
            ("main.ts", "import { u } from './util';\nexport const run = (n: number) => n ? u(n) : 0;\n"),
            ("util.ts", "export function u(n: number) { return n; }\n"),
        ])
        assert report.diagnostics == []
        assert [(e.source, e.target) for e in report.edges] == [("main", "util")]
        assert report.functions[0].name == "run"


def test_grammar_for():
    assert grammar_for("a.ts") == "typescript"
    assert grammar_for("a.tsx") == "tsx"
    assert grammar_for("a.mjs") == "javascript"
    assert grammar_for(None) == "javascript"


def test_alias_lookup():
    assert get_parser("treesitter").name == "tree-sitter"
