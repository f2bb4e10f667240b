"""
Tests for cyclomatic complexity, nesting depth and advisory notes.
"""

import pytest

from complexityscanner.analysis.complexity import NoteThresholds, function_notes


class TestCyclomaticComplexity:
    """Tests for decision point counting."""

    def test_straight_line_function_is_one(self, only_function):
        """No decision points means complexity 1."""
        record = only_function("function f(a) { const b = a + 1; return b; }")
        assert record.complexity == 1
        assert record.max_nesting == 0

    @pytest.mark.parametrize("body", [
        "if (a) { b(); }",
        "for (let i = 0; i < 3; i++) {}",
        "for (const k in a) {}",
        "for (const v of a) {}",
        "while (a) { a--; }",
        "do { a--; } while (a);",
        "return a ? 1 : 2;",
        "try { a(); } catch (e) {}",
        "return a && b;",
        "return a || b;",
    ])
    def test_each_decision_point_adds_one(self, only_function, body):
        """Every decision construct contributes exactly one."""
        record = only_function(f"function f(a, b) {{ {body} }}")
        assert record.complexity == 2

    def test_try_finally_without_catch(self, only_function):
        """Only catch clauses count, not the try block itself."""
        record = only_function("function f() { try { a(); } finally { b(); } }")
        assert record.complexity == 1

    def test_switch_default_adds_nothing(self, only_function):
        """Non-default cases count; the default branch does not."""
        code = """
function pick(x) {
  switch (x) {
    case 1: return 'a';
    case 2: return 'b';
    default: return 'c';
  }
}
"""
        record = only_function(code)
        assert record.complexity == 3
        assert record.max_nesting == 1

    def test_switch_with_only_default(self, only_function):
        """A switch with just a default branch keeps the baseline."""
        record = only_function("function f(x) { switch (x) { default: return 1; } }")
        assert record.complexity == 1

    def test_logical_chain(self, only_function):
        """Each && or || in a chain counts separately."""
        record = only_function("const ok = (a, b, c) => a && b || c;")
        assert record.complexity == 3
        assert record.name == "ok"

    def test_else_if_chain(self, only_function):
        """else-if branches are separate conditionals."""
        record = only_function("function f(a, b) { if (a) {} else if (b) {} else {} }")
        assert record.complexity == 3
        assert record.max_nesting == 2

    def test_nested_function_counts_toward_outer(self, functions):
        """Inner decision points are also charged to the enclosing function."""
        code = """
function outer(items) {
  if (items) {
    items.forEach(function inner(item) {
      if (item) { log(item); }
    });
  }
}
"""
        records = {r.name: r for r in functions(code)}
        assert records["outer"].complexity == 3
        assert records["inner"].complexity == 2
        assert records["outer"].max_nesting == 2
        assert records["inner"].max_nesting == 1

    def test_complexity_and_nesting_lower_bounds(self, functions):
        """Complexity is at least 1 and nesting at least 0 everywhere."""
        code = """
const a = () => {};
function b(x) { while (x) { x--; } }
const c = { d() { return 1; } };
"""
        for record in functions(code):
            assert record.complexity >= 1
            assert record.max_nesting >= 0


class TestNesting:
    """Tests for the monotonic nesting measure."""

    def test_sibling_blocks_accumulate(self, only_function):
        """Depth is a running high-water mark, so siblings add up."""
        code = """
function flat(a, b, c) {
  if (a) { x(); }
  if (b) { y(); }
  if (c) { z(); }
}
"""
        record = only_function(code)
        assert record.max_nesting == 3
        assert record.complexity == 4

    def test_try_and_loops_increase_depth(self, only_function):
        """try blocks, loops and switches raise the depth."""
        code = """
function f(items) {
  try {
    for (const item of items) {
      switch (item) { case 1: break; }
    }
  } catch (e) {}
}
"""
        record = only_function(code)
        assert record.max_nesting == 3


class TestNotes:
    """Tests for threshold notes."""

    def test_high_complexity(self):
        assert function_notes(10, 10, 0, NoteThresholds()) == ["High CC"]

    def test_medium_long_and_deep(self):
        assert function_notes(5, 60, 4, NoteThresholds()) == ["Medium CC", "Long", "Deep Nesting"]

    def test_below_thresholds(self):
        assert function_notes(4, 59, 3, NoteThresholds()) == []

    def test_custom_thresholds(self):
        """Thresholds are configurable."""
        thresholds = NoteThresholds(high_complexity=3, medium_complexity=2, long_function=5, deep_nesting=1)
        assert function_notes(3, 5, 1, thresholds) == ["High CC", "Long", "Deep Nesting"]

    def test_notes_attached_to_records(self, only_function):
        """Extracted records carry their notes."""
        body = " ".join(f"if (a === {i}) {{ b(); }}" for i in range(9))
        record = only_function(f"function busy(a) {{ {body} }}")
        assert record.complexity == 10
        assert record.notes == ("High CC", "Deep Nesting")
