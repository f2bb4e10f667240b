"""
Tests for specifier normalization and dependency graph construction.
"""

import pytest

from complexityscanner.analysis.resolver import (
    ModuleResolver,
    build_dependency_graph,
    is_local_specifier,
    normalize_module_name,
)
from complexityscanner.core.models import SourceFile


def _files(*names):
    return [SourceFile(name=name, text="") for name in names]


class TestNormalization:
    """Tests for module name normalization."""

    @pytest.mark.parametrize("raw, expected", [
        ("./utils.js", "utils"),
        ("utils.ts", "utils"),
        ("./lib/helpers.jsx", "lib/helpers"),
        ("src\\app.mjs", "src/app"),
        ("react", "react"),
        ("../shared/x.js", "../shared/x"),
        ("widget.JS", "widget"),
        ("styles.css", "styles.css"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_module_name(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("./utils", True),
        ("../up", True),
        ("lib/helpers", True),
        ("lib\\helpers", True),
        ("react", False),
        ("lodash", False),
    ])
    def test_is_local(self, raw, expected):
        assert is_local_specifier(raw) is expected


class TestModuleResolver:
    """Tests for lookup against the batch."""

    def test_resolves_with_and_without_extension(self):
        resolver = ModuleResolver(_files("main.js", "utils.js"))
        assert resolver.resolve("./utils") == "utils"
        assert resolver.resolve("./utils.js") == "utils"

    def test_resolves_directory_index(self):
        resolver = ModuleResolver(_files("main.js", "components/index.js"))
        assert resolver.resolve("./components") == "components/index"

    def test_custom_extension(self):
        resolver = ModuleResolver(_files("app.ts", "store/main.ts"), default_extension=".ts", index_name="main")
        assert resolver.resolve("./store") == "store/main"

    def test_unknown_module(self):
        resolver = ModuleResolver(_files("main.js"))
        assert resolver.resolve("./missing") is None


class TestBuildDependencyGraph:
    """Tests for edge and external module bookkeeping."""

    def test_local_edge_not_external(self):
        """A resolved local import is an edge but not an external module."""
        graph = build_dependency_graph(
            _files("main.js", "utils.js"),
            [("main.js", ["./utils.js"])],
        )
        assert [e.to_dict() for e in graph.edges] == [{"from": "main", "to": "utils"}]
        assert graph.external_modules == []

    def test_unresolved_local_becomes_external(self):
        graph = build_dependency_graph(_files("main.js"), [("main.js", ["./missing"])])
        assert [e.to_dict() for e in graph.edges] == [{"from": "main", "to": "missing"}]
        assert graph.external_modules == ["missing"]

    def test_external_recorded_once(self):
        """Repeated external imports produce repeated edges but one module entry."""
        graph = build_dependency_graph(
            _files("a.js", "b.js"),
            [("a.js", ["lodash", "lodash"]), ("b.js", ["react", "lodash"])],
        )
        assert [(e.source, e.target) for e in graph.edges] == [
            ("a", "lodash"),
            ("a", "lodash"),
            ("b", "react"),
            ("b", "lodash"),
        ]
        assert graph.external_modules == ["lodash", "react"]

    def test_bare_specifier_matching_a_file_stays_external(self):
        """Package names are never resolved against the batch."""
        graph = build_dependency_graph(_files("main.js", "react.js"), [("main.js", ["react"])])
        assert graph.external_modules == ["react"]

    def test_empty_specifiers_skipped(self):
        graph = build_dependency_graph(_files("main.js"), [("main.js", ["", "fs"])])
        assert [(e.source, e.target) for e in graph.edges] == [("main", "fs")]

    def test_every_edge_source_is_a_batch_file(self):
        files = _files("src/app.js", "src/lib.js")
        graph = build_dependency_graph(files, [("src/app.js", ["./src/lib", "vue"])])
        keys = {normalize_module_name(f.name) for f in files}
        assert all(edge.source in keys for edge in graph.edges)
        assert [e.target for e in graph.edges] == ["src/lib", "vue"]
