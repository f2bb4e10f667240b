"""
JavaScript Complexity Scanner

A static analysis engine that measures per-function cyclomatic complexity
and nesting, maps inter-module dependencies, and scores maintainability
for a batch of JavaScript and TypeScript modules.
"""

__version__ = "1.0.0"
__author__ = "Complexity Scanner Team"

from complexityscanner.core.engine import AnalysisEngine
from complexityscanner.core.models import AnalysisReport, FunctionRecord, SourceFile
from complexityscanner.config import AnalysisConfig

__all__ = [
    "AnalysisEngine",
    "AnalysisReport",
    "FunctionRecord",
    "SourceFile",
    "AnalysisConfig",
]
