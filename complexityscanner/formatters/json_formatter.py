"""
JSON output formatter for machine-readable results.
"""

import json

from complexityscanner.core.models import AnalysisReport


class JSONFormatter:
    """
    Formats analysis reports as JSON for machine consumption.
    """

    def __init__(self, indent: int = 2, include_ast: bool = False):
        self.indent = indent
        self.include_ast = include_ast

    def format_result(self, report: AnalysisReport) -> str:
        """Format a complete analysis report as JSON."""
        data = report.to_dict(include_ast=self.include_ast)
        return json.dumps(data, indent=self.indent, default=str)
