"""
CLI output formatter for human-readable results.
"""

import sys
from typing import List

from complexityscanner.core.models import AnalysisReport, FunctionRecord


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


class CLIFormatter:
    """
    Formats analysis reports for human-readable CLI output.
    """

    def __init__(self, use_color: bool = True, max_functions: int = 0):
        self.use_color = use_color and supports_color()
        self.max_functions = max_functions

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def _score_color(self, score: int) -> str:
        if score >= 80:
            return Colors.GREEN
        if score >= 50:
            return Colors.YELLOW
        return Colors.RED

    def _complexity_color(self, complexity: int) -> str:
        if complexity >= 10:
            return Colors.RED
        if complexity >= 5:
            return Colors.YELLOW
        return Colors.GREEN

    def _section(self, title: str) -> List[str]:
        return [
            self._color("=" * 70, Colors.DIM),
            self._color(f" {title} ", Colors.BOLD),
            self._color("=" * 70, Colors.DIM),
        ]

    def format_result(self, report: AnalysisReport) -> str:
        """Format a complete analysis report."""
        stats = report.stats
        lines = [""]
        lines.extend(self._section("CODE COMPLEXITY REPORT"))
        lines.append("")

        # Summary
        lines.append(self._color("Summary", Colors.BOLD))
        lines.append(self._color("-" * 40, Colors.DIM))
        lines.append(f"  Files analyzed:    {stats.files}")
        lines.append(f"  Functions:         {stats.total_functions}")
        lines.append(f"  Max complexity:    {stats.max_complexity}")
        lines.append(f"  Avg complexity:    {stats.average_complexity:.2f}")
        lines.append(f"  Long functions:    {stats.long_function_percentage:.1f}%")
        score = self._color(f"{stats.score}/100", self._score_color(stats.score))
        lines.append(f"  Maintainability:   {score}")
        lines.append("")

        if report.functions:
            lines.extend(self._section("FUNCTIONS"))
            lines.append("")
            lines.extend(self._format_functions(report.functions))
            lines.append("")

        if report.edges:
            lines.extend(self._section("DEPENDENCIES"))
            lines.append("")
            for edge in report.edges:
                lines.append(f"  {edge.source} -> {edge.target}")
            lines.append("")

        if report.external_modules:
            lines.append(self._color("External modules", Colors.BOLD))
            lines.append(self._color("-" * 40, Colors.DIM))
            for module in report.external_modules:
                lines.append(f"  {module}")
            lines.append("")

        if report.diagnostics:
            lines.extend(self._section("ERRORS"))
            for message in report.diagnostics:
                lines.append(self._color(f"  • {message}", Colors.RED))
            lines.append("")

        return "\n".join(lines)

    def _format_functions(self, functions: List[FunctionRecord]) -> List[str]:
        if self.max_functions > 0:
            functions = functions[: self.max_functions]
        lines = [
            f"  {'File':<24} {'Function':<24} {'LOC':>5} {'Params':>6} {'CC':>4} {'Nest':>4}  Notes"
        ]
        for fn in functions:
            cc = self._color(f"{fn.complexity:>4}", self._complexity_color(fn.complexity))
            lines.append(
                f"  {fn.file[:24]:<24} {fn.name[:24]:<24} {fn.line_count:>5} "
                f"{fn.parameter_count:>6} {cc} {fn.max_nesting:>4}  {', '.join(fn.notes)}"
            )
        return lines
