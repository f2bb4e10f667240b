"""
Output formatters for analysis reports.

Provides:
- Human-readable CLI output
- JSON for machine processing
"""

from complexityscanner.formatters.cli import CLIFormatter
from complexityscanner.formatters.json_formatter import JSONFormatter

__all__ = [
    "CLIFormatter",
    "JSONFormatter",
    "get_formatter",
]


def get_formatter(format_name: str):
    """Get a formatter by name."""
    formatters = {
        "text": CLIFormatter,
        "cli": CLIFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if formatter_class:
        return formatter_class()

    raise ValueError(f"Unknown format: {format_name}")
