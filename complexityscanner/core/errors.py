"""
Exception hierarchy for the complexity scanner.

Only configuration problems and CLI misuse surface as raised exceptions.
The engine converts parse and batch failures into report data.
"""


class ComplexityScannerError(Exception):
    """Base class for all scanner errors."""


class ConfigError(ComplexityScannerError):
    """Raised when a configuration file or value is invalid."""


class ParseError(ComplexityScannerError):
    """Malformed source text for a single file."""

    def __init__(self, message: str, line: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line


class AnalysisFailure(ComplexityScannerError):
    """A failure that invalidates the whole batch."""


class ParserUnavailableError(AnalysisFailure):
    """The requested parser backend cannot be used."""
