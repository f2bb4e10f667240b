"""
Summary statistics and the maintainability score.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from complexityscanner.core.models import ComplexityDistribution, FunctionRecord, Stats


@dataclass(frozen=True)
class ScoreWeights:
    complexity: float = 6.0
    long_function_percentage: float = 0.4
    diagnostic: float = 8.0
    long_function_lines: int = 40


def sort_functions(functions: Iterable[FunctionRecord]) -> List[FunctionRecord]:
    """Most complex first; longer functions first among equals."""
    return sorted(functions, key=lambda f: (-f.complexity, -f.line_count))


def maintainability_score(
    average_complexity: float,
    long_function_percentage: float,
    diagnostic_count: int,
    weights: ScoreWeights = ScoreWeights(),
) -> int:
    raw = (
        100
        - average_complexity * weights.complexity
        - long_function_percentage * weights.long_function_percentage
        - diagnostic_count * weights.diagnostic
    )
    # half-up rounding, matching the reference scores
    return max(0, min(100, math.floor(raw + 0.5)))


def complexity_distribution(functions: Sequence[FunctionRecord]) -> ComplexityDistribution:
    return ComplexityDistribution(
        simple=sum(1 for f in functions if f.complexity <= 4),
        medium=sum(1 for f in functions if 5 <= f.complexity <= 9),
        complex=sum(1 for f in functions if f.complexity >= 10),
    )


def summarize(
    functions: Sequence[FunctionRecord],
    diagnostics: Sequence[str],
    file_count: int,
    weights: ScoreWeights = ScoreWeights(),
) -> Stats:
    total = len(functions)
    if total:
        max_cc = max(f.complexity for f in functions)
        total_cc = sum(f.complexity for f in functions)
        average_cc = total_cc / total
        long_count = sum(1 for f in functions if f.line_count > weights.long_function_lines)
        long_pct = long_count / total * 100
        average_params = round(sum(f.parameter_count for f in functions) / total, 1)
    else:
        max_cc = total_cc = 0
        average_cc = long_pct = average_params = 0.0
    return Stats(
        files=file_count,
        total_functions=total,
        max_complexity=max_cc,
        average_complexity=average_cc,
        long_function_percentage=long_pct,
        score=maintainability_score(average_cc, long_pct, len(diagnostics), weights),
        total_complexity=total_cc,
        total_lines=sum(f.line_count for f in functions),
        average_parameters=average_params,
        distribution=complexity_distribution(functions),
    )
