"""Statement coverage threshold gate.

The gate is evaluated by callers (the CLI sets the exit status from it). It
never changes report content.
"""

from dataclasses import dataclass

from clovergen.report.metrics import CloverCounter


@dataclass(frozen=True, slots=True)
class ThresholdResult:
    percent: float
    threshold: float
    passed: bool


def coverage_percent(counter: CloverCounter) -> float:
    """Covered statements as a percentage; an empty scope counts as fully covered."""
    if counter.statements == 0:
        return 100.0
    return counter.covered_statements * 100.0 / counter.statements


def check_threshold(counter: CloverCounter, threshold: float) -> ThresholdResult:
    if not (0.0 <= threshold <= 100.0):
        raise ValueError(f"Threshold must be 0-100, got {threshold}")
    percent = coverage_percent(counter)
    return ThresholdResult(percent=percent, threshold=threshold, passed=percent >= threshold)
