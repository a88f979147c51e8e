"""Clover report generation.

Usage:
    from clovergen.instrumentation import load_instrumentation
    from clovergen.report import generate_clover_report

    result = load_instrumentation(Path("coverage.json"))
    outcome = generate_clover_report(result, Path("coverage.xml"), threshold=90)
    if not outcome.threshold.passed:
        ...
"""

from clovergen.report.clover import (
    ReportOutcome,
    generate_clover_report,
    render_document,
    write_report,
)
from clovergen.report.hits import HitIndex, load_hits, parse_hits
from clovergen.report.metrics import (
    CloverCounter,
    count_file_metrics,
    count_metrics,
    count_package_metrics,
    count_project_metrics,
)
from clovergen.report.threshold import ThresholdResult, check_threshold, coverage_percent
from clovergen.report.tree import (
    ClassNode,
    FileNode,
    LineNode,
    PackageNode,
    ProjectNode,
    build_report_tree,
)

__all__ = [
    # Hits
    "HitIndex",
    "load_hits",
    "parse_hits",
    # Metrics
    "CloverCounter",
    "count_file_metrics",
    "count_metrics",
    "count_package_metrics",
    "count_project_metrics",
    # Tree
    "ClassNode",
    "FileNode",
    "LineNode",
    "PackageNode",
    "ProjectNode",
    "build_report_tree",
    # Threshold
    "ThresholdResult",
    "check_threshold",
    "coverage_percent",
    # Writer
    "ReportOutcome",
    "generate_clover_report",
    "render_document",
    "write_report",
]
