"""Clover XML report writer.

Structure:
<coverage generated="..." clover="4.1.0">
  <project timestamp="..." name="...">
    <metrics ...project stats.../>
    <package name="...">
      <metrics ...package stats.../>
      <file name="Foo.cs" path="/path/to/Foo.cs">
        <metrics ...file stats.../>
        <class name="App.Foo"><metrics .../></class>
        <line num="10" count="2" type="stmt"/>
      </file>
    </package>
  </project>
</coverage>

The metrics attributes loc/ncloc, classes, files and packages are only
written when the corresponding counter is positive. All other metrics
attributes are always written.
"""

from __future__ import annotations

import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

import structlog

from clovergen.core.logging import set_run_id
from clovergen.instrumentation.models import InstrumentationResult
from clovergen.report.hits import load_hits
from clovergen.report.metrics import CloverCounter
from clovergen.report.threshold import ThresholdResult, check_threshold
from clovergen.report.tree import (
    ClassNode,
    FileNode,
    LineNode,
    PackageNode,
    ProjectNode,
    build_report_tree,
)

logger = structlog.get_logger()

CLOVER_VERSION = "4.1.0"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


@dataclass(frozen=True, slots=True)
class ReportOutcome:
    """What a report run produced."""

    output: Path
    metrics: CloverCounter
    threshold: ThresholdResult


def metrics_element(counter: CloverCounter) -> ET.Element:
    elem = ET.Element("metrics")
    elem.set("statements", str(counter.statements))
    elem.set("coveredstatements", str(counter.covered_statements))
    elem.set("conditionals", str(counter.conditionals))
    elem.set("coveredconditionals", str(counter.covered_conditionals))
    elem.set("methods", str(counter.methods))
    elem.set("coveredmethods", str(counter.covered_methods))
    elem.set("elements", str(counter.elements))
    elem.set("coveredelements", str(counter.covered_elements))

    if counter.lines > 0:
        elem.set("loc", str(counter.lines))
        elem.set("ncloc", str(counter.lines))
    if counter.classes > 0:
        elem.set("classes", str(counter.classes))
    if counter.files > 0:
        elem.set("files", str(counter.files))
    if counter.packages > 0:
        elem.set("packages", str(counter.packages))
    return elem


def _class_element(node: ClassNode) -> ET.Element:
    elem = ET.Element("class", name=node.name)
    elem.append(metrics_element(node.metrics))
    return elem


def _line_element(node: LineNode) -> ET.Element:
    elem = ET.Element("line")
    elem.set("num", str(node.num))
    elem.set("count", str(node.count))
    elem.set("type", node.type)
    return elem


def _file_element(node: FileNode) -> ET.Element:
    elem = ET.Element("file")
    elem.set("name", node.name)
    elem.set("path", node.path)
    elem.append(metrics_element(node.metrics))
    elem.extend(_class_element(c) for c in node.classes)
    elem.extend(_line_element(line) for line in node.lines)
    return elem


def _package_element(node: PackageNode) -> ET.Element:
    elem = ET.Element("package", name=node.name)
    elem.append(metrics_element(node.metrics))
    elem.extend(_file_element(f) for f in node.files)
    return elem


def coverage_element(project: ProjectNode) -> ET.Element:
    """Root <coverage> element for a report tree."""
    root = ET.Element("coverage")
    root.set("generated", str(project.timestamp))
    root.set("clover", CLOVER_VERSION)

    project_elem = ET.SubElement(root, "project")
    project_elem.set("timestamp", str(project.timestamp))
    project_elem.set("name", project.name)
    project_elem.append(metrics_element(project.metrics))
    project_elem.extend(_package_element(p) for p in project.packages)
    return root


def render_document(project: ProjectNode) -> str:
    """Serialize a report tree to an indented Clover XML document."""
    root = coverage_element(project)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def write_report(project: ProjectNode, output: Path) -> None:
    """Write the report as UTF-8, creating parent directories as needed."""
    document = render_document(project)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")


def generate_clover_report(
    result: InstrumentationResult,
    output: Path,
    threshold: float,
    *,
    hits_file: Path | None = None,
    timestamp: int | None = None,
) -> ReportOutcome:
    """Build and write the Clover report for one instrumented run.

    Args:
        result: Instrumentation result (read-only).
        output: Destination of the XML report.
        threshold: Minimum statement coverage percentage, evaluated into the
            returned outcome. It does not affect report content.
        hits_file: Hits log; defaults to the result's HitsFile.
        timestamp: Unix seconds for ``generated``/``timestamp``. Defaults to now.

    Returns:
        ReportOutcome with the project metrics and threshold verdict.

    Raises:
        HitsLogError: If the hits log has a non-integer line. Nothing is written.
        OSError: If the output directory or file cannot be written.
    """
    set_run_id()
    if hits_file is None and result.hits_file:
        hits_file = Path(result.hits_file)

    hits = load_hits(hits_file)

    if timestamp is None:
        timestamp = int(time.time())
    project = build_report_tree(result, hits, timestamp=timestamp)
    logger.debug(
        "report tree built",
        packages=len(project.packages),
        files=project.metrics.files,
        statements=project.metrics.statements,
    )

    verdict = check_threshold(project.metrics, threshold)
    write_report(project, output)

    logger.info(
        "clover report written",
        output=str(output),
        coverage_percent=round(verdict.percent, 2),
    )
    if not verdict.passed:
        logger.warning(
            "coverage below threshold",
            coverage_percent=round(verdict.percent, 2),
            threshold=threshold,
        )
    return ReportOutcome(output=output, metrics=project.metrics, threshold=verdict)
