"""In-memory Clover report tree.

The tree mirrors the Clover document (project -> package -> file -> class/line)
and carries the aggregated counters at every level. It is built leaf-first
from the instrumentation result and the hit index, and knows nothing about
XML; see ``clovergen.report.clover`` for serialization.

Ordering follows the input: assemblies as given, source files in mapping
order, classes by first appearance, lines one per instruction.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from clovergen.instrumentation.models import (
    InstrumentationResult,
    InstrumentedAssembly,
    InstrumentedInstruction,
    SourceFile,
)
from clovergen.report.hits import HitIndex
from clovergen.report.metrics import (
    CloverCounter,
    count_file_metrics,
    count_metrics,
    count_package_metrics,
    count_project_metrics,
)


@dataclass(frozen=True, slots=True)
class LineNode:
    num: int
    count: int
    type: str = "stmt"


@dataclass(frozen=True, slots=True)
class ClassNode:
    name: str
    metrics: CloverCounter


@dataclass(frozen=True, slots=True)
class FileNode:
    name: str  # base name
    path: str  # full path, as keyed in the assembly
    metrics: CloverCounter
    classes: tuple[ClassNode, ...]
    lines: tuple[LineNode, ...]


@dataclass(frozen=True, slots=True)
class PackageNode:
    name: str
    metrics: CloverCounter
    files: tuple[FileNode, ...]


@dataclass(frozen=True, slots=True)
class ProjectNode:
    name: str
    timestamp: int
    metrics: CloverCounter
    packages: tuple[PackageNode, ...]


def file_basename(path: str) -> str:
    """Base name of a path written on either Windows or POSIX."""
    return posixpath.basename(path.replace("\\", "/"))


def _build_classes(
    instructions: tuple[InstrumentedInstruction, ...], hits: HitIndex
) -> tuple[ClassNode, ...]:
    by_class: dict[str, list[InstrumentedInstruction]] = {}
    for instruction in instructions:
        by_class.setdefault(instruction.class_name, []).append(instruction)
    return tuple(
        ClassNode(name=name, metrics=count_metrics(group, hits))
        for name, group in by_class.items()
    )


def _build_lines(
    instructions: tuple[InstrumentedInstruction, ...], hits: HitIndex
) -> tuple[LineNode, ...]:
    return tuple(
        LineNode(num=instruction.start_line, count=hits.get(instruction.id, 0))
        for instruction in instructions
    )


def build_file(path: str, source_file: SourceFile, hits: HitIndex) -> FileNode:
    return FileNode(
        name=file_basename(path),
        path=path,
        metrics=count_file_metrics(source_file, hits),
        classes=_build_classes(source_file.instructions, hits),
        lines=_build_lines(source_file.instructions, hits),
    )


def build_package(assembly: InstrumentedAssembly, hits: HitIndex) -> PackageNode:
    return PackageNode(
        name=assembly.name,
        metrics=count_package_metrics(assembly, hits),
        files=tuple(
            build_file(path, source_file, hits)
            for path, source_file in assembly.source_files.items()
        ),
    )


def build_report_tree(
    result: InstrumentationResult, hits: HitIndex, *, timestamp: int
) -> ProjectNode:
    """Build the full report tree for one run."""
    return ProjectNode(
        name=result.source_path,
        timestamp=timestamp,
        metrics=count_project_metrics(result, hits),
        packages=tuple(build_package(assembly, hits) for assembly in result.assemblies),
    )
