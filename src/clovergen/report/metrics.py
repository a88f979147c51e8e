"""Clover metrics aggregation.

Metrics are computed at four nested scopes:

- group (a class, or any slice of instructions): statements and methods
- file: group metrics plus ``lines`` (max end line) and ``classes``
- package (assembly): sum of its files, plus one ``files`` per file
- project: sum of its packages, plus one ``packages`` per package

Parent counters are folded from an explicit zero counter, so an assembly
without files or a project without assemblies aggregates to all zeros.
Conditionals are never populated from instruction data and stay 0.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from clovergen.instrumentation.models import (
    InstrumentationResult,
    InstrumentedAssembly,
    InstrumentedInstruction,
    SourceFile,
)
from clovergen.report.hits import HitIndex


@dataclass(slots=True)
class CloverCounter:
    """Aggregate coverage metrics for one scope."""

    statements: int = 0
    covered_statements: int = 0
    conditionals: int = 0
    covered_conditionals: int = 0
    methods: int = 0
    covered_methods: int = 0
    lines: int = 0
    classes: int = 0
    files: int = 0
    packages: int = 0

    @property
    def elements(self) -> int:
        return self.statements + self.conditionals + self.methods

    @property
    def covered_elements(self) -> int:
        return self.covered_statements + self.covered_conditionals + self.covered_methods

    def add(self, other: CloverCounter) -> CloverCounter:
        """Add every stored field of ``other`` into this counter, in place."""
        self.statements += other.statements
        self.covered_statements += other.covered_statements
        self.conditionals += other.conditionals
        self.covered_conditionals += other.covered_conditionals
        self.methods += other.methods
        self.covered_methods += other.covered_methods
        self.lines += other.lines
        self.classes += other.classes
        self.files += other.files
        self.packages += other.packages
        return self


def is_covered(instruction: InstrumentedInstruction, hits: HitIndex) -> bool:
    return hits.get(instruction.id, 0) > 0


def count_metrics(
    instructions: Iterable[InstrumentedInstruction], hits: HitIndex
) -> CloverCounter:
    """Statement and method metrics for a group of instructions."""
    statements = 0
    covered_statements = 0
    methods: set[str] = set()
    covered_methods: set[str] = set()

    for instruction in instructions:
        statements += 1
        methods.add(instruction.method_full_name)
        if is_covered(instruction, hits):
            covered_statements += 1
            covered_methods.add(instruction.method_full_name)

    return CloverCounter(
        statements=statements,
        covered_statements=covered_statements,
        methods=len(methods),
        covered_methods=len(covered_methods),
    )


def count_file_metrics(source_file: SourceFile, hits: HitIndex) -> CloverCounter:
    instructions = source_file.instructions
    counter = count_metrics(instructions, hits)
    counter.lines = max((i.end_line for i in instructions), default=0)
    counter.classes = len({i.class_name for i in instructions})
    return counter


def count_package_metrics(assembly: InstrumentedAssembly, hits: HitIndex) -> CloverCounter:
    counter = CloverCounter()
    for source_file in assembly.source_files.values():
        counter.add(count_file_metrics(source_file, hits))
        counter.files += 1
    return counter


def count_project_metrics(result: InstrumentationResult, hits: HitIndex) -> CloverCounter:
    counter = CloverCounter()
    for assembly in result.assemblies:
        counter.add(count_package_metrics(assembly, hits))
        counter.packages += 1
    return counter
