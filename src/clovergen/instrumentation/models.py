"""Instrumentation result data model.

The instrumenter records every instruction it injected a probe for, grouped
assembly -> source file -> instruction, and persists the result as a JSON
document with PascalCase keys. These models are read-only views over that
document; the report never mutates them.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


class InstrumentedInstruction(_Frozen):
    """One probed instruction.

    ``id`` is unique across the whole result and is the join key with the
    hits log. Line numbers are 1-based.
    """

    id: int
    class_name: str = Field(alias="Class")
    method_full_name: str
    start_line: int = Field(ge=1)
    end_line: int = Field(ge=1)
    start_column: int | None = None
    end_column: int | None = None

    @model_validator(mode="after")
    def _check_lines(self) -> InstrumentedInstruction:
        if self.end_line < self.start_line:
            raise ValueError(
                f"instruction {self.id}: EndLine {self.end_line} < StartLine {self.start_line}"
            )
        return self


class SourceFile(_Frozen):
    """Instructions belonging to one source file."""

    instructions: tuple[InstrumentedInstruction, ...] = ()


class InstrumentedAssembly(_Frozen):
    """An assembly and its source files, keyed by full file path.

    Key order is significant: it is the order files appear in the report.
    """

    name: str
    source_files: dict[str, SourceFile] = Field(default_factory=dict)


class InstrumentationResult(_Frozen):
    """Root of the instrumentation document."""

    source_path: str
    hits_file: str | None = None
    assemblies: tuple[InstrumentedAssembly, ...] = ()

    def iter_instructions(self) -> Iterator[InstrumentedInstruction]:
        for assembly in self.assemblies:
            for source_file in assembly.source_files.values():
                yield from source_file.instructions

    @model_validator(mode="after")
    def _check_unique_ids(self) -> InstrumentationResult:
        seen: set[int] = set()
        for instruction in self.iter_instructions():
            if instruction.id in seen:
                raise ValueError(f"duplicate instruction id {instruction.id}")
            seen.add(instruction.id)
        return self
