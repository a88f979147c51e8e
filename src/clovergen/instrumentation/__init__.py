"""Instrumentation result model and loader."""

from clovergen.instrumentation.loader import load_instrumentation
from clovergen.instrumentation.models import (
    InstrumentationResult,
    InstrumentedAssembly,
    InstrumentedInstruction,
    SourceFile,
)

__all__ = [
    "InstrumentationResult",
    "InstrumentedAssembly",
    "InstrumentedInstruction",
    "SourceFile",
    "load_instrumentation",
]
