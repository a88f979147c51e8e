"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides builders for instrumentation results.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local clovergen package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of clovergen modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("clovergen"):
        del sys.modules[module_name]

from clovergen.instrumentation import (  # noqa: E402
    InstrumentationResult,
    InstrumentedAssembly,
    InstrumentedInstruction,
    SourceFile,
)

InstructionFactory = Callable[..., InstrumentedInstruction]


@pytest.fixture
def make_instruction() -> InstructionFactory:
    """Factory for instructions with sequential default ids."""
    next_id = iter(range(1, 1_000_000))

    def _make(
        *,
        id: int | None = None,
        class_name: str = "App.Foo",
        method: str = "System.Void App.Foo::Bar()",
        start_line: int = 1,
        end_line: int | None = None,
    ) -> InstrumentedInstruction:
        return InstrumentedInstruction(
            id=id if id is not None else next(next_id),
            class_name=class_name,
            method_full_name=method,
            start_line=start_line,
            end_line=end_line if end_line is not None else start_line,
        )

    return _make


@pytest.fixture
def scenario_result() -> InstrumentationResult:
    """One assembly, one file, two instructions of class A in two methods."""
    return InstrumentationResult(
        source_path="/repo/src",
        assemblies=(
            InstrumentedAssembly(
                name="App",
                source_files={
                    "/repo/src/A.cs": SourceFile(
                        instructions=(
                            InstrumentedInstruction(
                                id=1,
                                class_name="A",
                                method_full_name="A.M1",
                                start_line=10,
                                end_line=10,
                            ),
                            InstrumentedInstruction(
                                id=2,
                                class_name="A",
                                method_full_name="A.M2",
                                start_line=20,
                                end_line=20,
                            ),
                        )
                    )
                },
            ),
        ),
    )


@pytest.fixture
def multi_result() -> InstrumentationResult:
    """Three assemblies (the last has no files), three files, four classes."""

    def ins(
        id: int, cls: str, method: str, start: int, end: int | None = None
    ) -> InstrumentedInstruction:
        return InstrumentedInstruction(
            id=id,
            class_name=cls,
            method_full_name=method,
            start_line=start,
            end_line=end if end is not None else start,
        )

    return InstrumentationResult(
        source_path="/repo",
        assemblies=(
            InstrumentedAssembly(
                name="Core",
                source_files={
                    "/repo/Core/Calc.cs": SourceFile(
                        instructions=(
                            ins(1, "Core.Calc", "Core.Calc::Add", 5),
                            ins(2, "Core.Calc", "Core.Calc::Add", 6),
                            ins(3, "Core.Calc", "Core.Calc::Sub", 10, 12),
                            ins(4, "Core.Calc/Inner", "Core.Calc/Inner::Run", 30),
                        )
                    ),
                    "/repo/Core/Util.cs": SourceFile(
                        instructions=(
                            ins(5, "Core.Util", "Core.Util::Trim", 3),
                            ins(6, "Core.Util", "Core.Util::Trim", 3),
                        )
                    ),
                },
            ),
            InstrumentedAssembly(
                name="Web",
                source_files={
                    "/repo/Web/Home.cs": SourceFile(
                        instructions=(ins(7, "Web.Home", "Web.Home::Index", 8, 9),)
                    ),
                },
            ),
            InstrumentedAssembly(name="Empty", source_files={}),
        ),
    )


@pytest.fixture
def multi_hits() -> dict[int, int]:
    return {1: 3, 2: 1, 4: 2, 6: 1}
