"""Fixtures for CLI tests."""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def quiet_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep log output out of command output and ignore any real global config."""
    monkeypatch.setenv("CLOVERGEN__LOGGING__LEVEL", "ERROR")
    with patch("clovergen.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


def _instruction(id: int, cls: str, method: str, line: int) -> dict[str, Any]:
    return {
        "Id": id,
        "Class": cls,
        "MethodFullName": method,
        "StartLine": line,
        "EndLine": line,
    }


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Project directory with coverage.json and a hits log covering 1 of 2 statements."""
    project = tmp_path / "project"
    project.mkdir()
    doc = {
        "SourcePath": str(project / "src"),
        "HitsFile": "coverage-hits.txt",
        "Assemblies": [
            {
                "Name": "App",
                "SourceFiles": {
                    str(project / "src" / "A.cs"): {
                        "Instructions": [
                            _instruction(1, "A", "A.M1", 10),
                            _instruction(2, "A", "A.M2", 20),
                        ]
                    }
                },
            }
        ],
    }
    (project / "coverage.json").write_text(json.dumps(doc))
    (project / "coverage-hits.txt").write_text("1\n1\n")
    return project
