"""Hits log parsing.

The runtime appends one instruction id per executed instruction to a plain
text log. Repeated ids are repeated executions. A missing log means nothing
ran, which is a valid state (e.g. a report generated before the tests).
"""

import re
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path

import structlog

from clovergen.core.errors import HitsLogError

logger = structlog.get_logger()

HitIndex = Mapping[int, int]
"""Instruction id -> number of recorded executions. Absent ids ran zero times."""

# ASCII digits only: int() alone would also take "1_0" and non-ASCII digits.
_INSTRUCTION_ID = re.compile(r"[+-]?[0-9]+")


def parse_hits(lines: Iterable[str], *, source: str = "<hits>") -> dict[int, int]:
    """Count occurrences of each instruction id.

    The whole log is rejected on the first line that is not an integer;
    there is no best-effort mode.

    Raises:
        HitsLogError: On a blank or non-integer line.
    """
    counts: Counter[int] = Counter()
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not _INSTRUCTION_ID.fullmatch(text):
            raise HitsLogError.malformed(source, line_number, line.rstrip("\r\n"))
        counts[int(text)] += 1
    return dict(counts)


def _decode(path: Path, data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        line_number = data.count(b"\n", 0, e.start) + 1
        start = data.rfind(b"\n", 0, e.start) + 1
        end = data.find(b"\n", e.start)
        raw = data[start:] if end == -1 else data[start:end]
        text = raw.rstrip(b"\r").decode("utf-8", errors="backslashreplace")
        raise HitsLogError.malformed(str(path), line_number, text) from e


def load_hits(path: Path | None) -> dict[int, int]:
    """Read the hits log at ``path``; an absent log yields an empty index.

    Only a regular file counts as present. A directory at ``path`` is treated
    like a missing log.
    """
    if path is None or not path.is_file():
        logger.info("hits log not found, assuming no executions", path=str(path) if path else None)
        return {}

    hits = parse_hits(_decode(path, path.read_bytes()).splitlines(), source=str(path))

    logger.info(
        "hits loaded",
        path=str(path),
        distinct_ids=len(hits),
        total_hits=sum(hits.values()),
    )
    return hits
