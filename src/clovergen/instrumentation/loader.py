"""Load an instrumentation result document from disk."""

from pathlib import Path

import structlog
from pydantic import ValidationError

from clovergen.core.errors import InstrumentationError
from clovergen.instrumentation.models import InstrumentationResult

logger = structlog.get_logger()


def load_instrumentation(path: Path) -> InstrumentationResult:
    """Parse the JSON document written by the instrumenter.

    A relative ``HitsFile`` is resolved against the document's directory so
    the result can be used from any working directory.

    Raises:
        InstrumentationError: If the file is missing, is not valid JSON, or
            does not match the instrumentation schema.
    """
    if not path.is_file():
        raise InstrumentationError.not_found(str(path))

    try:
        result = InstrumentationResult.model_validate_json(path.read_bytes())
    except ValidationError as e:
        err = e.errors()[0]
        where = ".".join(str(loc) for loc in err["loc"]) or "document"
        raise InstrumentationError.invalid(str(path), f"{where}: {err['msg']}") from e

    if result.hits_file and not Path(result.hits_file).is_absolute():
        hits_file = str(path.parent / result.hits_file)
        result = result.model_copy(update={"hits_file": hits_file})

    logger.debug(
        "instrumentation loaded",
        path=str(path),
        assemblies=len(result.assemblies),
        files=sum(len(a.source_files) for a in result.assemblies),
    )
    return result
