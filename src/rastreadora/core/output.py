# ABOUTME: Serialization of scraped posters into a single JSON document
# ABOUTME: Sparse encoding (empty fields omitted) written to a file or standard output

import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from rastreadora.core.models import MissingPersonPoster
from rastreadora.errors import OutputError
from rastreadora.utils.logging import get_logger

logger = get_logger(__name__)

_POSTERS = TypeAdapter(list[MissingPersonPoster])


def dump_posters(posters: Sequence[MissingPersonPoster]) -> bytes:
    """Encode posters as one JSON array (UTF-8), omitting fields that hold their empty value."""
    return _POSTERS.dump_json(list(posters), exclude_defaults=True)


def load_posters(payload: bytes | str) -> list[MissingPersonPoster]:
    """Decode a JSON array produced by :func:`dump_posters`."""
    return _POSTERS.validate_json(payload)


def write_output(posters: Sequence[MissingPersonPoster], path: Path | str | None = None) -> int:
    """Write the serialized posters to ``path``, or to standard output when no path is given.

    Returns:
        Number of bytes written

    Raises:
        OutputError: If the destination cannot be written
    """
    output = dump_posters(posters)
    destination = str(path) if path else "<stdout>"
    try:
        if path:
            Path(path).write_bytes(output)
        else:
            sys.stdout.buffer.write(output)
            sys.stdout.buffer.flush()
    except OSError as e:
        logger.error("Unable to write output", destination=destination, error=str(e))
        raise OutputError(f"unable to write {destination}: {e}") from e

    logger.debug("Output written", destination=destination, size=len(output), posters=len(posters))
    return len(output)
