"""Functions to open the input source and output sink of a run."""

import io
import sys
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from loguru import logger

from slc.configuration import STDIN_PATH
from slc.errors import SourceOpenError

ENCODING = "utf-8"

# Lines end at "\n" only (a lone "\r" stays inside the line) and terminators are not translated.
READ_NEWLINE = "\n"
# No translation on output either.
WRITE_NEWLINE = ""


def _wrap_stream(stream: TextIO, newline: str) -> tuple[TextIO, bool]:
    """Re-wrap a standard stream so line terminators pass through untranslated.

    Returns the stream to use and whether it is a new wrapper that must be detached afterwards.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream, False
    return io.TextIOWrapper(buffer, encoding=ENCODING, newline=newline), True


@contextmanager
def open_source(path: str | None = None) -> Generator[TextIO]:
    """Context manager yielding a text reader for `path`, or standard input for `-` and None.

    Lines end at LF only and keep their original terminator, so CRLF lines and lone CRs pass through intact.
    Standard input is never closed.

    Raises:
        SourceOpenError: If the file cannot be opened.
    """
    if path is None or path == STDIN_PATH:
        logger.debug("Reading from standard input")
        reader, wrapped = _wrap_stream(sys.stdin, READ_NEWLINE)
        try:
            yield reader
        finally:
            if wrapped:
                reader.detach()
        return

    try:
        reader = Path(path).open(encoding=ENCODING, newline=READ_NEWLINE)  # noqa: SIM115
    except OSError as exc:
        raise SourceOpenError(path, exc) from exc

    logger.debug(f"Reading from {path}")
    with reader:
        yield reader


@contextmanager
def open_sink() -> Generator[TextIO]:
    """Context manager yielding a writer on standard output that writes lines exactly as given."""
    writer, wrapped = _wrap_stream(sys.stdout, WRITE_NEWLINE)
    try:
        yield writer
    finally:
        if wrapped:
            # Hand the buffer back to sys.stdout; anything pending has already been flushed by the slicer.
            try:
                writer.detach()
            except OSError as exc:
                # Only reachable after a failed write, which has already been raised to the caller.
                logger.debug(f"Failed to release standard output: {exc}")
