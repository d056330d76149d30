"""Opening the files named by ``<``, ``>`` and ``>>`` redirections."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Sequence

from nemshell.status import format_error

_MODE = 0o644
_NO_SUCH_FILE = "no such file or directory\n"
_AMBIGUOUS = "ambiguous redirect\n"


class RedirectionError(Exception):
    """An input redirection names a file that cannot be opened."""

    status = 1

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(format_error(path, reason).rstrip("\n"))
        self.path = path
        self.reason = reason


def _require_paths(paths: Sequence[str]) -> None:
    if not paths:
        raise ValueError("a redirection needs at least one file name")


def _open_for_writing(path: str, append: bool) -> BinaryIO | None:
    flags = os.O_CREAT | os.O_WRONLY | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(path, flags, _MODE)
    except OSError as exc:
        print(f"open: {exc.strerror}", file=sys.stderr)
        return None
    return os.fdopen(fd, "ab" if append else "wb")


def open_output(paths: Sequence[str], append: bool) -> BinaryIO | None:
    """Create every file in ``paths`` and return the last one open for writing.

    Files are truncated, or appended to when ``append`` is true.  A file that
    cannot be opened is reported on stderr and skipped; None is returned when
    the last one fails.
    """
    _require_paths(paths)
    *earlier, last = paths
    for path in earlier:
        handle = _open_for_writing(path, append)
        if handle is not None:
            handle.close()
    return _open_for_writing(last, append)


def _open_for_reading(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError:
        reason = _AMBIGUOUS if "*" in path else _NO_SUCH_FILE
        raise RedirectionError(path, reason) from None


def open_input(paths: Sequence[str]) -> BinaryIO:
    """Check every file in ``paths`` and return the last one open for reading.

    Raises RedirectionError for the first file that cannot be opened.
    """
    _require_paths(paths)
    *earlier, last = paths
    for path in earlier:
        _open_for_reading(path).close()
    return _open_for_reading(last)