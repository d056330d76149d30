"""Exit statuses of finished commands and error messages."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

INTERRUPTED = 130
FAILED = 127


class _Waitable(Protocol):
    def wait(self) -> int: ...


def _raw_status(returncode: int) -> int:
    """Turn a process return code back into a wait status word."""
    if returncode < 0:
        return -returncode & 0x7F
    return (returncode & 0xFF) << 8


def normalize_status(raw: int) -> int:
    """Map a wait status word to the shell status: 0, 130 on SIGINT, else 127."""
    if raw == 2:
        return INTERRUPTED
    if raw > 0:
        return FAILED
    return 0


def wait_all(processes: Iterable[_Waitable]) -> int | None:
    """Wait for every process in order and return the last status.

    Stops at the first process that cannot be waited for.  Returns None
    when nothing was waited for.
    """
    status: int | None = None
    for process in processes:
        try:
            returncode = process.wait()
        except ChildProcessError:
            break
        status = normalize_status(_raw_status(returncode))
    return status


def wait_last(processes: Sequence[_Waitable]) -> int | None:
    """Wait only for the last process; any non-zero exit code becomes 127."""
    if not processes:
        return None
    try:
        returncode = processes[-1].wait()
    except ChildProcessError:
        return None
    code = (_raw_status(returncode) >> 8) & 0xFF
    return FAILED if code > 0 else 0


def format_error(command: str, message: str) -> str:
    """The shell's error line for ``command``."""
    return f"nemshell: {command}: {message}"