"""The builtins the shell runs itself: echo, export, cd, env, unset, pwd and exit."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from nemshell.cd import change_directory
from nemshell.environment import Environment
from nemshell.libft import atoi

_TOO_MANY_ARGUMENTS = "nemshell: exit: too many arguments\n"
_NUMERIC_REQUIRED = "nemshell: exit: numeric argument required\n"


class ShellExit(Exception):
    """Raised by ``exit``: the shell should stop with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit status {status}")
        self.status = status


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def echo_merge(words: Sequence[str]) -> str:
    """Join words with single spaces; an empty word adds no space after it."""
    parts: list[str] = []
    for position, word in enumerate(words):
        parts.append(word)
        if position + 1 < len(words) and word:
            parts.append(" ")
    return "".join(parts)


def is_n_flag(arg: str) -> bool:
    """True for ``-n``, ``-nn`` and so on."""
    return arg.startswith("-n") and all(char == "n" for char in arg[1:])


def echo(args: Sequence[str], out: TextIO | None = None) -> int:
    """Run ``echo`` with the arguments after the command name.

    Leading ``-n`` flags are dropped.  When only flags are given nothing is
    printed; otherwise the words are printed followed by a newline.
    """
    stream = _stream(out)
    words = list(args)
    if words and words[0].startswith("-n"):
        index = 0
        while index < len(words) and is_n_flag(words[index]):
            index += 1
        if index == len(words):
            return 0
        words = words[index:]
    stream.write(echo_merge(words) + "\n")
    return 0


def _is_number(text: str | None) -> bool:
    return text is None or all("0" <= char <= "9" for char in text)


def exit_builtin(args: Sequence[str], out: TextIO | None = None) -> int:
    """Run ``exit`` with the arguments after the command name.

    Always raises ShellExit: status 1 for too many arguments, 2 for a
    non-numeric one, otherwise the argument modulo 256 (0 without one).
    """
    if len(args) > 1:
        sys.stderr.write(_TOO_MANY_ARGUMENTS)
        raise ShellExit(1)
    value = args[0] if args else None
    if not _is_number(value):
        sys.stderr.write(_NUMERIC_REQUIRED)
        raise ShellExit(2)
    _stream(out).write("exit\n")
    if value is None:
        raise ShellExit(0)
    raise ShellExit(atoi(value) % 256)


def pwd(env: Environment, out: TextIO | None = None) -> int:
    """Print ``PWD``, or the real working directory when it is not set."""
    value = env.pwd_value()
    if value is not None:
        _stream(out).write(value + "\n")
    return 0


def _write_lines(lines: Sequence[str], out: TextIO) -> None:
    for line in lines:
        out.write(line + "\n")


def run_builtin(argv: Sequence[str], env: Environment, out: TextIO | None = None) -> int | None:
    """Run ``argv`` if it names a builtin and return its status.

    Returns None when ``argv`` is not a builtin.  ``exit`` raises ShellExit.
    """
    if not argv:
        return None
    stream = _stream(out)
    name, args = argv[0], list(argv[1:])
    if name == "export":
        if not args:
            _write_lines(env.export(None), stream)
        for argument in args:
            _write_lines(env.export(argument), stream)
        return 0
    if name == "cd":
        return change_directory(env, args[0] if args else None)
    if name == "env":
        _write_lines(env.env_lines(), stream)
        return 0
    if name == "unset":
        for key in args:
            env.unset(key)
        return 0
    if name == "pwd":
        return pwd(env, stream)
    if name == "exit":
        return exit_builtin(args, stream)
    if name == "echo":
        return echo(args, stream)
    return None