"""The ``cd`` builtin and the logical ``PWD`` bookkeeping behind it."""

from __future__ import annotations

import os
import sys

from nemshell.environment import Environment
from nemshell.libft import strtrim
from nemshell.status import format_error

_NO_SUCH_DIRECTORY = "No such file or directory\n"
_HOME_UNSET = "nemshell : HOME is probably unset!\n"
_OLDPWD_UNSET = "nemshell: cd: OLDPWD not set\n"


def _report(message: str) -> None:
    sys.stderr.write(message)


def _getcwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _try_chdir(path: str | None) -> bool:
    if path is None:
        return False
    try:
        os.chdir(path)
    except (OSError, ValueError):
        return False
    return True


def _chdir(path: str) -> bool:
    """Change directory, reporting a failure on stderr."""
    if _try_chdir(path):
        return True
    _report(format_error(path, _NO_SUCH_DIRECTORY))
    return False


def search_and_replace(text: str | None, char: str | None, insert: str | None) -> str | None:
    """Put ``insert`` in place of the first ``char`` of ``text``.

    Later occurrences of ``char`` are dropped.  A ``char`` directly after a
    replaced one is kept as it is.  When any argument is missing ``text`` is
    returned unchanged.
    """
    if not text or not char or insert is None:
        return text
    out: list[str] = []
    inserted = False
    index = 0
    while index < len(text):
        if text[index] == char:
            index += 1
            if not inserted:
                out.append(insert)
                inserted = True
        if index < len(text):
            out.append(text[index])
            index += 1
    return "".join(out)


def split_pwd(pwd: str) -> list[str]:
    """Split a path into a root ``"/"`` and components with their trailing slash.

    Joining the parts gives the path back: ``"/home/user"`` becomes
    ``["/", "home/", "user"]``.
    """
    parts = ["/"]
    index = 0
    while index < len(pwd):
        if pwd[index] == "/":
            index += 1
            end = pwd.find("/", index)
            parts.append(pwd[index:] if end < 0 else pwd[index:end + 1])
        if index < len(pwd):
            index += 1
    return parts


def strip_trailing_slash(path: str | None) -> str | None:
    """Drop one trailing ``/`` from ``path``."""
    if path and path.endswith("/"):
        return path[:-1]
    return path


def is_symbolic_link(path: str | None) -> bool:
    """True when ``path`` itself is a symbolic link."""
    if not path:
        return False
    return os.path.islink(path)


def _drop_last_component(parts: list[str]) -> list[str]:
    if len(parts) <= 1:
        return []
    remaining = parts[:-1]
    remaining[-1] = strip_trailing_slash(remaining[-1]) or ""
    return remaining


def _set_pwd_from_parts(env: Environment, parts: list[str]) -> None:
    if parts:
        env.set("PWD", "".join(parts))


def home_path(env: Environment, path: str | None) -> int:
    """``cd`` with no argument or one starting with ``~``."""
    home = env.get("HOME")
    new_path = search_and_replace(path, "~", home) if path else home
    if not _try_chdir(new_path):
        if new_path is None:
            _report(_HOME_UNSET)
        else:
            _report(format_error(new_path, _NO_SUCH_DIRECTORY))
        return 1
    env.set("PWD", strip_trailing_slash(new_path) or "")
    return 0


def absolute_path(env: Environment, path: str) -> int:
    """``cd`` to a path starting with ``/``."""
    old_pwd = _getcwd()
    if old_pwd is None:
        return 1
    status = 0 if _chdir(path) else 1
    env.set("OLDPWD", old_pwd)
    current = _getcwd()
    if current is not None:
        env.set("PWD", current)
    return status


def go_old_pwd(env: Environment) -> int:
    """``cd -``: return to ``OLDPWD``."""
    old_pwd = env.get("OLDPWD")
    if not _try_chdir(old_pwd):
        _report(_OLDPWD_UNSET)
        return 1
    env.set("PWD", old_pwd or "")
    return 0


def _parent(env: Environment, current_pwd: str | None) -> int:
    if is_symbolic_link(current_pwd):
        env.set("OLDPWD", current_pwd or "")
        parts = _drop_last_component(split_pwd(env.get("PWD") or ""))
        _set_pwd_from_parts(env, parts)
        return 0
    if not _chdir(".."):
        return 1
    if current_pwd is not None:
        env.set("OLDPWD", current_pwd)
    current = _getcwd()
    if current is not None:
        env.set("PWD", current)
    return 0


def change_directory(env: Environment, path: str | None) -> int:
    """Run ``cd`` with an optional argument and return the exit status."""
    old_pwd = env.get("PWD")
    if path is None or path.startswith("~"):
        return home_path(env, path)
    if path.startswith("/"):
        return absolute_path(env, path)
    if path.startswith("-"):
        return go_old_pwd(env)
    if path == "..":
        return _parent(env, old_pwd)
    if not _chdir(path):
        return 1
    trimmed = strtrim(path, "./")
    if old_pwd is not None:
        env.set("OLDPWD", old_pwd)
    node = "/" + trimmed if trimmed else _getcwd()
    if is_symbolic_link(strip_trailing_slash(path)) and node is not None:
        parts = split_pwd(env.get("PWD") or "")
        parts.append(node)
        _set_pwd_from_parts(env, parts)
    else:
        current = _getcwd()
        if current is not None:
            env.set("PWD", current)
    return 0