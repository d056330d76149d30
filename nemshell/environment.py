"""The shell's environment: variables, ``export``, ``unset``, ``env`` and ``pwd``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple


@dataclass
class EnvVar:
    """One environment variable.

    ``hidden`` marks a name exported without a value: ``env`` leaves it out,
    ``export`` still lists it.  ``internal`` marks a variable that neither
    ``env`` nor ``export`` shows.
    """

    key: str
    value: str = ""
    hidden: bool = False
    internal: bool = False


class Assignment(NamedTuple):
    """An ``export`` argument split into its parts."""

    key: str
    value: str | None
    append: bool


def parse_assignment(argument: str) -> Assignment:
    """Split ``KEY=value`` or ``KEY+=value``.

    Without an ``=`` the whole argument is the key and the value is None.
    """
    key, sep, value = argument.partition("=")
    if not sep:
        return Assignment(argument, None, False)
    if key.endswith("+"):
        return Assignment(key[:-1], value, True)
    return Assignment(key, value, False)


class Environment:
    """An ordered set of variables, in the order they were defined."""

    def __init__(self, pairs: Iterable[tuple[str, str] | EnvVar] = ()) -> None:
        self._vars: dict[str, EnvVar] = {}
        for item in pairs:
            var = item if isinstance(item, EnvVar) else EnvVar(item[0], item[1])
            self._vars[var.key] = var

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars.values()))

    def get(self, key: str) -> str | None:
        """Value of ``key``, or None when it is not defined."""
        var = self._vars.get(key)
        return None if var is None else var.value

    def set(self, key: str, value: str) -> None:
        """Define or replace ``key``; a replaced variable becomes visible."""
        var = self._vars.get(key)
        if var is None:
            self._vars[key] = EnvVar(key, value)
            return
        var.value = value
        var.hidden = False

    def append(self, key: str, value: str) -> None:
        """Append to the value of ``key``, defining it when missing."""
        var = self._vars.get(key)
        if var is None:
            self.set(key, value)
        else:
            var.value += value

    def unset(self, key: str | None) -> None:
        """Remove ``key``; unknown names are ignored."""
        if key is not None:
            self._vars.pop(key, None)

    def export(self, argument: str | None) -> list[str]:
        """Run ``export`` with one argument and return the lines it prints.

        Without an argument the sorted declaration list is returned.
        """
        if argument is None:
            return self.export_lines()
        assignment = parse_assignment(argument)
        if assignment.value is None:
            self.set(assignment.key, "")
            self._vars[assignment.key].hidden = True
        elif assignment.append:
            self.append(assignment.key, assignment.value)
        else:
            self.set(assignment.key, assignment.value)
        return []

    def env_lines(self) -> list[str]:
        """Lines printed by ``env``."""
        return [
            f"{var.key}={var.value}"
            for var in self._vars.values()
            if not var.hidden and not var.internal
        ]

    def export_lines(self) -> list[str]:
        """Sort the variables by name in place and return ``declare -x`` lines."""
        ordered = sorted(self._vars.values(), key=lambda var: var.key.encode())
        self._vars = {var.key: var for var in ordered}
        return [
            f'declare -x {var.key}="{var.value}"'
            for var in ordered
            if not var.internal
        ]

    def pwd_value(self) -> str | None:
        """What ``pwd`` prints: ``PWD`` if defined, else the real directory."""
        value = self.get("PWD")
        if value is not None:
            return value
        try:
            return os.getcwd()
        except OSError:
            return None