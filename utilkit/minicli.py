"""A tiny command-line dispatcher: the first registered flag found runs its callback."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from utilkit.simpleset import SimpleSet

__all__ = ["CliArgument", "CliParser"]

Callback = Callable[[list[str], Any], None]


@dataclass
class CliArgument:
    """A flag with an optional shorthand and the callback it triggers."""

    name: str
    callback: Callback
    shorthand: str | None = None
    description: str | None = None
    user_data: Any = None

    def matches(self, token: str) -> bool:
        return token == self.name or (self.shorthand is not None and token == self.shorthand)


class CliParser:
    """Holds registered arguments and dispatches on the command line."""

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self.arguments: list[CliArgument] = []
        self._flags = SimpleSet()

    def add_argument(self, argument: CliArgument) -> None:
        """Register an argument under its name and shorthand."""
        self.arguments.append(argument)
        self._flags.add(argument.name)
        if argument.shorthand:
            self._flags.add(argument.shorthand)

    def is_registered(self, flag: str) -> bool:
        """True if ``flag`` is a registered name or shorthand."""
        return flag in self._flags

    def parse(self, argv: Sequence[str] | None = None) -> CliArgument | None:
        """Run the callback of the first registered flag after argv[0].

        The callback receives the tokens following the flag and the
        argument's user data. Returns the argument that ran, or None.
        """
        tokens = list(sys.argv if argv is None else argv)
        for position, token in enumerate(tokens[1:], start=1):
            for argument in self.arguments:
                if argument.matches(token):
                    argument.callback(tokens[position + 1 :], argument.user_data)
                    return argument
        return None