"""Command-line front end that reads a problem's input text and prints its answer."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator

from .containers import ACError, apply_ac, run_set_commands
from .graphs import distances_to_target, tomato_days

_SET_COMMANDS_WITH_ARGUMENT = frozenset({"add", "remove", "check", "toggle"})


class _Tokens:
    """Whitespace-separated tokens of an input text, read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("the input ended too early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def grid(self, height: int, width: int) -> list[list[int]]:
        return [[self.number() for _ in range(width)] for _ in range(height)]


def _solve_ac(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.number()):
        commands = tokens.word()
        tokens.number()
        values = [int(v) for v in re.findall(r"\d+", tokens.word())]
        try:
            result = apply_ac(commands, values)
        except ACError:
            lines.append("error")
        else:
            lines.append("[" + ",".join(map(str, result)) + "]")
    return lines


def _solve_set(tokens: _Tokens) -> list[str]:
    commands = []
    for _ in range(tokens.number()):
        name = tokens.word()
        if name in _SET_COMMANDS_WITH_ARGUMENT:
            commands.append(f"{name} {tokens.number()}")
        else:
            commands.append(name)
    return [str(answer) for answer in run_set_commands(commands)]


def _solve_tomato(tokens: _Tokens) -> list[str]:
    width = tokens.number()
    height = tokens.number()
    return [str(tomato_days(tokens.grid(height, width)))]


def _solve_shortest_distance(tokens: _Tokens) -> list[str]:
    height = tokens.number()
    width = tokens.number()
    distances = distances_to_target(tokens.grid(height, width))
    return [" ".join(map(str, row)) for row in distances]


_SOLVERS: dict[str, Callable[[_Tokens], list[str]]] = {
    "5430": _solve_ac,
    "7576": _solve_tomato,
    "11723": _solve_set,
    "14940": _solve_shortest_distance,
}


def solve(problem: str, text: str) -> str:
    """Solve the numbered problem for the given input text and return the output."""
    try:
        solver = _SOLVERS[str(problem)]
    except KeyError:
        known = ", ".join(sorted(_SOLVERS, key=int))
        raise ValueError(f"unknown problem {problem!r}; known: {known}") from None
    lines = solver(_Tokens(text))
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="bojsolve", description="Solve a problem from its input text."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS, key=int))
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=None,
        help="input file (standard input when left out)",
    )
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with args.input as handle:
            text = handle.read()
    try:
        output = solve(args.problem, text)
    except ValueError as error:
        print(f"bojsolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())