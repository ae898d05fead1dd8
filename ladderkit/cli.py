"""Command line entry point: solve a puzzle from its judge-style input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from ladderkit.sequences import balanced_split, orange_fraction, search_comparisons


class InputFormatError(ValueError):
    """The puzzle input is truncated or holds something other than an integer."""


class _Tokens:
    """Whitespace-separated tokens of a puzzle input, read as integers."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def integer(self) -> int:
        try:
            token = next(self._items)
        except StopIteration:
            raise InputFormatError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise InputFormatError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise InputFormatError(f"negative count: {count}")
        return [self.integer() for _ in range(count)]


def _one_and_two(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.integer()):
        values = tokens.integers(tokens.integer())
        if not values:
            raise InputFormatError("a test case needs at least one value")
        k = balanced_split(values)
        lines.append(str(-1 if k is None else k))
    return lines


def _drinks(tokens: _Tokens) -> list[str]:
    percentages = tokens.integers(tokens.integer())
    if not percentages:
        raise InputFormatError("at least one drink is needed")
    return [f"{orange_fraction(percentages):.6g}"]


def _effective_approach(tokens: _Tokens) -> list[str]:
    array = tokens.integers(tokens.integer())
    queries = tokens.integers(tokens.integer())
    try:
        forward, backward = search_comparisons(array, queries)
    except KeyError as missing:
        raise InputFormatError(f"query {missing.args[0]} is not in the array") from None
    return [f"{forward} {backward}"]


_PUZZLES: dict[str, Callable[[_Tokens], list[str]]] = {
    "one-and-two": _one_and_two,
    "drinks": _drinks,
    "effective-approach": _effective_approach,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ladderkit",
        description="Solve a puzzle, reading its input in the judge's format.",
    )
    parser.add_argument("puzzle", choices=sorted(_PUZZLES), help="puzzle to solve")
    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="file holding the input (standard input by default)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 on success and 1 on bad puzzle input."""
    args = _parser().parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as error:
        print(f"ladderkit: {error}", file=sys.stderr)
        return 1
    try:
        lines = _PUZZLES[args.puzzle](_Tokens(text))
    except InputFormatError as error:
        print(f"ladderkit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())