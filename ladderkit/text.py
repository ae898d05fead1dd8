"""Puzzles about strings: words, codes and small string games."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterable

_HQ9_PRINTING = frozenset("HQ9")
_BORZE = {".": "0", "-.": "1", "--": "2"}
_MAGIC = re.compile(r"(?:144|14|1)*")
_WATER_RUN = re.compile(r"\.+")
_ABBREVIATE_ABOVE = 10
_MAX_DOUBLINGS = 6


def hq9_has_output(program: str) -> bool:
    """Tell whether an HQ9+ program prints anything."""
    return any(ch in _HQ9_PRINTING for ch in program)


def is_amusing_joke(guest: str, host: str, pile: str) -> bool:
    """Tell whether ``pile`` is exactly a reshuffle of the two names."""
    return Counter(guest + host) == Counter(pile)


def stones_to_remove(colors: str) -> int:
    """Count stones to take so that no neighbours share a colour."""
    return sum(a == b for a, b in zip(colors, colors[1:]))


def queue_after(queue: str, seconds: int) -> str:
    """Return the queue after boys ("B") let girls ("G") forward for ``seconds``."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    for _ in range(seconds):
        moved = queue.replace("BG", "GB")
        if moved == queue:
            break
        queue = moved
    return queue


def capitalize_word(word: str) -> str:
    """Upper-case the first letter and leave the rest untouched."""
    return word[:1].upper() + word[1:]


def run_bitpp(statements: Iterable[str]) -> int:
    """Run Bit++ statements such as ``X++`` or ``--X`` on x = 0 and return x."""
    x = 0
    for statement in statements:
        if len(statement) < 2:
            raise ValueError(f"not a Bit++ statement: {statement!r}")
        operator = statement[1]
        if operator == "+":
            x += 1
        elif operator == "-":
            x -= 1
    return x


def is_magic_number(digits: str) -> bool:
    """Tell whether ``digits`` is a concatenation of 1, 14 and 144."""
    return _MAGIC.fullmatch(digits) is not None


def decode_borze(code: str) -> str:
    """Decode a Borze string ("." = 0, "-." = 1, "--" = 2) into ternary digits.

    A trailing incomplete symbol is dropped.
    """
    digits = []
    pending = ""
    for ch in code:
        pending += ch
        digit = _BORZE.get(pending)
        if digit is not None:
            digits.append(digit)
            pending = ""
    return "".join(digits)


def rearrange_sum(expression: str) -> str:
    """Rewrite a sum such as ``3+1+2`` with its terms in non-decreasing order."""
    return "+".join(sorted(ch for ch in expression if ch in string.digits))


def normalize_case(word: str) -> str:
    """Put the word in upper case if it has more capitals, otherwise lower case."""
    upper = sum(ch.isupper() for ch in word)
    lower = sum(ch.islower() for ch in word)
    return word.upper() if upper > lower else word.lower()


def digit_xor(first: str, second: str) -> str:
    """Compare two digit strings position by position: "0" if equal, else "1"."""
    if len(second) < len(first):
        raise ValueError("second number is shorter than the first")
    return "".join("0" if a == b else "1" for a, b in zip(first, second))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) > _ABBREVIATE_ABOVE:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def gender_by_name(name: str) -> str:
    """Guess by the parity of distinct letters in a user name."""
    if len(set(name)) % 2 == 1:
        return "IGNORE HIM!"
    return "CHAT WITH HER!"


def doublings_to_contain(x: str, s: str) -> int | None:
    """Fewest doublings of ``x`` (x = x + x) so that ``s`` occurs in it.

    Returns None when five doublings are not enough.
    """
    for operations in range(_MAX_DOUBLINGS):
        if s in x:
            return operations
        x += x
    return None


def water_actions(row: str) -> int:
    """Fewest pours needed to fill every empty cell ("."): 2 with a run of three."""
    longest = max((len(run) for run in _WATER_RUN.findall(row)), default=0)
    if longest >= 3:
        return 2
    return row.count(".")