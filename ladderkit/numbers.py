"""Puzzles about integers: digits, divisibility, primes and small games."""

from __future__ import annotations

import math
from collections.abc import Iterable

_LUCKY_DIGITS = "47"
_BEAUTIFUL_YEAR_LIMIT = 10000


def is_nearly_lucky(n: int) -> bool:
    """Return True when the count of lucky digits (4 and 7) in ``n`` is 4 or 7.

    Non-positive numbers have no digits counted.
    """
    digits = str(n) if n > 0 else ""
    lucky = sum(digit in _LUCKY_DIGITS for digit in digits)
    return lucky in (4, 7)


def insomnia_cure(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count the dragons among ``1..d`` hit by at least one of the four rules."""
    divisors = (k, l, m, n)
    return sum(
        1 for dragon in range(1, d + 1) if any(dragon % step == 0 for step in divisors)
    )


def can_pay_with_coins(n: int, k: int) -> bool:
    """Tell whether ``n`` burles can be paid with coins of value 2 and ``k``."""
    if n % 2 == 0:
        return True
    if k % 2 == 0:
        return False
    # An odd sum needs an odd number of odd coins; one such coin suffices.
    return n - k >= 0


def game_with_integers(n: int) -> str:
    """Name the winner ("First" or "Second") of the divisible-by-three game."""
    return "Second" if n % 3 == 0 else "First"


def next_beautiful_year(year: int) -> int:
    """Return the first year after ``year`` whose digits are all distinct.

    Raises ValueError if there is none up to 10000.
    """
    for candidate in range(year + 1, _BEAUTIFUL_YEAR_LIMIT + 1):
        text = str(candidate)
        if len(set(text)) == len(text):
            return candidate
    raise ValueError(f"no year with distinct digits after {year}")


def is_prime(n: int) -> bool:
    """Trial division up to the square root of ``n``.

    0 and 1 pass, since no divisor is tried for them; negative numbers are rejected.
    """
    if n < 0:
        raise ValueError("is_prime() needs a non-negative number")
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def is_next_prime(n: int, m: int) -> bool:
    """Tell whether ``m`` is the first prime after ``n``."""
    first = next((i for i in range(n + 1, m + 1) if is_prime(i)), None)
    return first == m


def missing_efficiency(efficiencies: Iterable[int]) -> int:
    """Return the efficiency of the last team, given all the others."""
    return -sum(efficiencies)


def walking_master(a: int, b: int, c: int, d: int) -> int | None:
    """Fewest moves from (a, b) to (c, d), or None when (c, d) is unreachable.

    A move is either (+1, +1) or (-1, 0).
    """
    if d < b:
        return None
    rise = d - b
    x = a + rise
    if x < c:
        return None
    return rise + (x - c)