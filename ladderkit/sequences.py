"""Puzzles about lists of numbers: queues, arrays, sums and orderings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest tram capacity for stops given as (leaving, entering) pairs."""
    inside = 0
    capacity = 0
    for leaving, entering in stops:
        inside += entering - leaving
        capacity = max(capacity, inside)
    return capacity


def general_swaps(heights: Sequence[int]) -> int:
    """Adjacent swaps to put a tallest soldier first and a shortest one last."""
    if not heights:
        raise ValueError("general_swaps() needs at least one soldier")
    last = len(heights) - 1
    tallest = heights.index(max(heights))
    shortest = last - list(reversed(heights)).index(min(heights))
    swaps = tallest + (last - shortest)
    if tallest >= shortest:
        swaps -= 1
    return swaps


def balanced_split(values: Sequence[int]) -> int | None:
    """Smallest 1-based k with equal products of ``values[:k]`` and ``values[k:]``.

    The values are ones and twos; None is returned when no split exists.
    """
    if not values:
        raise ValueError("balanced_split() needs a non-empty sequence")
    twos = values.count(2)
    if twos % 2 == 1:
        return None
    seen = 0
    for k, value in enumerate(values, start=1):
        if value == 2:
            seen += 1
        if seen == twos // 2:
            return k
    return None


def ambitious_kid(values: Iterable[int]) -> int:
    """Fewest unit steps to make the product of ``values`` zero."""
    distances = [abs(value) for value in values]
    if not distances:
        raise ValueError("ambitious_kid() needs at least one value")
    return min(distances)


def has_subsegment_mode(values: Iterable[int], k: int) -> bool:
    """Tell whether ``k`` can be the most common element of some subsegment."""
    return k in values


def can_be_good(values: Iterable[int]) -> bool:
    """Tell whether the values can be ordered so all adjacent sums are equal."""
    counts = Counter(values)
    if len(counts) == 1:
        return True
    if len(counts) == 2:
        first, second = counts.values()
        return abs(first - second) <= 1
    return False


def can_sort_jagged(permutation: Sequence[int]) -> bool:
    """Tell whether jagged swaps can sort the permutation (1 must lead)."""
    positions = [position for position, value in enumerate(permutation) if value == 1]
    return not positions or positions[-1] == 0


def min_tank_volume(stations: Iterable[int], x: int) -> int:
    """Smallest tank for a round trip from 0 to ``x`` past the given stations.

    ``x`` itself has no station, so the last leg is travelled twice.
    """
    longest = 0
    previous = 0
    for station in stations:
        longest = max(longest, station - previous)
        previous = station
    return max(longest, 2 * (x - previous))


def can_sort_boxes(values: Sequence[int], k: int) -> bool:
    """Tell whether reversing subarrays of length up to ``k`` can sort the boxes."""
    if k >= 2:
        return True
    ordered = all(a <= b for a, b in zip(values, values[1:]))
    return k == 1 and ordered


def orange_fraction(percentages: Sequence[float]) -> float:
    """Percentage of orange juice in a mix of equal parts of each drink."""
    if not percentages:
        raise ValueError("orange_fraction() needs at least one drink")
    return sum(percentages) / len(percentages)


def max_ratio_count(pedal: Sequence[int], rear: Sequence[int]) -> int:
    """Count the gears whose integer ratio rear/pedal is the largest."""
    ratios = [b // a for b in rear for a in pedal if b % a == 0]
    if not ratios:
        return 0
    return ratios.count(max(ratios))


def search_comparisons(
    array: Sequence[int], queries: Iterable[int]
) -> tuple[int, int]:
    """Comparisons made by forward and backward linear search for each query.

    For repeated elements the first position counts. Raises KeyError for a
    query that is not in the array.
    """
    positions: dict[int, int] = {}
    for position, value in enumerate(array):
        positions.setdefault(value, position)
    size = len(array)
    forward = 0
    backward = 0
    for query in queries:
        position = positions[query]
        forward += position + 1
        backward += size - position
    return forward, backward


def defeats_all_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Tell whether Kirito, fighting in a good order, beats every dragon.

    Each dragon is a (strength, bonus) pair; beating it adds the bonus.
    """
    postponed = []
    for dragon_strength, bonus in dragons:
        if strength > dragon_strength:
            strength += bonus
        else:
            postponed.append((dragon_strength, bonus))
    for dragon_strength, bonus in sorted(postponed):
        if strength <= dragon_strength:
            return False
        strength += bonus
    return True


def solvable_problems(votes: Iterable[tuple[int, int, int]]) -> int:
    """Count problems where at least two of three friends are sure."""
    return sum(1 for triple in votes if sum(triple) >= 2)


def cupboard_seconds(doors: Sequence[tuple[int, int]]) -> int:
    """Seconds to make all left doors alike and all right doors alike."""
    total = len(doors)
    left_open = sum(left for left, _ in doors)
    right_open = sum(right for _, right in doors)
    return min(left_open, total - left_open) + min(right_open, total - right_open)


def min_puzzle_difference(n: int, pieces: Sequence[int]) -> int:
    """Least spread between largest and smallest of ``n`` chosen puzzles."""
    if n < 1 or n > len(pieces):
        raise ValueError("n must be between 1 and the number of puzzles")
    ordered = sorted(pieces)
    return min(high - low for low, high in zip(ordered, ordered[n - 1 :]))


def max_sale_earnings(prices: Iterable[int], m: int) -> int:
    """Most money earned by carrying at most ``m`` TV sets."""
    if m < 0:
        raise ValueError("m must not be negative")
    return sum(-price for price in sorted(prices)[:m] if price < 0)


def is_in_equilibrium(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether the force vectors sum to zero."""
    totals = [0, 0, 0]
    for force in forces:
        totals = [total + part for total, part in zip(totals, force)]
    return not any(totals)


def max_submission_score(values: Iterable[int]) -> int:
    """Best total score: zeros score one (their mex), others score themselves."""
    return sum(value if value != 0 else 1 for value in values)