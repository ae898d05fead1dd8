import math

import pytest

from ladderkit.sequences import (
    ambitious_kid,
    balanced_split,
    can_be_good,
    can_sort_boxes,
    can_sort_jagged,
    cupboard_seconds,
    defeats_all_dragons,
    general_swaps,
    has_subsegment_mode,
    is_in_equilibrium,
    max_ratio_count,
    max_sale_earnings,
    max_submission_score,
    min_puzzle_difference,
    min_tank_volume,
    orange_fraction,
    search_comparisons,
    solvable_problems,
    tram_capacity,
)


def test_tram_single_stop_capacity_is_boarders():
    assert tram_capacity([(0, 7)]) == 7


def test_tram_final_emptying_stop_does_not_change_capacity():
    stops = [(0, 3), (2, 5), (4, 2)]
    assert tram_capacity(stops + [(4, 0)]) == tram_capacity(stops)


def test_general_swaps_already_arranged_lists_agree():
    assert general_swaps([9, 1]) == general_swaps([9, 5, 1])


def test_general_swaps_uses_leftmost_tallest():
    assert general_swaps([7, 7, 1]) == general_swaps([7, 1])


def test_general_swaps_empty_raises():
    with pytest.raises(ValueError):
        general_swaps([])


@pytest.mark.parametrize(
    "values", [[2, 2, 1, 2, 1, 2], [1, 1, 1], [2, 1, 2, 1], [1, 2, 2, 2, 2, 1]]
)
def test_balanced_split_products_match(values):
    k = balanced_split(values)
    assert math.prod(values[:k]) == math.prod(values[k:])
    assert all(
        math.prod(values[:j]) != math.prod(values[j:]) for j in range(1, k)
    )


def test_balanced_split_odd_twos_has_no_split():
    assert balanced_split([1, 2, 1]) is None


def test_balanced_split_empty_raises():
    with pytest.raises(ValueError):
        balanced_split([])


def test_ambitious_kid_smallest_distance():
    assert ambitious_kid([2, -6, 4]) == 2


def test_ambitious_kid_sign_invariant():
    values = [8, -3, 11, -20]
    assert ambitious_kid(values) == ambitious_kid([-v for v in values])


def test_ambitious_kid_empty_raises():
    with pytest.raises(ValueError):
        ambitious_kid([])


def test_has_subsegment_mode():
    assert has_subsegment_mode([1, 4, 3, 4, 1], 4)
    assert not has_subsegment_mode([2, 3, 5], 4)


def test_can_be_good():
    assert can_be_good([8, 9])
    assert can_be_good([5, 5, 5])
    assert can_be_good([1, 1, 2, 2, 2])
    assert not can_be_good([1, 1, 1, 2])
    assert not can_be_good([1, 2, 3])


def test_can_sort_jagged():
    assert can_sort_jagged([1, 3, 2])
    assert not can_sort_jagged([2, 1, 3])
    assert not can_sort_jagged([3, 2, 1])


def test_min_tank_volume_station_gap_dominates():
    assert min_tank_volume([3], 4) == 3


def test_min_tank_volume_is_at_least_every_gap():
    stations = [1, 2, 5, 6]
    x = 7
    volume = min_tank_volume(stations, x)
    points = [0, *stations]
    assert all(volume >= b - a for a, b in zip(points, points[1:]))
    assert volume >= min_tank_volume([], x - stations[-1])


def test_can_sort_boxes():
    assert can_sort_boxes([3, 2, 1], 2)
    assert can_sort_boxes([1, 2, 2, 3], 1)
    assert not can_sort_boxes([3, 1, 2], 1)


def test_orange_fraction_equal_drinks():
    assert orange_fraction([40, 40]) == pytest.approx(40)


def test_orange_fraction_between_bounds():
    values = [50, 50, 100, 0]
    result = orange_fraction(values)
    assert min(values) <= result <= max(values)


def test_orange_fraction_empty_raises():
    with pytest.raises(ValueError):
        orange_fraction([])


def test_max_ratio_count_duplicates_all_count():
    rear = [7, 7, 7]
    assert max_ratio_count([1], rear) == len(rear)


def test_max_ratio_count_no_integer_ratio():
    assert not max_ratio_count([2], [3, 5])


def test_search_comparisons_small():
    assert search_comparisons([1, 2], [1]) == (1, 2)


def test_search_comparisons_sum_invariant():
    array = [3, 1, 2, 5]
    queries = [1, 2, 3, 5, 5]
    forward, backward = search_comparisons(array, queries)
    assert forward + backward == (len(array) + 1) * len(queries)


def test_search_comparisons_first_position_counts():
    forward, _ = search_comparisons([5, 5, 5], [5])
    assert forward == search_comparisons([5], [5])[0]


def test_search_comparisons_missing_query_raises():
    with pytest.raises(KeyError):
        search_comparisons([1, 2], [3])


def test_defeats_all_dragons():
    assert defeats_all_dragons(2, [(1, 99), (100, 0)])
    assert defeats_all_dragons(2, [(100, 0), (1, 99)])
    assert not defeats_all_dragons(10, [(100, 100)])
    assert not defeats_all_dragons(5, [(5, 10)])


def test_solvable_problems_counts_agreed():
    agreed = [(1, 1, 0), (1, 1, 1), (0, 1, 1)]
    unsure = [(1, 0, 0), (0, 0, 0)]
    assert solvable_problems(agreed + unsure) == len(agreed)


def test_cupboard_seconds_uniform_is_free():
    assert not cupboard_seconds([(1, 0), (1, 0), (1, 0)])


def test_cupboard_seconds_flip_symmetry():
    doors = [(0, 1), (1, 0), (0, 1), (1, 1), (0, 1)]
    flipped = [(1 - l, 1 - r) for l, r in doors]
    assert cupboard_seconds(doors) == cupboard_seconds(flipped)


def test_min_puzzle_difference_example():
    assert min_puzzle_difference(4, [10, 12, 10, 7, 5, 22]) == 5


def test_min_puzzle_difference_all_pieces():
    pieces = [9, 4, 17]
    assert min_puzzle_difference(len(pieces), pieces) == max(pieces) - min(pieces)


@pytest.mark.parametrize("n", [0, 4])
def test_min_puzzle_difference_bad_n_raises(n):
    with pytest.raises(ValueError):
        min_puzzle_difference(n, [1, 2, 3])


def test_max_sale_earnings_example():
    assert max_sale_earnings([-6, 0, 35, -2, 4], 3) == 8


def test_max_sale_earnings_large_m_takes_every_negative():
    assert max_sale_earnings([-3, 9, -4], 10) == max_sale_earnings([-3, -4], 2)


def test_max_sale_earnings_no_negatives():
    assert not max_sale_earnings([1, 2, 3], 2)


def test_max_sale_earnings_negative_m_raises():
    with pytest.raises(ValueError):
        max_sale_earnings([-1], -1)


def test_is_in_equilibrium():
    assert is_in_equilibrium([(3, -1, 7), (-5, 2, -4), (2, -1, -3)])
    assert not is_in_equilibrium([(4, 1, 7), (-2, 4, -1), (1, -5, -3)])


def test_max_submission_score_zero_counts_as_one():
    assert max_submission_score([0, 5]) == max_submission_score([1, 5])
    assert max_submission_score([3, 4]) == 3 + 4