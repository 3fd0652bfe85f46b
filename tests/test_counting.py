import pytest

from problemset.counting import (
    array_coloring,
    bear_years,
    beautiful_matrix_moves,
    elephant_steps,
    gaming_forces_spells,
    next_round_count,
    phone_desktop_screens,
    soldier_borrow,
    split_multiset_operations,
    team_problem_count,
    wrong_subtraction,
)


def _grid_with_one_at(row, col):
    grid = [[0] * 5 for _ in range(5)]
    grid[row][col] = 1
    return grid


def test_array_coloring_parity_flips_with_odd_values():
    base = [2, 4, 6]
    assert array_coloring(base) is True
    assert array_coloring(base + [3]) is False
    assert array_coloring(base + [3, 5]) is True
    assert array_coloring(base + [3, 8]) == array_coloring(base + [3])


@pytest.mark.parametrize("a,b", [(4, 7), (4, 9), (1, 1), (1, 10), (10, 10)])
def test_bear_years_is_first_year_limak_is_heavier(a, b):
    years = bear_years(a, b)
    assert a * 3**years > b * 2**years
    if years:
        assert a * 3 ** (years - 1) <= b * 2 ** (years - 1)


def test_bear_years_none_needed_when_already_heavier():
    assert bear_years(9, 3) == bear_years(10, 1)
    assert bear_years(9, 3) < bear_years(3, 9)


def test_bear_years_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        bear_years(0, 5)


def test_beautiful_matrix_centre_needs_no_moves():
    assert beautiful_matrix_moves(_grid_with_one_at(2, 2)) == 0


def test_beautiful_matrix_is_symmetric_and_grows_outward():
    corners = {beautiful_matrix_moves(_grid_with_one_at(r, c)) for r, c in [(0, 0), (0, 4), (4, 0), (4, 4)]}
    assert len(corners) == 1
    assert beautiful_matrix_moves(_grid_with_one_at(1, 2)) < beautiful_matrix_moves(_grid_with_one_at(0, 2))
    assert beautiful_matrix_moves(_grid_with_one_at(0, 2)) < corners.pop()


def test_beautiful_matrix_rejects_wrong_shape():
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 5 for _ in range(4)])
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 4 for _ in range(5)])


@pytest.mark.parametrize("x", range(1, 40))
def test_elephant_steps_is_minimal(x):
    steps = elephant_steps(x)
    assert 5 * steps >= x
    assert 5 * (steps - 1) < x


def test_elephant_steps_non_positive_distance():
    assert elephant_steps(-3) == elephant_steps(0)
    assert elephant_steps(0) < elephant_steps(1)


@pytest.mark.parametrize("pairs", [1, 2, 5])
def test_gaming_forces_pairs_of_ones(pairs):
    assert gaming_forces_spells([1] * (2 * pairs)) == pairs


def test_gaming_forces_without_ones_is_one_spell_each():
    healths = [2, 7, 3, 4]
    assert gaming_forces_spells(healths) == len(healths)


def test_gaming_forces_extra_monster_adds_spell():
    base = [1, 1, 1, 5]
    assert gaming_forces_spells(base + [9]) == gaming_forces_spells(base) + 1


def test_next_round_example():
    assert next_round_count([10, 9, 8, 7, 7, 7, 5, 5], 5) == 6


def test_next_round_zero_scores_do_not_advance():
    assert next_round_count([0, 0, 0, 0], 2) < next_round_count([1, 1, 1, 1], 2)
    assert next_round_count([1, 1, 1, 1], 2) == 4


@pytest.mark.parametrize("k", [0, 5])
def test_next_round_rejects_bad_place(k):
    with pytest.raises(ValueError):
        next_round_count([3, 2, 1, 1], k)


def test_team_counts_problems_with_two_votes():
    votes = [(1, 1, 0), (1, 1, 1), (0, 1, 1)]
    assert team_problem_count(votes) == len(votes)
    assert team_problem_count(votes + [(1, 0, 0), (0, 0, 0)]) == len(votes)


def test_soldier_borrow_worked_sum():
    assert soldier_borrow(1, 0, 4) == 10


def test_soldier_borrow_reduces_by_money_held():
    full = soldier_borrow(3, 0, 4)
    for money in range(full + 1):
        assert soldier_borrow(3, money, 4) + money == full
    assert soldier_borrow(3, full + 50, 4) == soldier_borrow(3, full, 4)


def test_wrong_subtraction_example():
    assert wrong_subtraction(512, 4) == 50


def test_wrong_subtraction_zero_steps_keeps_number():
    assert wrong_subtraction(1000000000, 0) == 1000000000


def test_wrong_subtraction_steps_compose():
    assert wrong_subtraction(wrong_subtraction(9876, 3), 4) == wrong_subtraction(9876, 7)


def test_split_multiset_worked_example():
    assert split_multiset_operations(6, 3) == 3


def test_split_multiset_one_needs_nothing():
    assert split_multiset_operations(1, 5) == split_multiset_operations(1, 2)
    assert split_multiset_operations(1, 5) < split_multiset_operations(2, 5)


def test_split_multiset_with_pairs_takes_one_per_unit():
    assert split_multiset_operations(16, 2) == 16 - 1


def test_split_multiset_rejects_k_below_two():
    with pytest.raises(ValueError):
        split_multiset_operations(5, 1)


@pytest.mark.parametrize("x", [0, 1, 6, 7, 20, 44])
@pytest.mark.parametrize("y", [0, 1, 2, 3, 9])
def test_phone_desktop_screens_is_minimal(x, y):
    screens = phone_desktop_screens(x, y)

    def fits(count):
        return 2 * count >= y and 15 * count >= x + 4 * y

    assert fits(screens)
    assert screens == 0 or not fits(screens - 1)