import random

import pytest

from judgebox.puzzles import (
    balloon_winner,
    game_scores,
    knapsack,
    max_submatrix,
    max_times_power,
    palindrome_bases,
    tetravex_possible,
)


@pytest.mark.parametrize(
    "a, b, winner",
    [(343, 49, 49), (3599, 610, 610), (62, 36, 62)],
)
def test_balloon_winner_samples(a, b, winner):
    assert balloon_winner(a, b) == winner


def test_balloon_winner_is_symmetric():
    for a, b in [(343, 49), (3599, 610), (62, 36), (12, 35)]:
        assert balloon_winner(a, b) == balloon_winner(b, a)
        assert balloon_winner(a, b) in (a, b)


def test_balloon_winner_rejects_zero():
    with pytest.raises(ValueError):
        balloon_winner(0, 10)


def _grid_tiles(n, seed):
    rng = random.Random(seed)
    horizontal = [[rng.randint(0, 9) for _ in range(n + 1)] for _ in range(n)]
    vertical = [[rng.randint(0, 9) for _ in range(n)] for _ in range(n + 1)]
    tiles = []
    for r in range(n):
        for c in range(n):
            tiles.append(
                (vertical[r][c], horizontal[r][c + 1], vertical[r + 1][c], horizontal[r][c])
            )
    rng.shuffle(tiles)
    return tiles


def test_tetravex_sample_possible():
    tiles = [(5, 9, 1, 4), (4, 4, 5, 6), (6, 8, 5, 4), (0, 4, 4, 3)]
    assert tetravex_possible(2, tiles)


def test_tetravex_sample_impossible():
    tiles = [(1, 1, 1, 1), (2, 2, 2, 2), (3, 3, 3, 3), (4, 4, 4, 4)]
    assert not tetravex_possible(2, tiles)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_tetravex_shuffled_solution_is_found(seed):
    assert tetravex_possible(3, _grid_tiles(3, seed))


def test_tetravex_single_tile():
    assert tetravex_possible(1, [(7, 8, 9, 1)])


def test_tetravex_wrong_tile_count():
    with pytest.raises(ValueError):
        tetravex_possible(2, [(1, 1, 1, 1)])


def test_game_scores_one_two_rule():
    assert game_scores([1], [2]) == (6, 0)


def test_game_scores_equal_hands_score_nothing():
    hand = [1, 3, 4, 5, 2]
    assert game_scores(hand, hand) == (0, 0)


def test_game_scores_swap_players():
    a = [1, 3, 4, 5, 2, 5]
    b = [1, 2, 3, 4, 5, 1]
    score_a, score_b = game_scores(a, b)
    assert game_scores(b, a) == (score_b, score_a)


def test_game_scores_higher_card_far_apart():
    assert game_scores([5], [1]) == (5, 0)


def test_game_scores_length_mismatch():
    with pytest.raises(ValueError):
        game_scores([1, 2], [1])


def test_max_submatrix_sample():
    grid = [[0, -2, -7, 0], [9, 2, -6, 2], [-4, 1, -4, 1], [-1, 8, 0, -2]]
    assert max_submatrix(grid) == 15


def test_max_submatrix_all_positive_is_total():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert max_submatrix(grid) == sum(map(sum, grid))


def test_max_submatrix_all_negative_is_largest_cell():
    grid = [[-5, -3], [-9, -4]]
    assert max_submatrix(grid) == -3


def test_max_submatrix_single_cell():
    assert max_submatrix([[-42]]) == -42


def test_max_submatrix_empty():
    with pytest.raises(ValueError):
        max_submatrix([])


def test_palindrome_bases_seventeen():
    assert palindrome_bases(17) == [2, 4, 16]


def test_palindrome_bases_single_digit_bases():
    assert set(range(6, 17)) <= set(palindrome_bases(5))


def test_palindrome_bases_zero_everywhere():
    assert palindrome_bases(0) == list(range(2, 17))


def test_palindrome_bases_negative():
    with pytest.raises(ValueError):
        palindrome_bases(-1)


def test_knapsack_everything_fits():
    items = [(3, 4), (2, 3), (5, 8)]
    assert knapsack(items, 10) == 15


def test_knapsack_zero_capacity():
    assert knapsack([(1, 5), (2, 7)], 0) == 0


def test_knapsack_monotonic_in_capacity():
    items = [(3, 4), (4, 5), (2, 3), (5, 8), (1, 1)]
    results = [knapsack(items, cap) for cap in range(16)]
    assert results == sorted(results)


def test_knapsack_order_does_not_matter():
    items = [(3, 4), (4, 5), (2, 3), (5, 8), (1, 1)]
    assert knapsack(items, 7) == knapsack(list(reversed(items)), 7)


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack([(1, 1)], -1)


def test_max_times_power_single_value():
    assert max_times_power([5]) == 5


def test_max_times_power_doubles_per_extra_value():
    values = [7, 300, 12]
    base = max_times_power(values)
    assert max_times_power(values + [1]) == base * 2 % 2006


def test_max_times_power_in_range():
    rng = random.Random(4)
    for _ in range(20):
        values = [rng.randint(-5000, 5000) for _ in range(rng.randint(1, 40))]
        assert 0 <= max_times_power(values) < 2006


def test_max_times_power_empty():
    with pytest.raises(ValueError):
        max_times_power([])