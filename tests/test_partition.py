"""Tests covering the board partition search."""

from __future__ import annotations

import itertools

import pytest

from tilesolve import solve
from tilesolve.partition import (
    GroupSizes,
    find_partition,
    group_size_targets,
    solve_board,
    verify_partition,
)
from tilesolve.pieces import WILDCARD, Color, Piece, Ranked, full_deck
from tilesolve.validate import valid_set

K, B, R, O = Color.BLACK, Color.BLUE, Color.RED, Color.ORANGE

SCENARIO_A: list[Piece] = [
    Ranked(1, K),
    Ranked(1, R),
    Ranked(1, B),
    Ranked(2, K),
    WILDCARD,
    Ranked(2, B),
]


def _triples(targets: list[GroupSizes]) -> list[tuple[int, int, int]]:
    return [sizes.as_tuple() for sizes in targets]


def test_group_size_targets_single_option() -> None:
    assert _triples(group_size_targets(5)) == [(0, 0, 1)]
    assert _triples(group_size_targets(6)) == [(2, 0, 0)]


def test_group_size_targets_order() -> None:
    assert _triples(group_size_targets(20)) == [
        (4, 2, 0),
        (0, 5, 0),
        (5, 0, 1),
        (1, 3, 1),
        (2, 1, 2),
        (0, 0, 4),
    ]


def test_group_size_targets_full_board() -> None:
    assert len(group_size_targets(98)) == 90


@pytest.mark.parametrize("total", [1, 2])
def test_group_size_targets_unreachable(total: int) -> None:
    assert group_size_targets(total) == []


def test_peel_prefers_smallest_group_size() -> None:
    assert GroupSizes(1, 1, 1).peel() == (3, GroupSizes(0, 1, 1))
    assert GroupSizes(0, 1, 1).peel() == (4, GroupSizes(0, 0, 1))
    assert GroupSizes(0, 0, 1).peel() == (5, GroupSizes(0, 0, 0))


def test_allow_case_with_two_groups() -> None:
    assert solve_board(SCENARIO_A) == [
        [Ranked(1, K), Ranked(1, B), Ranked(1, R)],
        [Ranked(2, K), Ranked(2, B), WILDCARD],
    ]


def test_search_commits_lowest_index_combination_first() -> None:
    assert find_partition(SCENARIO_A) == [(0, 1, 2), (3, 4, 5)]


def test_single_group_is_sorted_by_color() -> None:
    board = [Ranked(9, O), Ranked(9, K), Ranked(9, R)]

    assert solve(board) == [[Ranked(9, K), Ranked(9, R), Ranked(9, O)]]


def test_gap_too_wide_has_no_solution() -> None:
    assert solve([Ranked(1, O), WILDCARD, WILDCARD, Ranked(6, O)]) is None


@pytest.mark.parametrize("board", [[], [Ranked(4, R)], [Ranked(4, R), Ranked(5, R)]])
def test_tiny_boards_have_no_solution(board: list[Piece]) -> None:
    assert solve(board) is None


def test_run_clamps_to_rank_one() -> None:
    assert solve([Ranked(1, R), WILDCARD, WILDCARD]) == [[Ranked(1, R), WILDCARD, WILDCARD]]


def test_search_backtracks_out_of_a_dead_end() -> None:
    # Taking 1K 2K 3K first strands 4K, so the search must fall back to 2K 3K 4K.
    board = [
        Ranked(1, K),
        Ranked(2, K),
        Ranked(3, K),
        Ranked(4, K),
        Ranked(1, B),
        Ranked(1, R),
    ]

    result = solve(board)

    assert result == [
        [Ranked(1, K), Ranked(1, B), Ranked(1, R)],
        [Ranked(2, K), Ranked(3, K), Ranked(4, K)],
    ]


def test_eight_pieces_split_into_two_fours() -> None:
    board = [Ranked(rank, B) for rank in range(1, 5)] + [Ranked(9, color) for color in (K, B, R, O)]

    result = solve(board)

    assert result == [
        [Ranked(1, B), Ranked(2, B), Ranked(3, B), Ranked(4, B)],
        [Ranked(9, K), Ranked(9, B), Ranked(9, R), Ranked(9, O)],
    ]


def test_wildcard_only_groups_are_never_committed() -> None:
    assert solve([WILDCARD, WILDCARD, WILDCARD]) is None

    board = [WILDCARD, WILDCARD, WILDCARD, Ranked(5, R), Ranked(6, R), Ranked(7, R)]
    result = solve(board)

    assert result is not None
    assert verify_partition(board, result)


def test_solution_is_independent_of_input_order() -> None:
    expected = solve(SCENARIO_A)

    for permutation in itertools.permutations(SCENARIO_A):
        assert solve(list(permutation)) == expected


def test_solve_is_deterministic() -> None:
    board = [Ranked(rank, color) for color in (K, R) for rank in range(3, 9)] + [WILDCARD]

    assert solve(board) == solve(board)


def test_verify_partition_checks_multiset() -> None:
    groups = [[Ranked(1, K), Ranked(1, B), Ranked(1, R)]]

    assert verify_partition([Ranked(1, R), Ranked(1, K), Ranked(1, B)], groups)
    assert not verify_partition([Ranked(1, R), Ranked(1, K), Ranked(1, O)], groups)
    assert not verify_partition([Ranked(1, R), Ranked(1, K)], groups)
    assert not verify_partition([WILDCARD] * 3, [[WILDCARD] * 3])


def test_single_ranked_piece_with_four_wildcards_is_a_run() -> None:
    board = [Ranked(5, R), WILDCARD, WILDCARD, WILDCARD, WILDCARD]

    assert solve(board) == [[WILDCARD, WILDCARD, WILDCARD, WILDCARD, Ranked(5, R)]]


def test_eight_pieces_split_into_three_and_five() -> None:
    # No two four-piece melds exist, so the search moves on to one three and one five.
    board = [Ranked(rank, B) for rank in range(1, 6)] + [Ranked(9, color) for color in (K, B, R)]

    assert find_partition(board) == [(5, 6, 7), (0, 1, 2, 3, 4)]
    assert solve(board) == [
        [Ranked(1, B), Ranked(2, B), Ranked(3, B), Ranked(4, B), Ranked(5, B)],
        [Ranked(9, K), Ranked(9, B), Ranked(9, R)],
    ]


def _full_board() -> list[Piece]:
    board: list[Piece] = []
    for rank in range(1, 14):
        for _copy in range(2):
            board.extend([Ranked(rank, K), Ranked(rank, B), Ranked(rank, R)])
    for start in (1, 4, 7, 10):
        board.extend(Ranked(rank, O) for rank in range(start, start + 3))
    board.extend([Ranked(13, O), WILDCARD, WILDCARD])
    for start in (1, 4, 7):
        board.extend(Ranked(rank, O) for rank in range(start, start + 3))
    board.extend(Ranked(rank, O) for rank in range(10, 14))
    return board


def test_full_board_is_cleared() -> None:
    board = _full_board()

    result = solve(board)

    assert len(board) == 106
    assert result is not None
    assert verify_partition(board, result)
    assert all(valid_set(group) for group in result)
    assert sum(len(group) for group in result) == 106


def test_full_deck_in_deal_order_is_cleared() -> None:
    board = full_deck()

    result = solve(board)

    assert result is not None
    assert verify_partition(board, result)
