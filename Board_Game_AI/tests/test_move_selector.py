"""Candidate generation: opening move, neighbourhood bounds, and discovery order."""

from Board_Game_AI.Board import GOMOKU, TIC_TAC_TOE, BoardState, apply_move, initial_state, replay_moves
from Board_Game_AI.ai import move_selector


def idx_of(row, col):
    return row * 15 + col


def test_empty_gomoku_board_offers_center_only():
    assert move_selector.get_candidate_moves(initial_state(GOMOKU)) == [112]


def test_corner_stone_neighbourhood_in_discovery_order():
    state = apply_move(initial_state(GOMOKU), 0)
    assert move_selector.get_candidate_moves(state) == [1, 2, 15, 16, 17, 30, 31, 32]


def test_center_stone_has_24_neighbours_within_two():
    state = apply_move(initial_state(GOMOKU), 112)
    candidates = move_selector.get_candidate_moves(state)
    assert len(candidates) == 24
    assert candidates[0] == 5 * 15 + 5
    for c in candidates:
        row, col = divmod(c, 15)
        assert max(abs(row - 7), abs(col - 7)) <= 2
        assert state.cells[c] is None


def test_candidates_are_deduplicated_and_follow_stone_order():
    state = replay_moves(GOMOKU, [112, 113])
    candidates = move_selector.get_candidate_moves(state)
    assert len(candidates) == len(set(candidates))
    assert 112 not in candidates and 113 not in candidates
    # 5x6 block around the pair, minus the two stones
    assert len(candidates) == 28
    # the column two to the right of the second stone is only reachable from 113
    assert candidates.index(idx_of(7, 10)) > candidates.index(idx_of(9, 9))


def test_full_board_has_no_candidates():
    cells = tuple("B" if (col // 2 + row) % 2 == 0 else "W" for row in range(15) for col in range(15))
    state = BoardState(ruleset=GOMOKU, cells=cells, to_move="B")
    assert move_selector.get_candidate_moves(state) == []


def test_tictactoe_candidates_are_all_empty_cells():
    state = replay_moves(TIC_TAC_TOE, [4, 0])
    assert move_selector.get_candidate_moves(state) == [1, 2, 3, 5, 6, 7, 8]
    assert move_selector.get_candidate_moves(initial_state(TIC_TAC_TOE)) == list(range(9))
