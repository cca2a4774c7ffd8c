"""Difficulty tiers and exhaustive tic-tac-toe search."""

import random

import pytest

from Board_Game_AI.Board import GOMOKU, TIC_TAC_TOE, BoardState, apply_move, initial_state, is_valid_move
from Board_Game_AI.ai import difficulty, move_selector, search_exhaustive
from Board_Game_AI.engine import rules


class FixedRandom(random.Random):
    """random() always returns `value`, which pins the medium tier to one branch."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def make_ttt(marks, to_move):
    cells = tuple(None if ch == "." else ch for ch in marks.replace(" ", ""))
    return BoardState(ruleset=TIC_TAC_TOE, cells=cells, to_move=to_move)


def gomoku_state(stones, to_move):
    cells = [None] * GOMOKU.cell_count
    for (row, col), mark in stones:
        cells[row * 15 + col] = mark
    return BoardState(ruleset=GOMOKU, cells=tuple(cells), to_move=to_move)


def drawn_gomoku_state():
    cells = tuple("B" if (col // 2 + row) % 2 == 0 else "W" for row in range(15) for col in range(15))
    return BoardState(ruleset=GOMOKU, cells=cells, to_move="B")


def test_hard_completes_own_line():
    state = make_ttt("XX. OO. ...", to_move="X")
    assert difficulty.get_ai_move(state, "hard") == 2


def test_hard_blocks_opponent():
    state = make_ttt("XO. .O. ..X", to_move="X")
    assert difficulty.get_ai_move(state, "hard") == 7


def test_exhaustive_ties_break_on_lowest_index():
    # Every reply draws from the empty board; the first cell is chosen.
    assert search_exhaustive.choose_move(initial_state(TIC_TAC_TOE)) == 0


def test_exhaustive_cache_is_reused():
    cache = {}
    state = initial_state(TIC_TAC_TOE)
    first = search_exhaustive.choose_move(state, cache=cache)
    size = len(cache)
    assert size > 0
    assert search_exhaustive.choose_move(state, cache=cache) == first
    assert len(cache) == size


def test_hard_self_play_is_a_draw():
    state = initial_state(TIC_TAC_TOE)
    cache = {}
    while rules.check_result(state) is None:
        move = difficulty.get_ai_move(state, "hard", cache=cache)
        assert is_valid_move(state, move)
        state = apply_move(state, move)
    assert rules.check_result(state).is_draw


@pytest.mark.parametrize("first", ["hard", "random"])
def test_hard_never_loses_to_random(first):
    rng = random.Random(11)
    cache = {}
    for _ in range(15):
        state = initial_state(TIC_TAC_TOE)
        hard_mark = "X" if first == "hard" else "O"
        while rules.check_result(state) is None:
            if state.to_move == hard_mark:
                move = difficulty.get_ai_move(state, "hard", cache=cache)
            else:
                move = difficulty.get_ai_move(state, "easy", rng=rng)
            state = apply_move(state, move)
        assert rules.check_result(state).winner in (hard_mark, None)


@pytest.mark.parametrize("level", difficulty.DIFFICULTIES)
def test_empty_gomoku_board_opens_at_center(level):
    assert difficulty.get_ai_move(initial_state(GOMOKU), level, rng=random.Random(3)) == 112


@pytest.mark.parametrize("level", difficulty.DIFFICULTIES)
def test_full_board_returns_none(level):
    assert difficulty.get_ai_move(drawn_gomoku_state(), level) is None
    assert difficulty.get_ai_move(make_ttt("XOX OOX XXO", to_move="O"), level) is None


def test_easy_is_reproducible_with_seed():
    state = apply_move(initial_state(GOMOKU), 112)
    a = difficulty.get_ai_move(state, "easy", rng=random.Random(42))
    b = difficulty.get_ai_move(state, "easy", rng=random.Random(42))
    assert a == b
    assert a in move_selector.get_candidate_moves(state)


def test_medium_random_branch_picks_a_candidate():
    state = gomoku_state([((7, 7), "B"), ((7, 8), "W")], to_move="B")
    move = difficulty.get_ai_move(state, "medium", rng=FixedRandom(0.0))
    assert move in move_selector.get_candidate_moves(state)


def test_medium_search_branch_completes_five():
    stones = [((7, c), "B") for c in range(3, 7)] + [((0, c), "W") for c in range(4)]
    state = gomoku_state(stones, to_move="B")
    move = difficulty.get_ai_move(state, "medium", rng=FixedRandom(0.99))
    assert move in (7 * 15 + 2, 7 * 15 + 7)


def test_hard_completes_open_four_on_gomoku():
    stones = [((7, c), "B") for c in range(3, 7)] + [((0, c), "W") for c in range(4)]
    state = gomoku_state(stones, to_move="B")
    assert difficulty.get_ai_move(state, "hard") in (7 * 15 + 2, 7 * 15 + 7)


def test_medium_search_stays_near_stones():
    state = gomoku_state([((7, 7), "B"), ((7, 8), "W")], to_move="B")
    move = difficulty.get_ai_move(state, "medium", rng=FixedRandom(0.99))
    assert is_valid_move(state, move)
    row, col = divmod(move, 15)
    assert 5 <= row <= 9
    assert 5 <= col <= 10


def test_ai_move_is_always_a_valid_candidate():
    rng = random.Random(5)
    for _ in range(3):
        state = initial_state(GOMOKU)
        for _ in range(6):
            state = apply_move(state, rng.choice(move_selector.get_candidate_moves(state)))
        move = difficulty.get_ai_move(state, "medium", rng=rng)
        assert move in move_selector.get_candidate_moves(state)
        assert is_valid_move(state, move)


def test_unknown_difficulty_raises():
    with pytest.raises(ValueError):
        difficulty.get_ai_move(initial_state(TIC_TAC_TOE), "impossible")


def test_load_profiles_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("difficulty:\n  medium:\n    depth: 3\n", encoding="utf-8")
    profiles = difficulty.load_profiles(path)
    assert profiles["medium"].depth == 3
    assert profiles["medium"].random_chance == 0.3
    assert profiles["hard"] == difficulty.DEFAULT_PROFILES["hard"]


def test_load_profiles_rejects_bad_entries(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("difficulty:\n  expert:\n    depth: 6\n", encoding="utf-8")
    with pytest.raises(ValueError):
        difficulty.load_profiles(path)
    path.write_text("difficulty:\n  medium:\n    random_chance: 1.5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        difficulty.load_profiles(path)


def test_packaged_settings_match_defaults(tmp_path):
    assert difficulty.load_profiles() == difficulty.DEFAULT_PROFILES
    assert difficulty.load_profiles(tmp_path / "missing.yaml") == difficulty.DEFAULT_PROFILES
