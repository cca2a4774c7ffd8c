"""Exhaustive minimax for small boards (no depth limit, no pruning) with a position cache."""

import logging

from Board_Game_AI.Board import EMPTY, other_mark
from Board_Game_AI.engine import rules

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


class ExhaustiveSolver:
    """Plays a small board perfectly for `mark`; cache maps (cells, maximizing, mark) -> score."""

    def __init__(self, ruleset, mark, cache=None):
        self.ruleset = ruleset
        self.mark = mark
        self.opp = other_mark(ruleset, mark)
        self.cache = {} if cache is None else cache
        self.node_counter = 0

    def choose_move(self, cells):
        """Return the first empty index (ascending) with the best minimax score, or None."""
        best_score = None
        best_move = None
        for idx, cell in enumerate(cells):
            if cell is not EMPTY:
                continue
            child = cells[:idx] + (self.mark,) + cells[idx + 1:]
            score = self._minimax(child, maximizing=False)
            if best_score is None or score > best_score:
                best_score = score
                best_move = idx
        LOGGER.debug(
            "exhaustive %s: move=%s score=%s nodes=%d cached=%d",
            self.mark, best_move, best_score, self.node_counter, len(self.cache),
        )
        return best_move

    def _minimax(self, cells, maximizing):
        key = (cells, maximizing, self.mark)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        self.node_counter += 1

        line = rules.find_winning_line(cells, self.ruleset)
        if line is not None:
            score = WIN_SCORE if cells[line[0]] == self.mark else LOSS_SCORE
        elif EMPTY not in cells:
            score = DRAW_SCORE
        else:
            mover = self.mark if maximizing else self.opp
            scores = (
                self._minimax(cells[:idx] + (mover,) + cells[idx + 1:], not maximizing)
                for idx, cell in enumerate(cells)
                if cell is EMPTY
            )
            score = max(scores) if maximizing else min(scores)

        self.cache[key] = score
        return score


def choose_move(state, cache=None):
    """Best move for the side to move in `state` (ruleset must be exhaustive)."""
    solver = ExhaustiveSolver(state.ruleset, state.to_move, cache=cache)
    return solver.choose_move(state.cells)
