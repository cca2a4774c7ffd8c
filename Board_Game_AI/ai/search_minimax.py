"""Depth-limited minimax with alpha-beta pruning over neighbourhood candidates."""

import logging
import time

from Board_Game_AI.Board import EMPTY, other_mark
from Board_Game_AI.engine import rules

from . import heuristic
from . import move_selector

LOGGER = logging.getLogger(__name__)

INF = float("inf")
WIN_SCORE = 1_000_000  # terminal score, offset by remaining depth


class MinimaxSearcher:
    """Encapsulates the state and logic for one alpha-beta search."""

    def __init__(self, ruleset, mark, depth, run_scores=None, stats=None):
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        self.ruleset = ruleset
        self.mark = mark
        self.opp = other_mark(ruleset, mark)
        self.depth = depth
        self.run_scores = run_scores or heuristic.DEFAULT_RUN_SCORES
        self.stats_list = stats

        # Scratch position, mutated by _push_stone/_pop_stone during the search
        self.cells = []
        self.empty_count = 0
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, cells):
        """Return the best candidate index for self.mark, or None when no candidate exists."""
        self.start_time = time.time()
        self.node_counter = 0
        self.cells = list(cells)
        self.empty_count = self.cells.count(EMPTY)

        candidates = move_selector.generate_candidates(self.cells, self.ruleset)
        if not candidates:
            return None
        if rules.find_winning_line(self.cells, self.ruleset) is not None:
            # Decided position: every child is terminal with the same verdict.
            return candidates[0]

        # An immediate win scores above every deeper line, so the first one is the answer.
        win_move = self._find_immediate_win(candidates)
        if win_move is not None:
            self._record_stats(win_move, WIN_SCORE + self.depth - 1)
            return win_move

        root_score = heuristic.evaluate_board(self.cells, self.mark, self.ruleset, self.run_scores)
        position = {move: pos for pos, move in enumerate(candidates)}
        best_score = -INF
        best_move = None
        for move, _, new_score in self._order_moves(candidates, self.mark, root_score, True):
            self._push_stone(move, self.mark)
            try:
                # alpha one below the best keeps equal scores exact, so ties go to the earlier candidate
                score = self._minimax(self.depth - 1, best_score - 1, INF, False, new_score)
            finally:
                self._pop_stone(move)
            if best_move is None or score > best_score or (
                score == best_score and position[move] < position[best_move]
            ):
                best_score = score
                best_move = move

        self._record_stats(best_move, best_score)
        return best_move

    def _minimax(self, depth, alpha, beta, maximizing, current_score):
        """Value of the scratch position; the stone just placed is known not to have won."""
        self.node_counter += 1

        if self.empty_count == 0:
            return 0
        if depth == 0:
            return current_score

        candidates = move_selector.generate_candidates(self.cells, self.ruleset)
        mover = self.mark if maximizing else self.opp
        if depth > 1:
            moves = self._order_moves(candidates, mover, current_score, maximizing)
        else:
            # children are leaves, scored lazily so a cutoff skips the rest
            moves = ((move, None, None) for move in candidates)

        best_score = -INF if maximizing else INF
        for move, win_now, new_score in moves:
            self._push_stone(move, mover)
            try:
                if win_now is None:
                    win_now = rules.wins_through(self.cells, move, self.ruleset)
                if win_now:
                    score = WIN_SCORE + depth - 1 if maximizing else -(WIN_SCORE + depth - 1)
                else:
                    if new_score is None:
                        new_score = self._score_after(move, current_score)
                    score = self._minimax(depth - 1, alpha, beta, not maximizing, new_score)
            finally:
                self._pop_stone(move)

            if win_now:
                # No sibling can do better than winning right away.
                return score
            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)
            if beta <= alpha:
                break

        return best_score

    def _order_moves(self, candidates, mover, current_score, maximizing):
        """
        Return (move, win_now, score_after) for each candidate, most promising first
        for `mover`. A winning move is returned alone. The sort is stable, so equal
        scores keep candidate order.
        """
        ordered = []
        for move in candidates:
            self._push_stone(move, mover)
            try:
                if rules.wins_through(self.cells, move, self.ruleset):
                    return [(move, True, None)]
                new_score = self._score_after(move, current_score)
            finally:
                self._pop_stone(move)
            ordered.append((move, False, new_score))

        ordered.sort(key=lambda item: item[2], reverse=maximizing)
        return ordered

    def _find_immediate_win(self, candidates):
        for move in candidates:
            self.cells[move] = self.mark
            try:
                if rules.wins_through(self.cells, move, self.ruleset):
                    return move
            finally:
                self.cells[move] = EMPTY
        return None

    def _push_stone(self, idx, mark):
        self.cells[idx] = mark
        self.empty_count -= 1

    def _pop_stone(self, idx):
        self.cells[idx] = EMPTY
        self.empty_count += 1

    def _score_after(self, idx, current_score):
        return heuristic.update_score_after_move(
            self.cells, idx, self.mark, current_score, self.ruleset, self.run_scores
        )

    def _record_stats(self, move, score):
        total_time = max(time.time() - self.start_time, 1e-9)
        LOGGER.debug(
            "minimax %s depth=%d: move=%s score=%s nodes=%d time=%.3fs",
            self.mark, self.depth, move, score, self.node_counter, total_time,
        )
        if self.stats_list is not None:
            self.stats_list.append({
                "mark": self.mark,
                "depth": self.depth,
                "move": move,
                "score": score,
                "nodes": self.node_counter,
                "time": total_time,
                "nps": self.node_counter / total_time,
            })


def choose_move(state, depth, run_scores=None, stats=None):
    """
    Public function to start a search for the side to move in `state`.
    Instantiates and uses MinimaxSearcher; `state` itself is never modified.
    """
    searcher = MinimaxSearcher(
        ruleset=state.ruleset,
        mark=state.to_move,
        depth=depth,
        run_scores=run_scores,
        stats=stats,
    )
    return searcher.choose_move(state.cells)
