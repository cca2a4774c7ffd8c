"""Win/draw detection: first uniform window in the ruleset's scan order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from Board_Game_AI.Board import EMPTY


@dataclass(frozen=True)
class GameResult:
    """Terminal verdict. winner None means draw (and winning_line is None too)."""

    winner: Optional[str]
    winning_line: Optional[Tuple[int, ...]]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def find_winning_line(cells, ruleset):
    """
    Return the first window of `win_length` identical marks, or None.

    Longer runs still match: any contained window counts, and the one that
    comes first in the scan order is reported.
    """
    for line in ruleset.win_lines:
        mark = cells[line[0]]
        if mark is EMPTY:
            continue
        if all(cells[idx] == mark for idx in line[1:]):
            return line
    return None


def wins_through(cells, index, ruleset):
    """True if the stone at `index` sits in a complete window of its own mark."""
    mark = cells[index]
    if mark is EMPTY:
        return False
    for line in ruleset.win_lines_through[index]:
        if all(cells[idx] == mark for idx in line):
            return True
    return False


def check_result(state):
    """Return a GameResult for a finished position, or None while the game is ongoing."""
    cells = state.cells
    line = find_winning_line(cells, state.ruleset)
    if line is not None:
        return GameResult(winner=cells[line[0]], winning_line=line)
    if EMPTY not in cells:
        return GameResult(winner=None, winning_line=None)
    return None


def is_game_over(state) -> bool:
    return check_result(state) is not None
