"""Game loop and turn management for any ruleset."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from Board_Game_AI.Board import apply_move, format_board, initial_state, is_valid_move, other_mark
from Board_Game_AI.engine import rules
from Board_Game_AI.utils.logger import log_event


@dataclass
class MatchResult:
    winner: Optional[str]  # None = draw
    reason: str  # "win", "draw" or "disqualification"
    winning_line: Optional[Tuple[int, ...]] = None
    moves: List[int] = field(default_factory=list)


class Match:
    def __init__(self, ruleset, first_player, second_player, logger=log_event, show_board=False):
        first, second = ruleset.marks
        if first_player.mark != first or second_player.mark != second:
            raise ValueError(f"players must play {first} (first) and {second} (second)")
        self.ruleset = ruleset
        self.players = {first: first_player, second: second_player}
        self.logger = logger
        self.show_board = show_board
        self.state = initial_state(ruleset)
        self.moves = []

    def play(self):
        """Run a single game and return its MatchResult."""
        while True:
            mark = self.state.to_move
            player = self.players[mark]
            try:
                move = player.next_move(self.state)
                if not is_valid_move(self.state, move):
                    raise ValueError(f"illegal move {move!r}")
            except ValueError as exc:
                self.logger(f"Disqualification: {mark} - {exc}")
                return MatchResult(winner=other_mark(self.ruleset, mark), reason="disqualification", moves=self.moves)

            self.state = apply_move(self.state, move)
            self.moves.append(move)
            row, col = self.ruleset.row_col(move)
            self.logger(f"Move {len(self.moves)}: {mark} ({row}, {col})")
            if self.show_board:
                self.logger("\n" + format_board(self.state))

            result = rules.check_result(self.state)
            if result is None:
                continue
            if result.is_draw:
                self.logger("Result: Draw (board full)")
                return MatchResult(winner=None, reason="draw", moves=self.moves)
            self.logger(f"Winner: {result.winner} {list(result.winning_line)}")
            return MatchResult(
                winner=result.winner, reason="win", winning_line=result.winning_line, moves=self.moves
            )
