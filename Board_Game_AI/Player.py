"""Abstract player interface for human or AI controllers."""

from Board_Game_AI.Board import get_valid_moves


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, state):
        """Return a cell index for the next move in `state`."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, input_fn=input):
        super().__init__(mark)
        self.input_fn = input_fn

    def next_move(self, state):
        """Text-input player: 'row col' (0-indexed) or a single cell index."""
        raw = self.input_fn(f"{self.mark} to move, enter 'row col' or index: ").strip()
        parts = raw.split()
        try:
            if len(parts) == 1:
                return int(parts[0])
            if len(parts) == 2:
                row, col = int(parts[0]), int(parts[1])
                if not state.ruleset.in_bounds(row, col):
                    raise ValueError(f"({row}, {col}) is off the board")
                return state.ruleset.index_of(row, col)
        except ValueError as exc:
            raise ValueError(f"Invalid input {raw!r}; expected 'row col' or an index") from exc
        raise ValueError(f"Invalid input {raw!r}; expected 'row col' or an index")


class RandomPlayer(Player):
    """Baseline that plays a uniform random legal move."""

    def __init__(self, mark, rng):
        super().__init__(mark)
        self.rng = rng

    def next_move(self, state):
        moves = get_valid_moves(state)
        if not moves:
            raise ValueError("No legal moves available")
        return self.rng.choice(moves)
