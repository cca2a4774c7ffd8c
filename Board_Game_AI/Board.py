"""Board state container, rulesets, and move application (immutable values)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

# Win-line directions as (row step, col step): horizontal, vertical, diag down-right, diag down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

EMPTY = None


class InvalidMoveError(ValueError):
    """Raised when a move is out of range or targets an occupied cell."""


@dataclass(frozen=True)
class Ruleset:
    """
    One board game configuration: board size, win length, marks, and scan order.

    scan_by_direction=True enumerates winning windows direction-first (rows, then
    columns, then diagonals), which reproduces the fixed 8-line order of a 3x3
    board. False scans start cells row-major and tries every direction per cell,
    the order used for gomoku.
    """

    name: str
    size: int
    win_length: int
    marks: Tuple[str, str]
    scan_by_direction: bool = False
    exhaustive: bool = False
    win_lines: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    win_lines_through: Tuple[Tuple[Tuple[int, ...], ...], ...] = field(init=False, repr=False, compare=False)
    full_lines: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    full_lines_through: Tuple[Tuple[Tuple[int, ...], ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.size < self.win_length:
            raise ValueError(f"board size {self.size} is smaller than win length {self.win_length}")
        if len(self.marks) != 2 or self.marks[0] == self.marks[1]:
            raise ValueError("a ruleset needs exactly two distinct marks")

        win_lines = _window_lines(self.size, self.win_length, self.scan_by_direction)
        full_lines = _full_lines(self.size, self.win_length)
        # frozen dataclass: derived tables are attached once here
        object.__setattr__(self, "win_lines", win_lines)
        object.__setattr__(self, "win_lines_through", _index_lines(self.cell_count, win_lines))
        object.__setattr__(self, "full_lines", full_lines)
        object.__setattr__(self, "full_lines_through", _index_lines(self.cell_count, full_lines))

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def first_mark(self) -> str:
        return self.marks[0]

    @property
    def center(self) -> int:
        return self.index_of(self.size // 2, self.size // 2)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def index_of(self, row, col):
        return row * self.size + col

    def row_col(self, index):
        return divmod(index, self.size)


def _window_lines(size, length, by_direction):
    """Every in-bounds run of `length` cells, in the ruleset's scan order."""

    def window(row, col, dr, dc):
        cells = []
        for step in range(length):
            r, c = row + dr * step, col + dc * step
            if not (0 <= r < size and 0 <= c < size):
                return None
            cells.append(r * size + c)
        return tuple(cells)

    lines = []
    if by_direction:
        for dr, dc in DIRECTIONS:
            for row in range(size):
                for col in range(size):
                    line = window(row, col, dr, dc)
                    if line:
                        lines.append(line)
    else:
        for row in range(size):
            for col in range(size):
                for dr, dc in DIRECTIONS:
                    line = window(row, col, dr, dc)
                    if line:
                        lines.append(line)
    return tuple(lines)


def _full_lines(size, min_length):
    """Rows, columns and both diagonal families, edge to edge, of at least min_length cells."""
    lines = []
    for dr, dc in DIRECTIONS:
        for row in range(size):
            for col in range(size):
                # only start where the previous cell in this direction is off-board
                pr, pc = row - dr, col - dc
                if 0 <= pr < size and 0 <= pc < size:
                    continue
                cells = []
                r, c = row, col
                while 0 <= r < size and 0 <= c < size:
                    cells.append(r * size + c)
                    r += dr
                    c += dc
                if len(cells) >= min_length:
                    lines.append(tuple(cells))
    return tuple(lines)


def _index_lines(cell_count, lines):
    through = [[] for _ in range(cell_count)]
    for line in lines:
        for idx in line:
            through[idx].append(line)
    return tuple(tuple(group) for group in through)


TIC_TAC_TOE = Ruleset(name="tictactoe", size=3, win_length=3, marks=("X", "O"), scan_by_direction=True, exhaustive=True)
GOMOKU = Ruleset(name="gomoku", size=15, win_length=5, marks=("B", "W"))

RULESETS = {TIC_TAC_TOE.name: TIC_TAC_TOE, GOMOKU.name: GOMOKU}


def make_ruleset(name, size=None):
    """Look up a ruleset by name; gomoku may be resized (e.g. 19x19)."""
    try:
        base = RULESETS[name]
    except KeyError:
        raise ValueError(f"Unsupported game: {name}") from None
    if size is None or size == base.size:
        return base
    if base.exhaustive:
        raise ValueError(f"{name} is played on a fixed {base.size}x{base.size} board")
    return Ruleset(name=base.name, size=size, win_length=base.win_length, marks=base.marks)


def other_mark(ruleset, mark):
    first, second = ruleset.marks
    if mark == first:
        return second
    if mark == second:
        return first
    raise ValueError(f"{mark!r} is not a mark of {ruleset.name}")


@dataclass(frozen=True)
class BoardState:
    """Immutable position: row-major cells, side to move, and last placed index."""

    ruleset: Ruleset
    cells: Tuple[Optional[str], ...]
    to_move: str
    last_move: Optional[int] = None

    @property
    def size(self) -> int:
        return len(self.cells)


def initial_state(ruleset=TIC_TAC_TOE):
    return BoardState(ruleset=ruleset, cells=(EMPTY,) * ruleset.cell_count, to_move=ruleset.first_mark)


def is_valid_move(state, index):
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < len(state.cells) and state.cells[index] is EMPTY


def get_valid_moves(state):
    return [i for i, cell in enumerate(state.cells) if cell is EMPTY]


def apply_move(state, index):
    """Return the state after `state.to_move` plays `index`; raise on an illegal move."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidMoveError(f"move index must be an integer, got {index!r}")
    if not 0 <= index < len(state.cells):
        raise InvalidMoveError(f"move {index} out of bounds")
    if state.cells[index] is not EMPTY:
        raise InvalidMoveError(f"cell {index} already occupied")

    cells = state.cells[:index] + (state.to_move,) + state.cells[index + 1:]
    return BoardState(
        ruleset=state.ruleset,
        cells=cells,
        to_move=other_mark(state.ruleset, state.to_move),
        last_move=index,
    )


def replay_moves(ruleset, moves: Sequence[int]):
    """Rebuild a position by re-applying a move list from the initial state."""
    state = initial_state(ruleset)
    for index in moves:
        state = apply_move(state, index)
    return state


def snapshot_state(state):
    """Flat, JSON-friendly form of a state (grid + turn marker + last move)."""
    return {
        "game": state.ruleset.name,
        "size": state.ruleset.size,
        "grid": list(state.cells),
        "currentMark": state.to_move,
        "lastMove": state.last_move,
    }


def restore_state(data, ruleset=None):
    """Rebuild a BoardState from snapshot_state output; raise ValueError on a malformed blob."""
    if ruleset is None:
        ruleset = make_ruleset(data.get("game", TIC_TAC_TOE.name), size=data.get("size"))

    grid = data.get("grid")
    if not isinstance(grid, (list, tuple)) or len(grid) != ruleset.cell_count:
        raise ValueError(f"grid must hold {ruleset.cell_count} cells for {ruleset.name}")
    for cell in grid:
        if cell is not EMPTY and cell not in ruleset.marks:
            raise ValueError(f"unknown cell value {cell!r} for {ruleset.name}")

    to_move = data.get("currentMark", ruleset.first_mark)
    if to_move not in ruleset.marks:
        raise ValueError(f"unknown mark to move {to_move!r}")

    last_move = data.get("lastMove")
    if last_move is not None and not (
        isinstance(last_move, int) and 0 <= last_move < ruleset.cell_count and grid[last_move] is not EMPTY
    ):
        raise ValueError(f"lastMove {last_move!r} does not point at a stone")

    return BoardState(ruleset=ruleset, cells=tuple(grid), to_move=to_move, last_move=last_move)


def format_board(state):
    """Plain-text grid, '.' for empty, the last move in lowercase."""
    size = state.ruleset.size
    width = len(str(size - 1))
    rows = ["   " + " ".join(f"{c:>{width}}" for c in range(size))]
    for r in range(size):
        out = []
        for c in range(size):
            idx = r * size + c
            cell = state.cells[idx] or "."
            out.append(f"{cell:>{width}}" if idx != state.last_move else f"{cell.lower():>{width}}")
        rows.append(f"{r:>2} " + " ".join(out))
    return "\n".join(rows)
