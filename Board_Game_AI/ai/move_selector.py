"""Candidate move generation (neighbourhood of existing stones, first-found order)."""

from Board_Game_AI.Board import EMPTY

CANDIDATE_RADIUS = 2


def _neighbourhood_offsets(radius):
    """Chebyshev square around a stone, row offset then column offset ascending."""
    return tuple(
        (dr, dc)
        for dr in range(-radius, radius + 1)
        for dc in range(-radius, radius + 1)
        if dr != 0 or dc != 0
    )


NEIGHBOURHOOD = _neighbourhood_offsets(CANDIDATE_RADIUS)


def generate_candidates(cells, ruleset, radius=CANDIDATE_RADIUS):
    """
    Generate candidate empty cells for a position given as raw cells.
    - Exhaustive rulesets (3x3): every empty cell, ascending.
    - Empty board: the center cell only.
    - Otherwise: empty cells within `radius` (Chebyshev) of any stone, deduplicated,
      in the order they are first reached scanning stones row-major.
    """
    if ruleset.exhaustive:
        return [i for i, cell in enumerate(cells) if cell is EMPTY]

    occupied = [i for i, cell in enumerate(cells) if cell is not EMPTY]
    if not occupied:
        return [ruleset.center]

    offsets = NEIGHBOURHOOD if radius == CANDIDATE_RADIUS else _neighbourhood_offsets(radius)
    size = ruleset.size
    seen = set()
    candidates = []
    for idx in occupied:
        row, col = divmod(idx, size)
        for dr, dc in offsets:
            r, c = row + dr, col + dc
            if r < 0 or r >= size or c < 0 or c >= size:
                continue
            nidx = r * size + c
            if cells[nidx] is not EMPTY or nidx in seen:
                continue
            seen.add(nidx)
            candidates.append(nidx)
    return candidates


def get_candidate_moves(state):
    """Moves the AI considers for `state`; empty list when the board is full."""
    return generate_candidates(state.cells, state.ruleset)
