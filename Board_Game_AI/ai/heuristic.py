"""Run-based evaluation for large boards (open/closed runs scored by length)."""

from pathlib import Path
from typing import NamedTuple

import yaml

from Board_Game_AI.Board import EMPTY, other_mark


class RunScores(NamedTuple):
    five: int
    by_length: dict  # run length -> (both ends open, one end open)


# Default table; can be overridden by loading config/run_scores.yaml.
DEFAULT_RUN_SCORES = RunScores(
    five=1_000_000,
    by_length={
        4: (50_000, 10_000),
        3: (5_000, 1_000),
        2: (500, 100),
        1: (10, 1),
    },
)

_NO_OVERRIDE = object()


def load_run_scores(path="config/run_scores.yaml"):
    """Load the run table from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_RUN_SCORES

    by_length = dict(DEFAULT_RUN_SCORES.by_length)
    for length, item in (data.get("runs") or {}).items():
        length = int(length)
        if length < 1:
            raise ValueError(f"run length must be positive, got {length}")
        if not isinstance(item, dict):
            raise ValueError(f"run entry {length} must map open/half_open to scores, got {item!r}")
        by_length[length] = (int(item.get("open", 0)), int(item.get("half_open", 0)))
    return RunScores(five=int(data.get("five", DEFAULT_RUN_SCORES.five)), by_length=by_length)


def run_score(length, open_ends, win_length, run_scores=DEFAULT_RUN_SCORES):
    """Score one maximal run; a completed line ignores its ends, a dead run scores 0."""
    if length >= win_length:
        return run_scores.five
    if open_ends == 0:
        return 0
    both, one = run_scores.by_length.get(length, (0, 0))
    return both if open_ends == 2 else one


def score_line(values, mark, win_length, run_scores=DEFAULT_RUN_SCORES):
    """Sum run scores for `mark` along one line of cell values."""
    total = 0
    run = 0
    open_ends = 0  # open cell before the current run (0 or 1)
    for value in values:
        if value == mark:
            run += 1
        elif value is EMPTY:
            if run:
                total += run_score(run, open_ends + 1, win_length, run_scores)
                run = 0
            open_ends = 1
        else:
            if run:
                total += run_score(run, open_ends, win_length, run_scores)
                run = 0
            open_ends = 0
    if run:
        total += run_score(run, open_ends, win_length, run_scores)
    return total


def score_line_suffixes(values, mark, win_length, run_scores=DEFAULT_RUN_SCORES):
    """
    Sum of score_line over every suffix of `values` holding at least win_length cells,
    computed in one pass. A run is seen whole by suffixes starting before it and cut,
    with a closed start, by suffixes starting inside it.
    """
    n = len(values)
    last_start = n - win_length
    if last_start < 0:
        return 0
    total = 0
    i = 0
    while i < n:
        if values[i] != mark:
            i += 1
            continue
        start = i
        while i < n and values[i] == mark:
            i += 1
        before = 1 if start > 0 and values[start - 1] is EMPTY else 0
        after = 1 if i < n and values[i] is EMPTY else 0
        whole = min(start, last_start + 1)
        if whole:
            total += whole * run_score(i - start, before + after, win_length, run_scores)
        for cut in range(start, min(i, last_start + 1)):
            total += run_score(i - cut, after, win_length, run_scores)
    return total


def score_lines(lines, mark, ruleset, run_scores=None):
    """Score a collection of edge-to-edge lines (all their suffixes) for `mark`, minus the opponent."""
    run_scores = run_scores or DEFAULT_RUN_SCORES
    opp = other_mark(ruleset, mark)
    win_length = ruleset.win_length
    total = 0
    for line in lines:
        total += score_line_suffixes(line, mark, win_length, run_scores)
        total -= score_line_suffixes(line, opp, win_length, run_scores)
    return total


def evaluate_board(cells, mark, ruleset, run_scores=None):
    """
    Positional score of `cells`. Positive favours `mark`, negative favours the opponent.
    Every line running from any cell to the board edge in one of the four
    directions, long enough to hold a win, is scored; overlapping lines all count.
    """
    lines = ([cells[idx] for idx in line] for line in ruleset.full_lines)
    return score_lines(lines, mark, ruleset, run_scores)


def lines_through(cells, index, ruleset, override=_NO_OVERRIDE):
    """
    Return the full lines passing through `index` as lists of values. If override
    is given, the cell at `index` is replaced with that value in the returned lines.
    """
    result = []
    for line in ruleset.full_lines_through[index]:
        values = [cells[idx] for idx in line]
        if override is not _NO_OVERRIDE:
            values[line.index(index)] = override
        result.append(values)
    return result


def update_score_after_move(cells, index, eval_mark, prev_score, ruleset, run_scores=None):
    """
    Incrementally update evaluation score after a stone was placed at `index`.
    cells is assumed to already contain the stone.
    eval_mark is the perspective for scoring (searcher's mark).
    """
    lines_after = lines_through(cells, index, ruleset)
    lines_before = lines_through(cells, index, ruleset, override=EMPTY)
    delta = score_lines(lines_after, eval_mark, ruleset, run_scores) - score_lines(lines_before, eval_mark, ruleset, run_scores)
    return prev_score + delta
