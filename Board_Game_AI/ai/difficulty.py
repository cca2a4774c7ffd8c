"""Difficulty tiers: random play, search with noise, and full-strength search."""

import logging
import random
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from . import move_selector, search_exhaustive, search_minimax

LOGGER = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class DifficultyProfile:
    """random_chance: probability of a uniform random candidate; depth: large-board plies."""

    random_chance: float
    depth: int

    def __post_init__(self):
        if not 0.0 <= self.random_chance <= 1.0:
            raise ValueError(f"random_chance must be within [0, 1], got {self.random_chance}")
        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")


DEFAULT_PROFILES = {
    "easy": DifficultyProfile(random_chance=1.0, depth=1),
    "medium": DifficultyProfile(random_chance=0.3, depth=2),
    "hard": DifficultyProfile(random_chance=0.0, depth=4),
}


def load_profiles(path="config/settings.yaml"):
    """Load difficulty overrides from the `difficulty` section of a YAML settings file."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_PROFILES)

    profiles = dict(DEFAULT_PROFILES)
    for name, item in (data.get("difficulty") or {}).items():
        if name not in DEFAULT_PROFILES:
            raise ValueError(f"Unknown difficulty in {path}: {name}")
        item = item or {}
        base = profiles[name]
        profiles[name] = replace(
            base,
            random_chance=float(item.get("random_chance", base.random_chance)),
            depth=int(item.get("depth", base.depth)),
        )
    return profiles


def get_ai_move(state, difficulty, rng=None, profiles=None, run_scores=None, stats=None, cache=None):
    """
    Pick a move for the side to move in `state`, or None when nothing can be played.
    - rng: random.Random used for every random decision (seed it for reproducible play).
    - profiles: difficulty name -> DifficultyProfile (defaults to DEFAULT_PROFILES).
    - run_scores: evaluator table for the large-board search (heuristic.load_run_scores).
    - cache: optional position cache shared across calls for the exhaustive solver.
    """
    profiles = profiles or DEFAULT_PROFILES
    try:
        profile = profiles[difficulty]
    except KeyError:
        raise ValueError(f"Unsupported difficulty: {difficulty}") from None

    candidates = move_selector.get_candidate_moves(state)
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    rng = rng or random.Random()
    if profile.random_chance >= 1.0 or (profile.random_chance > 0.0 and rng.random() < profile.random_chance):
        move = rng.choice(candidates)
        LOGGER.debug("%s: random move %d among %d candidates", difficulty, move, len(candidates))
        return move

    if state.ruleset.exhaustive:
        return search_exhaustive.choose_move(state, cache=cache)
    return search_minimax.choose_move(state, depth=profile.depth, run_scores=run_scores, stats=stats)
