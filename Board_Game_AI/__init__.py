"""Board_Game_AI package exports."""

from .Board import (
    BoardState,
    GOMOKU,
    InvalidMoveError,
    Ruleset,
    TIC_TAC_TOE,
    apply_move,
    get_valid_moves,
    initial_state,
    is_valid_move,
    make_ruleset,
    replay_moves,
    restore_state,
    snapshot_state,
)
from .engine.rules import GameResult, check_result
from .ai.move_selector import get_candidate_moves
from .ai.heuristic import evaluate_board
from .ai.difficulty import get_ai_move
from .Player import Player, HumanPlayer, RandomPlayer
from .AIPlayer import AIPlayer
from .Match import Match, MatchResult

# Subpackages for rules, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "BoardState",
    "GOMOKU",
    "InvalidMoveError",
    "Ruleset",
    "TIC_TAC_TOE",
    "apply_move",
    "get_valid_moves",
    "initial_state",
    "is_valid_move",
    "make_ruleset",
    "replay_moves",
    "restore_state",
    "snapshot_state",
    "GameResult",
    "check_result",
    "get_candidate_moves",
    "evaluate_board",
    "get_ai_move",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "AIPlayer",
    "Match",
    "MatchResult",
    "ai",
    "engine",
    "utils",
]
