"""Entry point for board game matches. Load config, wire players, start Match."""

import random
from collections import Counter
from pathlib import Path

import yaml

from Board_Game_AI.AIPlayer import AIPlayer
from Board_Game_AI.Board import make_ruleset
from Board_Game_AI.Match import Match
from Board_Game_AI.Player import HumanPlayer
from Board_Game_AI.ai import difficulty, heuristic
from Board_Game_AI.utils.cli import parse_args
from Board_Game_AI.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Board_Game_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        log_event(f"Warning: settings file {path} not found, using defaults")
        return {}


def build_player(kind, mark, level, rng, profiles, run_scores):
    if kind == "human":
        return HumanPlayer(mark)
    return AIPlayer(mark, difficulty=level, rng=rng, profiles=profiles, run_scores=run_scores)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    game = args.game or settings.get("game", "tictactoe")
    board_size = args.board_size or (settings.get("board_size") if game == "gomoku" else None)
    ruleset = make_ruleset(game, size=board_size)

    default_level = args.difficulty or settings.get("difficulty_level", "hard")
    first_level = args.first_difficulty or default_level
    second_level = args.second_difficulty or default_level
    profiles = difficulty.load_profiles(resolve_project_path(args.settings))
    run_scores = heuristic.load_run_scores(resolve_project_path(args.run_scores))
    rng = random.Random(args.seed)

    first_kind, second_kind = {
        "ai-vs-ai": ("ai", "ai"),
        "human-vs-ai": ("human", "ai"),
        "ai-vs-human": ("ai", "human"),
        "human-vs-human": ("human", "human"),
    }[args.mode]
    first_mark, second_mark = ruleset.marks

    tally = Counter()
    for game_no in range(1, args.games + 1):
        first = build_player(first_kind, first_mark, first_level, rng, profiles, run_scores)
        second = build_player(second_kind, second_mark, second_level, rng, profiles, run_scores)
        show_board = args.show_board or "human" in (first_kind, second_kind)
        match = Match(ruleset, first, second, logger=log_event, show_board=show_board)
        result = match.play()
        outcome = "Draw" if result.winner is None else f"{result.winner} wins ({result.reason})"
        print(f"Game {game_no}: {outcome} after {len(result.moves)} moves")
        tally[result.winner or "draw"] += 1

    if args.games > 1:
        summary = ", ".join(f"{key}={tally[key]}" for key in (first_mark, second_mark, "draw"))
        print(f"Summary over {args.games} games: {summary}")
    return tally


if __name__ == "__main__":
    main()
