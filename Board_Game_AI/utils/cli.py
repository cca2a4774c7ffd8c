"""CLI options for selecting the game, players, difficulty, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Board game AI (tic-tac-toe / gomoku)")
    parser.add_argument("--game", choices=["tictactoe", "gomoku"], help="Ruleset to play (default from settings)")
    parser.add_argument("--board-size", type=int, help="Gomoku board size (default from settings)")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default="human-vs-ai",
        help="Play mode (who moves first / second)",
    )
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], help="Difficulty for every AI player")
    parser.add_argument("--first-difficulty", choices=["easy", "medium", "hard"], help="Difficulty of the first AI")
    parser.add_argument("--second-difficulty", choices=["easy", "medium", "hard"], help="Difficulty of the second AI")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play (ai-vs-ai tallies)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for AI randomness (optional)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--run-scores", default="config/run_scores.yaml", help="Path to gomoku evaluation YAML")
    parser.add_argument("--show-board", action="store_true", help="Print the board after every move")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser.parse_args(argv)
