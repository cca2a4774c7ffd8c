"""Computer player that delegates to the difficulty controller."""

import random

from Board_Game_AI.Player import Player
from Board_Game_AI.ai import difficulty as difficulty_mod


class AIPlayer(Player):
    def __init__(self, mark, difficulty="hard", rng=None, profiles=None, run_scores=None):
        super().__init__(mark)
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.profiles = profiles
        self.run_scores = run_scores
        self.cache = {}
        self.stats = []

    def next_move(self, state):
        move = difficulty_mod.get_ai_move(
            state,
            self.difficulty,
            rng=self.rng,
            profiles=self.profiles,
            run_scores=self.run_scores,
            stats=self.stats,
            cache=self.cache,
        )
        if move is None:
            raise ValueError("No candidate moves available")
        return move
