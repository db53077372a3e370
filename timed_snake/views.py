"""Render and HUD collaborators driven by the engine."""

from .models import Cell


class GameView:
    """One-way notifications from a GameEngine.

    The base class ignores everything; front ends override what they show.
    """

    def draw(self, snake_segments: list[Cell], food_positions: list[Cell]):
        pass

    def set_score(self, score: int):
        pass

    def set_elapsed(self, seconds: float):
        pass

    def show_game_over(self):
        pass

    def hide_game_over(self):
        pass
