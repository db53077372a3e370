"""Score-driven pacing."""

from dataclasses import replace

from .constants import SPEEDUP_FACTOR
from .models import PacingState


def on_food_eaten(state: PacingState, factor: float = SPEEDUP_FACTOR) -> PacingState:
    """Shorten both the tick interval and the lifetime of future food."""
    return replace(
        state,
        tick_interval_ms=state.tick_interval_ms * factor,
        food_lifetime_ms=state.food_lifetime_ms * factor,
    )
