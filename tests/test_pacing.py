import pytest

from timed_snake.models import PacingState
from timed_snake.pacing import on_food_eaten


def test_defaults():
    state = PacingState()
    assert state.tick_interval_ms == 100
    assert state.food_lifetime_ms == 10000


@pytest.mark.parametrize("k", [1, 2, 5, 20])
def test_pacing_after_k_foods(k):
    state = PacingState()
    for _ in range(k):
        state = on_food_eaten(state)
    assert state.tick_interval_ms == pytest.approx(100 * 0.9 ** k)
    assert state.food_lifetime_ms == pytest.approx(10000 * 0.9 ** k)


def test_pacing_is_pure():
    state = PacingState()
    faster = on_food_eaten(state)
    assert state == PacingState()
    assert faster.tick_interval_ms < state.tick_interval_ms
    assert faster.food_lifetime_ms < state.food_lifetime_ms
