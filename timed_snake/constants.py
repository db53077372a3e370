"""Game constants."""

GRID_W, GRID_H = 20, 20

TICK_INTERVAL_MS = 100
FOOD_LIFETIME_MS = 10000
SPAWN_PERIOD_MS = 1000
CLOCK_PERIOD_MS = 100
SPEEDUP_FACTOR = 0.9

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

KEY_DIRECTIONS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    **DIRECTIONS,
}
