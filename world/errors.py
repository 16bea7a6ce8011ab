"""Error types and messages for world construction."""

ERROR_PLAYER_COUNT = "Player count must be between {low} and {high}, got {value!r}."
ERROR_FOOD_COUNT = "Food count must be between {low} and {high}, got {value!r}."
ERROR_MAP_SIZE = "Map size must be a positive finite number, got {value!r}."
ERROR_UNKNOWN_PLAYER = "No player with id {value!r} in this world."
ERROR_JUMP_VELOCITY = "Jump velocity must be positive, got {value!r}."
ERROR_LAYOUT_POSITION = "{kind} {index} at {value!r} is not a finite point inside the arena (map_size={map_size})."
ERROR_STEP_PARAM = "{name} must be a non-negative finite number, got {value!r}."


class InvalidConfiguration(ValueError):
    """Raised when a world is requested with counts or bounds it cannot accept."""
