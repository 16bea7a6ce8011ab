"""
Simulation tuning knobs.
"""

# Arena
MAP_SIZE = 8.0  # half-extent: positions range over [-MAP_SIZE, MAP_SIZE]
GROUND_HEIGHT = 0.5
SPAWN_RADIUS_FACTOR = 0.75
FOOD_MARGIN = 0.5

# Population bounds (accepted by World.create)
PLAYER_COUNT_RANGE = (1, 8)
FOOD_COUNT_RANGE = (0, 500)

# Race setup defaults (what the setup screen lets you pick)
DEFAULT_PLAYERS = 4
DEFAULT_FOOD = 100
SETUP_FOOD_RANGE = (1, 500)
FOOD_ADJUST_STEP = 10

# Movement
PLAYER_SPEED = 4.0  # units per second
PICKUP_RADIUS = 0.5
MAX_TICK_DELTA = 0.1  # larger frame gaps are clamped to this

# Jump arc (cosmetic)
GRAVITY = -18.0  # units/sec^2
JUMP_VELOCITY = 8.0

# Palettes
PLAYER_COLORS = [
    "#FF5733", "#33FF57", "#3357FF", "#F3FF33",
    "#FF33F3", "#33FFF3", "#F333FF", "#FFA533",
]
FOOD_COLORS = ["#FF9999", "#99FF99", "#9999FF", "#FFFF99", "#FF99FF", "#99FFFF"]

# Runtime pacing
RACE_DURATION = 60.0  # seconds
FPS = 60

# Window
SCREEN_W, SCREEN_H = 760, 820
HUD_H = 60
