"""
constants.py: Centralized configuration for game and rendering settings.
"""

# -------- Time Config --------
TICK_MS = 40                    # Milliseconds between game updates
TICK_TIME = TICK_MS / 1000.0    # Fixed time step (Delta Time)

# -------- Game World Config --------
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 960
WINDOW_CAPTION = "Flappy Block"

# -------- Player Config --------
PLAYER_X = 100                  # Fixed block X position
PLAYER_SIZE = 40

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY_ACCEL = 100.0           # Vertical acceleration (pixels/s^2)
FLAP_IMPULSE = -150.0           # Instantaneous velocity change (pixels/s)

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 50
OBSTACLE_SPACING = 300          # Horizontal distance between obstacles
OBSTACLE_GAP = 200              # Vertical gap the block passes through
OBSTACLE_SPEED = 3              # Pixels per tick, always leftward
FIRST_OBSTACLE_X = 400
RECYCLE_MARGIN = 20             # Distance past the right edge on recycle

# -------- Colours --------
BACKGROUND_COLOR = (151, 151, 250)
PLAYER_COLOR = (232, 110, 43)
OBSTACLE_COLOR = (85, 66, 34)
SCORE_ZONE_COLOR = (0, 0, 0)
SCORE_COLOR = (128, 0, 0)
SCORE_BOX_COLOR = (255, 255, 255, 85)
MESSAGE_COLOR = (0, 0, 0)

# -------- Text --------
FONT_NAME = "arial"
SCORE_FONT_SIZE = 50
MESSAGE_FONT_SIZE = 30
START_MESSAGE = 'Press SPACE to begin! Press space to "flap".'
GAME_OVER_MESSAGE = "Block can flap no more. Press R to restart."
