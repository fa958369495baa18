"""
config.py: Validated game configuration built from the compiled-in constants.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import (
    TICK_MS, SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_X, PLAYER_SIZE,
    GRAVITY_ACCEL, FLAP_IMPULSE, OBSTACLE_WIDTH, OBSTACLE_SPACING,
    OBSTACLE_GAP, OBSTACLE_SPEED, FIRST_OBSTACLE_X
)


class ConfigurationError(ValueError):
    """Raised when a size or tuning value cannot produce a playable game."""


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a game session. Invalid values fail at construction."""
    play_width: int = SCREEN_WIDTH
    play_height: int = SCREEN_HEIGHT
    tick_ms: int = TICK_MS

    player_x: int = PLAYER_X
    player_size: int = PLAYER_SIZE
    gravity: float = GRAVITY_ACCEL
    flap_impulse: float = FLAP_IMPULSE

    obstacle_width: int = OBSTACLE_WIDTH
    obstacle_spacing: int = OBSTACLE_SPACING
    obstacle_gap: int = OBSTACLE_GAP
    obstacle_speed: int = OBSTACLE_SPEED
    first_obstacle_x: int = FIRST_OBSTACLE_X

    seed: Optional[int] = None          # None draws obstacle offsets from OS entropy
    show_score_zones: bool = False      # Paint the hidden score zones

    def __post_init__(self):
        if self.play_width <= 0 or self.play_height <= 0:
            raise ConfigurationError(
                f"Play area must be positive, got {self.play_width}x{self.play_height}")
        if self.tick_ms <= 0:
            raise ConfigurationError(f"Tick interval must be positive, got {self.tick_ms} ms")
        if self.player_size < 0:
            raise ConfigurationError(f"Player size must not be negative, got {self.player_size}")
        if self.player_size > self.play_height:
            raise ConfigurationError(
                f"Player size {self.player_size} does not fit in play height {self.play_height}")
        if self.obstacle_width < 0:
            raise ConfigurationError(
                f"Obstacle width must not be negative, got {self.obstacle_width}")
        if self.obstacle_spacing <= 0:
            raise ConfigurationError(
                f"Obstacle spacing must be positive, got {self.obstacle_spacing}")
        if self.obstacle_speed < 0:
            raise ConfigurationError(
                f"Obstacle speed must not be negative, got {self.obstacle_speed}")
        if not 0 < self.obstacle_gap < self.play_height:
            raise ConfigurationError(
                f"Obstacle gap {self.obstacle_gap} must lie strictly between 0 "
                f"and the play height {self.play_height}")

    @property
    def dt(self) -> float:
        """Seconds simulated by one tick."""
        return self.tick_ms / 1000.0

    @property
    def obstacle_count(self) -> int:
        """Size of the obstacle pool needed to fill the play width."""
        return self.play_width // self.obstacle_spacing
