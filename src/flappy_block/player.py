"""
player.py: The flapping block controlled by the player.
"""

from typing import Optional

from .config import GameConfig
from .constants import PLAYER_COLOR
from .data_models import CollidableRect, Position
from .physics_core import PhysicsCore


class FlappyBlock:
    """
    Stays at a fixed horizontal position and moves vertically under a
    constant downward acceleration, plus an upward impulse for each flap.
    """

    def __init__(self, config: GameConfig):
        self.play_height = config.play_height
        self.size = config.player_size
        self.physics = PhysicsCore(
            gravity=config.gravity, flap_impulse=config.flap_impulse, dt=config.dt)

        self.rect = CollidableRect(
            Position(config.player_x, self.start_y), self.size, self.size, PLAYER_COLOR)
        self.velocity = 0.0
        self.flap_queued = False

    @property
    def start_y(self) -> float:
        """Top edge that vertically centres the block in the play area."""
        return self.play_height / 2 - self.size / 2

    @property
    def position(self) -> Position:
        return self.rect.position

    def update(self, dt: Optional[float] = None):
        """
        Integrates one tick. A queued flap is consumed by this update and
        does not carry over to the next one.
        """
        self.position.y, self.velocity = self.physics.step(
            self.position.y, self.velocity, flap=self.flap_queued, dt=dt)
        self.flap_queued = False

    def queue_flap(self):
        """Queues a flap for the next update(). Queuing twice is the same as once."""
        self.flap_queued = True

    def reset(self):
        self.velocity = 0.0
        self.flap_queued = False
        self.position.y = self.start_y

    def is_out_of_bounds(self) -> bool:
        """True once the block has left the play area entirely, above or below."""
        return self.rect.bottom < 0 or self.rect.top > self.play_height

    def is_colliding_with(self, other: CollidableRect) -> bool:
        return self.rect.is_colliding_with(other)
