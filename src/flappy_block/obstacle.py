"""
obstacle.py: A top and bottom obstacle pair scrolling left, with a hidden
score zone trailing just behind the gap between them.
"""

import random
from typing import List

from .config import ConfigurationError
from .constants import OBSTACLE_COLOR, SCORE_ZONE_COLOR, RECYCLE_MARGIN
from .data_models import CollidableRect, Position
from .logger import get_logger

logger = get_logger("obstacle")


class Obstacle:
    """
    The gap between top and bottom is preserved under every move and recycle:
    bottom.top - top.bottom == gap.
    """

    def __init__(self, start_x: int, gap: int, play_width: int, play_height: int,
                 width: int, rng: random.Random):
        if play_height - gap <= 0:
            raise ConfigurationError(
                f"Obstacle gap {gap} leaves no room in play height {play_height}")
        self.gap = gap
        self.play_width = play_width
        self.play_height = play_height
        self.width = width
        self.rng = rng
        self.score_applied = False

        self.top = CollidableRect(
            Position(start_x, -play_height), width, play_height, OBSTACLE_COLOR)
        self.bottom = CollidableRect(
            Position(start_x, gap), width, play_height, OBSTACLE_COLOR)
        self.score_zone = CollidableRect(
            Position(start_x + width, 0), width, gap, SCORE_ZONE_COLOR)
        self.offset = 0
        self.randomise_offset()

    @property
    def x(self) -> float:
        return self.top.left

    @property
    def rects(self) -> List[CollidableRect]:
        """The visible parts, top then bottom."""
        return [self.top, self.bottom]

    def update(self, move_dx: float):
        """Moves horizontally (negative moves left), recycling once fully off the left edge."""
        self.top.move(move_dx)
        self.bottom.move(move_dx)
        self.score_zone.move(move_dx)
        if self.top.right <= 0:
            self.reset_past_right_edge()

    def reset_past_right_edge(self):
        """Moves just past the right edge with a new random vertical offset."""
        x = self.play_width + RECYCLE_MARGIN
        self.top.position.x = x
        self.bottom.position.x = x
        self.score_zone.position.x = x + self.width
        self.randomise_offset()
        self.score_applied = False
        logger.debug("Obstacle recycled to x=%d with offset %d", x, self.offset)

    def randomise_offset(self):
        """Draws an offset in [0, play_height - gap) and realigns all three rects."""
        self.offset = self.rng.randrange(self.play_height - self.gap)
        self.top.position.y = self.offset - self.play_height
        self.bottom.position.y = self.gap + self.offset
        self.score_zone.position.y = self.offset

    def is_colliding_for_loss(self, other: CollidableRect) -> bool:
        return self.top.is_colliding_with(other) or self.bottom.is_colliding_with(other)

    def consume_score_collision(self, other: CollidableRect) -> bool:
        """
        Check-and-consume command, not a pure query: returns True the first
        time `other` touches the score zone on this pass and marks the score
        as applied, so every later call returns False until the next recycle.
        """
        if not self.score_applied and self.score_zone.is_colliding_with(other):
            self.score_applied = True
            return True
        return False

    is_colliding_for_score = consume_score_collision
