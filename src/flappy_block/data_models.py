"""
data_models.py: Positions, rectangles and the AABB collision primitive.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import ConfigurationError

Color = Tuple[int, int, int]


@dataclass
class Position:
    """Top left corner of a rectangle in screen space (pixels)."""
    x: float
    y: float

    def set_position(self, x: float, y: float):
        self.x = x
        self.y = y

    def move(self, dx: float, dy: float):
        self.x += dx
        self.y += dy


@dataclass
class CollidableRect:
    """
    An axis-aligned rectangle with a colour to render it with.
    Owns its position; nothing else should hold a reference to it.
    """
    position: Position
    width: int
    height: int
    color: Color = (0, 0, 0)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ConfigurationError(
                f"Rectangle size must not be negative, got {self.width}x{self.height}")

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    def move(self, dx: float, dy: float = 0.0):
        """Moves with no consideration for where it is moving to."""
        self.position.move(dx, dy)

    def is_colliding_with(self, other: "CollidableRect") -> bool:
        return overlaps(self, other)

    def to_render_rect(self) -> Tuple[int, int, int, int]:
        """Whole-pixel (x, y, w, h) for drawing."""
        return (int(self.position.x), int(self.position.y), self.width, self.height)


def overlaps(a: CollidableRect, b: CollidableRect) -> bool:
    """
    AABB test with inclusive bounds: rectangles that only touch along an
    edge or a corner count as colliding.
    """
    # Any separating axis means no intersection
    if a.bottom < b.top:
        return False
    if a.top > b.bottom:
        return False
    if a.right < b.left:
        return False
    if a.left > b.right:
        return False

    return True
