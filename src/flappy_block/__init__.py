"""
Flappy Block: a single block flapping through a stream of gap obstacles.
"""

from .config import ConfigurationError, GameConfig
from .data_models import CollidableRect, Position, overlaps
from .game_engine import GameEngine, GameInput, GameState, RenderRect, Scene
from .obstacle import Obstacle
from .physics_core import PhysicsCore
from .player import FlappyBlock

__version__ = "1.0.0"

__all__ = [
    "CollidableRect",
    "ConfigurationError",
    "FlappyBlock",
    "GameConfig",
    "GameEngine",
    "GameInput",
    "GameState",
    "Obstacle",
    "PhysicsCore",
    "Position",
    "RenderRect",
    "Scene",
    "overlaps",
]
