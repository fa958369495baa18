"""
game_engine.py: The game state machine, per-tick update and scene description.
"""

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional

from .config import GameConfig
from .constants import START_MESSAGE, GAME_OVER_MESSAGE
from .data_models import Color
from .logger import get_logger
from .obstacle import Obstacle
from .player import FlappyBlock

logger = get_logger("game_engine")


class GameState(Enum):
    """
    WAITING: before the game starts, a flap moves to PLAYING.
    PLAYING: the block flaps until it collides or leaves the play area.
    GAME_OVER: frozen until a restart returns to WAITING.
    """
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameInput(Enum):
    """The logical inputs the game reacts to. Other keys never get this far."""
    FLAP = "flap"
    RESTART = "restart"
    QUIT = "quit"


@dataclass
class RenderRect:
    x: int
    y: int
    width: int
    height: int
    color: Color


@dataclass
class Scene:
    """Everything the renderer needs for one frame, in draw order."""
    rects: List[RenderRect] = field(default_factory=list)
    score_text: str = "0"
    overlay_text: Optional[str] = None


class GameEngine:
    """
    Owns the block, the obstacle pool, the score and the game state.
    Inputs are queued by handle_input() and only take effect at the start
    of the next tick(), never in the middle of an update.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.player = FlappyBlock(self.config)
        self.obstacles: List[Obstacle] = []
        self.create_obstacles()

        self.state = GameState.WAITING
        self.score = 0
        self.tick_count = 0
        self.quit_requested = False
        self.pending_inputs: Deque[GameInput] = deque()

    # ----------------- Obstacles -----------------

    def create_obstacles(self):
        """Creates enough obstacles to fill the screen, each with a fresh offset."""
        cfg = self.config
        self.obstacles = [
            Obstacle(
                start_x=cfg.first_obstacle_x + i * cfg.obstacle_spacing,
                gap=cfg.obstacle_gap,
                play_width=cfg.play_width,
                play_height=cfg.play_height,
                width=cfg.obstacle_width,
                rng=self.rng,
            )
            for i in range(cfg.obstacle_count)
        ]

    # ----------------- Input -----------------

    def handle_input(self, game_input: GameInput):
        """Queues an input intent for the next tick."""
        self.pending_inputs.append(game_input)

    def process_inputs(self):
        """
        Applies every input queued before this call, in the order it arrived.
        A restart clears the queue but not the inputs already taken from it,
        so a flap released just after a restart still starts the new game.
        """
        inputs = list(self.pending_inputs)
        self.pending_inputs.clear()
        for game_input in inputs:
            if game_input is GameInput.QUIT:
                logger.info("Quit requested. Final score: %d", self.score)
                self.quit_requested = True
            elif game_input is GameInput.RESTART:
                self.reset()
            elif game_input is GameInput.FLAP:
                if self.state is GameState.WAITING:
                    self.start()
                elif self.state is GameState.PLAYING:
                    self.player.queue_flap()

    # ----------------- State machine -----------------

    def start(self):
        if self.state is GameState.WAITING:
            self.state = GameState.PLAYING
            logger.info("Game started.")

    def game_over(self):
        self.state = GameState.GAME_OVER
        logger.info("Game over after %d ticks. Final score: %d", self.tick_count, self.score)

    def reset(self):
        """
        Back to a default state: block re-centred, a fresh set of obstacles,
        score zeroed, queued inputs dropped and waiting for the first flap.
        """
        self.player.reset()
        self.create_obstacles()
        self.score = 0
        self.tick_count = 0
        self.state = GameState.WAITING
        self.pending_inputs.clear()
        logger.info("Game reset.")

    # ----------------- Tick -----------------

    def tick(self) -> Scene:
        """One fixed-interval step: apply queued inputs, update, then describe the frame."""
        self.process_inputs()
        self.update()
        return self.build_scene()

    def update(self):
        """
        Only runs while PLAYING. Obstacles move, then the block, then loss is
        checked. A loss in this tick suppresses any score from the same tick.
        """
        if self.state is not GameState.PLAYING:
            return

        self.tick_count += 1
        for obstacle in self.obstacles:
            obstacle.update(-self.config.obstacle_speed)

        self.player.update(self.config.dt)

        if self.is_lost():
            self.game_over()
            return

        gained = sum(
            1 for obstacle in self.obstacles
            if obstacle.consume_score_collision(self.player.rect)
        )
        if gained:
            self.score += gained
            logger.debug("Score is now %d", self.score)

    def is_lost(self) -> bool:
        if self.player.is_out_of_bounds():
            return True
        return any(obstacle.is_colliding_for_loss(self.player.rect) for obstacle in self.obstacles)

    # ----------------- Rendering -----------------

    def overlay_text(self) -> Optional[str]:
        if self.state is GameState.WAITING:
            return START_MESSAGE
        if self.state is GameState.GAME_OVER:
            return GAME_OVER_MESSAGE
        return None

    def build_scene(self) -> Scene:
        """Obstacles first, then the block, so the block is drawn on top."""
        rects = []
        for obstacle in self.obstacles:
            parts = obstacle.rects
            if self.config.show_score_zones:
                parts = parts + [obstacle.score_zone]
            rects.extend(_to_render(rect) for rect in parts)
        rects.append(_to_render(self.player.rect))

        return Scene(rects=rects, score_text=str(self.score), overlay_text=self.overlay_text())


def _to_render(rect) -> RenderRect:
    x, y, w, h = rect.to_render_rect()
    return RenderRect(x, y, w, h, rect.color)
