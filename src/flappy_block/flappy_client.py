"""
flappy_client.py

pygame host for the game: window, fixed-timestep tick source, keyboard
input and rendering of the scene produced by the engine.
"""

from typing import Optional

import pygame

from .config import GameConfig
from .constants import (
    WINDOW_CAPTION, BACKGROUND_COLOR, SCORE_COLOR, SCORE_BOX_COLOR, MESSAGE_COLOR,
    FONT_NAME, SCORE_FONT_SIZE, MESSAGE_FONT_SIZE
)
from .game_engine import GameEngine, GameInput, Scene
from .logger import get_logger

logger = get_logger("client")

# Only key releases are observed, so a held key never repeats a flap.
KEY_BINDINGS = {
    pygame.K_SPACE: GameInput.FLAP,
    pygame.K_r: GameInput.RESTART,
    pygame.K_ESCAPE: GameInput.QUIT,
}


def map_event(event) -> Optional[GameInput]:
    """Translates a pygame event to a game input, or None if it is ignored."""
    if event.type == pygame.QUIT:
        return GameInput.QUIT
    if event.type == pygame.KEYUP:
        return KEY_BINDINGS.get(event.key)
    return None


# ----------------- Renderer -----------------

class SceneRenderer:
    """Draws a Scene onto a pygame surface."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        if not pygame.font.get_init():
            pygame.font.init()
        self.score_font = pygame.font.SysFont(FONT_NAME, SCORE_FONT_SIZE, bold=True)
        self.message_font = pygame.font.SysFont(FONT_NAME, MESSAGE_FONT_SIZE)

    def draw(self, surface: pygame.Surface, scene: Scene):
        surface.fill(BACKGROUND_COLOR)

        for rect in scene.rects:
            pygame.draw.rect(surface, rect.color, (rect.x, rect.y, rect.width, rect.height))

        self._draw_score(surface, scene.score_text)

        if scene.overlay_text:
            self._draw_message(surface, scene.overlay_text)

    def _draw_score(self, surface: pygame.Surface, score_text: str):
        """Score centred at the top of the screen on a translucent box."""
        text = self.score_font.render(score_text, True, SCORE_COLOR)
        box_width = text.get_width() + 40
        box_height = 65

        box = pygame.Surface((box_width, box_height), pygame.SRCALPHA)
        box.fill(SCORE_BOX_COLOR)
        surface.blit(box, (self.width // 2 - box_width // 2, 50))
        surface.blit(text, (self.width // 2 - text.get_width() // 2,
                            50 + box_height // 2 - text.get_height() // 2))

    def _draw_message(self, surface: pygame.Surface, message: str):
        text = self.message_font.render(message, True, MESSAGE_COLOR)
        surface.blit(text, (self.width // 2 - text.get_width() // 2,
                            self.height // 2 - text.get_height() // 2))


# ----------------- Game Client (window / loop) -----------------

class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((self.config.play_width, self.config.play_height))
        pygame.display.set_caption(WINDOW_CAPTION)

        self.engine = GameEngine(self.config)
        self.renderer = SceneRenderer(self.config.play_width, self.config.play_height)

        # Time Management
        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0

    def handle_events(self):
        """Queues inputs for the next tick. The engine is never updated from here."""
        for event in pygame.event.get():
            game_input = map_event(event)
            if game_input is not None:
                self.engine.handle_input(game_input)

    def run(self) -> int:
        """The main execution loop. Returns the process exit status."""
        logger.info("Window opened at %dx%d, tick every %d ms.",
                    self.config.play_width, self.config.play_height, self.config.tick_ms)
        scene = self.engine.build_scene()
        tick_time = self.config.dt

        try:
            while not self.engine.quit_requested:
                self.tick_timer += self.clock.tick(2 * 1000 // self.config.tick_ms) / 1000.0
                self.handle_events()

                # --- Fixed Timestep ---
                while self.tick_timer >= tick_time and not self.engine.quit_requested:
                    self.tick_timer -= tick_time
                    scene = self.engine.tick()

                self.renderer.draw(self.screen, scene)
                pygame.display.flip()
        finally:
            pygame.quit()

        return 0
