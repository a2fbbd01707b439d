"""The game window, its main loop and the match state."""

from __future__ import annotations

import sys
import time
from collections.abc import Container
from pathlib import Path
from typing import ClassVar, Optional

import pygame

from .ball import Ball, Direction
from .menus import MainMenu, Menu
from .player import Player, PlayerType
from .renderer import Renderer
from .settings import Settings, load_settings
from .utils import fail, round_half

TITLE = "Pongus Maximus"
SETTINGS_PATH = Path("Assets/settings.json")
BACKGROUND_PATH = Path("Assets/textures/backdrop.png")
EXIT_KEY = pygame.K_F8
SCORE_SIZE = 50
FPS_TEXT_SIZE = 20
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class Game:
    """Owns the window, the paddles, the ball, the score and the menu.

    Only one game may exist at a time; use it as a context manager so the
    slot is released again.
    """

    _instance: ClassVar[Optional["Game"]] = None

    def __init__(self) -> None:
        if Game._instance is None:
            Game._instance = self
        else:
            fail("There is more than one instance of game!", -1)

        self.window_width = 1280
        self.window_height = 720
        self.players: list[Player] = []
        self.ball: Optional[Ball] = None
        self.is_running = False
        self.delta_time = 0.0
        self.settings = Settings()
        self.renderer = Renderer()
        self.score = [0, 0]
        self.menu: Menu = MainMenu()
        self.existing = True

        self._pvp = True
        self._should_set_pvp = False
        self._pvp_mode_set = False
        self._background: Optional[pygame.Surface] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._score_font: Optional[pygame.font.Font] = None

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *exc_info) -> None:
        self._release()

    def _release(self) -> None:
        if Game._instance is self:
            Game._instance = None

    def run(self) -> None:
        """Open the window, load the settings and play until closed."""
        pygame.init()
        try:
            pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(TITLE)
            try:
                pygame.mixer.init()
            except pygame.error:
                pass
            self.settings = load_settings(SETTINGS_PATH)
            self.settings.background = str(BACKGROUND_PATH)
            self._background = self._load_background()
            self.set_menu(MainMenu)
            self.loop()
        finally:
            self.ball = None
            if pygame.mixer.get_init():
                pygame.mixer.quit()
            pygame.quit()

    def _load_background(self) -> Optional[pygame.Surface]:
        if not self.settings.background:
            return None
        try:
            return pygame.image.load(self.settings.background)
        except (pygame.error, FileNotFoundError):
            return None

    def _start_music(self) -> bool:
        if not self.settings.background_music or not pygame.mixer.get_init():
            return False
        try:
            pygame.mixer.music.load(self.settings.background_music)
            pygame.mixer.music.play(-1)
        except (pygame.error, FileNotFoundError):
            return False
        return True

    def loop(self) -> None:
        """Run frames until the window is closed or the game quits."""
        surface = pygame.display.get_surface()
        if surface is None:
            raise RuntimeError("the game window is not open")

        self.ball = Ball(self.window_width, self.window_height, self.settings.ball_color)
        self.menu = MainMenu()
        previous_time = time.perf_counter()
        music_playing = self._start_music()
        held: set[int] = set()

        try:
            while self.existing:
                pressed: set[int] = set()
                closing = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        closing = True
                    elif event.type == pygame.KEYDOWN:
                        if event.key == EXIT_KEY:
                            closing = True
                        pressed.add(event.key)
                        held.add(event.key)
                    elif event.type == pygame.KEYUP:
                        held.discard(event.key)
                if closing:
                    break

                self._frame_update(pressed, held)
                self._draw(surface)

                current_time = time.perf_counter()
                draw_update_time = current_time - previous_time
                if self.settings.fps > 0:
                    wait = 1.0 / self.settings.fps - draw_update_time
                    if wait > 0:
                        time.sleep(wait)
                        current_time = time.perf_counter()
                        self.delta_time = current_time - previous_time
                    else:
                        self.delta_time = draw_update_time
                    previous_time = current_time
        finally:
            if music_playing and pygame.mixer.get_init():
                pygame.mixer.music.stop()

    def _apply_player_mode(self) -> None:
        if self._pvp_mode_set or not self._should_set_pvp:
            return
        if self._pvp:
            sys.stdout.write("Making pvp")
            opponent = PlayerType.PLAYER2
        else:
            sys.stdout.write("Making pvb")
            opponent = PlayerType.BOT
        sys.stdout.flush()
        self.players = [self._make_player(PlayerType.PLAYER1), self._make_player(opponent)]
        self._pvp_mode_set = True

    def _make_player(self, kind: PlayerType) -> Player:
        return Player(
            kind, self.settings.paddle_color, self.window_width, self.window_height
        )

    def _frame_update(self, pressed: Container, held: Container) -> None:
        if pygame.K_ESCAPE in pressed:
            self.is_running = False
            self.set_menu(MainMenu)

        self._apply_player_mode()

        if not self.is_running:
            self.menu.update(self, pressed)
        else:
            for player in self.players:
                player.update(self, held)
            if self.ball is not None:
                self.ball.update(self)

    def _fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._score_font is None or self._small_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._score_font = pygame.font.Font(None, SCORE_SIZE)
            self._small_font = pygame.font.Font(None, FPS_TEXT_SIZE)
        return self._score_font, self._small_font

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(BLACK)
        if self._background is not None:
            surface.blit(self._background, (0, 0))

        for player in self.players:
            player.render(surface)
        if self.ball is not None:
            self.ball.render(surface)

        score_font, small_font = self._fonts()
        width = surface.get_width()
        for text, centre in ((str(self.score[0]), width // 4), (str(self.score[1]), width // 4 * 3)):
            text_width = score_font.size(text)[0]
            surface.blit(score_font.render(text, True, BLACK), (centre - text_width // 2, 0))

        if not self.is_running:
            self.menu.render(self, surface)

        if self.delta_time > 0:
            fps_text = f"FPS: {round_half(1.0 / self.delta_time):.1f}"
        else:
            fps_text = "FPS: inf"
        surface.blit(small_font.render(fps_text, True, WHITE), (0, 0))

        pygame.display.flip()

    def start_gameplay(self, pvp: bool) -> None:
        """Leave the menus and start a match against a person or the bot."""
        self.is_running = True
        self._pvp = pvp
        self._should_set_pvp = True

    def quit(self) -> None:
        """Stop the main loop after the current frame."""
        self.existing = False

    def increment_score(self, side: Direction) -> None:
        """Give a point to the left or the right player."""
        if side is Direction.LEFT:
            self.score[0] += 1
        else:
            self.score[1] += 1

    def set_menu(self, menu_class: type[Menu]) -> None:
        """Show a fresh instance of ``menu_class``."""
        self.menu = menu_class()


def main(argv=None) -> int:
    """Start the game."""
    with Game() as game:
        game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())