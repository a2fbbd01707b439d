"""Paddles, steered by keys or by following the ball."""

from __future__ import annotations

from collections.abc import Container
from enum import Enum, auto
from typing import NamedTuple, Optional

import pygame

Color = tuple[int, int, int, int]

PADDLE_SIZE = (20.0, 80.0)
EDGE_MARGIN = 10.0
ACCELERATION = 60.0
MAX_SPEED = 300.0
FRICTION = 30.0


class PlayerType(Enum):
    PLAYER1 = auto()
    PLAYER2 = auto()
    BOT = auto()


class Rectangle(NamedTuple):
    x: float
    y: float
    width: float
    height: float


_KEYS: dict[PlayerType, tuple[Optional[int], Optional[int]]] = {
    PlayerType.PLAYER1: (pygame.K_w, pygame.K_s),
    PlayerType.PLAYER2: (pygame.K_UP, pygame.K_DOWN),
    PlayerType.BOT: (None, None),
}


class Player:
    """A paddle on the left (player one) or right (player two or bot)."""

    def __init__(
        self,
        kind: PlayerType,
        color: Color = (255, 255, 255, 255),
        window_width: float = 1280,
        window_height: float = 720,
    ) -> None:
        self.kind = kind
        self.color = color
        self.size = PADDLE_SIZE
        self.up_key, self.down_key = _KEYS[kind]

        width, height = self.size
        y = window_height / 2 - height / 2
        if kind is PlayerType.PLAYER1:
            x = EDGE_MARGIN
        else:
            x = window_width - EDGE_MARGIN - width
        self.position = (x, y)
        self.velocity = (0.0, 0.0)

    @property
    def rectangle(self) -> Rectangle:
        return Rectangle(*self.position, *self.size)

    def update(self, game, keys_down: Container) -> None:
        """Advance one frame.

        ``game`` supplies ``delta_time``, ``window_height`` and, for bots,
        ``ball``; ``keys_down`` holds the key codes currently held.
        """
        x, y = self.position
        vy = self.velocity[1]

        if self.kind is PlayerType.BOT:
            ball_y = game.ball.position[1]
            down, up = ball_y > y, ball_y < y
        else:
            down = self.down_key in keys_down
            up = self.up_key in keys_down

        if down:
            vy = min(vy + ACCELERATION, MAX_SPEED)
        elif up:
            vy = max(vy - ACCELERATION, -MAX_SPEED)
        elif vy > 0:
            vy -= FRICTION
        elif vy < 0:
            vy += FRICTION

        self.velocity = (self.velocity[0], vy)

        height = self.size[1]
        blocked_top = y < 0 and vy < 0
        blocked_bottom = y + height > game.window_height and vy > 0
        if not blocked_top and not blocked_bottom:
            dt = game.delta_time
            self.position = (x + self.velocity[0] * dt, y + vy * dt)

    def render(self, surface: pygame.Surface) -> None:
        x, y, width, height = self.rectangle
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        pygame.draw.rect(surface, self.color, rect, border_radius=int(min(width, height) / 2))