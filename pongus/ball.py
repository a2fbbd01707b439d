"""The ball: bounces off walls and paddles, scores at the side edges."""

from __future__ import annotations

from enum import Enum, auto

import pygame

Color = tuple[int, int, int, int]

BALL_RADIUS = 12.0
START_VELOCITY = (-420.0, 420.0)


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()


def _circle_hits_rect(center: tuple[float, float], radius: float, rect) -> bool:
    x, y, width, height = rect
    dx = abs(center[0] - (x + width / 2))
    dy = abs(center[1] - (y + height / 2))
    half_w, half_h = width / 2, height / 2
    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    return (dx - half_w) ** 2 + (dy - half_h) ** 2 <= radius * radius


class Ball:
    """A ball starting in the middle of the screen."""

    def __init__(
        self,
        screen_width: float = 1280,
        screen_height: float = 720,
        color: Color = (255, 255, 255, 255),
    ) -> None:
        self.radius = BALL_RADIUS
        self.color = color
        self.velocity = START_VELOCITY
        self.position = (0.0, 0.0)
        self.reset(screen_width, screen_height)

    def reset(self, screen_width: float, screen_height: float) -> None:
        """Put the ball back in the centre, keeping its velocity."""
        self.position = (screen_width / 2, screen_height / 2)

    def update(self, game) -> None:
        """Advance one frame.

        ``game`` supplies ``players``, ``delta_time``, ``window_width``,
        ``window_height`` and ``increment_score(side)``.
        """
        vx, vy = self.velocity
        x, y = self.position
        r = self.radius

        for player in game.players:
            if _circle_hits_rect(self.position, r, player.rectangle):
                vx = -vx

        if y + r > game.window_height or y - r < 0:
            vy = -vy

        self.velocity = (vx, vy)

        if x + r > game.window_width:
            self.velocity = (-vx, -vy)
            self.reset(game.window_width, game.window_height)
            game.increment_score(Direction.LEFT)
        elif x - r < 0:
            self.velocity = (-vx, -vy)
            self.reset(game.window_width, game.window_height)
            game.increment_score(Direction.RIGHT)

        dt = game.delta_time
        x, y = self.position
        self.position = (x + self.velocity[0] * dt, y + self.velocity[1] * dt)

    def render(self, surface: pygame.Surface) -> None:
        x, y = self.position
        pygame.draw.circle(surface, self.color, (round(x), round(y)), round(self.radius))