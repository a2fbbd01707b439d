import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from pongus.ball import Ball, Direction  # noqa: E402
from pongus.player import Player, PlayerType  # noqa: E402


class _Game:
    def __init__(self, dt=0.0, players=()):
        self.delta_time = dt
        self.window_width = 1280
        self.window_height = 720
        self.players = list(players)
        self.scored = []

    def increment_score(self, side):
        self.scored.append(side)


def test_ball_starts_centred_moving_left_and_down():
    ball = Ball(1280, 720)
    assert ball.position == (640.0, 360.0)
    assert ball.velocity == (-420.0, 420.0)
    assert ball.radius == 12.0


def test_update_moves_by_velocity():
    ball = Ball()
    game = _Game(dt=0.1)
    ball.update(game)
    x, y = ball.position
    assert x < 640.0 and y > 360.0
    assert (640.0 - x) == (y - 360.0)
    assert game.scored == []


def test_zero_time_keeps_ball_still():
    ball = Ball()
    ball.update(_Game(dt=0.0))
    assert ball.position == (640.0, 360.0)


def test_top_edge_flips_vertical_velocity():
    ball = Ball()
    ball.position = (640.0, 5.0)
    ball.update(_Game())
    assert ball.velocity == (-420.0, -420.0)


def test_right_edge_scores_left_and_resets():
    ball = Ball()
    ball.position = (1275.0, 360.0)
    game = _Game()
    ball.update(game)
    assert game.scored == [Direction.LEFT]
    assert ball.position == (640.0, 360.0)
    assert ball.velocity == (420.0, -420.0)


def test_left_edge_scores_right():
    ball = Ball()
    ball.position = (5.0, 360.0)
    game = _Game()
    ball.update(game)
    assert game.scored == [Direction.RIGHT]
    assert ball.position == (640.0, 360.0)


def test_paddle_hit_reverses_horizontal_velocity():
    paddle = Player(PlayerType.PLAYER1)
    px, py, pw, ph = paddle.rectangle
    ball = Ball()
    ball.position = (px + pw + 5.0, py + ph / 2)
    ball.velocity = (-420.0, 0.0)
    game = _Game(players=[paddle])
    ball.update(game)
    assert ball.velocity == (420.0, 0.0)
    assert game.scored == []


def test_far_paddle_leaves_ball_alone():
    paddle = Player(PlayerType.PLAYER2)
    ball = Ball()
    ball.update(_Game(players=[paddle]))
    assert ball.velocity == (-420.0, 420.0)


def test_reset_keeps_velocity():
    ball = Ball()
    ball.position = (1.0, 2.0)
    ball.velocity = (100.0, -50.0)
    ball.reset(800, 600)
    assert ball.position == (400.0, 300.0)
    assert ball.velocity == (100.0, -50.0)


def test_render_draws_ball_colour_at_centre():
    surface = pygame.Surface((100, 100), pygame.SRCALPHA)
    ball = Ball(100, 100, color=(0, 0, 255, 255))
    ball.render(surface)
    assert tuple(surface.get_at((50, 50))) == (0, 0, 255, 255)
    assert surface.get_at((0, 0))[3] == 0