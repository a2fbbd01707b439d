"""Game settings and the JSON file they are read from."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from typing import Union

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


@dataclass
class Settings:
    """Colours, frame rate and media paths used by the game."""

    paddle_color: Color = WHITE
    ball_color: Color = WHITE
    fps: float = 60.0
    background_music: Union[str, None] = None
    background: Union[str, None] = None


def parse_color(hex_string: str) -> Color:
    """Turn an ``RRGGBB`` hex string into an opaque RGBA tuple."""
    if not isinstance(hex_string, str):
        raise TypeError(f"colour must be a string, not {type(hex_string).__name__}")
    try:
        value = int(hex_string + "ff", 16)
    except ValueError as exc:
        raise ValueError(f"invalid colour: {hex_string!r}") from exc
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"colour out of range: {hex_string!r}")
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def load_settings(path: Union[str, PathLike]) -> Settings:
    """Read settings from a JSON file; missing keys raise ``KeyError``."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)

    paddle_color = parse_color(data["PaddleColor"])
    ball_color = parse_color(data["BallColor"])
    background_music = data["BackgroundMusic"]
    if not isinstance(background_music, str):
        raise TypeError("BackgroundMusic must be a string")
    fps = float(data["fps"])

    return Settings(
        paddle_color=paddle_color,
        ball_color=ball_color,
        fps=fps,
        background_music=background_music,
    )