"""Text drawing with a cache of fonts per size."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

import pygame

DEFAULT_FONT_PATH = Path("Assets/fonts/CreatoDisplay/CreatoDisplay-Medium.ttf")
TEXT_SPACING = 3


class Renderer:
    """Draws text, loading each font size once."""

    def __init__(self, font_path: Union[str, PathLike] = DEFAULT_FONT_PATH) -> None:
        self.font_path = Path(font_path)
        self._fonts: dict[float, pygame.font.Font] = {}

    def get_font(self, size: float) -> pygame.font.Font:
        """Return the font for ``size``, loading it on first use."""
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            pixels = max(1, round(size))
            try:
                font = pygame.font.Font(str(self.font_path), pixels)
            except OSError:
                font = pygame.font.Font(None, pixels)
            self._fonts[size] = font
        return font

    def measure_text(self, text: str, font_size: float) -> tuple[float, float]:
        """Return the width and height ``text`` takes when drawn."""
        if not text:
            return (0.0, float(font_size))
        font = self.get_font(font_size)
        width = sum(font.size(ch)[0] for ch in text)
        width += TEXT_SPACING * (len(text) - 1)
        return (float(width), float(font_size))

    def render_text(
        self,
        surface: pygame.Surface,
        text: str,
        x: float,
        y: float,
        font_size: float,
        color: int,
    ) -> None:
        """Draw ``text`` at (x, y) in the ``0xRRGGBBAA`` colour ``color``."""
        font = self.get_font(font_size)
        rgba = pygame.Color(color)
        cursor = x
        for ch in text:
            glyph = font.render(ch, True, rgba)
            surface.blit(glyph, (round(cursor), round(y)))
            cursor += glyph.get_width() + TEXT_SPACING