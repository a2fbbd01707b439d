"""Small helpers shared by the game."""

from __future__ import annotations

import math
import sys
from typing import NoReturn


def fail(message: str, code: int) -> NoReturn:
    """Print a highlighted error to stderr and exit with ``code``."""
    sys.stderr.write(f"\n\033[1;31mERROR: \033[0m{message}\n\n")
    sys.stderr.flush()
    sys.exit(code)


def round_half(num: float) -> float:
    """Round to the nearest whole number, halves going up."""
    return float(math.floor(num + 0.5))


def center_text(renderer, text: str, font_size: float, screen_width: float) -> float:
    """Return the x at which ``text`` sits centred on a screen of the given width."""
    width, _ = renderer.measure_text(text, font_size)
    return screen_width / 2 - width / 2