"""An arcade Pong game with player-vs-player and player-vs-bot modes."""

__version__ = "0.1.0"
__all__ = ["__version__"]