"""Keyboard-driven menus shown while no match is being played."""

from __future__ import annotations

from collections.abc import Container

import pygame

from .utils import center_text

TEXT_COLOR = 0xFFFFFFFF
FIRST_OPTION_Y = 180
OPTION_SPACING = 50

_NEXT_KEYS = (pygame.K_s, pygame.K_DOWN)
_PREVIOUS_KEYS = (pygame.K_w, pygame.K_UP)
_CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_SPACE)


def _any_pressed(pressed: Container, keys) -> bool:
    return any(key in pressed for key in keys)


class Menu:
    """A vertical list of options, one of them selected, driven by keys."""

    options: tuple[str, ...] = ()
    font_size: float = 70

    def __init__(self) -> None:
        self.selected = 0

    def update(self, game, pressed: Container) -> None:
        """Move the selection according to the keys pressed this frame."""
        if not self.options:
            return
        step = 0
        if _any_pressed(pressed, _NEXT_KEYS):
            step += 1
        if _any_pressed(pressed, _PREVIOUS_KEYS):
            step -= 1
        self.selected = min(max(self.selected + step, 0), len(self.options) - 1)

    def labels(self) -> list[str]:
        """The option texts as drawn, the selected one marked."""
        return [
            f"> {option} <" if index == self.selected else option
            for index, option in enumerate(self.options)
        ]

    def _option_x(self, game, label: str, screen_width: float) -> float:
        return center_text(game.renderer, label, self.font_size, screen_width)

    def render(self, game, surface) -> None:
        """Draw the options onto ``surface``, centred horizontally."""
        screen_width = surface.get_width()
        y = FIRST_OPTION_Y
        for label in self.labels():
            x = self._option_x(game, label, screen_width)
            game.renderer.render_text(surface, label, x, y, self.font_size, TEXT_COLOR)
            y += OPTION_SPACING


class MainMenu(Menu):
    """Play, settings and quit."""

    options = ("Play", "Settings", "Quit")
    font_size = 70

    def update(self, game, pressed: Container) -> None:
        super().update(game, pressed)
        if _any_pressed(pressed, _CONFIRM_KEYS):
            if self.selected == 0:
                game.set_menu(PlayMenu)
            elif self.selected == 2:
                game.set_menu(QuitMenu)


class PlayMenu(Menu):
    """Choice between a match against a person or against the bot."""

    options = ("Player vs Player", "Player vs AI")
    font_size = 70

    def update(self, game, pressed: Container) -> None:
        super().update(game, pressed)
        if _any_pressed(pressed, _CONFIRM_KEYS):
            if self.selected == 0:
                game.start_gameplay(True)
            elif self.selected == 1:
                game.start_gameplay(False)


class QuitMenu(Menu):
    """Asks whether to leave the game."""

    options = ("Yes", "No")
    font_size = 40
    title = "Are you sure you wish to quit? (Y/N)"
    title_size = 60
    title_y = 130

    def update(self, game, pressed: Container) -> None:
        super().update(game, pressed)
        if _any_pressed(pressed, _CONFIRM_KEYS):
            if self.selected == 0:
                game.quit()
            elif self.selected == 1:
                game.set_menu(MainMenu)
        if pygame.K_y in pressed:
            game.quit()
        if pygame.K_n in pressed:
            game.set_menu(MainMenu)

    def _option_x(self, game, label: str, screen_width: float) -> float:
        return float(int(super()._option_x(game, label, screen_width)))

    def render(self, game, surface) -> None:
        screen_width = surface.get_width()
        x = center_text(game.renderer, self.title, self.title_size, screen_width)
        game.renderer.render_text(
            surface, self.title, x, self.title_y, self.title_size, TEXT_COLOR
        )
        super().render(game, surface)