from __future__ import annotations

from typing import Callable
import pygame


class Button:
    """
    Clickable action button for the garden panel.

    - rect: pygame.Rect region
    - text: label text
    - action: called with no arguments when clicked
    - needs_selection: if True, the button is inert while no tile is selected
    """

    def __init__(
        self,
        rect: pygame.Rect,
        text: str,
        action: Callable[[], None],
        needs_selection: bool = False,
    ):
        self.rect = rect
        self.text = text
        self.action = action
        self.needs_selection = needs_selection

    def handle_event(self, event: pygame.event.Event, has_selection: bool = True) -> bool:
        """Run the action on a left click inside the button; return True if it ran."""
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        if not self.rect.collidepoint(event.pos):
            return False
        if self.needs_selection and not has_selection:
            return False
        self.action()
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, has_selection: bool = True) -> None:
        color = (70, 100, 70)
        if self.needs_selection and not has_selection:
            color = (60, 60, 60)

        pygame.draw.rect(surface, color, self.rect)
        pygame.draw.rect(surface, (200, 200, 200), self.rect, 2)

        text_surf = font.render(self.text, True, (255, 255, 255))
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)
