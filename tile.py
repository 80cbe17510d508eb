from __future__ import annotations

from typing import Optional
import pygame

from plant import Plant

WATERED_COLOR = (60, 140, 255)
SUNLIGHT_COLOR = (240, 210, 80)
STEM_COLOR = (70, 180, 70)


class Tile:
    """
    One square of the garden grid, showing the plant at a plot index.

    - index: position of the plant in GardenPlot.plants
    - rect: screen area of the tile
    """

    def __init__(self, index: int, plant: Plant, rect: pygame.Rect):
        self.index = index
        self.plant = plant
        self.rect = rect

    def height_fraction(self, tallest_height: float) -> float:
        """
        Return this plant's height relative to the tallest, in [0, 1].
        Used for drawing the growth bar.
        """
        if tallest_height <= 0:
            return 0.0
        return max(0.0, min(1.0, self.plant.height / tallest_height))

    def sunlight_fraction(self) -> float:
        threshold = self.plant.rule.sunlight_threshold
        if threshold <= 0:
            return 1.0
        return max(0.0, min(1.0, self.plant.sunlight_hours / threshold))

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        tallest_height: float,
        selected_tile: Optional["Tile"],
    ) -> None:
        """
        Draw this tile: soil, growth bar, sunlight bar, label + selection outline.
        """
        pygame.draw.rect(surface, (90, 60, 35), self.rect)

        # growth bar
        plant_rect = self.rect.inflate(-self.rect.width * 0.5, -self.rect.height * 0.3)
        filled_height = int(plant_rect.height * self.height_fraction(tallest_height))
        if filled_height > 0:
            filled_rect = pygame.Rect(
                plant_rect.left,
                plant_rect.bottom - filled_height,
                plant_rect.width,
                filled_height,
            )
            pygame.draw.rect(surface, STEM_COLOR, filled_rect)

        # sunlight bar along the bottom edge
        sun_width = int((self.rect.width - 8) * self.sunlight_fraction())
        if sun_width > 0:
            sun_rect = pygame.Rect(self.rect.left + 4, self.rect.bottom - 6, sun_width, 3)
            pygame.draw.rect(surface, SUNLIGHT_COLOR, sun_rect)

        if self.plant.watered:
            pygame.draw.rect(surface, WATERED_COLOR, self.rect, 2)

        # name initial and height
        label = f"{self.plant.name[:1].upper()} {self.plant.height}"
        text_surf = font.render(label, True, (235, 235, 235))
        text_rect = text_surf.get_rect()
        text_rect.midtop = (self.rect.centerx, self.rect.top + 4)
        surface.blit(text_surf, text_rect)

        if selected_tile is self:
            pygame.draw.rect(surface, (255, 255, 255), self.rect, 3)
