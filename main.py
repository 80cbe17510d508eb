import json
import logging
import os
import sys
from typing import List, Optional

import pygame

from button import Button
from garden_plot import GardenPlot
from plant import Plant
from tile import Tile

_LOGGER = logging.getLogger(__name__)

# --- Constants ---
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
UI_PANEL_HEIGHT = 140
FPS = 30

GRID_COLS = 8
TILE_SIZE = 80
GRID_MARGIN_X = 20
GRID_MARGIN_Y = 20

BUTTON_HEIGHT = 32
SUNLIGHT_STEP = 1
SAVE_FILE = "garden.json"

PLANT_NAMES = ["Tomato", "Carrot", "Sunflower", "Lettuce", "Bean", "Pumpkin"]


class GardenViewer:
    def __init__(self, save_file: str = SAVE_FILE):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Garden Plot")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 16)

        self.save_file = save_file
        self.running = True
        self.buttons: List[Button] = []
        self.create_buttons()

        self.reset_state()
        self.load_state()

    def reset_state(self):
        self.plot = GardenPlot()
        self.selected_tile: Optional[Tile] = None
        self.status = ""
        self.tiles: List[Tile] = []

    def create_tiles(self) -> List[Tile]:
        tiles = []
        for index, plant in enumerate(self.plot.plants):
            col = index % GRID_COLS
            row = index // GRID_COLS
            rect = pygame.Rect(
                GRID_MARGIN_X + col * TILE_SIZE,
                GRID_MARGIN_Y + row * TILE_SIZE,
                TILE_SIZE - 4,
                TILE_SIZE - 4,
            )
            tiles.append(Tile(index, plant, rect))
        return tiles

    def refresh_tiles(self):
        selected_index = self.selected_tile.index if self.selected_tile else None
        self.tiles = self.create_tiles()
        self.selected_tile = None
        if selected_index is not None and selected_index < len(self.tiles):
            self.selected_tile = self.tiles[selected_index]

    def create_buttons(self):
        panel_top = WINDOW_HEIGHT - UI_PANEL_HEIGHT + 10
        x = 20

        actions = [
            ("Water", self.water_selected, True),
            ("Sun +1h", self.sun_selected, True),
            ("Grow", self.grow_selected, True),
            ("Water all", self.water_all, False),
            ("Grow all", self.grow_all, False),
            ("Add plant", self.add_plant, False),
            ("Save", self.save_state, False),
        ]
        for text, action, needs_selection in actions:
            width = 12 + 10 * len(text)
            rect = pygame.Rect(x, panel_top, width, BUTTON_HEIGHT)
            self.buttons.append(Button(rect, text, action, needs_selection=needs_selection))
            x += width + 8

    # --- Actions ---

    def selected_plant(self) -> Optional[Plant]:
        if self.selected_tile is None:
            self.status = "Select a plant first."
            return None
        return self.selected_tile.plant

    def water_selected(self):
        plant = self.selected_plant()
        if plant:
            plant.water()
            self.status = f"Watered {plant.name}."

    def sun_selected(self):
        plant = self.selected_plant()
        if plant:
            plant.give_sunlight(SUNLIGHT_STEP)
            self.status = f"{plant.name} has {plant.sunlight_hours}h of sunlight."

    def grow_selected(self):
        plant = self.selected_plant()
        if plant:
            gained = plant.grow()
            self.status = f"{plant.name} grew by {gained} to {plant.height}."

    def water_all(self):
        for plant in self.plot:
            plant.water()
        self.status = "Watered every plant."

    def grow_all(self):
        total = sum(plant.grow() for plant in self.plot)
        self.status = f"Plot grew by {total} in total."

    def add_plant(self):
        name = PLANT_NAMES[len(self.plot) % len(PLANT_NAMES)]
        self.plot.add_plant(Plant(name))
        self.refresh_tiles()
        self.selected_tile = self.tiles[-1]
        self.status = f"Planted {name}."

    # --- Persistence ---

    def save_state(self):
        try:
            with open(self.save_file, "w") as f:
                json.dump(self.plot.to_dict(), f)
        except OSError:
            _LOGGER.warning("Could not save garden to %s", self.save_file, exc_info=True)
            return
        _LOGGER.info("Saved %d plants to %s", len(self.plot), self.save_file)
        self.status = "Saved."

    def load_state(self) -> bool:
        if not os.path.exists(self.save_file):
            return False
        try:
            with open(self.save_file, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("Invalid save format")
            plot = GardenPlot.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError):
            # Bad save -> start fresh
            _LOGGER.warning("Ignoring unreadable save file %s", self.save_file, exc_info=True)
            self.reset_state()
            return False
        self.plot = plot
        self.selected_tile = None
        self.refresh_tiles()
        _LOGGER.info("Loaded %d plants from %s", len(self.plot), self.save_file)
        return True

    # --- Main loop ---

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            self.draw()
            pygame.display.flip()
        self.save_state()
        pygame.quit()
        sys.exit()

    def handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_w:
                self.water_selected()
            elif event.key == pygame.K_s:
                self.sun_selected()
            elif event.key == pygame.K_g:
                self.grow_selected()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for btn in self.buttons:
                if btn.handle_event(event, self.selected_tile is not None):
                    return

            # Tiles (only when clicking in grid area)
            pos = event.pos
            if pos[1] < WINDOW_HEIGHT - UI_PANEL_HEIGHT:
                self.handle_tile_click(pos)

    def handle_tile_click(self, pos):
        for tile in self.tiles:
            if tile.rect.collidepoint(pos):
                self.selected_tile = tile
                self.status = repr(tile.plant)
                return
        # click outside any tile clears selection
        self.selected_tile = None

    # --- Drawing ---

    def draw_grid(self):
        tallest = self.plot.tallest_plant()
        tallest_height = tallest.height if tallest else 0
        for tile in self.tiles:
            tile.draw(self.screen, self.font, tallest_height, self.selected_tile)

    def draw_ui_panel(self):
        panel_rect = pygame.Rect(
            0, WINDOW_HEIGHT - UI_PANEL_HEIGHT, WINDOW_WIDTH, UI_PANEL_HEIGHT
        )
        pygame.draw.rect(self.screen, (20, 20, 20), panel_rect)
        pygame.draw.line(
            self.screen,
            (80, 80, 80),
            (0, panel_rect.top),
            (WINDOW_WIDTH, panel_rect.top),
            2,
        )

        for btn in self.buttons:
            btn.draw(self.screen, self.font, self.selected_tile is not None)

        tallest = self.plot.tallest_plant()
        info_y = panel_rect.top + BUTTON_HEIGHT + 24
        texts = [
            f"Plants: {len(self.plot)}  All watered: {'yes' if self.plot.all_watered() else 'no'}",
            f"Tallest: {tallest.name} ({tallest.height})" if tallest else "Tallest: -",
            self.status,
        ]
        for i, t in enumerate(texts):
            surf = self.font.render(t, True, (220, 220, 220))
            self.screen.blit(surf, (20, info_y + i * 18))

    def draw(self):
        self.screen.fill((30, 45, 30))
        self.draw_grid()
        self.draw_ui_panel()


def main():
    logging.basicConfig(level=logging.INFO)
    viewer = GardenViewer()
    viewer.run()


if __name__ == "__main__":
    main()
