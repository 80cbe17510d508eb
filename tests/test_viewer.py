import json
import logging

import pygame
import pytest

from growth_rule import GrowthRule
from main import GardenViewer


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "garden.json"


@pytest.fixture
def viewer(save_path):
    v = GardenViewer(save_file=str(save_path))
    yield v
    pygame.quit()


def click(viewer, pos):
    viewer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))


def button(viewer, text):
    return next(b for b in viewer.buttons if b.text == text)


def test_starts_empty_without_save(viewer):
    assert len(viewer.plot) == 0
    assert viewer.tiles == []


def test_add_water_sun_and_grow(viewer):
    viewer.add_plant()
    plant = viewer.selected_tile.plant
    assert plant.name == "Tomato"
    viewer.water_selected()
    for _ in range(4):
        viewer.sun_selected()
    viewer.grow_selected()
    assert plant.height == 2, f"Expected a full grow cycle, got {plant!r}"
    assert "grew by 2" in viewer.status


def test_selection_buttons_need_a_selected_tile(viewer):
    viewer.add_plant()
    viewer.selected_tile = None
    click(viewer, button(viewer, "Water").rect.center)
    assert viewer.plot.plants[0].watered is False, "Water should be inert without a selection"


def test_clicking_a_tile_selects_it(viewer):
    viewer.add_plant()
    viewer.add_plant()
    first = viewer.tiles[0]
    click(viewer, first.rect.center)
    assert viewer.selected_tile is first
    click(viewer, (790, 10))
    assert viewer.selected_tile is None


def test_water_all_and_grow_all_buttons(viewer):
    viewer.add_plant()
    viewer.add_plant()
    click(viewer, button(viewer, "Water all").rect.center)
    assert viewer.plot.all_watered(), "Water all should water every plant"
    click(viewer, button(viewer, "Grow all").rect.center)
    assert [p.height for p in viewer.plot] == [1, 1]
    assert not viewer.plot.all_watered()


def test_keyboard_shortcuts(viewer):
    viewer.add_plant()
    viewer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert viewer.selected_tile.plant.watered
    viewer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert viewer.running is False


def test_save_and_load(viewer, save_path):
    viewer.add_plant()
    viewer.water_selected()
    viewer.save_state()
    assert json.loads(save_path.read_text())["plants"][0]["watered"] is True

    other = GardenViewer(save_file=str(save_path))
    assert [p.to_dict() for p in other.plot] == [p.to_dict() for p in viewer.plot]
    assert len(other.tiles) == 1


@pytest.mark.parametrize(
    "payload",
    [
        "[1, 2",
        "[1, 2]",
        '{"plants": [1]}',
        '{"plants": "abc"}',
        '{"plants": [{"name": "Bean", "height": -1}]}',
        '{"plants": [{"name": "Bean", "watered": "false"}]}',
    ],
)
def test_bad_save_starts_fresh(save_path, caplog, payload):
    save_path.write_text(payload)
    with caplog.at_level(logging.WARNING, logger="main"):
        v = GardenViewer(save_file=str(save_path))
    try:
        assert len(v.plot) == 0, f"Expected an empty plot after loading {payload!r}"
        assert any(r.levelno == logging.WARNING for r in caplog.records), (
            f"Expected a warning for unreadable save {payload!r}"
        )
    finally:
        pygame.quit()


def test_custom_rule_survives_save_and_load(viewer, save_path):
    viewer.add_plant()
    viewer.plot.plants[0].rule = GrowthRule(sunlight_threshold=6, full_growth=3)
    viewer.save_state()
    other = GardenViewer(save_file=str(save_path))
    assert other.plot.plants[0].rule == GrowthRule(sunlight_threshold=6, full_growth=3)


def test_draw_does_not_fail(viewer):
    viewer.add_plant()
    viewer.add_plant()
    viewer.draw()
