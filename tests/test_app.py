import random

import pygame
import pytest

from pvzgame.app import Assets, draw, load_assets, main, plant_frame_paths
from pvzgame.game import GRID_LEFT, GRID_TOP, Game, Zombie

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _solid(size, color):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color + (255,))
    return surface


@pytest.fixture
def assets():
    pygame.font.init()
    return Assets(
        background=_solid((900, 600), RED),
        bar=_solid((300, 90), (10, 10, 10)),
        cards=[_solid((64, 90), (20, 20, 20)) for _ in range(2)],
        plants=[[_solid((50, 50), GREEN)] * 3, [_solid((50, 50), (0, 200, 0))] * 2],
        sunshine=[_solid((80, 80), (255, 255, 0))] * 29,
        zombie_walk=[_solid((20, 30), BLUE)] * 22,
        zombie_dead=[_solid((20, 30), (50, 50, 50))] * 20,
        zombie_eat=[_solid((20, 30), (0, 0, 100))] * 21,
        bullet_normal=_solid((10, 10), (0, 255, 255)),
        bullet_blast=[_solid((10, 10), (255, 0, 255))] * 4,
        font=pygame.font.Font(None, 30),
    )


@pytest.fixture
def game():
    return Game([3, 2], [50, 50], (80, 80), random.Random(3))


def test_plant_frame_paths_stop_at_gap(tmp_path):
    frames = tmp_path / "zhiwu" / "0"
    frames.mkdir(parents=True)
    for number in (1, 2, 4):
        (frames / f"{number}.png").write_bytes(b"")
    paths = plant_frame_paths(tmp_path, 0)
    assert [p.name for p in paths] == ["1.png", "2.png"]


def test_plant_frame_paths_missing_plant(tmp_path):
    assert plant_frame_paths(tmp_path, 1) == []


def test_load_assets_missing_resources(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_assets(tmp_path)


def test_draw_background_and_plant(assets, game):
    screen = pygame.Surface((900, 600))
    game.grid[0][0].type = 1
    draw(screen, game, assets)
    assert screen.get_at((10, 590))[:3] == RED
    assert screen.get_at((GRID_LEFT + 1, GRID_TOP + 1))[:3] == GREEN


def test_draw_zombie_stands_on_its_y(assets, game):
    screen = pygame.Surface((900, 600))
    game.zombies[0] = Zombie(x=500, y=472, used=True, speed=1, blood=100)
    draw(screen, game, assets)
    assert screen.get_at((505, 472 - 30 + 1))[:3] == BLUE
    assert screen.get_at((505, 473))[:3] == RED


def test_draw_dragged_plant_centred(assets, game):
    screen = pygame.Surface((900, 600))
    game.press(341, 10)
    game.move(700, 550)
    draw(screen, game, assets)
    assert screen.get_at((700, 550))[:3] == GREEN
    assert screen.get_at((700, 599))[:3] == RED


def test_main_rejects_missing_resource_dir(tmp_path, capsys):
    assert main(["--resources", str(tmp_path / "absent")]) == 2
    assert "absent" in capsys.readouterr().err