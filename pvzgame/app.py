"""Window, resources, drawing and main loop for the lawn defence game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import pygame

from pvzgame.game import (
    CARD_LEFT,
    CARD_WIDTH,
    CELL_HEIGHT,
    CELL_WIDTH,
    GRID_LEFT,
    GRID_TOP,
    PLANT_COUNT,
    WIN_HEIGHT,
    WIN_WIDTH,
    Game,
    GameOver,
)
from pvzgame.tools import DelayTimer

MAX_PLANT_FRAMES = 20
FRAME_MS = 55
MENU_BUTTON = pygame.Rect(475, 75, 325, 65)


@dataclass
class Assets:
    """Every image, font and sound the game draws or plays."""

    background: pygame.Surface
    bar: pygame.Surface
    cards: List[pygame.Surface]
    plants: List[List[pygame.Surface]]
    sunshine: List[pygame.Surface]
    zombie_walk: List[pygame.Surface]
    zombie_dead: List[pygame.Surface]
    zombie_eat: List[pygame.Surface]
    bullet_normal: pygame.Surface
    bullet_blast: List[pygame.Surface]
    font: pygame.font.Font
    menu_background: Optional[pygame.Surface] = None
    menu_pressed: Optional[pygame.Surface] = None
    menu_idle: Optional[pygame.Surface] = None
    sunshine_sound: Optional[pygame.mixer.Sound] = field(default=None)


def plant_frame_paths(root, index: int) -> List[Path]:
    """Return the consecutive frame files of plant ``index``, stopping at a gap."""
    paths = []
    for number in range(1, MAX_PLANT_FRAMES + 1):
        path = Path(root) / "zhiwu" / str(index) / f"{number}.png"
        if not path.is_file():
            break
        paths.append(path)
    return paths


def _load(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"missing resource: {path}")
    image = pygame.image.load(str(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_series(directory: Path, count: int) -> List[pygame.Surface]:
    return [_load(directory / f"{number}.png") for number in range(1, count + 1)]


def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    if not path.is_file():
        return None
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def load_assets(root) -> Assets:
    """Load all resources from the directory ``root``."""
    root = Path(root)
    background = _load(root / "bg.jpg")
    bar = _load(root / "bar5.png")
    cards = [_load(root / "Cards" / f"card_{i + 1}.png") for i in range(PLANT_COUNT)]
    plants = [[_load(p) for p in plant_frame_paths(root, i)] for i in range(PLANT_COUNT)]
    for index, frames in enumerate(plants):
        if not frames:
            raise FileNotFoundError(f"no frames for plant {index}")
    sunshine = _load_series(root / "sunshine", 29)
    zombie_walk = _load_series(root / "zm", 22)
    zombie_dead = _load_series(root / "zm_dead", 20)
    zombie_eat = _load_series(root / "zm_eat", 21)
    bullet_normal = _load(root / "bullets" / "bullet_normal.png")
    blast = _load(root / "bullets" / "bullet_blast.png")
    width, height = blast.get_size()
    bullet_blast = [
        pygame.transform.smoothscale(
            blast, (max(1, int(width * (i + 1) * 0.2)), max(1, int(height * (i + 1) * 0.2)))
        )
        for i in range(3)
    ]
    bullet_blast.append(blast)
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.SysFont("Segoe UI Black", 30)
    return Assets(
        background=background,
        bar=bar,
        cards=cards,
        plants=plants,
        sunshine=sunshine,
        zombie_walk=zombie_walk,
        zombie_dead=zombie_dead,
        zombie_eat=zombie_eat,
        bullet_normal=bullet_normal,
        bullet_blast=bullet_blast,
        font=font,
        menu_background=_load(root / "menu.png"),
        menu_pressed=_load(root / "menu1.png"),
        menu_idle=_load(root / "menu2.png"),
        sunshine_sound=_load_sound(root / "sunshine.mp3"),
    )


def draw(screen: pygame.Surface, game: Game, assets: Assets) -> None:
    """Render one frame of the game onto ``screen``."""
    screen.blit(assets.background, (0, 0))
    screen.blit(assets.bar, (260, 0))
    for index, card in enumerate(assets.cards):
        screen.blit(card, (CARD_LEFT + index * CARD_WIDTH, 4))

    for row_index, row in enumerate(game.grid):
        for column, cell in enumerate(row):
            if cell.type:
                image = assets.plants[cell.type - 1][cell.frame_index]
                screen.blit(image, (GRID_LEFT + column * CELL_WIDTH, GRID_TOP + row_index * CELL_HEIGHT))

    if game.cur_plant:
        image = assets.plants[game.cur_plant - 1][0]
        screen.blit(
            image,
            (game.cur_x - image.get_width() // 2, game.cur_y - image.get_height() // 2),
        )

    for ball in game.balls:
        if ball.used or ball.xoff:
            screen.blit(assets.sunshine[ball.frame_index], (ball.x, ball.y))

    text = assets.font.render(str(game.sunshine), True, (0, 0, 0))
    screen.blit(text, (285, 67))

    for zombie in game.zombies:
        if not zombie.used:
            continue
        if zombie.dead:
            image = assets.zombie_dead[zombie.frame_index]
        elif zombie.eating:
            image = assets.zombie_eat[zombie.frame_index]
        else:
            image = assets.zombie_walk[zombie.frame_index]
        screen.blit(image, (zombie.x, zombie.y - image.get_height()))

    for bullet in game.bullets:
        if bullet.blast:
            screen.blit(assets.bullet_blast[bullet.frame_index], (bullet.x, bullet.y))
        elif bullet.used:
            screen.blit(assets.bullet_normal, (bullet.x, bullet.y))


def start_menu(screen: pygame.Surface, assets: Assets, clock: pygame.time.Clock) -> bool:
    """Show the start menu until the start button is clicked.

    Returns False if the window is closed instead.
    """
    pressed = False
    while True:
        screen.blit(assets.menu_background, (0, 0))
        screen.blit(assets.menu_pressed if pressed else assets.menu_idle, MENU_BUTTON.topleft)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if (
                event.type == pygame.MOUSEBUTTONDOWN
                and event.button == 1
                and MENU_BUTTON.left < event.pos[0] < MENU_BUTTON.right
                and MENU_BUTTON.top < event.pos[1] < MENU_BUTTON.bottom
            ):
                pressed = True
            elif event.type == pygame.MOUSEBUTTONUP and pressed:
                return True
        pygame.display.flip()
        clock.tick(60)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pvzgame", description="Defend the lawn from zombies.")
    parser.add_argument("--resources", default="res", help="resource directory")
    args = parser.parse_args(argv)
    root = Path(args.resources)
    if not root.is_dir():
        print(f"resource directory not found: {root}", file=sys.stderr)
        return 2

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption("Plants vs Zombies")
        assets = load_assets(root)
        clock = pygame.time.Clock()
        if not start_menu(screen, assets, clock):
            return 0
        game = Game(
            [len(frames) for frames in assets.plants],
            [frames[0].get_width() for frames in assets.plants],
            assets.sunshine[0].get_size(),
        )
        delay = DelayTimer()
        elapsed = 0
        ready = True
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if game.press(*event.pos) and assets.sunshine_sound is not None:
                        assets.sunshine_sound.play()
                elif event.type == pygame.MOUSEMOTION:
                    game.move(*event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    game.release(*event.pos)
            elapsed += delay.delay()
            if elapsed > FRAME_MS:
                ready = True
                elapsed = 0
            if ready:
                ready = False
                draw(screen, game, assets)
                pygame.display.flip()
                try:
                    game.update()
                except GameOver:
                    print("game over")
                    return 0
            clock.tick(500)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())