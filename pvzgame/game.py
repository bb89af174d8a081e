"""Game state and rules: lawn grid, sunshine, zombies, peas and collisions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

WIN_WIDTH = 900
WIN_HEIGHT = 600

ROWS = 3
COLUMNS = 9
GRID_LEFT = 256
GRID_TOP = 179
CELL_WIDTH = 81
CELL_HEIGHT = 102
GRID_BOTTOM = 489

CARD_LEFT = 340
CARD_WIDTH = 72
BAR_BOTTOM = 94

PEA_SHOOTER = 0
SUN_FLOWER = 1
PLANT_COUNT = 2

PLANT_BLOOD = 120
START_SUNSHINE = 75
SUNSHINE_VALUE = 25
SUNSHINE_FRAMES = 29
SUNSHINE_LIFETIME = 300
SUN_TARGET_X = 262
SUN_TARGET_Y = 0
SUN_FLIGHT_SPEED = 8

ZOMBIE_BLOOD = 100
ZOMBIE_WALK_FRAMES = 22
ZOMBIE_DEAD_FRAMES = 20
ZOMBIE_EAT_FRAMES = 21
ZOMBIE_LIMIT_X = 165

BULLET_SPEED = 4
BULLET_DAMAGE = 15
BULLET_BLAST_FRAMES = 4
SHOOT_INTERVAL = 20

BALL_POOL = 10
ZOMBIE_POOL = 10
BULLET_POOL = 30


class GameOver(Exception):
    """Raised when a zombie reaches the house."""


@dataclass
class Plant:
    """One lawn cell; ``type`` is 0 when empty, otherwise plant index + 1."""

    type: int = 0
    frame_index: int = 0
    blood: int = PLANT_BLOOD
    catched: bool = False


@dataclass
class SunshineBall:
    """A sunshine ball, falling, resting, or flying to the counter."""

    x: int = 0
    y: int = 0
    frame_index: int = 0
    dest_y: int = 0
    used: bool = False
    timer: int = 0
    xoff: float = 0.0
    yoff: float = 0.0

    @property
    def flying(self) -> bool:
        return not self.used and self.xoff != 0


@dataclass
class Zombie:
    x: int = 0
    y: int = 0
    frame_index: int = 0
    used: bool = False
    speed: int = 0
    row: int = 0
    blood: int = 0
    dead: bool = False
    eating: bool = False


@dataclass
class Bullet:
    x: int = 0
    y: int = 0
    row: int = 0
    used: bool = False
    speed: int = 0
    blast: bool = False
    frame_index: int = 0


def _flight_offsets(x: int, y: int) -> Tuple[float, float]:
    dx = x - SUN_TARGET_X
    dy = y - SUN_TARGET_Y
    if dx == 0:
        angle = math.pi / 2 if dy >= 0 else -math.pi / 2
    else:
        angle = math.atan(dy / dx)
    return SUN_FLIGHT_SPEED * math.cos(angle), SUN_FLIGHT_SPEED * math.sin(angle)


@dataclass
class Game:
    """The whole mutable state of a running game, advanced one tick at a time."""

    plant_frames: Sequence[int]
    plant_widths: Sequence[int]
    sunshine_size: Tuple[int, int]
    rng: Optional[random.Random] = None

    sunshine: int = field(init=False, default=START_SUNSHINE)
    cur_plant: int = field(init=False, default=0)
    cur_x: int = field(init=False, default=0)
    cur_y: int = field(init=False, default=0)
    grid: List[List[Plant]] = field(init=False)
    balls: List[SunshineBall] = field(init=False)
    zombies: List[Zombie] = field(init=False)
    bullets: List[Bullet] = field(init=False)

    def __post_init__(self) -> None:
        self.plant_frames = list(self.plant_frames)
        self.plant_widths = list(self.plant_widths)
        if not self.plant_frames or len(self.plant_frames) != len(self.plant_widths):
            raise ValueError("plant_frames and plant_widths must be non-empty and match")
        if any(count < 1 for count in self.plant_frames):
            raise ValueError("every plant needs at least one frame")
        if self.rng is None:
            self.rng = random.Random()
        self.grid = [[Plant() for _ in range(COLUMNS)] for _ in range(ROWS)]
        self.balls = [SunshineBall() for _ in range(BALL_POOL)]
        self.zombies = [Zombie() for _ in range(ZOMBIE_POOL)]
        self.bullets = [Bullet() for _ in range(BULLET_POOL)]
        self._dragging = False
        self._sun_count = 0
        self._sun_interval = 200
        self._zombie_count = 0
        self._zombie_interval = 300
        self._shoot_count = 0

    # --- input -----------------------------------------------------------

    def press(self, x: int, y: int) -> int:
        """Handle a left press: pick a card or collect sunshine.

        Returns the number of sunshine balls collected.
        """
        card_right = CARD_LEFT + CARD_WIDTH * len(self.plant_frames)
        if CARD_LEFT < x < card_right and y < BAR_BOTTOM:
            self._dragging = True
            self.cur_plant = (x - CARD_LEFT) // CARD_WIDTH + 1
            return 0
        return self.collect_sunshine(x, y)

    def move(self, x: int, y: int) -> None:
        """Track the cursor while a plant is being dragged."""
        if self._dragging:
            self.cur_x, self.cur_y = x, y

    def release(self, x: int, y: int) -> None:
        """Drop the dragged plant on the lawn cell under (x, y), if free."""
        if not self._dragging:
            return
        if x > GRID_LEFT and GRID_TOP < y < GRID_BOTTOM:
            row = (y - GRID_TOP) // CELL_HEIGHT
            column = (x - GRID_LEFT) // CELL_WIDTH
            if row < ROWS and column < COLUMNS:
                cell = self.grid[row][column]
                if cell.type == 0:
                    cell.type = self.cur_plant
                    cell.frame_index = 0
        self._dragging = False
        self.cur_plant = 0

    def collect_sunshine(self, x: int, y: int) -> int:
        """Send every resting ball under (x, y) flying; return how many."""
        width, height = self.sunshine_size
        collected = 0
        for ball in self.balls:
            if ball.used and ball.x < x < ball.x + width and ball.y < y < ball.y + height:
                ball.used = False
                ball.xoff, ball.yoff = _flight_offsets(ball.x, ball.y)
                collected += 1
        return collected

    # --- sunshine --------------------------------------------------------

    def create_sunshine(self) -> None:
        self._sun_count += 1
        if self._sun_count < self._sun_interval:
            return
        self._sun_interval = 100 + self.rng.randrange(300)
        self._sun_count = 0
        ball = next((b for b in self.balls if not b.used), None)
        if ball is None:
            return
        ball.used = True
        ball.frame_index = 0
        ball.x = 260 + self.rng.randrange(WIN_WIDTH - 260)
        ball.y = 60
        ball.dest_y = 200 + self.rng.randrange(4) * 90
        ball.timer = 0
        ball.xoff = 0.0
        ball.yoff = 0.0

    def update_sunshine(self) -> None:
        for ball in self.balls:
            if ball.used:
                ball.frame_index = (ball.frame_index + 1) % SUNSHINE_FRAMES
                if ball.timer == 0:
                    ball.y += 2
                if ball.y >= ball.dest_y:
                    ball.timer += 1
                    if ball.timer > SUNSHINE_LIFETIME:
                        ball.used = False
            elif ball.xoff:
                ball.xoff, ball.yoff = _flight_offsets(ball.x, ball.y)
                ball.x = int(ball.x - ball.xoff)
                ball.y = int(ball.y - ball.yoff)
                if ball.y < 0 or ball.x < SUN_TARGET_X:
                    ball.xoff = 0.0
                    ball.yoff = 0.0
                    self.sunshine += SUNSHINE_VALUE

    # --- zombies ---------------------------------------------------------

    def create_zombie(self) -> None:
        self._zombie_count += 1
        if self._zombie_count <= self._zombie_interval:
            return
        self._zombie_count = 0
        self._zombie_interval = 100 + self.rng.randrange(100)
        for index, zombie in enumerate(self.zombies):
            if not zombie.used:
                row = self.rng.randrange(ROWS)
                self.zombies[index] = Zombie(
                    x=WIN_WIDTH,
                    y=172 + (1 + row) * 100,
                    used=True,
                    speed=1,
                    row=row,
                    blood=ZOMBIE_BLOOD,
                )
                return

    def update_zombies(self) -> None:
        """Advance zombie animations and walking; raise GameOver at the house."""
        for zombie in self.zombies:
            if not zombie.used:
                continue
            if zombie.dead:
                zombie.frame_index += 1
                if zombie.frame_index >= ZOMBIE_DEAD_FRAMES:
                    zombie.used = False
                    zombie.dead = False
            elif zombie.eating:
                zombie.frame_index = (zombie.frame_index + 1) % ZOMBIE_EAT_FRAMES
            else:
                zombie.frame_index = (zombie.frame_index + 1) % ZOMBIE_WALK_FRAMES
                zombie.x -= zombie.speed
                if zombie.x < ZOMBIE_LIMIT_X:
                    raise GameOver("a zombie reached the house")

    # --- bullets ---------------------------------------------------------

    def shoot(self) -> None:
        occupied = {zombie.row for zombie in self.zombies if zombie.used}
        for row_index, row in enumerate(self.grid):
            if row_index not in occupied:
                continue
            for column, cell in enumerate(row):
                if cell.type != PEA_SHOOTER + 1:
                    continue
                self._shoot_count += 1
                if self._shoot_count <= SHOOT_INTERVAL:
                    continue
                self._shoot_count = 0
                bullet = next((b for b in self.bullets if not b.used), None)
                if bullet is None:
                    continue
                plant_x = GRID_LEFT + column * CELL_WIDTH
                plant_y = GRID_TOP + row_index * CELL_HEIGHT
                bullet.used = True
                bullet.row = row_index
                bullet.speed = BULLET_SPEED
                bullet.blast = False
                bullet.frame_index = 0
                bullet.x = plant_x + self.plant_widths[cell.type - 1] - 10
                bullet.y = plant_y + 5

    def update_bullets(self) -> None:
        for bullet in self.bullets:
            if not bullet.used:
                continue
            bullet.x += bullet.speed
            if bullet.x > WIN_WIDTH:
                bullet.used = False
            if bullet.blast:
                bullet.frame_index += 1
                if bullet.frame_index >= BULLET_BLAST_FRAMES:
                    bullet.used = False
                    bullet.blast = False

    # --- collisions and plants -------------------------------------------

    def check_collisions(self) -> None:
        """Resolve pea hits on zombies and zombies reaching plants."""
        for bullet in self.bullets:
            if not bullet.used or bullet.blast:
                continue
            for zombie in self.zombies:
                if not zombie.used:
                    break
                if bullet.row == zombie.row and zombie.x + 80 < bullet.x < zombie.x + 110:
                    zombie.blood -= BULLET_DAMAGE
                    bullet.blast = True
                    bullet.speed = 0
                    bullet.frame_index = 0
                    if zombie.blood <= 0:
                        zombie.dead = True
                        zombie.speed = 0
                        zombie.frame_index = 0
                    break

        for zombie in self.zombies:
            if zombie.dead:
                continue
            mouth = zombie.x + 80
            for column, cell in enumerate(self.grid[zombie.row]):
                if not cell.type:
                    continue
                plant_x = GRID_LEFT + column * CELL_WIDTH
                if plant_x + 10 < mouth < plant_x + 60:
                    if cell.blood <= 0:
                        zombie.eating = False
                        zombie.speed = 1
                    elif not zombie.eating:
                        cell.catched = True
                        zombie.eating = True
                        zombie.speed = 0
                        zombie.frame_index = 0

    def update_plants(self) -> None:
        for row in self.grid:
            for cell in row:
                if not cell.type:
                    continue
                if cell.blood <= 0:
                    cell.type = 0
                    cell.catched = False
                elif cell.catched:
                    cell.blood -= 1

    def animate_plants(self) -> None:
        for row in self.grid:
            for cell in row:
                if cell.type:
                    cell.frame_index += 1
                    if cell.frame_index >= self.plant_frames[cell.type - 1]:
                        cell.frame_index = 0

    def update(self) -> None:
        """Advance the game by one tick."""
        self.animate_plants()
        self.create_sunshine()
        self.update_sunshine()
        self.create_zombie()
        self.update_zombies()
        self.shoot()
        self.update_bullets()
        self.check_collisions()
        self.update_plants()