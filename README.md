# pvzgame

A small lane-defence game built on pygame. Drag plant cards from the bar
onto a three-row, nine-column lawn, collect falling sunshine, and keep the
zombies from reaching your house.

## Installing

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
pvzgame
```

The game loads its images and sounds from a resource directory, `res` in
the current directory by default. Another directory can be given with
`--resources`:

```
pvzgame --resources path/to/res
```

If the directory does not exist the command prints an error and exits
with status 2. A missing image raises `FileNotFoundError`; a missing or
unplayable `sunshine.mp3` only silences the collect sound.

The directory must contain `bg.jpg`, `bar5.png`, `menu.png`, `menu1.png`,
`menu2.png`, `Cards/card_1.png` and `Cards/card_2.png`, plant frames
`zhiwu/0/1.png`, `zhiwu/1/1.png` and onwards (up to 20 each, read until the
first gap), `sunshine/1.png` to `29.png`, `zm/1.png` to `22.png`,
`zm_dead/1.png` to `20.png`, `zm_eat/1.png` to `21.png`, and
`bullets/bullet_normal.png` and `bullets/bullet_blast.png`.

- Click the start button on the menu to begin; closing the window quits.
- Press on a card in the bar, drag it over the lawn and release to plant it
  in a free cell.
- Peashooters fire peas at zombies in their row; each hit takes 15 of a
  zombie's 100 health.
- Zombies stop to eat the first plant they reach, which then loses health
  every tick until it disappears.
- Click sunshine to collect it; each ball adds 25 to the counter once it
  reaches the bar. Uncollected sunshine vanishes after a while.
- When a zombie reaches the house, `game over` is printed and the game ends.

## What it does not do

Planting costs no sunshine, and sunflowers produce none; they only stand
in the way. There is no scoring, no levels, no pause and no saving. No
images or sounds are shipped with the package.

## Using the pieces

`pvzgame.game.Game` holds the rules and needs no window. Construct it
with the number of animation frames of each plant, each plant's width and
the `(width, height)` of a sunshine ball, and optionally a
`random.Random`; then drive it with `press`, `move`, `release` and
`update`. `press` returns how many sunshine balls it sent flying. A zombie
reaching the house makes `update` raise `GameOver`. The state is kept in
`grid` (`Plant` cells), `balls` (`SunshineBall`), `zombies` (`Zombie`),
`bullets` (`Bullet`) and `sunshine`.

`pvzgame.app` holds the pygame side: `load_assets` builds an `Assets`
from a resource directory, `plant_frame_paths` lists a plant's frame
files, `draw` renders a `Game`, `start_menu` shows the menu, and `main` is
the command.

`pvzgame.vector2` provides an immutable integer `Vector2` with addition,
subtraction, scaling, Gaussian-integer multiplication, rounded division
and remainder, plus `cross`, `dot`, `dv`, `length_squared`, `dis`, `gcd`
and `calc_bezier_point`.

`pvzgame.tools` holds `blend_pixel` (alpha-blends an `0xAARRGGBB` pixel
over an `0xRRGGBB` one), `clip_region` (clips an image placed at a
position to the window) and `DelayTimer` (milliseconds since the previous
call).