# spaceshooter

A small arcade space shooter built on pygame. Your ship sits in the lower part of
the screen, asteroids fall from the top, and you shoot or dodge them. An asteroid
that hits the ship makes it explode and costs a life; the reborn control brings it
back.

## Installing

```
pip install .
```

pygame is installed with the package.

## Playing

```
spaceshooter
```

Options:

- `--assets DIR` – directory holding the font `acmesab.ttf` and a `bitmaps/`
  directory with `spaceship1-1.png`, `bullet.png`, `explosion.png`,
  `asteroid-1-96.png`, `asteroid-2-96.png` and `asteroid-3-96.png`. Defaults to
  the current directory.
- `--no-debug` – hide the overlay that shows frames per second, the frame count,
  the elapsed time and the mouse buttons and joystick directions being held.

If the window cannot be opened, or the font or an image cannot be loaded, the
command prints a message to standard error and exits with status 1.

Controls:

| Action         | Keyboard   | Mouse          | Joystick |
|----------------|------------|----------------|----------|
| Move           | arrow keys | move the mouse | stick    |
| Fire           | Space      | left button    | button 2 |
| Reborn         | R          |                | button 1 |
| Pause / resume | Enter      |                | button 9 |
| Quit           | Escape     |                |          |

At most five bullets are in flight at once and at most three asteroids fall at a
time. The game also pauses when its window loses focus.

## What the package does not include

The package ships no images and no font. The game only runs when the files
listed under `--assets` are supplied; without them the `spaceshooter` command
stops with an error.

## Using the pieces

The building blocks can be used on their own:

- `spaceshooter.game.Game` – every object of one game; `handle_input`,
  `handle_collisions`, `step`, `toggle_pause` and `draw` make up one frame.
- `spaceshooter.sprite.Sprite` – an image region with a position, an optional
  pixel mask and a visible flag.
- `spaceshooter.image.Image` – an image file cached by path; `clear_cache()`
  forgets every loaded image. A file that cannot be loaded raises `ImageError`.
- `spaceshooter.mask.Mask` and `spaceshooter.collision.collide` – pixel-exact
  collision between two sprites.
- `spaceshooter.animation.BaseAnimation` – keyed frame animations over a sprite
  sheet, cyclic or one-shot.
- `spaceshooter.scene.Scene` – a list of game objects updated and drawn together.
- `spaceshooter.spaceship.SpaceShip`, `spaceshooter.bullet.Bullet`,
  `spaceshooter.asteroid.Asteroid` and `AsteroidGenerator`,
  `spaceshooter.firing.FireBulletHandler`,
  `spaceshooter.explosions.ExplosionHandler` and
  `spaceshooter.textfont.TextFont` – the game's objects.
- `spaceshooter.controls` – `Keyboard`, `Mouse` and `Joystick` remember the
  previous update's state, so "has been pressed" and "has been released" can be
  asked as well as "is pressed". States can be read from pygame or passed to
  `update()` directly (a set of key codes, a `MouseState`, a `JoystickState`).

```python
from spaceshooter.collision import collide

if collide(asteroid.sprite, ship.sprite):
    ship.explode()
```

## Tests

```
pip install .[test]
pytest
```