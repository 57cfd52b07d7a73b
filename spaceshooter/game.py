"""The space shooter game: its objects, its rules and its main loop."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from pathlib import Path
from typing import Optional, Union

import pygame

from .asteroid import Asteroid, AsteroidGenerator
from .bullet import Bullet
from .collision import collide
from .controls import (
    Joystick,
    Keyboard,
    Mouse,
    MouseButton,
    get_joystick,
    init_joysticks,
    joystick_count,
)
from .explosions import ExplosionHandler
from .firing import FireBulletHandler
from .image import Image, ImageError
from .scene import Scene
from .spaceship import SpaceShip
from .textfont import Alignment, TextFont

WIDTH = 700
HEIGHT = 650
TITLE = "My SpaceShooter"
FONT_NAME = "acmesab.ttf"
BITMAP_DIR = "bitmaps"

SHIP_FILE = "spaceship1-1.png"
BULLET_FILE = "bullet.png"
EXPLOSION_FILE = "explosion.png"
ASTEROID_FILES = ("asteroid-1-96.png", "asteroid-2-96.png", "asteroid-3-96.png")

SHIP_LIFE = 3
SHIP_VELOCITY = 320
BULLET_VELOCITY = 600
MAX_BULLETS = 5
MAX_ASTEROIDS = 3
ASTEROID_MARGIN = 60

PAUSE_BUTTON = 9
REBORN_BUTTON = 1
FIRE_BUTTON = 2

_ARROWS = (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN)
_BACKGROUND = (255, 255, 255)
_FRAME_RATE = 60


class Game:
    """Every object of one game and the rules that tie them together."""

    def __init__(
        self,
        assets: Union[str, os.PathLike] = ".",
        rng: Optional[random.Random] = None,
    ) -> None:
        root = Path(assets)
        bitmaps = root / BITMAP_DIR
        font = root / FONT_NAME

        self.paused = False
        self.done = False

        self.ship = SpaceShip(Image(bitmaps / SHIP_FILE), SHIP_LIFE)
        self.ship.velocity = SHIP_VELOCITY

        self.life_text = TextFont(font, 18)
        self.life_text.set_pos(5, 5)
        self.life_text.color = (100, 60, 50, 200)
        self.life_text.text = f"Life: {SHIP_LIFE}"

        self.pause_text = TextFont(font, 40)
        self.pause_text.hide()
        self.pause_text.text = "GAME PAUSED"
        self.pause_text.set_pos_x(WIDTH // 2)
        self.pause_text.set_center_y(HEIGHT // 2)
        self.pause_text.alignment = Alignment.CENTER
        self.pause_text.color = (0, 0, 200, 100)

        models = [Asteroid(Image(bitmaps / name), 0, 0, 0, 0) for name in ASTEROID_FILES]
        self.asteroid_generator = AsteroidGenerator(
            0, WIDTH - ASTEROID_MARGIN, MAX_ASTEROIDS, models, rng
        )
        self.explosions = ExplosionHandler(Image(bitmaps / EXPLOSION_FILE))
        self.firing = FireBulletHandler(
            Bullet(Image(bitmaps / BULLET_FILE), None, 0, 0, BULLET_VELOCITY), MAX_BULLETS
        )

        self.scene = Scene()
        for obj in (
            self.ship,
            self.asteroid_generator,
            self.explosions,
            self.firing,
            self.life_text,
            self.pause_text,
        ):
            self.scene.add(obj)

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        self.paused = not self.paused
        if self.paused:
            self.pause_text.show()
        else:
            self.pause_text.hide()

    def pause(self) -> None:
        self.paused = True
        self.pause_text.show()

    def handle_collisions(self) -> None:
        """Drop what left the screen and resolve every hit."""
        generator = self.asteroid_generator

        for asteroid in generator.asteroids:
            if asteroid.y > HEIGHT:
                generator.explode_asteroid(asteroid)

        if not self.ship.is_exploded:
            for asteroid in generator.asteroids:
                if collide(asteroid.sprite, self.ship.sprite):
                    generator.explode_asteroid(asteroid)
                    self.explosions.new_explosion(asteroid.center_x, asteroid.center_y)
                    self.explosions.new_explosion(self.ship.center_x, self.ship.center_y)
                    self.ship.explode()
                    self.life_text.text = f"Life: {self.ship.life}"

        for bullet in self.firing.bullets:
            if bullet.y <= 0:
                self.firing.explode_bullet(bullet)

        for asteroid in generator.asteroids:
            hit = next(
                (b for b in self.firing.bullets if collide(asteroid.sprite, b.sprite)),
                None,
            )
            if hit is not None:
                self.firing.explode_bullet(hit)
                generator.explode_asteroid(asteroid)
                self.explosions.new_explosion(asteroid.center_x, asteroid.center_y)

    def handle_input(
        self,
        keyboard: Keyboard,
        mouse: Mouse,
        joystick: Optional[Joystick] = None,
    ) -> None:
        """Turn the state of the input devices into game actions."""

        def button(index: int) -> bool:
            return joystick is not None and joystick.has_been_pressed(index)

        def stick(direction: str) -> bool:
            return joystick is not None and getattr(joystick, f"{direction}_is_pressed")

        ship = self.ship

        if button(PAUSE_BUTTON) or keyboard.has_been_pressed(pygame.K_RETURN):
            self.toggle_pause()

        if button(REBORN_BUTTON) or keyboard.has_been_pressed(pygame.K_r):
            if ship.is_exploded:
                ship.reborn()

        if (
            button(FIRE_BUTTON)
            or keyboard.has_been_pressed(pygame.K_SPACE)
            or mouse.has_been_pressed(MouseButton.LEFT)
        ):
            if self.firing.can_fire:
                self.firing.new_bullet(ship.center_x, ship.y)

        centred = joystick is None or joystick.center_is_pressed
        if centred and not any(keyboard.is_pressed(key) for key in _ARROWS):
            ship.move_stop()

        if stick("left") or keyboard.is_pressed(pygame.K_LEFT) or mouse.has_moved_left:
            if ship.center_x > 0:
                ship.move_left()
        if stick("right") or keyboard.is_pressed(pygame.K_RIGHT) or mouse.has_moved_right:
            if ship.center_x < WIDTH:
                ship.move_right()

        if stick("up") or keyboard.is_pressed(pygame.K_UP) or mouse.has_moved_up:
            if ship.y > HEIGHT * 3.0 / 7.0:
                ship.move_up()
        if stick("down") or keyboard.is_pressed(pygame.K_DOWN) or mouse.has_moved_down:
            if ship.center_y < HEIGHT:
                ship.move_down()

    def step(self, seconds: float) -> None:
        """Advance every object by ``seconds`` unless the game is paused."""
        if not self.paused:
            self.scene.update(seconds)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND)
        self.scene.draw(surface)


def _apply_event(game: Game, event: pygame.event.Event) -> None:
    if event.type == pygame.QUIT:
        game.done = True
    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        game.done = True
    elif event.type == pygame.WINDOWFOCUSLOST:
        game.pause()


def _draw_debug(
    surface: pygame.Surface,
    small: pygame.font.Font,
    large: pygame.font.Font,
    fps: int,
    frames: int,
    elapsed: float,
    mouse: Mouse,
    joystick: Optional[Joystick],
) -> None:
    panel = pygame.Rect(5, HEIGHT - 100, 155, 95)
    overlay = pygame.Surface(panel.size, pygame.SRCALPHA)
    pygame.draw.rect(overlay, (0, 0, 200, 50), overlay.get_rect(), border_radius=10)
    surface.blit(overlay, panel.topleft)
    pygame.draw.rect(surface, (70, 130, 180), panel, width=3, border_radius=10)

    info_colour = (65, 105, 225)
    for offset, text in (
        (85, f"FPS: {fps}"),
        (63, f"Frame: {frames}"),
        (41, f"Time: {elapsed:4.2f}"),
    ):
        surface.blit(small.render(text, True, info_colour), (15, HEIGHT - offset))

    label_colour = (65, 100, 125)

    def centred(text: str, x: int, y: int) -> None:
        rendered = large.render(text, True, label_colour)
        surface.blit(rendered, (x - rendered.get_width() // 2, y))

    if mouse.is_pressed(MouseButton.LEFT):
        centred("LEFT", WIDTH // 2 - 180, HEIGHT - 70)
    if mouse.is_pressed(MouseButton.RIGHT):
        centred("RIGHT", WIDTH // 2 - 20, HEIGHT - 70)
    if mouse.is_pressed(MouseButton.CENTER):
        centred("CENTER", WIDTH // 2 - 100, HEIGHT - 100)

    if joystick is None:
        return
    for index in range(joystick.num_buttons):
        if joystick.is_pressed(index):
            centred(
                joystick.button_name(index),
                WIDTH // 2 + 80 + 50 * (index % 4),
                HEIGHT - 100 + 30 * (index // 4),
            )
    if joystick.left_is_pressed:
        centred("LEFT", WIDTH // 2 - 180, HEIGHT - 70)
    elif joystick.right_is_pressed:
        centred("RIGHT", WIDTH // 2 - 20, HEIGHT - 70)
    if joystick.up_is_pressed:
        centred("UP", WIDTH // 2 - 100, HEIGHT - 100)
    elif joystick.down_is_pressed:
        centred("DOWN", WIDTH // 2 - 100, HEIGHT - 40)


def main(argv: Optional[list[str]] = None) -> int:
    """Open the window and play until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="spaceshooter", description="Shoot the asteroids.")
    parser.add_argument("--assets", default=".", help="directory holding the font and bitmaps/")
    parser.add_argument(
        "--no-debug", dest="debug", action="store_false", help="hide the debug overlay"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            print(f"Failed to create the window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(TITLE)

        font_path = Path(args.assets) / FONT_NAME
        try:
            small_font = pygame.font.Font(font_path, 14)
            large_font = pygame.font.Font(font_path, 26)
        except (OSError, pygame.error):
            print(f"Failed to load the TTF font {font_path}", file=sys.stderr)
            return 1

        init_joysticks()
        joystick = get_joystick(1) if joystick_count() else None
        keyboard = Keyboard()
        mouse = Mouse()

        try:
            game = Game(args.assets)
        except ImageError as exc:
            print(exc, file=sys.stderr)
            return 1

        clock = pygame.time.Clock()
        started = second_start = time.monotonic()
        fps = frames = 0

        while not game.done:
            for event in pygame.event.get():
                _apply_event(game, event)

            seconds = clock.tick(_FRAME_RATE) / 1000.0
            now = time.monotonic()
            if now - second_start >= 1.0:
                fps, frames, second_start = frames, 0, now

            keyboard.update()
            mouse.update()
            if joystick is not None:
                joystick.update()

            game.handle_collisions()
            game.handle_input(keyboard, mouse, joystick)
            game.step(seconds)

            game.draw(screen)
            if args.debug:
                _draw_debug(
                    screen, small_font, large_font, fps, frames, now - started, mouse, joystick
                )
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0