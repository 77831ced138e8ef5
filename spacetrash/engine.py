"""Game engine: player, bullets, trash, planets, props and dust on a small screen."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterator, Optional

from .sprites import (
    draw_big_trash_sprite,
    draw_bullet_sprite,
    draw_dust_sprite,
    draw_player_sprite,
    draw_props_sprite,
    draw_small_trash_sprite,
)
from .utils import Direction, UserInput

MAX_BULLETS = 5
MAX_TRASH = 8
MAX_PLANETS = 2
MAX_PROPS = 3
MAX_DUST = 20
FPS = 10
DUST_LIFETIME_FRAMES = 3 * FPS
BOUNDARY_Y = 9
"""First usable row below the score line."""

PLAYER_SPEED = 1.5
PLANET_HITS = 3
SMALL_TRASH_SIZE = 5
BIG_TRASH_SIZE = 7
PLANET_SIZE = 20
PLANET_RADIUS = 10


class ObjectType(IntEnum):
    """Kind of object on the playfield."""

    NONE = 0
    PLAYER = 1
    BULLET = 2
    SMALL_TRASH = 3
    BIG_TRASH = 4
    PLANET = 5
    PROPS = 6
    DUST = 7


class GameState(Enum):
    """Top-level state of the game loop."""

    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


@dataclass
class GameObject:
    """Axis-aligned object with position, size and velocity.

    ``life`` holds the remaining frames of a dust particle or the
    remaining hits of a planet.
    """

    type: ObjectType = ObjectType.NONE
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    active: bool = False
    life: int = 0

    def move(self) -> None:
        self.x += self.vx
        self.y += self.vy


def check_collision(a: GameObject, b: GameObject) -> bool:
    """True when both objects are active and their boxes overlap."""
    if not a.active or not b.active:
        return False
    overlap_x = a.x < b.x + b.w and a.x + a.w > b.x
    overlap_y = a.y < b.y + b.h and a.y + a.h > b.y
    return overlap_x and overlap_y


def _free_slot(pool: list[GameObject]) -> Optional[GameObject]:
    return next((obj for obj in pool if not obj.active), None)


def _active(pool: list[GameObject]) -> Iterator[GameObject]:
    return (obj for obj in pool if obj.active)


class SpaceTrashEngine:
    """Per-frame simulation and drawing of the space trash game."""

    def __init__(self, rng: Any = None, buzzer: Any = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.buzzer = buzzer
        self._total_trash_spawned = 0
        self._total_trash_missed = 0
        self.init(84, 48)

    def init(self, screen_width: int, screen_height: int) -> None:
        """Reset lives, score and every object for a screen of the given size."""
        self.width = screen_width
        self.height = screen_height
        self._lives = 3
        self._score = 0
        self.player = GameObject(type=ObjectType.PLAYER, w=9, h=9, x=1, active=True)
        self.player.y = (self.height - self.player.h) / 2
        self.bullets = [GameObject(type=ObjectType.BULLET) for _ in range(MAX_BULLETS)]
        self.trash = [GameObject(type=ObjectType.SMALL_TRASH) for _ in range(MAX_TRASH)]
        self.planets = [GameObject(type=ObjectType.PLANET) for _ in range(MAX_PLANETS)]
        self.props = [GameObject(type=ObjectType.PROPS) for _ in range(MAX_PROPS)]
        self.dust = [GameObject(type=ObjectType.DUST) for _ in range(MAX_DUST)]

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def score(self) -> int:
        return self._score

    @property
    def total_trash_spawned(self) -> int:
        return self._total_trash_spawned

    @property
    def total_trash_missed(self) -> int:
        return self._total_trash_missed

    def _play(self, frequency: int, duration_ms: int) -> None:
        if self.buzzer is not None:
            self.buzzer.play_note(frequency, duration_ms)

    def update(self, user_input: UserInput, fire: bool = False) -> int:
        """Advance one frame and return the remaining lives."""
        self._update_player(user_input)
        if self._rng.randrange(40) == 0:
            self._spawn_trash()
        if fire:
            self._fire_bullet()
        for bullet in _active(self.bullets):
            bullet.move()
            if bullet.x > self.width:
                bullet.active = False
        for trash in _active(self.trash):
            self._update_trash(trash)
        if self._rng.randrange(150) == 0:
            self._spawn_props()
        if self._rng.randrange(200) == 0:
            self._spawn_planet()
        for obj in (*_active(self.planets), *_active(self.props)):
            obj.x += obj.vx
            if obj.x + obj.w < 0:
                obj.active = False
        for particle in _active(self.dust):
            self._update_dust(particle)
        self._handle_collisions()
        return self._lives

    def draw(self, lcd: Any) -> None:
        """Render the playfield, score and lives onto the screen."""
        lcd.clear()
        lcd.draw_line(0, 8, self.width, 8)
        if self.player.active:
            draw_player_sprite(lcd, int(self.player.x), int(self.player.y))
        for bullet in _active(self.bullets):
            draw_bullet_sprite(lcd, int(bullet.x), int(bullet.y))
        for trash in _active(self.trash):
            if trash.w == SMALL_TRASH_SIZE:
                draw_small_trash_sprite(lcd, int(trash.x), int(trash.y))
            elif trash.w == BIG_TRASH_SIZE:
                draw_big_trash_sprite(lcd, int(trash.x), int(trash.y))
        for planet in _active(self.planets):
            lcd.draw_circle(
                int(planet.x + PLANET_RADIUS), int(planet.y + PLANET_RADIUS), PLANET_RADIUS
            )
        for prop in _active(self.props):
            draw_props_sprite(lcd, int(prop.x), int(prop.y))
        for particle in _active(self.dust):
            draw_dust_sprite(lcd, int(particle.x), int(particle.y))
        lcd.print_string(f"S:{self._score} L:{self._lives}", 0, 0)
        lcd.refresh()

    def _update_player(self, user_input: UserInput) -> None:
        if user_input.d == Direction.N:
            self.player.y -= PLAYER_SPEED * user_input.mag
        elif user_input.d == Direction.S:
            self.player.y += PLAYER_SPEED * user_input.mag
        if self.player.y < BOUNDARY_Y:
            self.player.y = BOUNDARY_Y
        if self.player.y + self.player.h > self.height:
            self.player.y = self.height - self.player.h

    def _spawn_trash(self) -> None:
        small = self._rng.random() < 0.7
        slot = _free_slot(self.trash)
        if slot is None:
            return
        slot.active = True
        size = SMALL_TRASH_SIZE if small else BIG_TRASH_SIZE
        if small:
            self._total_trash_spawned += 1
        slot.type = ObjectType.SMALL_TRASH if small else ObjectType.BIG_TRASH
        slot.x = float(self.width - 1)
        slot.w = slot.h = size
        span = self.height - BOUNDARY_Y - size - BOUNDARY_Y
        slot.y = float(BOUNDARY_Y + self._rng.randrange(span))
        if small:
            slot.vx = -1.0 - self._rng.randrange(10) / 10.0
        else:
            slot.vx = -0.5 - self._rng.randrange(10) / 20.0
        slot.vy = 0.0

    def _spawn_props(self) -> None:
        slot = _free_slot(self.props)
        if slot is None:
            return
        slot.active = True
        slot.x = float(self.width - 1)
        slot.w = slot.h = 5
        span = self.height - BOUNDARY_Y - slot.h - BOUNDARY_Y
        if span > 0:
            slot.y = float(BOUNDARY_Y + self._rng.randrange(span))
        else:
            slot.y = (self.height - slot.h) / 2
        slot.vx = -1.0
        slot.vy = 0.0

    def _spawn_planet(self) -> None:
        slot = _free_slot(self.planets)
        if slot is None:
            return
        slot.active = True
        slot.x = float(self.width - PLANET_SIZE)
        max_y = int(self.height - BOUNDARY_Y - slot.h)
        slot.y = float(BOUNDARY_Y + self._rng.randrange(max_y))
        slot.w = slot.h = PLANET_SIZE
        slot.vx = -0.3 - self._rng.randrange(10) / 100.0
        slot.vy = 0.0
        slot.life = PLANET_HITS

    def _spawn_dust(self, x: float, y: float, count: int) -> None:
        for slot in self.dust:
            if count <= 0:
                break
            if slot.active:
                continue
            slot.active = True
            slot.x = x
            slot.y = y
            slot.vx = (self._rng.randrange(200) / 100.0 - 1.0) * 1.5
            slot.vy = (self._rng.randrange(200) / 100.0 - 1.0) * 1.5
            slot.w = slot.h = 1
            slot.life = DUST_LIFETIME_FRAMES
            count -= 1

    def _update_dust(self, particle: GameObject) -> None:
        particle.move()
        particle.life -= 1
        if particle.life <= 0:
            particle.active = False
            return
        if (
            particle.x < 0
            or particle.x > self.width
            or particle.y < 0
            or particle.y > self.height
        ):
            particle.active = False

    def _fire_bullet(self) -> None:
        slot = _free_slot(self.bullets)
        if slot is None:
            return
        slot.active = True
        slot.x = self.player.x + self.player.w
        slot.y = self.player.y + self.player.h / 2 - 1
        slot.vx = 2.0
        slot.vy = 0.0
        slot.w = slot.h = 2

    def _update_trash(self, trash: GameObject) -> None:
        trash.move()
        if trash.x + trash.w < 0:
            trash.active = False
            self._score -= 20
            self._total_trash_missed += 1

    def _handle_collisions(self) -> None:
        player = self.player
        for bullet in self.bullets:
            if not bullet.active:
                continue
            for trash in self.trash:
                if trash.active and check_collision(bullet, trash):
                    bullet.active = False
                    if trash.w == SMALL_TRASH_SIZE:
                        self._spawn_dust(trash.x, trash.y, 12)
                    elif trash.w == BIG_TRASH_SIZE:
                        self._spawn_small_trash_pair(trash.x, trash.y)
                    trash.active = False
                    self._score += 10
                    self._play(1000, 100)
                    break

        for trash in self.trash:
            if trash.active and check_collision(player, trash):
                trash.active = False
                self._lives -= 1
                self._spawn_dust(trash.x, trash.y, 16)

        for prop in self.props:
            if prop.active and check_collision(player, prop):
                prop.active = False
                self._score += 20
                self._play(1500, 150)
                self._spawn_dust(prop.x, prop.y, 8)

        for bullet in self.bullets:
            if not bullet.active:
                continue
            for planet in self.planets:
                if planet.active and check_collision(bullet, planet):
                    bullet.active = False
                    planet.life -= 1
                    centre_x = planet.x + PLANET_RADIUS
                    centre_y = planet.y + PLANET_RADIUS
                    if planet.life <= 0:
                        planet.active = False
                        self._spawn_dust(centre_x, centre_y, 20)
                        self._score += 50
                        self._play(800, 200)
                    else:
                        self._spawn_dust(centre_x, centre_y, 5)
                        self._play(1200, 80)
                    break

        for planet in self.planets:
            if planet.active and check_collision(player, planet):
                planet.active = False
                self._lives -= 1
                self._spawn_dust(planet.x + PLANET_RADIUS, planet.y + PLANET_RADIUS, 20)

        if self._score < 0:
            self._score = 0

    def _spawn_small_trash_pair(self, cx: float, cy: float) -> None:
        px = self.player.x + self.player.w * 0.5
        py = self.player.y + self.player.h * 0.5
        dx, dy = px - cx, py - cy
        mag = math.hypot(dx, dy)
        if mag > 0.0:
            ux, uy = dx / mag, dy / mag
        else:
            ux, uy = -1.0, 0.0
        perp_x, perp_y = -uy, ux
        separation = 6.0
        speed = 1.5
        free = [slot for slot in self.trash if not slot.active][:2]
        for sign, slot in zip((1.0, -1.0), free):
            offset = sign * separation * 0.5
            slot.active = True
            slot.type = ObjectType.SMALL_TRASH
            slot.w = slot.h = SMALL_TRASH_SIZE
            slot.x = cx + perp_x * offset
            slot.y = cy + perp_y * offset
            slot.vx = ux * speed
            slot.vy = uy * speed