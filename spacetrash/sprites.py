"""Monochrome sprite bitmaps and helpers that draw them on a screen."""

from __future__ import annotations

from typing import Any

Sprite = tuple[tuple[int, ...], ...]

PLAYER_SPRITE: Sprite = (
    (0, 0, 1, 0, 0, 0, 0, 0, 0),
    (0, 1, 1, 1, 0, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 1, 0, 0, 0),
    (0, 0, 1, 1, 1, 1, 1, 1, 0),
    (0, 0, 1, 1, 1, 1, 1, 1, 1),
    (0, 0, 1, 1, 1, 1, 1, 1, 0),
    (1, 1, 1, 1, 1, 1, 0, 0, 0),
    (0, 1, 1, 1, 0, 0, 0, 0, 0),
    (0, 0, 1, 0, 0, 0, 0, 0, 0),
)

BULLET_SPRITE: Sprite = (
    (1, 1),
    (1, 1),
)

SMALL_TRASH_SPRITE: Sprite = (
    (0, 0, 1, 0, 0),
    (0, 1, 1, 1, 0),
    (1, 1, 1, 1, 1),
    (0, 1, 1, 1, 0),
    (0, 0, 1, 0, 0),
)

BIG_TRASH_SPRITE: Sprite = (
    (0, 0, 1, 1, 1, 0, 0),
    (0, 1, 1, 1, 1, 1, 0),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1),
    (0, 1, 1, 1, 1, 1, 0),
    (0, 0, 1, 1, 1, 0, 0),
)

PROPS_SPRITE: Sprite = (
    (0, 0, 1, 0, 0),
    (0, 1, 1, 1, 0),
    (1, 1, 1, 1, 1),
    (0, 1, 1, 1, 0),
    (0, 1, 0, 1, 0),
)

DUST_SPRITE: Sprite = ((1,),)


def _draw(lcd: Any, x: int, y: int, sprite: Sprite) -> None:
    lcd.draw_sprite(x, y, len(sprite), len(sprite[0]), sprite)


def draw_player_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, PLAYER_SPRITE)


def draw_bullet_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, BULLET_SPRITE)


def draw_small_trash_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, SMALL_TRASH_SPRITE)


def draw_big_trash_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, BIG_TRASH_SPRITE)


def draw_props_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, PROPS_SPRITE)


def draw_dust_sprite(lcd: Any, x: int, y: int) -> None:
    _draw(lcd, x, y, DUST_SPRITE)