"""Game loop with menu, play, pause and game-over screens, and a text-mode screen."""

from __future__ import annotations

import argparse
import random
import time
from typing import Any, Optional, Sequence

from .devices import Button, LifeIndicator
from .engine import GameState, SpaceTrashEngine
from .joystick import Joystick
from .utils import UserInput

SCREEN_WIDTH = 84
SCREEN_HEIGHT = 48
MENU_DELAY_S = 0.2
PLAY_DELAY_S = 0.1


class TextScreen:
    """Monochrome framebuffer with a character layer, rendered as plain text.

    Text is placed on a grid of 6x8 pixel cells, like a small LCD font.
    """

    CHAR_WIDTH = 6
    CHAR_HEIGHT = 8

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.columns = width // self.CHAR_WIDTH
        self.rows = height // self.CHAR_HEIGHT
        self.frames = 0
        self.frame = ""
        self.pixels: list[list[bool]] = []
        self.text: list[list[str]] = []
        self.clear()

    def clear(self) -> None:
        """Turn every pixel off and erase all text."""
        self.pixels = [[False] * self.width for _ in range(self.height)]
        self.text = [[" "] * self.columns for _ in range(self.rows)]

    def refresh(self) -> None:
        """Latch the current contents as the displayed frame."""
        self.frame = self.render()
        self.frames += 1

    def _put(self, x: int, y: int, on: bool) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y][x] = on

    def set_pixel(self, x: int, y: int) -> None:
        """Turn one pixel on; coordinates off the screen are ignored."""
        self._put(int(x), int(y), True)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a solid line between two points, both ends included."""
        x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self._put(x0, y0, True)
            if x0 == x1 and y0 == y1:
                return
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_circle(self, cx: int, cy: int, radius: int) -> None:
        """Draw a filled circle centred on (cx, cy)."""
        r = int(radius)
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx * dx + dy * dy <= r * r:
                    self._put(int(cx) + dx, int(cy) + dy, True)

    def draw_sprite(
        self, x: int, y: int, rows: int, cols: int, sprite: Sequence[Sequence[int]]
    ) -> None:
        """Copy a bitmap: 1 sets a pixel, 0 clears it, anything else is transparent."""
        for i, line in enumerate(sprite[:rows]):
            for j, value in enumerate(line[:cols]):
                if value == 1:
                    self._put(int(x) + j, int(y) + i, True)
                elif value == 0:
                    self._put(int(x) + j, int(y) + i, False)

    def print_string(self, text: str, column: int, row: int) -> None:
        """Write text at a character cell; what falls off the grid is dropped."""
        if not 0 <= row < self.rows:
            return
        for offset, char in enumerate(text):
            col = column + offset
            if 0 <= col < self.columns:
                self.text[row][col] = char

    def render(self) -> str:
        """Text rows, then one line per pixel row with '#' for lit pixels."""
        text_lines = ["".join(line).rstrip() for line in self.text]
        pixel_lines = ["".join("#" if on else "." for on in line) for line in self.pixels]
        return "\n".join([*text_lines, *pixel_lines])


class GameApp:
    """State machine that drives the engine, screen, LEDs and buttons one frame at a time."""

    def __init__(
        self,
        lcd: Any,
        joystick: Joystick,
        button: Button,
        fire_button: Button,
        life_indicator: Optional[LifeIndicator] = None,
        buzzer: Any = None,
        rng: Any = None,
    ) -> None:
        self.lcd = lcd
        self.joystick = joystick
        self.button = button
        self.fire_button = fire_button
        self.life_indicator = life_indicator if life_indicator is not None else LifeIndicator()
        self.engine = SpaceTrashEngine(rng=rng, buzzer=buzzer)
        self.state = GameState.MENU
        self._show_prompt = True
        self.joystick.init()
        self.life_indicator.init()

    def step(self) -> float:
        """Run one pass of the loop and return the pause in seconds before the next."""
        pressed = self.button.pressed()
        if self.state is GameState.MENU:
            return self._menu(pressed)
        if self.state is GameState.PLAYING:
            return self._play(pressed)
        if self.state is GameState.PAUSED:
            return self._paused(pressed)
        return self._game_over(pressed)

    def _menu(self, pressed: bool) -> float:
        lcd = self.lcd
        lcd.clear()
        lcd.print_string(" SPACE TRASH! ", 0, 1)
        if self._show_prompt:
            lcd.print_string(" PRESS BUTTON ", 0, 3)
        self._show_prompt = not self._show_prompt
        lcd.refresh()
        if pressed:
            self.engine.init(SCREEN_WIDTH, SCREEN_HEIGHT)
            self.state = GameState.PLAYING
        return MENU_DELAY_S

    def _play(self, pressed: bool) -> float:
        user_input = UserInput(self.joystick.get_direction(), self.joystick.get_mag())
        lives = self.engine.update(user_input, fire=self.fire_button.pressed())
        self.life_indicator.set_lives(lives)
        self.lcd.clear()
        self.engine.draw(self.lcd)
        self.lcd.refresh()
        if lives <= 0:
            self.state = GameState.GAMEOVER
        if pressed:
            self.state = GameState.PAUSED
        return PLAY_DELAY_S

    def _paused(self, pressed: bool) -> float:
        lcd = self.lcd
        lcd.clear()
        lcd.print_string("   PAUSED!", 0, 1)
        lcd.print_string(f"   score:{self.engine.score}", 0, 3)
        lcd.print_string(f"   lives:{self.engine.lives}", 0, 4)
        lcd.refresh()
        if pressed:
            self.state = GameState.PLAYING
        return MENU_DELAY_S

    def _game_over(self, pressed: bool) -> float:
        lcd = self.lcd
        engine = self.engine
        spawned = engine.total_trash_spawned
        missed = engine.total_trash_missed
        pct = missed * 100 // spawned if spawned > 0 else 0
        info = f"  S:{engine.score} M:{pct}%"
        column = int((14 - len(info)) / 2)
        lcd.clear()
        lcd.print_string("  GAME OVER", 0, 0)
        lcd.print_string(info[:16], column, 2)
        lcd.print_string(" PRESS TO RESTART ", 0, 5)
        lcd.refresh()
        if pressed:
            self.state = GameState.MENU
        return MENU_DELAY_S


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a scripted game on a text screen and print the last frame."""
    parser = argparse.ArgumentParser(
        prog="spacetrash",
        description="Run the space trash game with a centred stick and an automatic trigger.",
    )
    parser.add_argument("--frames", type=int, default=200, help="number of loop passes")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--fire-every", type=int, default=3, help="fire on every Nth frame, 0 to never fire"
    )
    parser.add_argument(
        "--realtime", action="store_true", help="wait between frames as the device does"
    )
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("--frames must be at least 1")
    if args.fire_every < 0:
        parser.error("--fire-every must not be negative")

    clock = {"frame": 0}

    def no_delay(_seconds: float) -> None:
        return None

    start_button = Button(lambda: clock["frame"] == 0, delay=no_delay)
    fire_button = Button(
        lambda: args.fire_every > 0 and clock["frame"] % args.fire_every == 0,
        delay=no_delay,
    )
    screen = TextScreen()
    app = GameApp(
        screen,
        Joystick(lambda: 0.5, lambda: 0.5),
        start_button,
        fire_button,
        LifeIndicator(),
        None,
        random.Random(args.seed),
    )
    for frame in range(args.frames):
        clock["frame"] = frame
        pause = app.step()
        if args.realtime:
            time.sleep(pause)

    print(screen.frame)
    print(f"state: {app.state.value} score: {app.engine.score} lives: {app.engine.lives}")
    return 0