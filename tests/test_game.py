import pytest

from spacetrash.devices import Button, LifeIndicator
from spacetrash.engine import GameState
from spacetrash.game import GameApp, TextScreen, main
from spacetrash.joystick import Joystick
from spacetrash.sprites import PLAYER_SPRITE


class _Switch:
    def __init__(self) -> None:
        self.on = False

    def button(self) -> Button:
        return Button(lambda: self.on, delay=lambda _s: None)


class _QuietRng:
    """Never triggers a random spawn."""

    def randrange(self, n: int) -> int:
        return n - 1

    def random(self) -> float:
        return 0.5


def _text_rows(screen: TextScreen) -> list[str]:
    return screen.render().splitlines()[: screen.rows]


def _make_app():
    screen = TextScreen()
    start = _Switch()
    fire = _Switch()
    leds = LifeIndicator()
    app = GameApp(
        screen,
        Joystick(lambda: 0.5, lambda: 0.5),
        start.button(),
        fire.button(),
        leds,
        None,
        _QuietRng(),
    )
    return app, screen, start, fire, leds


def _start_playing(app, start):
    start.on = True
    app.step()
    start.on = False
    assert app.state is GameState.PLAYING


def test_set_pixel_and_out_of_range_ignored():
    screen = TextScreen()
    screen.set_pixel(3, 4)
    screen.set_pixel(-1, 0)
    screen.set_pixel(screen.width, screen.height)
    assert screen.pixels[4][3] is True
    assert sum(sum(row) for row in screen.pixels) == 1


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        TextScreen(0, 48)


def test_horizontal_line_is_clipped_to_screen():
    screen = TextScreen()
    screen.draw_line(0, 8, screen.width, 8)
    assert all(screen.pixels[8])
    assert sum(sum(row) for row in screen.pixels) == screen.width


def test_diagonal_line_includes_both_ends():
    screen = TextScreen()
    screen.draw_line(2, 2, 7, 7)
    assert screen.pixels[2][2] and screen.pixels[7][7]
    assert all(screen.pixels[i][i] for i in range(2, 8))


def test_draw_sprite_sets_bitmap_pixels():
    screen = TextScreen()
    screen.draw_sprite(10, 12, 9, 9, PLAYER_SPRITE)
    lit = sum(sum(row) for row in screen.pixels)
    assert lit == sum(sum(row) for row in PLAYER_SPRITE)
    for i, row in enumerate(PLAYER_SPRITE):
        for j, value in enumerate(row):
            assert screen.pixels[12 + i][10 + j] == bool(value)


def test_draw_sprite_zero_clears_pixel():
    screen = TextScreen()
    screen.set_pixel(0, 0)
    screen.draw_sprite(0, 0, 1, 2, ((0, 1),))
    assert screen.pixels[0][0] is False
    assert screen.pixels[0][1] is True


def test_filled_circle_is_symmetric():
    screen = TextScreen()
    screen.draw_circle(40, 24, 10)
    assert screen.pixels[24][40]
    assert screen.pixels[24][50] and screen.pixels[24][30]
    assert not screen.pixels[24][51]
    for dy in range(-10, 11):
        for dx in range(-10, 11):
            assert screen.pixels[24 + dy][40 + dx] == screen.pixels[24 - dy][40 - dx]


def test_print_string_and_clipping():
    screen = TextScreen()
    screen.print_string(" SPACE TRASH! ", 0, 1)
    screen.print_string("ABCDEF", -2, 2)
    screen.print_string("ignored", 0, screen.rows)
    rows = _text_rows(screen)
    assert rows[1] == " SPACE TRASH!"
    assert rows[2] == "CDEF"
    assert len(screen.render().splitlines()) == screen.rows + screen.height


def test_clear_and_refresh():
    screen = TextScreen()
    screen.set_pixel(1, 1)
    screen.print_string("X", 0, 0)
    screen.refresh()
    assert screen.frames == 1
    assert screen.frame.splitlines()[0] == "X"
    screen.clear()
    assert not any(any(row) for row in screen.pixels)
    assert _text_rows(screen)[0] == ""
    assert screen.frame.splitlines()[0] == "X"


def test_menu_waits_and_blinks():
    app, screen, _start, _fire, _leds = _make_app()
    assert app.step() == pytest.approx(0.2)
    first = _text_rows(screen)
    app.step()
    second = _text_rows(screen)
    assert app.state is GameState.MENU
    assert first[1] == " SPACE TRASH!"
    assert first[3] == " PRESS BUTTON"
    assert second[3] == ""


def test_press_starts_game_and_draws_status():
    app, screen, start, _fire, leds = _make_app()
    _start_playing(app, start)
    assert app.step() == pytest.approx(0.1)
    assert app.state is GameState.PLAYING
    assert _text_rows(screen)[0] == "S:0 L:3"
    assert leds.leds == (True, True, True)


def test_fire_button_launches_bullet():
    app, _screen, start, fire, _leds = _make_app()
    _start_playing(app, start)
    fire.on = True
    app.step()
    assert sum(b.active for b in app.engine.bullets) == 1


def test_pause_and_resume():
    app, screen, start, _fire, _leds = _make_app()
    _start_playing(app, start)
    start.on = True
    app.step()
    assert app.state is GameState.PAUSED
    start.on = False
    app.step()
    rows = _text_rows(screen)
    assert rows[1] == "   PAUSED!"
    assert rows[3] == "   score:0"
    assert rows[4] == "   lives:3"
    start.on = True
    app.step()
    assert app.state is GameState.PLAYING


def test_losing_all_lives_ends_game_and_restart_goes_to_menu():
    app, screen, start, _fire, leds = _make_app()
    _start_playing(app, start)
    player = app.engine.player
    for trash in app.engine.trash[:3]:
        trash.active = True
        trash.x, trash.y = player.x, player.y
        trash.w = trash.h = 5
    app.step()
    assert app.engine.lives == 0
    assert app.state is GameState.GAMEOVER
    assert leds.leds == (False, False, False)
    app.step()
    rows = _text_rows(screen)
    assert rows[0] == "  GAME OVER"
    assert "S:0 M:0%" in rows[2]
    assert rows[5].startswith(" PRESS TO")
    start.on = True
    app.step()
    assert app.state is GameState.MENU


def test_main_runs_scripted_game(capsys):
    assert main(["--frames", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "state: playing" in out
    assert "lives: 3" in out
    assert out.startswith("S:")


def test_main_rejects_zero_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "0"])