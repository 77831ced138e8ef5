"""Buzzer, life indicator LEDs and debounced push buttons."""

from __future__ import annotations

import time
from typing import Callable, Optional

PwmOutput = Callable[[int, int], None]
"""Receives (period_us, pulse_width_us); a pulse width of 0 is silence."""

_DEFAULT_PERIOD_US = 20000
_DEBOUNCE_S = 0.01


class Buzzer:
    """Square-wave buzzer driven through a PWM output."""

    def __init__(
        self,
        output: Optional[PwmOutput] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._output = output
        self._sleep = sleep
        self.period_us = _DEFAULT_PERIOD_US
        self.pulse_width_us = 0
        self.stop()

    def _apply(self) -> None:
        if self._output is not None:
            self._output(self.period_us, self.pulse_width_us)

    def play_note(self, frequency: int, duration_ms: int = 200) -> None:
        """Play a tone at 50% duty for the given time; ignore non-positive values."""
        if frequency <= 0 or duration_ms <= 0:
            return
        self.period_us = 1_000_000 // frequency
        self.pulse_width_us = self.period_us // 2
        self._apply()
        self._sleep(duration_ms / 1000.0)
        self.stop()

    def stop(self) -> None:
        """Silence the buzzer."""
        self.pulse_width_us = 0
        self._apply()


class LifeIndicator:
    """Three LEDs showing the remaining lives, left to right."""

    MAX_LIVES = 3

    def __init__(self) -> None:
        self.leds: tuple[bool, bool, bool] = (False, False, False)

    def init(self) -> None:
        """Turn every LED off."""
        self.leds = (False, False, False)

    def set_lives(self, lives: int) -> None:
        """Light one LED per life, clamping lives to 0..3."""
        lives = max(0, min(self.MAX_LIVES, lives))
        self.leds = (lives >= 1, lives >= 2, lives >= 3)


class Button:
    """Push button with a simple confirm-after-delay debounce."""

    def __init__(
        self,
        read: Callable[[], object],
        delay: Callable[[float], None] = time.sleep,
    ) -> None:
        self._read = read
        self._delay = delay

    def pressed(self) -> bool:
        """True when the button reads pressed twice, 10 ms apart."""
        if self._read():
            self._delay(_DEBOUNCE_S)
            if self._read():
                return True
        return False