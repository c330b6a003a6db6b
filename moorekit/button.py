"""Debounced push-button input on a pull-up line."""

from typing import Callable

from .clock import Clock, elapsed_ms, monotonic_ms


class Button:
    """A debounced button read through ``read_pin``.

    ``read_pin`` returns the line level: True for high, False for low.
    The line is pulled up, so the button counts as pressed when it reads low.
    """

    DEFAULT_DEBOUNCE_MS = 50

    def __init__(
        self,
        read_pin: Callable[[], bool],
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Clock = monotonic_ms,
    ) -> None:
        self._read_pin = read_pin
        self.debounce_ms = debounce_ms
        self._clock = clock
        self._last_state = True
        self._current_state = True
        self._last_change = 0

    def update(self) -> bool:
        """Sample the line; return True if the debounced state changed."""
        reading = bool(self._read_pin())
        if reading != self._last_state:
            self._last_change = self._clock()
        if elapsed_ms(self._clock(), self._last_change) > self.debounce_ms:
            if reading != self._current_state:
                self._current_state = reading
                self._last_state = reading
                return True
        self._last_state = reading
        return False

    def was_pressed(self) -> bool:
        """Sample the line; return True only on a fresh debounced press."""
        return self.update() and self.is_pressed()

    def is_pressed(self) -> bool:
        """Whether the debounced state is pressed (line low)."""
        return not self._current_state