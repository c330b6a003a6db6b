"""Non-blocking interval timer."""

from .clock import Clock, elapsed_ms, monotonic_ms


class Timer:
    """A timer that reports expiry once ``interval_ms`` has passed since start."""

    def __init__(self, interval_ms: int, clock: Clock = monotonic_ms) -> None:
        self.interval_ms = interval_ms
        self._clock = clock
        self._last_trigger = 0
        self._running = False

    @property
    def running(self) -> bool:
        """Whether the timer is currently running."""
        return self._running

    def start(self) -> None:
        """Start the timer from now."""
        self._last_trigger = self._clock()
        self._running = True

    def stop(self) -> None:
        """Stop the timer."""
        self._running = False

    def restart(self) -> None:
        """Start the timer again from now."""
        self.start()

    def _elapsed(self) -> int:
        return elapsed_ms(self._clock(), self._last_trigger)

    def expired(self) -> bool:
        """True if running and at least one interval has passed."""
        return self._running and self._elapsed() >= self.interval_ms

    def set_interval(self, interval_ms: int) -> None:
        """Change the interval and restart from now."""
        self.interval_ms = interval_ms
        self.start()

    def remaining_time(self) -> int:
        """Milliseconds until expiry; 0 if stopped or already expired."""
        if not self._running:
            return 0
        elapsed = self._elapsed()
        if elapsed >= self.interval_ms:
            return 0
        return self.interval_ms - elapsed