"""Tracking of long-running operations against a timeout."""

from .clock import Clock, elapsed_ms, monotonic_ms


class AsyncOp:
    """An operation that may be started with a timeout and later finished."""

    def __init__(self, clock: Clock = monotonic_ms) -> None:
        self._clock = clock
        self._active = False
        self._start_time = 0
        self._timeout = 0

    @property
    def active(self) -> bool:
        """Whether the operation is in progress."""
        return self._active

    @property
    def timeout_ms(self) -> int:
        """The timeout given to the last ``start``."""
        return self._timeout

    def start(self, timeout_ms: int) -> None:
        """Begin the operation now with the given timeout in milliseconds."""
        self._active = True
        self._start_time = self._clock()
        self._timeout = timeout_ms

    def finish(self) -> None:
        """Mark the operation as finished, whether it succeeded or not."""
        self._active = False

    def _elapsed(self) -> int:
        return elapsed_ms(self._clock(), self._start_time)

    def timed_out(self) -> bool:
        """True if active and more than the timeout has passed."""
        return self._active and self._elapsed() > self._timeout

    def remaining_time(self) -> int:
        """Milliseconds left before timeout; 0 if inactive or timed out."""
        if not self._active:
            return 0
        elapsed = self._elapsed()
        if elapsed >= self._timeout:
            return 0
        return self._timeout - elapsed

    def elapsed_time(self) -> int:
        """Milliseconds since start; 0 if inactive."""
        if not self._active:
            return 0
        return self._elapsed()

    def progress(self) -> int:
        """Percentage of the timeout used: 0 if inactive, 100 once reached."""
        if not self._active:
            return 0
        elapsed = self._elapsed()
        if elapsed >= self._timeout:
            return 100
        return elapsed * 100 // self._timeout