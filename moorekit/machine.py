"""Moore finite state machine: outputs depend only on the current state."""

from typing import Any, Callable, Generic, List, Optional, TypeVar

State = TypeVar("State")
Symbol = TypeVar("Symbol")
Out = TypeVar("Out")

Transition = Callable[[Any, Any], Any]
OutputFunction = Callable[[Any], Any]
StateObserver = Callable[[Any, Any], None]


class ObserverLimitError(Exception):
    """Raised when a machine already holds its maximum number of observers."""


class MooreMachine(Generic[State, Symbol, Out]):
    """A machine M = (Q, Σ, δ, λ, q₀) driven one input symbol at a time.

    ``transition`` is δ: Q × Σ → Q and ``output_function`` is λ: Q → Γ.
    Observers are called with ``(old_state, new_state)`` after every step.
    """

    MAX_OBSERVERS = 8

    def __init__(
        self,
        transition: Optional[Callable[[State, Symbol], State]],
        initial_state: State,
        output_function: Optional[Callable[[State], Out]] = None,
    ) -> None:
        self.transition = transition
        self.output_function = output_function
        self._state = initial_state
        self._observers: List[Callable[[State, State], None]] = []

    @property
    def state(self) -> State:
        """The current state q."""
        return self._state

    @property
    def observer_count(self) -> int:
        """Number of registered state observers."""
        return len(self._observers)

    def step(self, symbol: Symbol) -> None:
        """Apply one input symbol: q ← δ(q, σ), then notify observers."""
        if self.transition is None:
            return
        old_state = self._state
        self._state = self.transition(old_state, symbol)
        for observer in tuple(self._observers):
            observer(old_state, self._state)

    def current_output(self) -> Optional[Out]:
        """Return λ(q), or None when no output function is set."""
        if self.output_function is None:
            return None
        return self.output_function(self._state)

    def add_observer(self, observer: Callable[[State, State], None]) -> None:
        """Register an observer called with ``(old_state, new_state)`` on each step."""
        if observer is None:
            raise ValueError("observer must be callable, not None")
        if len(self._observers) >= self.MAX_OBSERVERS:
            raise ObserverLimitError(
                f"at most {self.MAX_OBSERVERS} observers may be registered"
            )
        self._observers.append(observer)

    def remove_observer(self, observer: Callable[[State, State], None]) -> None:
        """Unregister an observer; raise ValueError if it is not registered."""
        try:
            self._observers.remove(observer)
        except ValueError:
            raise ValueError("observer is not registered") from None