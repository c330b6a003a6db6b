# moorekit

A small toolkit for writing control loops as Moore machines.

A Moore machine is a finite automaton whose output depends only on its
current state: a transition function `δ(state, input) → state` moves it
forward, and an output function `λ(state) → output` says what the outside
world should do next. Keeping the two pure and doing all I/O in the main
loop makes the logic easy to test.

Alongside the machine itself the package has the usual helpers of a polling
loop, all driven by a millisecond clock you can replace in tests:

- `moorekit.machine.MooreMachine` – the state machine, with state observers.
- `moorekit.timer.Timer` – a non-blocking interval timer.
- `moorekit.asyncop.AsyncOp` – tracks a long-running operation against a timeout.
- `moorekit.button.Button` – a debounced push button read through a callable.
- `moorekit.clock` – `monotonic_ms()` and wrap-safe `elapsed_ms(now, since)`.

A worked example, the logic of a WiFi connection manager, lives in
`moorekit.wifi_types`, `moorekit.wifi_machine` and `moorekit.wifi_ui`.

## Installation

```
pip install moorekit
```

The package has no runtime dependencies. To run its tests:

```
pip install "moorekit[test]"
pytest
```

## A first machine

```python
from moorekit.machine import MooreMachine


def transition(count, symbol):
    return count + 1 if symbol == "inc" else count


def output(count):
    return "even" if count % 2 == 0 else "odd"


machine = MooreMachine(transition, 0, output)


def log_change(old, new):
    print(f"{old} -> {new}")


machine.add_observer(log_change)

machine.step("inc")              # prints "0 -> 1"
print(machine.state)             # 1
print(machine.current_output())  # "odd"

machine.remove_observer(log_change)
```

- `step(symbol)` applies the transition function and then calls every
  observer with the old and the new state. If the transition function is
  `None`, `step` does nothing.
- `current_output()` returns the output function's value for the current
  state, or `None` when no output function was given.
- At most `MooreMachine.MAX_OBSERVERS` (eight) observers may be registered;
  `add_observer` raises `ObserverLimitError` beyond that and `ValueError` for
  `None`. `remove_observer` raises `ValueError` for an observer that is not
  registered. `observer_count` tells how many are registered.

## Timers, timeouts and buttons

All three take a `clock`: any callable returning the current time in
milliseconds. It defaults to `moorekit.clock.monotonic_ms`, which wraps at
32 bits like a microcontroller's counter; elapsed times are computed with
`elapsed_ms`, so the wrap is harmless. A test can pass its own function.

```python
from moorekit.asyncop import AsyncOp
from moorekit.timer import Timer

heartbeat = Timer(1000)
heartbeat.start()

connection = AsyncOp()
connection.start(30_000)

while True:
    if heartbeat.expired():
        heartbeat.restart()
        print("tick", connection.progress(), "%")

    if connection.timed_out():
        print("gave up after", connection.elapsed_time(), "ms")
        connection.finish()
        break
```

- `Timer.expired()` is true once at least the interval has passed since
  `start()`; `stop()` halts it, `set_interval(ms)` changes the interval and
  restarts, `remaining_time()` counts down to zero, `running` reports its state.
- `AsyncOp.timed_out()` is true once more than the timeout has passed while
  active. `remaining_time()` and `elapsed_time()` are 0 when inactive;
  `progress()` reports 0–100 percent. `active` and `timeout_ms` are readable.

A `Button` reads its pin through a function you supply, returning `True` for
a high level (released, with a pull-up) and `False` for low (pressed):

```python
from moorekit.button import Button

pin_level = True


def read_pin():
    return pin_level


button = Button(read_pin, debounce_ms=50)

if button.was_pressed():
    print("pressed")
```

A new level is accepted once it has held for longer than `debounce_ms`
(default `Button.DEFAULT_DEBOUNCE_MS`, 50 ms). `update()` returns whether the
debounced state changed, `was_pressed()` is true only on a fresh press, and
`is_pressed()` gives the debounced state. Call `was_pressed()` (or `update()`)
once per loop iteration so debouncing sees every change.

## The WiFi manager example

`moorekit.wifi_types` defines the example's alphabet: the `AppMode` state
space, the frozen `AppState`, the `Input` symbols (`Input.tick()`,
`Input.retry_connection()`, `Input.wifi_status_changed(status)`, …), the
`Output` effects, the `WiFiStatus` codes and `Credentials` with
`is_empty()` and `is_valid()`. `is_valid_credential_length(text)` accepts
1 to 63 bytes of UTF-8.

`moorekit.wifi_machine` holds the two pure functions:

```python
from moorekit.wifi_machine import output_for, transition
from moorekit.wifi_types import AppState, Input

state = AppState()
state = transition(state, Input.retry_connection(), now=1000)
effect = output_for(state)   # Output.start_wifi_connection()
state = transition(state, Input.connection_started(), now=1010)
effect = output_for(state)   # Output.update_leds(AppMode.CONNECTING)
```

`transition` stamps `last_update` with `now` (reading the clock when it is
omitted) on every input. `output_for` gives a pending reconnect first, then
unsaved credentials, then an LED update for the current mode.

`moorekit.wifi_ui` turns states into what a user sees:
`parse_user_input(char, mode)` maps `r` (only while disconnected) and `c`
keystrokes to inputs, `ui_message(mode)` and
`state_change_messages(old, new, ip)` give the text to print,
`wifi_led_level(mode, now)` gives the status LED level (solid when connected,
toggling every 250 ms while connecting, off otherwise), `format_mac(mac)`
formats six bytes as colon-separated hex, last byte first, and
`mode_name(mode)` names a mode for logging.

## What the package does not do

moorekit contains only logic. It does not talk to a WiFi radio, scan for
networks, read a serial console, drive LEDs or pins, or store credentials;
there is no command and no ready-made main loop. The WiFi example's
functions produce inputs, outputs and text, and carrying out those effects
is left to the program that uses them.