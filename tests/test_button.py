from moorekit.button import Button


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


class FakePin:
    def __init__(self, level=True):
        self.level = level

    def __call__(self):
        return self.level


def make(debounce=50, now=1000):
    pin = FakePin()
    clock = FakeClock(now)
    return Button(pin, debounce, clock), pin, clock


def test_default_debounce_is_fifty_ms():
    button = Button(FakePin(), clock=FakeClock())
    assert button.debounce_ms == 50


def test_idle_button_is_not_pressed():
    button, _, _ = make()
    assert not button.update()
    assert not button.is_pressed()


def test_press_accepted_after_debounce_period():
    button, pin, clock = make()
    pin.level = False
    assert not button.update()
    clock.now += 50
    assert not button.update()
    assert not button.is_pressed()
    clock.now += 1
    assert button.update()
    assert button.is_pressed()


def test_was_pressed_fires_once_per_press():
    button, pin, clock = make()
    pin.level = False
    button.update()
    clock.now += 51
    assert button.was_pressed()
    clock.now += 100
    assert not button.was_pressed()
    assert button.is_pressed()


def test_release_changes_state_but_is_not_a_press():
    button, pin, clock = make()
    pin.level = False
    button.update()
    clock.now += 51
    button.update()
    pin.level = True
    button.update()
    clock.now += 51
    assert not button.was_pressed()
    assert not button.is_pressed()


def test_bounce_restarts_debounce_timer():
    button, pin, clock = make()
    pin.level = False
    button.update()
    clock.now += 30
    pin.level = True
    button.update()
    clock.now += 10
    pin.level = False
    button.update()
    clock.now += 45
    assert not button.update()
    clock.now += 10
    assert button.update()
    assert button.is_pressed()


def test_debounce_delay_can_be_changed():
    button, pin, clock = make(debounce=50)
    button.debounce_ms = 5
    pin.level = False
    button.update()
    clock.now += 6
    assert button.was_pressed()