import pytest

from moorekit.clock import elapsed_ms, monotonic_ms


def test_monotonic_ms_never_goes_backwards():
    first = monotonic_ms()
    second = monotonic_ms()
    assert 0 <= first < 2**32
    assert 0 <= second < 2**32
    assert elapsed_ms(second, first) < 60_000


def test_elapsed_ms_plain_difference():
    assert elapsed_ms(1500, 1000) == 500


def test_elapsed_ms_same_instant_is_zero():
    assert elapsed_ms(42, 42) == 0


@pytest.mark.parametrize("since", [0, 1, 2**31, 2**32 - 1, 2**32 - 100])
@pytest.mark.parametrize("delta", [0, 1, 99, 250, 30_000])
def test_elapsed_ms_survives_wrap_around(since, delta):
    now = (since + delta) % 2**32
    assert elapsed_ms(now, since) == delta