import logging
import time

import pytest

from hostlink.led import Led


class Recorder:
    def __init__(self):
        self.writes = []

    def __call__(self, pin, level):
        self.writes.append((pin, level))


def _wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.005)
    return condition()


def test_created_off_and_pin_driven_low():
    rec = Recorder()
    led = Led(15, rec)
    assert led.is_off()
    assert not led.is_on()
    assert rec.writes == [(15, 0)]


def test_on_off_toggle():
    rec = Recorder()
    led = Led(16, rec)
    led.on()
    assert led.is_on()
    led.toggle()
    assert led.is_off()
    led.toggle()
    assert led.state() is True
    assert rec.writes == [(16, 0), (16, 1), (16, 0), (16, 1)]


def test_setting_same_state_writes_nothing():
    rec = Recorder()
    led = Led(3, rec)
    led.off()
    led.set(0)
    assert rec.writes == [(3, 0)]


def test_blink_toggles_and_stop_leaves_off():
    rec = Recorder()
    led = Led(5, rec)
    led.blink(20)
    assert led.is_blinking()
    assert _wait_for(lambda: rec.writes.count((5, 1)) >= 2)
    led.stop_blink()
    assert not led.is_blinking()
    assert led.is_off()
    assert rec.writes[-1] == (5, 0)


def test_changing_state_stops_blinking():
    rec = Recorder()
    led = Led(7, rec)
    led.blink(10_000)
    assert _wait_for(led.is_on)
    start = time.monotonic()
    led.off()
    assert time.monotonic() - start < 2.0
    assert not led.is_blinking()
    assert led.is_off()


def test_blink_twice_warns(caplog):
    led = Led(1)
    led.blink(10_000)
    with caplog.at_level(logging.WARNING, logger="hostlink.led"):
        led.blink(500)
    led.close()
    assert "already blinking" in caplog.text
    assert led.period == 10_000


def test_stop_when_not_blinking_warns(caplog):
    led = Led(2)
    with caplog.at_level(logging.WARNING, logger="hostlink.led"):
        led.stop_blink()
    assert "not blinking" in caplog.text
    assert not led.is_blinking()


def test_blink_rejects_non_positive_period():
    led = Led(4)
    with pytest.raises(ValueError):
        led.blink(0)


def test_context_manager_stops_blinking():
    with Led(8) as led:
        led.blink(10_000)
        assert led.is_blinking()
    assert not led.is_blinking()
    assert led.is_off()