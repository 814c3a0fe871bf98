"""On/off LED with background blinking."""

from __future__ import annotations

import logging
import threading
from typing import Callable

__all__ = ["Led"]

_log = logging.getLogger(__name__)

WriteLevel = Callable[[int, int], None]


class Led:
    """An LED on an output pin.

    ``write_level(pin, level)`` drives the pin with level 0 or 1. Without a
    writer only the state is tracked. The LED starts off and the pin is
    driven low on creation.
    """

    def __init__(self, pin: int, write_level: WriteLevel | None = None) -> None:
        self.pin = pin
        self._write = write_level
        self._lock = threading.Lock()
        self._state = False
        self._period = 0
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()
        self._drive(0)

    def __enter__(self) -> Led:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Led(pin={self.pin}, on={self._state}, blinking={self.is_blinking()})"

    def _drive(self, level: int) -> None:
        if self._write is not None:
            self._write(self.pin, level)

    def _apply(self, state: bool) -> None:
        with self._lock:
            self._drive(int(state))
            self._state = state

    def state(self) -> bool:
        """Return whether the LED is currently lit."""
        return self._state

    def is_on(self) -> bool:
        return self._state

    def is_off(self) -> bool:
        return not self._state

    def on(self) -> None:
        self.set(True)

    def off(self) -> None:
        self.set(False)

    def set(self, state: bool) -> None:
        """Switch the LED; a change of state also stops any blinking."""
        state = bool(state)
        if state == self._state:
            return
        if self.is_blinking():
            self.stop_blink()
        self._apply(state)

    def toggle(self) -> None:
        self.set(not self._state)

    def is_blinking(self) -> bool:
        return self._thread is not None

    @property
    def period(self) -> int:
        """The blink period in milliseconds last requested."""
        return self._period

    def _blink_loop(self, stop: threading.Event, half_period: float) -> None:
        while not stop.is_set():
            self._apply(not self._state)
            if stop.wait(half_period):
                break
        self._apply(False)

    def blink(self, period: int) -> None:
        """Start toggling the LED with a full cycle of ``period`` milliseconds."""
        if period <= 0:
            raise ValueError("blink period must be positive")
        if self.is_blinking():
            _log.warning("LED is already blinking")
            return
        self._period = period
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._blink_loop,
            args=(self._stop, period / 2 / 1000),
            name=f"led-blink-{self.pin}",
            daemon=True,
        )
        self._thread.start()

    def stop_blink(self) -> None:
        """Stop blinking and leave the LED off."""
        thread = self._thread
        if thread is None:
            _log.warning("LED is not blinking")
            return
        self._stop.set()
        thread.join()
        self._thread = None

    def close(self) -> None:
        """Stop any blinking."""
        if self.is_blinking():
            self.stop_blink()