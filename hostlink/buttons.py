"""Debounced push button with press and long-press callbacks."""

from __future__ import annotations

import threading
import time
from typing import Callable

from hostlink.common import get_time_ms

__all__ = ["Button"]

_UINT32_MASK = 0xFFFFFFFF
_POLL_INTERVAL_S = 0.02

ReadLevel = Callable[[int], int]
Clock = Callable[[], int]
Callback = Callable[[], object]


class Button:
    """A push button on an input pin.

    ``read_level(pin)`` returns the raw pin level (0 or 1) and ``clock()``
    returns a millisecond counter that may wrap at 32 bits. Without
    ``read_level`` the pin rests at the level its pull setting gives it.
    By default the pull-up is enabled, the button is active low, the
    debounce time is 35 ms, the held threshold is 1000 ms and interrupt
    mode is off.

    In interrupt mode :meth:`read` is expected to be driven by whatever
    watches the pin (an edge handler, another thread); the wait methods then
    block on the events that :meth:`read` signals instead of polling.
    """

    def __init__(
        self,
        pin: int,
        read_level: ReadLevel | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.pin = pin
        self.pull_up = True
        self._read_level: ReadLevel = (
            read_level if read_level is not None else (lambda _pin: int(self.pull_up))
        )
        self._clock = clock if clock is not None else get_time_ms
        self.debounce_time = 35
        self.held_threshold = 1000
        self._active_low = True
        self._interrupt_enabled = False

        self._pressed_callback: Callback | None = None
        self._pressed_for_callback: Callback | None = None
        self._in_pressed_callback = False
        self._in_pressed_for_callback = False

        self._pressed_event = threading.Event()
        self._released_event = threading.Event()

        self._current_state = self._get_state()
        self._last_state = self._current_state
        self._changed = False
        self._was_held = False
        self._time = self._clock() & _UINT32_MASK
        self._last_change = self._time

    def __repr__(self) -> str:
        return f"Button(pin={self.pin}, pressed={self._current_state})"

    def _get_state(self) -> bool:
        level = bool(self._read_level(self.pin))
        return not level if self._active_low else level

    @staticmethod
    def _elapsed(now: int, since: int) -> int:
        return (now - since) & _UINT32_MASK

    # -- configuration --------------------------------------------------

    @property
    def active_low(self) -> bool:
        """Whether a low pin level counts as pressed."""
        return self._active_low

    @property
    def interrupt_enabled(self) -> bool:
        return self._interrupt_enabled

    def enable_interrupt(self) -> None:
        """Switch the wait methods to block on events signalled by :meth:`read`."""
        self._interrupt_enabled = True

    def disable_interrupt(self) -> None:
        """Switch the wait methods back to polling the pin."""
        self._interrupt_enabled = False

    def set_active_low(self) -> None:
        self._active_low = True

    def set_active_high(self) -> None:
        self._active_low = False

    def on_press(self, callback: Callback | None) -> None:
        """Call ``callback`` on release after a press shorter than the held threshold."""
        self._pressed_callback = callback

    def on_pressed_for(self, callback: Callback | None) -> None:
        """Call ``callback`` on release after a press of at least the held threshold."""
        self._pressed_for_callback = callback

    # -- sampling -------------------------------------------------------

    def read(self) -> bool:
        """Sample the pin, apply debouncing, fire callbacks and return the pressed state."""
        now = self._clock() & _UINT32_MASK
        state = self._get_state()

        if self._elapsed(now, self._last_change) < self.debounce_time:
            self._changed = False
        else:
            self._last_state = self._current_state
            self._current_state = state
            self._changed = self._current_state != self._last_state
            if self._changed:
                self._was_held = self._elapsed(now, self._last_change) >= self.held_threshold
                self._last_change = now

        if self.was_released():
            self._released_event.set()
            if (
                not self._was_held
                and self._pressed_callback is not None
                and not self._in_pressed_callback
            ):
                self._in_pressed_callback = True
                try:
                    self._pressed_callback()
                finally:
                    self._in_pressed_callback = False
            elif (
                self._was_held
                and self._pressed_for_callback is not None
                and not self._in_pressed_for_callback
            ):
                self._in_pressed_for_callback = True
                try:
                    self._pressed_for_callback()
                finally:
                    self._in_pressed_for_callback = False
            self._was_held = False
        elif self.was_pressed():
            self._pressed_event.set()

        self._time = now
        return self._current_state

    # -- state queries --------------------------------------------------

    def is_pressed(self) -> bool:
        return self._current_state

    def is_released(self) -> bool:
        return not self._current_state

    def was_pressed(self) -> bool:
        """Whether the last read saw the button go down."""
        return self._current_state and self._changed

    def was_pressed_for(self, duration: int) -> bool:
        """Whether the button has been held down for at least ``duration`` ms as of the last read."""
        return self._current_state and self._elapsed(self._time, self._last_change) >= duration

    def was_released(self) -> bool:
        """Whether the last read saw the button come up."""
        return not self._current_state and self._changed

    def was_released_for(self, duration: int) -> bool:
        """Whether the button has been up for at least ``duration`` ms as of the last read."""
        return not self._current_state and self._elapsed(self._time, self._last_change) >= duration

    # -- blocking waits -------------------------------------------------

    def _poll_until(self, condition: Callable[[], bool], timeout: float | None) -> bool:
        deadline = None if timeout is None else time.monotonic() + timeout
        while not condition():
            if deadline is not None and time.monotonic() >= deadline:
                return False
            self.read()
            time.sleep(_POLL_INTERVAL_S)
        return True

    def wait_for_press(self, timeout: float | None = None) -> bool:
        """Block until the button is pressed; return False if ``timeout`` seconds pass first."""
        if self._interrupt_enabled:
            self._pressed_event.clear()
            return self._pressed_event.wait(timeout)
        return self._poll_until(self.is_pressed, timeout)

    def wait_for_release(self, timeout: float | None = None) -> bool:
        """Block until the button is released; return False if ``timeout`` seconds pass first."""
        if self._interrupt_enabled:
            self._released_event.clear()
            return self._released_event.wait(timeout)
        return self._poll_until(self.is_released, timeout)