"""Two-axis analog joystick with persisted calibration."""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Callable

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_JOYSTICK_CONFIG",
    "JoystickConfig",
    "ConfigStore",
    "Joystick",
]

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "js_cfg"

ReadRaw = Callable[[], int]


@dataclass(frozen=True)
class JoystickConfig:
    """Raw reading limits and resting positions of both axes."""

    x_max: int = 3903
    x_min: int = 0
    x_rest: int = 1745
    y_max: int = 3813
    y_min: int = 0
    y_rest: int = 1651


DEFAULT_JOYSTICK_CONFIG = JoystickConfig()


class ConfigStore:
    """Named joystick configurations kept in a JSON file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("configuration file does not hold an object")
        return data

    def load(self, name: str) -> JoystickConfig | None:
        """Return the configuration stored under ``name``, or None if there is none usable."""
        try:
            data = self._read_all()
        except (OSError, ValueError) as exc:
            _log.warning("Error (%s) opening configuration store", exc)
            return None
        entry = data.get(name)
        if entry is None:
            _log.warning("No configuration found, using default")
            return None
        names = {f.name for f in fields(JoystickConfig)}
        if (
            not isinstance(entry, dict)
            or set(entry) != names
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in entry.values())
        ):
            _log.error("Error reading configuration %r: malformed entry", name)
            return None
        _log.info("Found joystick configuration")
        return JoystickConfig(**entry)

    def save(self, name: str, config: JoystickConfig) -> None:
        """Store ``config`` under ``name``, replacing any earlier one."""
        try:
            data = self._read_all()
        except ValueError:
            data = {}
        data[name] = asdict(config)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


def _normalise(raw: int, low: int, rest: int, high: int, deadband: float) -> float:
    delta = raw - rest
    span = (high - rest) if raw > rest else (rest - low)
    if span == 0:
        out = math.copysign(1.0, delta) if delta else 0.0
    else:
        out = delta / span
    out = max(-1.0, min(1.0, out))
    if abs(out) < deadband:
        out = 0.0
    return out


class Joystick:
    """An analog joystick read through two raw-value callables.

    Calibration is loaded from ``store`` under the default configuration
    name; without a stored entry the default configuration is used and the
    joystick counts as uncalibrated. The deadband defaults to 0.05.
    """

    def __init__(
        self,
        read_x: ReadRaw,
        read_y: ReadRaw,
        store: ConfigStore | None = None,
    ) -> None:
        self._read_x = read_x
        self._read_y = read_y
        self.deadband = 0.05
        self.x_raw = 0
        self.y_raw = 0
        loaded = store.load(DEFAULT_CONFIG_NAME) if store is not None else None
        self._calibrated = loaded is not None
        self.config = loaded if loaded is not None else DEFAULT_JOYSTICK_CONFIG

    def __repr__(self) -> str:
        return f"Joystick(x_raw={self.x_raw}, y_raw={self.y_raw}, calibrated={self._calibrated})"

    def read(self) -> None:
        """Sample both axes."""
        self.x_raw = int(self._read_x())
        self.y_raw = int(self._read_y())

    def x(self) -> float:
        """Return the X position of the last sample, in [-1, 1]."""
        c = self.config
        return _normalise(self.x_raw, c.x_min, c.x_rest, c.x_max, self.deadband)

    def y(self) -> float:
        """Return the Y position of the last sample, in [-1, 1]."""
        c = self.config
        return _normalise(self.y_raw, c.y_min, c.y_rest, c.y_max, self.deadband)

    def is_calibrated(self) -> bool:
        """Whether a stored configuration was found."""
        return self._calibrated