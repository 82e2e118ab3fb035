"""
Simulation settings.

Defaults come from the top-level ``constants`` module. A ``SimulationConfig``
is validated once, when a ``World`` is built, and is never mutated afterwards.
"""
import json
import logging
import math
import numbers
from dataclasses import dataclass, fields, replace as _replace
from typing import Optional, Tuple

import constants
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


_REAL_FIELDS = ('width', 'height', 'ticks_per_second', 'min_size', 'max_size', 'min_speed', 'max_speed')
_INT_FIELDS = ('ball_count', 'max_spawn_attempts')


@dataclass(frozen=True)
class SimulationConfig:
    ball_count: int = constants.DEFAULT_BALLS
    width: float = constants.WIDTH
    height: float = constants.HEIGHT
    ticks_per_second: float = constants.FPS
    min_size: float = constants.MIN_BALL_SIZE
    max_size: float = constants.MAX_BALL_SIZE
    min_speed: float = constants.MIN_BALL_SPEED
    max_speed: float = constants.MAX_BALL_SPEED
    max_spawn_attempts: int = constants.MAX_SPAWN_ATTEMPTS
    seed: Optional[int] = None
    background: Tuple[int, int, int] = constants.BACKGROUND_COLOR

    @property
    def tick_interval(self) -> float:
        """Seconds between two ticks."""
        return 1.0 / self.ticks_per_second

    def validate(self) -> "SimulationConfig":
        for name in _REAL_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value!r}")
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)):
            raise ConfigurationError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.background, (tuple, list)) or len(self.background) != 3 or not all(
                isinstance(c, numbers.Integral) and not isinstance(c, bool) and 0 <= c <= 255 for c in self.background):
            raise ConfigurationError(f"background must be three integers in 0..255, got {self.background!r}")

        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"arena must have positive dimensions, got {self.width}x{self.height}")
        if self.ticks_per_second <= 0:
            raise ConfigurationError(f"ticks_per_second must be positive, got {self.ticks_per_second}")
        if self.ball_count < 0:
            raise ConfigurationError(f"ball_count cannot be negative, got {self.ball_count}")
        if self.min_size <= 0 or self.min_size > self.max_size:
            raise ConfigurationError(f"invalid size range [{self.min_size}, {self.max_size}]")
        if self.min_speed < 0 or self.min_speed > self.max_speed:
            raise ConfigurationError(f"invalid speed range [{self.min_speed}, {self.max_speed}]")
        if self.max_spawn_attempts < 1:
            raise ConfigurationError("max_spawn_attempts must be at least 1")
        # spawn positions are inset by the largest radius on every side
        if self.ball_count > 0 and (self.width < 2 * self.max_size or self.height < 2 * self.max_size):
            raise ConfigurationError(
                f"arena {self.width}x{self.height} is too small for balls of radius {self.max_size}"
            )
        return self

    def replace(self, **overrides) -> "SimulationConfig":
        return _replace(self, **overrides)


def load_config(path: str, **overrides) -> SimulationConfig:
    """
    Read a JSON object of SimulationConfig fields from `path`.

    Keyword overrides win over the file; None overrides are ignored so that
    unset command-line options fall through.
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{path}: not valid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"{path}: unknown settings {', '.join(unknown)}")

    if isinstance(data.get('background'), list):
        data['background'] = tuple(data['background'])
    data.update({k: v for k, v in overrides.items() if v is not None})

    config = SimulationConfig(**data).validate()
    logger.info("Loaded configuration from %s", path)
    return config
