class BallSimError(Exception):
    """Base class for all errors raised by the simulation."""


class ConfigurationError(BallSimError, ValueError):
    """Invalid settings or a missing host surface, raised before any state is built."""


class DegenerateVectorError(BallSimError, ArithmeticError):
    """A zero-length (or non-finite) vector was normalized."""


class SpawnDensityError(BallSimError, RuntimeError):
    """The spawner could not place a ball without overlap within its retry budget."""

    def __init__(self, index, attempts, count):
        self.index = index
        self.attempts = attempts
        self.count = count
        super().__init__(
            f"could not place ball {index + 1} of {count} without overlap "
            f"after {attempts} attempts; lower the ball count or sizes"
        )
