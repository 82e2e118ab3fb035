from .Vec2 import Vec2, distance
from .Ball import Ball
from .config import SimulationConfig, load_config
from .errors import BallSimError, ConfigurationError, DegenerateVectorError, SpawnDensityError
from .spawner import Spawner
from .world import LoopState, World
