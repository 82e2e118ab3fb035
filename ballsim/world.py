import logging
import threading
from enum import Enum

from .Vec2 import Vec2
from .collision import BroadPhase, collide_with_balls, collide_with_boundary
from .config import SimulationConfig
from .errors import ConfigurationError
from .ports import RenderPort, Scheduler
from .spawner import Spawner

logger = logging.getLogger(__name__)


class LoopState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class World:
    def __init__(self, renderer: RenderPort, config=None, balls=None, rng=None, broad_phase=None):
        """
        Build the arena and its balls.

        :param renderer: object with `clear()` and `draw_ball(position, radius, color)`.
        :param config: SimulationConfig; defaults are used when omitted.
        :param balls: an explicit starting layout. When omitted, `config.ball_count`
            balls are spawned without overlap.
        :param rng: random.Random used for spawning (defaults to one seeded from config).
        :param broad_phase: collision prefilter; a numpy BroadPhase by default.
        """
        if renderer is None:
            raise ConfigurationError("a render target is required")
        config = (config or SimulationConfig()).validate()

        self.renderer = renderer
        self.config = config
        self.width = float(config.width)
        self.height = float(config.height)
        self.spawner = Spawner(config, rng=rng)
        self.broad_phase = broad_phase if broad_phase is not None else BroadPhase()

        self.state = LoopState.STOPPED
        self.ticks = 0
        self._job = None
        self._lock = threading.RLock()
        self._ticking = False
        self._pending_clicks = []

        if balls is None:
            self.balls = self.spawner.spawn(config.ball_count)
        else:
            self.balls = list(balls)

    @property
    def running(self):
        return self.state is LoopState.RUNNING

    def start(self, scheduler: Scheduler):
        if self.running:
            logger.warning("start() ignored: simulation already running")
            return
        self._job = scheduler.schedule_interval(self.config.tick_interval, self.tick)
        self.state = LoopState.RUNNING
        logger.info("Simulation started at %g ticks/s with %d balls",
                    self.config.ticks_per_second, len(self.balls))

    def stop(self):
        if not self.running:
            return
        if self._job is not None:
            self._job.cancel()
            self._job = None
        self.state = LoopState.STOPPED
        logger.info("Simulation stopped after %d ticks", self.ticks)

    def update(self):
        """Advance the physics by one tick."""
        with self._lock:
            balls = self.balls
            for i in range(len(balls)):
                ball = balls[i]
                ball.update()
                collide_with_boundary(ball, self.width, self.height)
                collide_with_balls(ball, balls, self.broad_phase)

    def render(self):
        for ball in self.balls:
            self.renderer.draw_ball(ball.pos, ball.radius, ball.color)

    def tick(self):
        with self._lock:
            self._ticking = True
            try:
                self.renderer.clear()
                self.update()
                self.render()
                self.ticks += 1
            finally:
                self._ticking = False
            if self._pending_clicks:
                pending, self._pending_clicks = self._pending_clicks, []
                for point in pending:
                    self.remove_at(point)

    def remove_at(self, point):
        """
        Remove every ball whose circle contains `point` (arena coordinates).

        Called while a tick is running, the click is queued and applied as soon
        as the tick finishes. Returns the removed balls (empty when queued).
        """
        if not isinstance(point, Vec2):
            point = Vec2(point[0], point[1])
        with self._lock:
            if self._ticking:
                self._pending_clicks.append(point)
                return []
            hit = {i for i, ball in enumerate(self.balls) if ball.contains(point)}
            if not hit:
                return []
            removed = [self.balls[i] for i in sorted(hit)]
            self.balls[:] = [b for i, b in enumerate(self.balls) if i not in hit]
        logger.debug("Click at (%.1f, %.1f) removed %d ball(s), %d left",
                     point.x, point.y, len(removed), len(self.balls))
        return removed

    def respawn(self, n=None):
        """Throw away the current balls and spawn a fresh non-overlapping layout."""
        n = self.config.ball_count if n is None else n
        with self._lock:
            self.balls[:] = self.spawner.spawn(n)
        return self.balls

    def add_balls(self, n):
        """Spawn `n` more balls that do not overlap the existing ones."""
        with self._lock:
            self.spawner.spawn_into(self.balls, n)
        return self.balls

    def total_kinetic_energy(self):
        return sum(b.kinetic_energy() for b in self.balls)

    def total_momentum(self):
        total = Vec2(0.0, 0.0)
        for b in self.balls:
            total = total + b.momentum()
        return total

    def __repr__(self):
        return f"<World {self.width:g}x{self.height:g} balls={len(self.balls)} state={self.state.value} ticks={self.ticks}>"
