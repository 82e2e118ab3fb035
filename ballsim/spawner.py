import logging
import random

from .Ball import Ball
from .Vec2 import Vec2
from .errors import DegenerateVectorError, SpawnDensityError

logger = logging.getLogger(__name__)


def random_color(rng):
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


class Spawner:
    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

    def get_random_pos(self):
        # inset by the largest possible radius, whatever the ball's own size
        inset = self.config.max_size
        return Vec2.random((inset, self.config.width - inset),
                           (inset, self.config.height - inset), self.rng)

    def get_random_speed(self):
        return self.rng.uniform(self.config.min_speed, self.config.max_speed)

    def get_random_dir(self):
        # sampled from the square, not the circle, so diagonals are favoured
        while True:
            try:
                return Vec2.random((-1, 1), (-1, 1), self.rng).normalize()
            except DegenerateVectorError:
                continue

    def get_random_size(self):
        return self.rng.uniform(self.config.min_size, self.config.max_size)

    def make_ball(self):
        return Ball(
            self.get_random_pos(),
            self.get_random_dir().scale_ip(self.get_random_speed()),
            self.get_random_size(),
            color=random_color(self.rng),
        )

    def will_collide(self, ball, balls):
        for other in balls:
            if ball.pos.distance_to(other.pos) < ball.radius + other.radius:
                return True
        return False

    def place(self, ball, balls, index=0, count=1):
        """Re-draw the ball's position until it overlaps nothing in `balls`."""
        for _ in range(self.config.max_spawn_attempts):
            ball.pos = self.get_random_pos()
            if not self.will_collide(ball, balls):
                return ball
        raise SpawnDensityError(index, self.config.max_spawn_attempts, count)

    def spawn_into(self, balls, n):
        """Append `n` new balls to `balls`, none overlapping anything already there."""
        start = len(balls)
        for i in range(n):
            ball = self.make_ball()
            self.place(ball, balls, index=start + i, count=start + n)
            balls.append(ball)
        logger.debug("Placed %d balls (%d total)", n, len(balls))
        return balls

    def spawn(self, n=None):
        n = self.config.ball_count if n is None else n
        balls = self.spawn_into([], n)
        logger.info("Spawned %d balls in a %gx%g arena", len(balls), self.config.width, self.config.height)
        return balls
