import math

import numpy as np

from .Vec2 import Vec2


def collide_with_boundary(ball, width, height):
    """
    Bounce a ball off the arena walls, x axis first, then y.

    The wall test rounds the leading edge up with ceil, so a ball may poke up to
    one unit past a wall before it is reflected. On reflection the velocity
    component flips and the ball is clamped tangent to that wall.
    Returns True if any wall was hit.
    """
    hit = False
    r = ball.radius
    if math.ceil(ball.pos.x - r) < 0:
        ball.vel.x *= -1
        ball.pos.x = r
        hit = True
    elif math.ceil(ball.pos.x + r) > width:
        ball.vel.x *= -1
        ball.pos.x = width - r
        hit = True
    if math.ceil(ball.pos.y - r) < 0:
        ball.vel.y *= -1
        ball.pos.y = r
        hit = True
    elif math.ceil(ball.pos.y + r) > height:
        ball.vel.y *= -1
        ball.pos.y = height - r
        hit = True
    return hit


def detect_ball_collision(a, b):
    """True if the two circles overlap."""
    return a.pos.distance_to(b.pos) - (a.radius + b.radius) < 0


def resolve_ball_collision(a, b):
    """
    Elastic collision of two balls of unequal mass.

    Velocities are rotated so the line of centers lies on the x axis, the 1D
    elastic exchange is applied along it and the result is rotated back.
    Nothing happens when the balls are already separating. Positions are never
    touched, so overlapping balls drift apart through velocity alone.
    Returns True if the velocities were changed.
    """
    vel_diff = a.vel - b.vel
    pos_diff = b.pos - a.pos
    if vel_diff.dot(pos_diff) < 0:
        return False

    angle = -math.atan2(b.pos.y - a.pos.y, b.pos.x - a.pos.x)

    ma = a.mass
    mb = b.mass
    total_mass = ma + mb
    mass_diff = ma - mb

    u1 = a.vel.rotate(angle)
    u2 = b.vel.rotate(angle)

    v1x = u1.x * mass_diff / total_mass + u2.x * 2 * mb / total_mass
    # 2 * ma, not 2 * mb: with unequal masses only this keeps momentum conserved
    v2x = u2.x * (-mass_diff) / total_mass + u1.x * 2 * ma / total_mass

    v1 = Vec2(v1x, u1.y).rotate(-angle)
    v2 = Vec2(v2x, u2.y).rotate(-angle)

    a.vel.x = v1.x
    a.vel.y = v1.y
    b.vel.x = v2.x
    b.vel.y = v2.y
    return True


class BroadPhase:
    """
    Vectorized overlap prefilter for large populations.

    Candidates are picked with numpy using a small safety margin and handed
    back in collection order, so the exact scalar test still decides every
    collision and results match the plain pairwise scan.
    """
    def __init__(self, threshold=64, margin=1e-3):
        self.threshold = int(threshold)
        self.margin = float(margin)

    def applies(self, balls):
        return len(balls) > self.threshold

    def candidates(self, ball, balls):
        pos_x = np.fromiter((b.pos.x for b in balls), dtype=np.float64, count=len(balls))
        pos_y = np.fromiter((b.pos.y for b in balls), dtype=np.float64, count=len(balls))
        radii = np.fromiter((b.radius for b in balls), dtype=np.float64, count=len(balls))

        dx = pos_x - ball.pos.x
        dy = pos_y - ball.pos.y
        rsum = radii + ball.radius + self.margin
        mask = dx * dx + dy * dy < rsum * rsum
        return [int(k) for k in np.nonzero(mask)[0]]


def collide_with_balls(ball, balls, broad_phase=None):
    """
    Resolve `ball` against every other ball, in collection order.
    Returns the number of resolved collisions.
    """
    if broad_phase is not None and broad_phase.applies(balls):
        others = (balls[k] for k in broad_phase.candidates(ball, balls))
    else:
        others = balls

    resolved = 0
    for other in others:
        if other is ball:
            continue
        if detect_ball_collision(ball, other) and resolve_ball_collision(ball, other):
            resolved += 1
    return resolved
