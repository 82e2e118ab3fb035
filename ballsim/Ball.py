from .Vec2 import Vec2


class Ball:
    def __init__(self, pos, vel=None, radius=10.0, color=(255, 255, 255)):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        if vel is None:
            self.vel = Vec2(0.0, 0.0)
        else:
            self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2(vel[0], vel[1])

        # bigger balls are heavier: mass is tied to the radius
        self._radius = float(radius)
        self._mass = self._radius
        self._color = tuple(color)

    @property
    def radius(self):
        return self._radius

    @property
    def mass(self):
        return self._mass

    @property
    def color(self):
        return self._color

    def update(self):
        # one tick is one unit of time
        self.pos = self.pos + self.vel

    def contains(self, point):
        return self.pos.distance_to(point) <= self._radius

    def kinetic_energy(self):
        return 0.5 * self._mass * self.vel.length_sq()

    def momentum(self):
        return self.vel * self._mass

    def __repr__(self):
        return f"Ball(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), radius={self.radius:.2f}, mass={self.mass:.2f})"

    def __str__(self):
        return self.__repr__()

    def to_dict(self):
        return {
            'pos': (self.pos.x, self.pos.y),
            'vel': (self.vel.x, self.vel.y),
            'radius': self.radius,
            'mass': self.mass,
            'color': self.color
        }
