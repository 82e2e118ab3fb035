import math

from .errors import DegenerateVectorError


class Vec2:
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sq(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        l = self.length()
        if l == 0.0 or not math.isfinite(l):
            raise DegenerateVectorError(f"cannot normalize {self!r}")
        return Vec2(self.x / l, self.y / l)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def rotate(self, angle):
        # both components come from the unrotated input
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def reflect(self, normal):
        """Mirror this vector about a surface with the given normal."""
        n = normal.normalize()
        return self - n * (2.0 * self.dot(n))

    def distance_to(self, other):
        return (self - other).length()

    def scale_ip(self, k):
        """Scale in place and return self; every other operation returns a new Vec2."""
        self.x *= k
        self.y *= k
        return self

    @staticmethod
    def random(x_range, y_range, rng):
        """Uniform sample of the rectangle x_range × y_range, each given as (lo, hi)."""
        return Vec2(rng.uniform(x_range[0], x_range[1]), rng.uniform(y_range[0], y_range[1]))

    def copy(self):
        return Vec2(self.x, self.y)

    def to_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"


def distance(a, b):
    return (a - b).length()
