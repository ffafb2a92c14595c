"""Three-component vector used for points, directions and colours."""

import math
from dataclasses import dataclass
from numbers import Real


def _divide(a, b):
    """Divide following IEEE semantics instead of raising on zero."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass(frozen=True)
class Vector3D:
    """Immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalized(self):
        """Return the unit vector; a zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            return Vector3D(self.x / length, self.y / length, self.z / length)
        return self

    @staticmethod
    def reflect(incident, normal):
        return incident - normal * 2.0 * incident.dot(normal)

    @staticmethod
    def parse(text):
        """Read a vector from three whitespace-separated numbers."""
        parts = text.split()
        if len(parts) < 3:
            raise ValueError(f"expected three components, got {len(parts)}")
        return Vector3D(*(float(part) for part in parts[:3]))

    def __add__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector3D(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D(
                _divide(self.x, other.x),
                _divide(self.y, other.y),
                _divide(self.z, other.z),
            )
        if isinstance(other, Real):
            return Vector3D(
                _divide(self.x, other),
                _divide(self.y, other),
                _divide(self.z, other),
            )
        return NotImplemented

    def __neg__(self):
        return Vector3D(-self.x, -self.y, -self.z)

    def __lt__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.length() < other.length()

    def __le__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.length() <= other.length()

    def __gt__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.length() > other.length()

    def __ge__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.length() >= other.length()

    def __str__(self):
        return f"{self.x:g} {self.y:g} {self.z:g}"