"""Scene objects that rays can hit."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .vector import Vector3D


@dataclass
class HitRecord:
    """Details of a ray-object intersection."""

    t: float = 0.0
    point: Vector3D = field(default_factory=Vector3D)
    normal: Vector3D = field(default_factory=Vector3D)
    front_face: bool = False
    material: object = None

    def set_face_normal(self, ray, outward_normal):
        """Orient the normal against the incoming ray."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else outward_normal * -1.0


class Primitive(ABC):
    """Anything that can be intersected by a ray."""

    @abstractmethod
    def hit(self, ray, t_min, t_max):
        """Return a :class:`HitRecord` for a hit within ``(t_min, t_max)``, else ``None``."""


class Sphere(Primitive):
    """Sphere defined by its centre and radius."""

    def __init__(self, centre, radius, material):
        self.centre = centre
        self.radius = radius.x if isinstance(radius, Vector3D) else float(radius)
        self.material = material

    def _record(self, ray, t):
        point = ray.at(t)
        rec = HitRecord(t=t, point=point, material=self.material)
        rec.set_face_normal(ray, (point - self.centre) / self.radius)
        return rec

    def hit(self, ray, t_min, t_max):
        oc = ray.origin - self.centre
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0:
            return None
        root = discriminant ** 0.5
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                return self._record(ray, t)
        return None

    def __repr__(self):
        return f"Sphere(centre={self.centre!r}, radius={self.radius!r})"


class Plane(Primitive):
    """Infinite plane through ``position`` with normal ``axis``."""

    def __init__(self, position, axis, material):
        self.position = position
        self.axis = axis
        self.material = material

    def hit(self, ray, t_min, t_max):
        denom = self.axis.dot(ray.direction)
        if abs(denom) <= 1e-6:
            return None
        t = (self.position - ray.origin).dot(self.axis) / denom
        if t < t_min or t > t_max:
            return None
        rec = HitRecord(t=t, point=ray.at(t), material=self.material)
        rec.set_face_normal(ray, self.axis)
        return rec

    def __repr__(self):
        return f"Plane(position={self.position!r}, axis={self.axis!r})"


class Cube(Primitive):
    """Axis-aligned box from ``position`` to ``position + size``.

    The slab test only accepts entry parameters in ``[0, 1]`` along the ray.
    """

    def __init__(self, position, size, material):
        self.position = position
        self.size = size
        self.material = material

    def hit(self, ray, t_min, t_max):
        inv_dir = Vector3D(1.0, 1.0, 1.0) / ray.direction
        t0 = (self.position - ray.origin) * inv_dir
        t1 = (self.position + self.size - ray.origin) * inv_dir
        lows = [min(a, b) for a, b in zip(t0, t1)]
        highs = [max(a, b) for a, b in zip(t0, t1)]
        t_near = max(max(lows[0], lows[1]), max(lows[2], 0.0))
        t_far = min(min(highs[0], highs[1]), min(highs[2], 1.0))
        if t_near < t_far and t_near < t_max and t_far > t_min:
            point = ray.at(t_near)
            rec = HitRecord(t=t_near, point=point, material=self.material)
            rec.set_face_normal(ray, (point - self.position).normalized())
            return rec
        return None

    def __repr__(self):
        return f"Cube(position={self.position!r}, size={self.size!r})"


class PrimitiveList(Primitive):
    """Collection of primitives hit in insertion order.

    The first primitive that reports a hit wins, whatever its distance.
    """

    def __init__(self, items=()):
        self._items = list(items)

    def add(self, primitive):
        self._items.append(primitive)

    def hit(self, ray, t_min, t_max):
        for item in self._items:
            rec = item.hit(ray, t_min, t_max)
            if rec is not None:
                return rec
        return None

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)