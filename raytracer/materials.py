"""Surface materials deciding how rays scatter after a hit."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .ray import Ray
from .vector import Vector3D

_default_rng = random.Random()


def random_in_unit_sphere(rng=None):
    """Return a random point strictly inside the unit sphere."""
    rng = rng or _default_rng
    while True:
        point = Vector3D(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        if point.dot(point) < 1.0:
            return point


class Material(ABC):
    """A surface that may scatter incoming rays."""

    @abstractmethod
    def scatter(self, ray_in, rec, rng=None):
        """Return ``(attenuation, scattered_ray)``, or ``None`` if the ray is absorbed."""


@dataclass
class Flat(Material):
    """Diffuse (Lambertian) material."""

    albedo: Vector3D

    def scatter(self, ray_in, rec, rng=None):
        direction = rec.normal + random_in_unit_sphere(rng)
        if direction.dot(direction) < 0.001:
            direction = rec.normal
        return self.albedo, Ray(rec.point, direction)


class Metal(Material):
    """Reflective material with optional fuzziness, capped at 1."""

    def __init__(self, albedo, fuzz=0.0):
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1

    def scatter(self, ray_in, rec, rng=None):
        reflected = self.reflect(ray_in.direction.normalized(), rec.normal)
        scattered = Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)
        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered
        return None

    def reflect(self, v, n):
        """Mirror ``v`` about the normal ``n``."""
        return v - n * 2.0 * v.dot(n)

    def __repr__(self):
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz!r})"