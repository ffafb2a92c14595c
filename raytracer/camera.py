"""Pinhole camera producing primary rays."""

import math

from .ray import Ray
from .vector import Vector3D


class Camera:
    """Camera with a resolution, an integer position and a vertical field of view."""

    def __init__(self, width, height, x, y, z, fov):
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.z = z
        self.fov = fov

        aspect_ratio = float(width) / float(height)
        theta = fov * math.pi / 180.0
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        self.lower_left_corner = Vector3D(-half_width, -half_height, -1.0)
        self.horizontal = Vector3D(2 * half_width, 0.0, 0.0)
        self.vertical = Vector3D(0.0, 2 * half_height, 0.0)
        self.origin = Vector3D(x, y, z)

    def ray(self, u, v):
        """Return the ray through the viewport point at fractions ``u``, ``v``."""
        return Ray(
            self.origin,
            self.lower_left_corner + u * self.horizontal + v * self.vertical - self.origin,
        )

    def __repr__(self):
        return (
            f"Camera(width={self.width}, height={self.height}, x={self.x}, "
            f"y={self.y}, z={self.z}, fov={self.fov})"
        )