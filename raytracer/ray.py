"""Rays cast through the scene."""

from dataclasses import dataclass, field

from .vector import Vector3D


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` going along ``direction``."""

    origin: Vector3D = field(default_factory=Vector3D)
    direction: Vector3D = field(default_factory=Vector3D)

    def at(self, t):
        """Return the point reached after travelling ``t`` directions."""
        return self.origin + t * self.direction