"""Lookup of primitive factories by name."""

from .errors import ErrorType, RaytracerError
from .primitives import Plane, Sphere


class PrimitiveManager:
    """Creates primitives from registered factories.

    ``Sphere`` and ``Plane`` are available out of the box.
    """

    def __init__(self):
        self._factories = {}
        self.register("Sphere", Sphere)
        self.register("Plane", Plane)

    def register(self, name, factory):
        """Make ``factory`` available under ``name``."""
        if not callable(factory):
            raise RaytracerError(ErrorType.DL_ERROR_INVALID_FUNCTION)
        self._factories[name] = factory

    def create_primitive(self, name, *args):
        """Build the primitive registered as ``name`` from ``args``."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"Primitive not found: {name}") from None
        return factory(*args)

    def __contains__(self, name):
        return name in self._factories