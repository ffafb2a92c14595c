"""Scene assembly from a configuration file and rendering to PPM."""

import math
import random
import sys

from .camera import Camera
from .errors import ErrorType, RaytracerError
from .materials import Flat, Metal
from .primitives import PrimitiveList
from .registry import PrimitiveManager
from .sceneconfig import ConfigError, SettingNotFoundError, load_config, lookup
from .vector import Vector3D

MAX_DEPTH = 50
T_MIN = 0.001
T_MAX = 3.4028234663852886e38
DEFAULT_SAMPLES = 100
SPHERE_METAL_FUZZ = 0.1
PLANE_METAL_FUZZ = 1

_SKY_BOTTOM = Vector3D(1.0, 1.0, 1.0)
_SKY_TOP = Vector3D(0.5, 0.7, 1.0)
_BLACK = Vector3D(0.0, 0.0, 0.0)

# Plane normals by axis name; the plane sits at ``normal * position``.
_PLANE_AXES = {
    "X": Vector3D(1, 0, 0),
    "Y": Vector3D(0, 0, 1),
    "Z": Vector3D(0, 1, 0),
}


def _warn(message):
    print(message, file=sys.stderr)


def _int_value(setting, name):
    value = setting.get(name) if isinstance(setting, dict) else None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _str_value(setting, name):
    value = setting.get(name) if isinstance(setting, dict) else None
    return value if isinstance(value, str) else None


def _require_int(setting, name):
    value = lookup(setting, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"setting {name!r} must be an integer")
    return value


def _children(setting):
    if isinstance(setting, dict):
        return list(setting.values())
    if isinstance(setting, list):
        return setting
    return []


def _albedo(r, g, b):
    return Vector3D(r / 255.0, g / 255.0, b / 255.0)


def _material(kind, albedo, metal_fuzz):
    if kind == "F":
        return Flat(albedo)
    if kind == "M":
        return Metal(albedo, metal_fuzz)
    return None


def ray_color(ray, world, depth=0, rng=None):
    """Trace ``ray`` through ``world`` and return the colour it carries back."""
    attenuation = Vector3D(1.0, 1.0, 1.0)
    while True:
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            t = 0.5 * (ray.direction.y + 1.0)
            return attenuation * ((1.0 - t) * _SKY_BOTTOM + t * _SKY_TOP)
        if depth >= MAX_DEPTH:
            return _BLACK
        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return _BLACK
        albedo, ray = scattered
        attenuation = attenuation * albedo
        depth += 1


class Builder:
    """Loads a scene description and renders it."""

    def __init__(self, path):
        try:
            self.config = load_config(path)
            self.primitives = lookup(self.config, "primitives")
            self.lights = lookup(self.config, "lights")
            self.camera = lookup(self.config, "camera")
        except OSError as exc:
            _warn(f"File I/O error: {exc}")
            raise RaytracerError(ErrorType.FILE_NOT_FOUND) from exc
        except SettingNotFoundError as exc:
            _warn(f"Setting not found: {exc.path}")
            raise RaytracerError(ErrorType.UNKNOWN_ERROR) from exc
        except ConfigError as exc:
            _warn(f"Config error: {exc}")
            raise RaytracerError(ErrorType.FILE_NOT_FOUND) from exc
        self.loaded_primitives = []
        self.loaded_lights = {}
        self.cam = None
        self._manager = PrimitiveManager()

    def load_primitives(self):
        """Create the spheres and planes described under ``primitives``.

        Entries that cannot be read are reported and skipped; a sphere
        without a ``color`` group raises :class:`SettingNotFoundError`.
        """
        if not isinstance(self.primitives, dict):
            return
        builders = {"spheres": self._build_sphere, "planes": self._build_plane}
        for list_name, entries in self.primitives.items():
            build = builders.get(list_name)
            if build is None:
                continue
            for entry in _children(entries):
                primitive = build(entry)
                if primitive is not None:
                    self.loaded_primitives.append(primitive)

    def _build_sphere(self, entry):
        values = []
        for key, label in (("x", "x"), ("y", "y"), ("z", "z"), ("r", "radius")):
            value = _int_value(entry, key)
            if value is None:
                _warn(f"Failed to read {label} value")
                return None
            values.append(value)
        x, y, z, radius = values
        color = lookup(entry, "color")
        albedo = _albedo(*(_int_value(color, key) or 0 for key in "rgb"))
        material = _material(_str_value(entry, "mat"), albedo, SPHERE_METAL_FUZZ)
        if material is None:
            _warn("Invalid material type")
            return None
        return self._manager.create_primitive(
            "Sphere", Vector3D(x, y, z), Vector3D(radius, radius, radius), material
        )

    def _build_plane(self, entry):
        axis_name = _str_value(entry, "axis")
        if axis_name is None:
            _warn("Failed to read axis value")
            return None
        position = _int_value(entry, "position")
        if position is None:
            _warn("Failed to read position value")
            return None
        axis = _PLANE_AXES.get(axis_name)
        if axis is None:
            _warn("Invalid axis name")
            return None
        try:
            color = lookup(entry, "color")
        except SettingNotFoundError as exc:
            _warn(f"Setting not found: {exc.path}")
            return None
        rgb = [_int_value(color, key) for key in "rgb"]
        if None in rgb:
            _warn("Failed to read color values")
            return None
        material = _material(_str_value(entry, "mat"), _albedo(*rgb), PLANE_METAL_FUZZ)
        if material is None:
            _warn("Invalid material type")
            return None
        return self._manager.create_primitive("Plane", axis * position, axis, material)

    def load_camera(self):
        """Build the camera from the ``camera`` group."""
        resolution = lookup(self.camera, "resolution")
        position = lookup(self.camera, "position")
        width = _require_int(resolution, "width")
        height = _require_int(resolution, "height")
        x = _require_int(position, "x")
        y = _require_int(position, "y")
        z = _require_int(position, "z")
        fov = _require_int(self.camera, "fieldOfView")
        if width <= 0 or height <= 0:
            raise RaytracerError(ErrorType.INVALID_SIZE)
        self.cam = Camera(width, height, x, y, z, fov)

    def load_lights(self):
        """Keep the ``lights`` group; shading does not use it."""
        self.loaded_lights = dict(self.lights) if isinstance(self.lights, dict) else {}

    def render(self, samples=DEFAULT_SAMPLES, rng=None):
        """Yield rows of ``(r, g, b)`` pixels, top row first."""
        if self.cam is None:
            raise RaytracerError(ErrorType.INVALID_STATE)
        if samples < 1:
            raise ValueError("samples must be at least 1")
        rng = rng or random.Random()
        world = PrimitiveList(self.loaded_primitives)
        cam = self.cam
        for i in range(cam.height - 1, -1, -1):
            row = []
            for j in range(cam.width):
                total = Vector3D()
                for _ in range(samples):
                    u = (j + rng.random()) / cam.width
                    v = (i + rng.random()) / cam.height
                    total = total + ray_color(cam.ray(u, v), world, 0, rng)
                average = total / float(samples)
                row.append(tuple(int(255.99 * math.sqrt(c)) for c in average))
            yield row

    def load_scene(self, out=None, samples=DEFAULT_SAMPLES, rng=None):
        """Render the scene as a plain PPM image to ``out``, reporting progress."""
        if self.cam is None:
            raise RaytracerError(ErrorType.INVALID_STATE)
        out = sys.stdout if out is None else out
        height = self.cam.height
        out.write(f"P3\n{self.cam.width} {height}\n255\n")
        progress = 0
        for done, row in enumerate(self.render(samples, rng), start=1):
            percent = done * 100 // height
            if percent > progress:
                progress = percent
                sys.stderr.write(f"\rRendering: {progress}%")
                sys.stderr.flush()
            for r, g, b in row:
                out.write(f"{r} {g} {b}\n")
        sys.stderr.write("\n")

    def load_all(self, out=None):
        """Load everything from the scene file and render it."""
        self.load_primitives()
        self.load_camera()
        self.load_lights()
        self.load_scene(out)