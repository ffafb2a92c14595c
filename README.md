# raytracer

A small path tracer. It reads a scene file that describes a camera and a set of
spheres and planes, traces 100 rays per pixel with diffuse ("flat") and
reflective ("metal") materials against a sky gradient, and writes the image as
a plain-text PPM (P3) to standard output.

## Installation

```
pip install .
```

## Usage

```
raytracer scene.cfg > image.ppm
raytracer --help
```

The same command is available as `python -m raytracer.cli`.

Progress is reported on standard error as `Rendering: N%`. The command exits
with status 0 on success and 84 on a usage error, an unreadable file, a
missing setting or a malformed scene.

## Scene file

The scene file uses a libconfig-style syntax (groups `{ }`, lists `( )`,
arrays `[ ]`, `#`, `//` and `/* */` comments). Three top-level settings are
required: `camera`, `primitives` and `lights`.

```
camera = {
    resolution = { width = 320; height = 180; };
    position = { x = 0; y = 0; z = 0; };
    fieldOfView = 90;
};

primitives = {
    spheres = (
        { x = 0; y = 0; z = -1; r = 1; color = { r = 200; g = 60; b = 60; }; mat = "F"; },
        { x = 2; y = 0; z = -2; r = 1; color = { r = 220; g = 220; b = 220; }; mat = "M"; }
    );
    planes = (
        { axis = "Z"; position = -1; color = { r = 90; g = 160; b = 90; }; mat = "F"; }
    );
};

lights = {};
```

* All camera values, sphere coordinates and radii, plane positions and colour
  components are integers. Colours are 0–255.
* `mat = "F"` is a flat, diffuse material; `mat = "M"` is metal (fuzz 0.1 on
  spheres, 1 on planes).
* A plane's `axis` chooses its normal: `"X"` gives a normal along x, `"Y"` a
  normal along z and `"Z"` a normal along y. The plane passes through the
  point `normal * position`.
* Sphere and plane entries with missing or invalid values are reported on
  standard error and skipped. A sphere without a `color` group is an error.
* Groups under `primitives` other than `spheres` and `planes` are ignored.
* When a ray meets several objects, the first one listed that it hits is used,
  not necessarily the nearest.

## Library use

```python
from raytracer.builder import Builder

builder = Builder("scene.cfg")
builder.load_primitives()
builder.load_camera()
builder.load_lights()
with open("image.ppm", "w") as out:
    builder.load_scene(out, samples=16, rng=None)
```

`Builder.render(samples, rng)` yields the image as rows of `(r, g, b)` tuples,
top row first, without writing anything. `raytracer.builder.ray_color` traces a
single ray through a world.

The building blocks are available on their own:

* `raytracer.vector.Vector3D` – immutable 3D vector with arithmetic, `dot`,
  `cross`, `normalized`, `reflect` and `parse`.
* `raytracer.ray.Ray` and `raytracer.camera.Camera`.
* `raytracer.materials` – `Flat`, `Metal` and `random_in_unit_sphere`.
* `raytracer.primitives` – `Sphere`, `Plane`, `Cube` (an axis-aligned box),
  `PrimitiveList` and `HitRecord`.
* `raytracer.registry.PrimitiveManager` – creates primitives by name
  (`"Sphere"` and `"Plane"` are registered; more can be added with `register`).
* `raytracer.sceneconfig` – `parse_config`, `load_config` and `lookup` for the
  scene file format.
* `raytracer.errors` – `RaytracerError` and its `ErrorType` kinds.

## What it does not do

* There is no preview window; the image is only written as PPM text.
* The `lights` group is read but not used: shading comes from the sky alone.
* Cubes can be built in code but cannot be described in a scene file.