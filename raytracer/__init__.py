"""A simple path-tracing renderer that turns a scene file into a PPM image."""

__version__ = "0.1.0"