from raytracer.ray import Ray
from raytracer.vector import Vector3D

ORIGIN = Vector3D(1, 2, 3)
DIRECTION = Vector3D(0.5, -1, 2)


def test_default_ray_is_zero():
    ray = Ray()
    assert ray.origin == Vector3D()
    assert ray.direction == Vector3D()


def test_at_zero_is_origin():
    assert Ray(ORIGIN, DIRECTION).at(0) == ORIGIN


def test_at_one_adds_direction():
    assert Ray(ORIGIN, DIRECTION).at(1) == ORIGIN + DIRECTION


def test_at_is_linear():
    ray = Ray(ORIGIN, DIRECTION)
    assert ray.at(3) - ray.at(2) == DIRECTION
    assert ray.at(-1) == ORIGIN - DIRECTION


def test_rays_compare_by_value():
    assert Ray(ORIGIN, DIRECTION) == Ray(Vector3D(1, 2, 3), Vector3D(0.5, -1, 2))
    assert Ray(ORIGIN, DIRECTION) != Ray(DIRECTION, ORIGIN)