import math
import random

import pytest

from raytracer.hittable import HitRecord
from raytracer.material import (
    Dielectric,
    Lambertian,
    Material,
    Metal,
    random_in_unit_sphere,
    reflect,
    refract,
    schlick,
)
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


UP = Vec3(0.0, 1.0, 0.0)
POINT = Vec3(0.0, 0.0, 0.0)


class _FixedRng:
    """Returns the same value from random(); uniform() gives the midpoint."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return (a + b) / 2.0


def _close(a, b):
    return all(math.isclose(p, q, abs_tol=1e-9) for p, q in zip(a, b))


def _record(material, normal=UP):
    return HitRecord(1.0, POINT, normal, material)


def test_random_in_unit_sphere_stays_inside():
    rng = random.Random(7)
    assert all(random_in_unit_sphere(rng).length_squared() < 1.0 for _ in range(500))


def test_reflect_flips_normal_component():
    assert reflect(Vec3(1.0, -1.0, 0.0), UP) == Vec3(1.0, 1.0, 0.0)


def test_reflect_twice_is_identity_and_preserves_length():
    v = Vec3(0.3, -2.0, 1.5)
    assert _close(reflect(reflect(v, UP), UP), v)
    assert math.isclose(reflect(v, UP).length(), v.length())


def test_refract_with_equal_indices_goes_straight():
    v = Vec3(0.4, -1.0, 0.2)
    refracted = refract(v, UP, 1.0)
    assert refracted is not None
    assert tuple(refracted) == pytest.approx(tuple(v.unit_vector()), abs=1e-9)


def test_refracted_direction_is_unit_length():
    refracted = refract(Vec3(0.5, -1.0, 0.0), UP, 1.0 / 1.5)
    assert math.isclose(refracted.length(), 1.0)


def test_total_internal_reflection_returns_none():
    assert refract(Vec3(1.0, -0.1, 0.0), UP, 1.5) is None


def test_schlick_at_grazing_angle_is_full_reflection():
    assert math.isclose(schlick(0.0, 1.5), 1.0)


def test_schlick_matching_indices_head_on_is_zero():
    assert schlick(1.0, 1.0) == 0.0


def test_lambertian_scatter_around_normal():
    albedo = Vec3(0.2, 0.4, 0.6)
    rng = random.Random(3)
    mat = Lambertian(albedo)
    for _ in range(100):
        attenuation, scattered = mat.scatter(Ray(Vec3(0.0, 5.0, 0.0), -UP), _record(mat), rng)
        assert attenuation == albedo
        assert scattered.origin == POINT
        assert (scattered.direction - UP).length_squared() < 1.0


@pytest.mark.parametrize("given, expected", [(5.0, 1.0), (-1.0, 0.0), (0.3, 0.3)])
def test_metal_fuzz_is_clamped(given, expected):
    assert Metal(Vec3(1.0, 1.0, 1.0), given).fuzz == expected


def test_metal_without_fuzz_reflects_mirror_like():
    mat = Metal(Vec3(0.7, 0.6, 0.5), 0.0)
    direction = Vec3(1.0, -1.0, 0.0)
    attenuation, scattered = mat.scatter(Ray(POINT, direction), _record(mat), random.Random(1))
    assert attenuation == mat.albedo
    assert _close(scattered.direction, reflect(direction.unit_vector(), UP))


def test_metal_absorbs_ray_reflected_below_surface():
    mat = Metal(Vec3(0.7, 0.6, 0.5), 0.0)
    assert mat.scatter(Ray(POINT, UP), _record(mat), random.Random(1)) is None


def test_dielectric_head_on_refracts_straight_through():
    mat = Dielectric(1.5)
    direction = Vec3(0.0, -1.0, 0.0)
    attenuation, scattered = mat.scatter(Ray(POINT, direction), _record(mat), _FixedRng(0.99))
    assert attenuation == Vec3(1.0, 1.0, 1.0)
    assert _close(scattered.direction, direction)


def test_dielectric_low_draw_reflects():
    mat = Dielectric(1.5)
    direction = Vec3(0.0, -1.0, 0.0)
    _, scattered = mat.scatter(Ray(POINT, direction), _record(mat), _FixedRng(0.0))
    assert scattered.direction == reflect(direction, UP)


def test_dielectric_total_internal_reflection_always_reflects():
    mat = Dielectric(1.5)
    direction = Vec3(1.0, 0.1, 0.0)
    _, scattered = mat.scatter(Ray(POINT, direction), _record(mat), _FixedRng(0.99))
    assert scattered.direction == reflect(direction, UP)
    assert scattered.origin == POINT


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()