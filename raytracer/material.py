"""Surface materials and the scattering helpers they use."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from raytracer.ray import Ray
from raytracer.vec3 import Color, Vec3

if TYPE_CHECKING:
    from raytracer.hittable import HitRecord

Scatter = Optional[tuple[Color, Ray]]


def random_in_unit_sphere(rng: random.Random) -> Vec3:
    """Return a uniformly chosen point strictly inside the unit sphere."""
    while True:
        p = Vec3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2.0 * v.dot(n) * n


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Optional[Vec3]:
    """Refract ``v`` through a surface with normal ``n``; None on total internal reflection."""
    uv = v.unit_vector()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0.0:
        return ni_over_nt * (uv - n * dt) - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 *= r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


class Material(ABC):
    @abstractmethod
    def scatter(self, ray_in: Ray, rec: "HitRecord", rng: random.Random) -> Scatter:
        """Return (attenuation, scattered ray), or None if the ray is absorbed."""


@dataclass
class Lambertian(Material):
    albedo: Color

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng: random.Random) -> Scatter:
        target = rec.point + rec.normal + random_in_unit_sphere(rng)
        return self.albedo, Ray(rec.point, target - rec.point)


@dataclass
class Metal(Material):
    albedo: Color
    fuzz: float = field(default=0.0)

    def __post_init__(self) -> None:
        self.fuzz = max(self.fuzz, 0.0) if self.fuzz < 1.0 else 1.0

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng: random.Random) -> Scatter:
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.point, reflected + self.fuzz * random_in_unit_sphere(rng))
        if scattered.direction.dot(rec.normal) > 0.0:
            return self.albedo, scattered
        return None


@dataclass
class Dielectric(Material):
    ref_idx: float

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng: random.Random) -> Scatter:
        attenuation = Vec3(1.0, 1.0, 1.0)
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        incidence = direction.dot(rec.normal)

        if incidence > 0.0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * incidence / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -incidence / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            reflect_prob = 1.0
        else:
            reflect_prob = max(min(schlick(cosine, self.ref_idx), 1.0), 0.0)

        if refracted is None or rng.random() < reflect_prob:
            return attenuation, Ray(rec.point, reflected)
        return attenuation, Ray(rec.point, refracted)