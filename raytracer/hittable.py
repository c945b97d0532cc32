"""Objects a ray can hit: spheres and lists of objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from raytracer.ray import Ray
from raytracer.vec3 import Point3, Vec3

if TYPE_CHECKING:
    from raytracer.material import Material


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray met a surface."""

    t: float
    point: Point3
    normal: Vec3
    material: "Material"


class Hittable(ABC):
    """Anything that can be intersected by a ray."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the nearest hit with ``t_min < t < t_max``, or None."""


@dataclass
class HittableList(Hittable):
    """A collection of objects hit as one."""

    objects: list[Hittable] = field(default_factory=list)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest


@dataclass
class Sphere(Hittable):
    center: Point3
    radius: float
    material: "Material"

    def _record(self, ray: Ray, t: float) -> HitRecord:
        point = ray.at(t)
        normal = (point - self.center) / self.radius
        return HitRecord(t, point, normal, self.material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        direction = ray.direction
        a = direction.dot(direction)
        half_b = oc.dot(direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant <= 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        for root in ((-half_b - sqrtd) / a, (-half_b + sqrtd) / a):
            if t_min < root < t_max:
                return self._record(ray, root)
        return None