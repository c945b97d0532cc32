"""A thin-lens camera producing rays through the image plane."""

from __future__ import annotations

import math
import random

from raytracer.ray import Ray
from raytracer.vec3 import Point3, Vec3


def random_in_unit_disk(rng: random.Random) -> Vec3:
    """Return a uniformly chosen point strictly inside the unit disk in the z=0 plane."""
    while True:
        p = Vec3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), 0.0)
        if p.dot(p) < 1.0:
            return p


class Camera:
    """Positionable camera with depth of field."""

    def __init__(
        self,
        look_from: Point3,
        look_at: Point3,
        vup: Vec3,
        vertical_fov_degrees: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        theta = math.radians(vertical_fov_degrees)
        half_height = math.tan(theta / 2.0)
        half_width = aspect_ratio * half_height

        w = (look_from - look_at).unit_vector()
        u = vup.cross(w).unit_vector()
        v = w.cross(u)

        self.origin = look_from
        self.u = u
        self.v = v
        self.lower_left_corner = (
            look_from
            - half_width * focus_dist * u
            - half_height * focus_dist * v
            - focus_dist * w
        )
        self.horizontal = 2.0 * half_width * focus_dist * u
        self.vertical = 2.0 * half_height * focus_dist * v
        self.lens_radius = aperture * 0.5

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Return a ray through the image-plane point at fractions ``s``, ``t``."""
        rd = self.lens_radius * random_in_unit_disk(rng)
        offset = self.u * rd.x + self.v * rd.y
        return Ray(
            self.origin + offset,
            self.lower_left_corner
            + s * self.horizontal
            + t * self.vertical
            - self.origin
            - offset,
        )