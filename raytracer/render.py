"""Scene construction, per-pixel shading and the command-line renderer."""

from __future__ import annotations

import argparse
import math
import random
import time
from pathlib import Path
from typing import Iterator, Optional, Sequence

from PIL import Image

from raytracer.camera import Camera
from raytracer.hittable import Hittable, HittableList, Sphere
from raytracer.material import Dielectric, Lambertian, Metal
from raytracer.ray import Ray
from raytracer.vec3 import Color, Point3, Vec3

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
BLUE = Color(0.5, 0.7, 1.0)

MAX_DEPTH = 50
T_MIN = 0.001

Pixel = tuple[int, int, int, int]


def clamp_u8(x: float) -> int:
    """Map a colour channel in [0, 1) to a byte, clamping out-of-range values."""
    x = min(max(x, 0.0), 0.999)
    return int(255.99 * x)


def ray_color(ray: Ray, world: Hittable, depth: int, rng: random.Random) -> Color:
    """Return the colour seen along ``ray``, following at most ``MAX_DEPTH`` bounces."""
    if depth >= MAX_DEPTH:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is not None:
        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK
        attenuation, next_ray = scattered
        return attenuation * ray_color(next_ray, world, depth + 1, rng)

    unit_dir = ray.direction.unit_vector()
    t = 0.5 * (unit_dir.y + 1.0)
    return (1.0 - t) * WHITE + t * BLUE


def random_scene(rng: random.Random) -> HittableList:
    """Build the classic field of small random spheres around three large ones."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))

    keep_clear = Point3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - keep_clear).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vec3(
                    rng.random() * rng.random(),
                    rng.random() * rng.random(),
                    rng.random() * rng.random(),
                )
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vec3(
                    0.5 * (1.0 + rng.random()),
                    0.5 * (1.0 + rng.random()),
                    0.5 * (1.0 + rng.random()),
                )
                material = Metal(albedo, 0.1)
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return world


def _shade_pixel(
    i: int,
    j: int,
    world: Hittable,
    camera: Camera,
    width: int,
    height: int,
    samples: int,
    rng: random.Random,
) -> Pixel:
    total = Color()
    for _ in range(samples):
        u = (i + rng.random()) / width
        v = (j + rng.random()) / height
        total = total + ray_color(camera.get_ray(u, v, rng), world, 0, rng)
    col = total / samples
    return (
        clamp_u8(math.sqrt(col.r)),
        clamp_u8(math.sqrt(col.g)),
        clamp_u8(math.sqrt(col.b)),
        255,
    )


def _scanlines(
    world: Hittable,
    camera: Camera,
    width: int,
    height: int,
    samples: int,
    rng: random.Random,
) -> Iterator[tuple[int, list[Pixel]]]:
    """Yield (image row, pixels) from the bottom of the image upwards."""
    for j in range(height):
        pixels = [
            _shade_pixel(i, j, world, camera, width, height, samples, rng)
            for i in range(width)
        ]
        yield height - 1 - j, pixels


def render(
    world: Hittable,
    camera: Camera,
    width: int,
    height: int,
    samples: int,
    rng: random.Random,
) -> Image.Image:
    """Render ``world`` through ``camera`` into an RGBA image, reporting each scanline."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if samples <= 0:
        raise ValueError("samples per pixel must be positive")

    image = Image.new("RGBA", (width, height))
    for done, (row, pixels) in enumerate(
        _scanlines(world, camera, width, height, samples, rng), start=1
    ):
        for i, px in enumerate(pixels):
            image.putpixel((i, row), px)
        print(f"Scanline {height - done + 1} of {height}")
    return image


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a random sphere scene to PNG.")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    parser.add_argument("--samples", type=int, default=10)
    parser.add_argument("--output", type=Path, default=None)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    world = random_scene(rng)
    camera = Camera(
        look_from=Point3(13.0, 2.0, 3.0),
        look_at=Point3(0.0, 0.0, 0.0),
        vup=Vec3(0.0, 1.0, 0.0),
        vertical_fov_degrees=20.0,
        aspect_ratio=args.width / args.height,
        aperture=0.1,
        focus_dist=10.0,
    )

    start = time.perf_counter()
    image = render(world, camera, args.width, args.height, args.samples, rng)
    elapsed = time.perf_counter() - start
    print(f"Render finished in {elapsed / 60.0:.2f} minutes")

    out_path = args.output if args.output is not None else Path.cwd() / "output.png"
    image.save(out_path)
    print(f"Image saved to: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())