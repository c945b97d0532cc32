# raytracer

A compact path tracer built from spheres, three materials and a thin-lens
camera. It renders a scene of randomly placed small spheres around three large
ones (glass, diffuse and metal) and writes the result to a PNG file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering from the command line

```
raytracer
```

This builds a random scene, renders it one scanline at a time from the bottom
of the image upwards, printing `Scanline N of H` as each row finishes, then
prints the total render time in minutes and saves `output.png` in the current
directory.

Options:

- `--width` (default 1920) and `--height` (default 1080): image size in pixels.
- `--samples` (default 10): rays averaged per pixel.
- `--output PATH`: where to write the PNG instead of `./output.png`.
- `--seed N`: seed for the random number generator; the same seed gives the
  same scene and the same image.

For a quick preview:

```
raytracer --width 320 --height 180 --samples 4 --seed 7 --output preview.png
```

Rendering runs in a single process, so full-size images take a long time.

## Using the library

```python
import random

from raytracer.camera import Camera
from raytracer.render import random_scene, render
from raytracer.vec3 import Vec3

rng = random.Random(7)
world = random_scene(rng)

width, height = 320, 180
camera = Camera(
    Vec3(13.0, 2.0, 3.0),   # look from
    Vec3(0.0, 0.0, 0.0),    # look at
    Vec3(0.0, 1.0, 0.0),    # up
    20.0,                   # vertical field of view, degrees
    width / height,         # aspect ratio
    0.1,                    # aperture
    10.0,                   # focus distance
)

image = render(world, camera, width, height, 4, rng)
image.save("preview.png")
```

`render` returns a Pillow RGBA image and raises `ValueError` if the width,
height or sample count is not positive.

### Building blocks

- `raytracer.vec3.Vec3`: an immutable 3-vector (also available as `Point3` and
  `Color`) that supports `+`, `-`, unary `-`, component-wise `*`, scalar `*`
  and `/`, iteration, the colour aliases `r`, `g`, `b`, and the methods
  `length()`, `length_squared()`, `unit_vector()`, `dot()` and `cross()`.
- `raytracer.ray.Ray`: an `origin` and a `direction`, with `at(t)`.
- `raytracer.hittable`: the abstract `Hittable`, `Sphere`, and
  `HittableList`, which reports the closest hit (a `HitRecord` with `t`,
  `point`, `normal` and `material`) strictly between `t_min` and `t_max`.
- `raytracer.material`: the abstract `Material` and the `Lambertian`, `Metal`
  (fuzz clamped to `[0, 1]`) and `Dielectric` materials, whose `scatter`
  returns `(attenuation, ray)` or `None` when the ray is absorbed, plus the
  helpers `reflect`, `refract`, `schlick` and `random_in_unit_sphere`.
- `raytracer.camera`: `Camera`, a positionable camera with depth of field whose
  `get_ray(s, t, rng)` maps normalised screen coordinates to a ray, and
  `random_in_unit_disk`.
- `raytracer.render`: `ray_color` (up to 50 bounces, sky gradient on a miss),
  `clamp_u8`, `random_scene`, `render` and the `main` entry point.

Each function that uses randomness takes a `random.Random` instance, so a fixed
seed gives the same result every time.