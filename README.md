# lumina

A small ray tracer in pure Python with no third-party dependencies. It
traces scenes of spheres, triangles and quadrilaterals lit by point lights
and writes the result as an 8-bit RGB PNG image.

Features:

- shading with ambient, Lambert and specular terms from the world's first
  light source, using jittered shadow rays toward that light;
- motion blur: each pixel is averaged, with increasing weights, over frames
  in which every shape steps along its movement vector;
- stratified supersampling on a 4x4 grid where a pixel's colour differs
  from its neighbours (edge antialiasing);
- a depth-of-field sampler (`RenderEngine.dof`) that averages rays from a
  jittered lens aperture.

## Installation

```
pip install .
```

## Command line

```
lumina
```

renders the built-in scene (two triangles under one point light) and writes
it to `motionblurz.png`. Options:

- `--width`, `--height`: image size in pixels (default 1920 x 1080);
- `--output`: PNG file to write;
- `--seed`: seed for the random sampling, to make a render repeatable.

Rendering is done in pure Python and is slow at the default size; a smaller
image such as `lumina --width 320 --height 180` finishes much sooner.

## Library use

```python
from lumina.vector3d import Vector3D
from lumina.color import Color
from lumina.camera import Camera
from lumina.world import World
from lumina.material import Material
from lumina.shapes import Sphere
from lumina.lights import PointLightSource
from lumina.renderengine import RenderEngine
from lumina.cli import write_png

camera = Camera(Vector3D(0, 0, 10), Vector3D(0, 0, 0), Vector3D(0, 1, 0), 45, 160, 90)

world = World()
world.ambient = Color.gray(1)
world.background = Color(1, 1, 1)

red = Material(world, color=Color(0.9, 0.0, 0.0), ka=0.1, kd=0.6, ks=0.3, n=8)

world.add_object(Sphere(Vector3D(0, 0, -10), 3, red, Vector3D(0.5, 0, 0)))
world.add_light(PointLightSource(world, Vector3D(0, 10, 0), Color(1, 1, 1)))

engine = RenderEngine(world, camera)
engine.render()
write_png("scene.png", camera.width, camera.height, camera.bitmap)
```

The modules:

- `lumina.vector3d`: the immutable `Vector3D` and `unit_vector`,
  `cross_product`, `dot_product`, `triple_product`.
- `lumina.color`: the immutable `Color`, with `gray`, `clamped`, `distance`
  and arithmetic operators.
- `lumina.ray`: `Ray`, which keeps its nearest hit via `set_parameter`.
- `lumina.camera`: `Camera`, which gives primary ray directions with
  `ray_direction(i, j)` and stores pixels in its `bitmap` with `draw_pixel`.
- `lumina.lights`: `LightSource` and `PointLightSource`.
- `lumina.material`: `Material`, holding the colour and shading
  coefficients and an `rng` used for the shadow-ray jitter.
- `lumina.shapes`: `Shape`, `Sphere`, `Triangle` and `Quad`, each with
  `intersect`, `normal`, `move` and `reset_position`.
- `lumina.world`: `World`, holding shapes, lights, ambient and background
  colours.
- `lumina.renderengine`: `RenderEngine`. `render_loop()` traces one column
  of pixels per call and returns `True` once the last column is done;
  `render()` runs it until the image is complete and returns the camera's
  bitmap. Motion blur can be turned off with `motion_blur=False`, and a
  `random.Random` can be passed as `rng`.
- `lumina.cli`: `build_scene(width, height)` builds the scene used by the
  command and returns its `RenderEngine` (the camera is `engine.camera`,
  the world `engine.world`); `write_png(path, width, height, pixels)` writes
  RGB bytes as a PNG file; `main()` is the command.

## What it does not do

There is no interactive window or live preview: images are only written to
PNG files. Materials carry reflection, refraction and refractive-index
coefficients (`kr`, `kt`, `eta`), but shading does not trace reflected or
refracted rays, and only the first light in a world is used.

## Tests

```
pip install .[test]
pytest
```