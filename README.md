# rasterlab

A small pure-Python 3D graphics toolkit. It needs only the standard library.

## Modules

- `rasterlab.geometry`: the immutable `Vector` type, with `+`, `-`, scalar
  `*`, `dot`, `cross`, `length`, `normalize` and `rotate`. It also has
  `Point`, `Line` and `Matrix`, plus `identity_matrix`.
  - `Line.intersection` returns the meeting point of two lines, or `None`
    when the lines are parallel.
  - `Matrix` multiplies with `@` and divides by a scalar.
- `rasterlab.transformations`: the 4x4 homogeneous matrices
  `translation_matrix`, `scaling_matrix`, `rotation_matrix`, `view_matrix` and
  `projection_matrix`. Angles are in degrees.
- `rasterlab.triangle`: the `Triangle` type.
  - A triangle holds its vertices as 4x1 column matrices.
  - `transform` divides each vertex by w after applying the matrix.
  - `sorted_by_y` orders the vertices from highest to lowest y.
  - `format` writes the vertices as `x y z` lines with seven decimals.
  - `ColorGenerator` is a seeded linear congruential generator for triangle
    colours.
  - `triangle_from_values` builds a triangle from nine numbers.
- `rasterlab.controls`: the `SpecialKey` and `MouseButton` enums, and
  `parse_special_key`.
- Scene logic with no window attached. Each scene keeps its state and reacts to
  key, special-key and mouse events given as strings or enums.
  - `orbits`: circle, cone and sphere point generators, and `OrbitScene`.
  - `ball`: a bouncing ball in a cube, with `Ball`, `FlyCamera`, `BallWorld`
    and `floor_tiles`.
  - `windmill`: `WindmillWorld`, `box_faces` and `blade_vertices`.
  - `clock`: analog clock geometry, with `hand_angles`, `hand_endpoint`,
    `hour_markers`, `minute_markers` and `ring_points`.
  - `dials`: `WaveTrace`, `SlidingWave`, `GearedDials` and
    `nested_dial_centers`.
  - `rig`: a windmill model with `RigCamera`, `WindmillRig` and
    `project_onto_plane`.
  - `swing`: a swing ride, with `Swing` and `OrbitCamera`.

## Installation

```
pip install .
```

## Examples

```python
from rasterlab.transformations import rotation_matrix, translation_matrix
from rasterlab.triangle import ColorGenerator, triangle_from_values

m = translation_matrix(1, 2, 3) @ rotation_matrix(0, 0, 1, 90)
tri = triangle_from_values([0, 0, 0, 1, 0, 0, 0, 1, 0])
tri.transform(m)
tri.assign_color(ColorGenerator())
print(tri.format())
```

```python
import random
from rasterlab.ball import BallWorld

world = BallWorld(rng=random.Random(1))
world.handle_key(" ")      # start the simulation
world.tick(0.02)           # advance physics by one frame
print(world.ball.position)
```

```python
from rasterlab.clock import hand_angles, hand_endpoint

angles = hand_angles(3, 30, 15, 500)
print(hand_endpoint(angles.minute, 30.0))
```

## What it does not do

The package has no command-line program. It does not read scene or
configuration files, and it does not rasterize triangles into an image or a
depth buffer.

The scenes compute state and geometry only. Nothing opens a window or draws.

## Tests

```
pip install .[test]
pytest
```