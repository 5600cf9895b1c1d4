# the_cube

A small 3D scene: a cube seen through a perspective camera. Button presses
rotate it, and a crank sets the spin speed. The package does its own 4x4
linear algebra. It sends drawing commands to a `Canvas` object, so you can
connect it to any display.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linear algebra

`the_cube.linalg` provides these types:

- `Vector3(x, y, z)` is a frozen dataclass and can be iterated.
  - `Vector3.zero()` returns the zero vector.
  - `v.cross(other)` returns the cross product.
  - `v.normalized()` returns a unit vector. A zero-length vector comes back unchanged.
- `Vector4(x, y, z, w)` is a frozen, iterable homogeneous vector. `Vector4.zero()` returns the zero vector.
- `Matrix4(values)` is a 4x4 matrix built from exactly 16 numbers in row-major order. Any other count raises `ValueError`.
  - `Matrix4.zero()` returns the zero matrix.
  - `a @ b` is the matrix product.
  - `m.transform(v)` multiplies the matrix by a `Vector4`. `m @ v` does the same.
- `add(a, b)` and `subtract(a, b)` work element by element on equal-length sequences and return tuples. Unequal lengths raise `ValueError`.

```python
from the_cube.linalg import Matrix4, Vector3, Vector4

identity = Matrix4((1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1))
moved = identity @ identity
image = moved.transform(Vector4(1.0, 2.0, 3.0, 1.0))

z_axis = Vector3(1.0, 0.0, 0.0).cross(Vector3(0.0, 1.0, 0.0)).normalized()
```

## The scene

`the_cube.scene` holds the camera and cube logic.

### Camera and rotation functions

- `camera_basis(eye, target, up)` returns the orthonormal camera axes `(w, u, v)`.
- `make_view_matrix(eye, target, up, width, height)` combines three transforms into one `Matrix4`:
  - viewport
  - perspective, with a 45° field of view, near −1 and far −1000
  - camera
- `rotation_matrices(spin)` maps each `Button` to its rotation by `spin` radians:
  - `UP` and `DOWN` rotate about X.
  - `RIGHT` and `LEFT` rotate about Y.
  - `A` and `B` rotate about Z.

  The mapping is ordered UP, DOWN, RIGHT, LEFT, A, B. This is the order in which pressed buttons are applied.

### Supporting types

- `Button` is an `IntFlag` with the members `LEFT`, `RIGHT`, `UP`, `DOWN`, `B` and `A`.
- `Color` is an enum with `BLACK` and `WHITE`.
- `Canvas` receives the drawing calls: `clear`, `draw_text`, `draw_line` and `fill_polygon`.
  - By default it records each call as a tuple in its `operations` list.
  - `clear` empties that list before it records itself.
  - To draw to a real output, subclass `Canvas` and override these methods.

### `CubeScene`

A `CubeScene` starts with these values:

| Setting | Start value |
| --- | --- |
| Cube | corners at ±1 |
| Camera position | `(0, 0.1, 10)` |
| Camera target | the origin |
| Screen size | 400×240 |
| Background | white |
| Lines | black |

Its methods:

- `project()` converts the corners to integer screen coordinates. The result is also stored in `projected`.
- `is_front_facing(square)` tests the winding order of a face on screen.
- `face_normals()` returns a unit normal for each face.
- `rotate(buttons)` applies the rotation of every pressed button, then projects the corners again.
- `turn_crank(change)` changes `spin` by 0.005 radians in the direction turned. `spin` is kept between 0.0174533 and 17.4527.
- `speed_label()` gives the speed in whole degrees, e.g. `"Rotation Speed:  2"`.
- `toggle_inverted()`, `toggle_fill()` and `toggle_backfaces()` each flip their display option and return its new state:
  - `toggle_inverted` swaps black and white.
  - `toggle_fill` draws faces solid.
  - `toggle_backfaces` also draws faces turned away from the camera.
- `draw_square(canvas, square, edges, color)` draws one face, either as edges or filled.
- `update(canvas, crank=0.0, buttons=Button(0))` draws one frame. It runs these steps in order:
  1. Clear the canvas.
  2. Write the speed label at (5, 220).
  3. Apply the crank.
  4. Rotate for the pressed buttons.
  5. Draw the visible faces. With fill on, it draws filled faces, then outlines them in the background colour.

```python
from the_cube.scene import Button, Canvas, CubeScene

scene = CubeScene()
canvas = Canvas()
scene.update(canvas, crank=1.0, buttons=Button.UP | Button.A)
for operation in canvas.operations:
    print(operation)
```

## What this package does not do

It has the following limits:

- It opens no window and reads no input device.
- It has no command-line program.
- It does not loop frames on its own.

Your own code must supply three things:

- a `Canvas` that draws to a real output
- the crank and button state for each frame
- a call to `CubeScene.update` once per frame

`face_normals` is computed on request only; drawing does not use it.