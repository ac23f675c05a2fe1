# physimos

The state and arithmetic of a small physics world, in plain Python with no
dependencies. It keeps objects, transforms, a camera and input state, and steps
gravity and ground collisions. It draws nothing, so it runs headless and is easy
to test.

## Modules

- `physimos.vecmath`: the dataclasses `Vec3` (supports `+`, `-`, `*` by a
  scalar, unary `-` and `copy()`) and `EulerAnglesRad`. The helpers
  `add_v3`, `sub_v3`, `cross_v3` and `div_v3` take any two 3-sequences and
  return a tuple. `dot_v3` returns a float. `are_equal_v3` compares exactly.
  `format_v3` renders a vector as labelled text.
- `physimos.logger`: `Logger(directory="logs")` has one file per `LogType`,
  `models.log` and `textures.log`. `init()` creates the directory and empties
  the files. `log(log_type, message)` appends a line. `path_for(log_type)`
  returns the file path.
- `physimos.timing`: `FrameClock` is a 60 FPS frame clock. `new_frame()` counts
  frames, updates `fps` once per wall-clock second and advances `world_time`.
  It also advances `world_epoch` unless the clock is paused. The other methods
  are `pause()`, `resume()`, `reset_world_epoch()` and
  `wait_for_next_frame()`, which sleeps for what is left of the frame budget.
  You can inject the clock, wall clock and sleep functions.
- `physimos.shapes`: the constants `TRIANGLE_POINTS`, `SIMULATOR_POINTS` (a
  wire cube given as line pairs) and `RIGID_CUBE_VERTICES`. `iter_vertices`
  groups flat coordinates into triples. `RigidBody` holds collision vertices
  and has `iter_vertices()` and `from_vertices()`.
- `physimos.camera`: `Camera(width, height)` holds Euler angles, a position, a
  row-major `view_matrix` and a `perspective_matrix`. Its methods are
  `set_perspective`, `set_euler_angles`, `rotate`, `set_position`, `translate`,
  `update_view_matrix` and `apply_input(input_state)`. The last one walks with
  W/A/S/D, turns with the arrow keys, drags with the middle mouse button and
  then rebuilds the view. `multiply_matrices` multiplies two row-major 4x4
  matrices.
- `physimos.input`: `InputState` records events through `on_key(key, action)`,
  `on_mouse_button(button, action, x, y)` and `on_cursor(x, y)`. Key,
  button and action codes are given by `Key`, `MouseButton` and `Action`.
  `on_mouse_button` returns `True` for a left-button press.
- `physimos.wireframe`: the enums `ModelFileType` and `VertexStructure` (each
  layout has a `stride`). `generate_wireframe(vertices, vertex_count,
  structure)` turns triangle data into a `Wireframe` line list and stores each
  shared edge once. `pairs_equivalent` tests two edges for equality in either
  direction.
- `physimos.world`: `Transform` (with `rotate` and `translate`) and
  `BoundingBox`. `model_matrix(transform, parent_transform=None)` builds the
  model matrix and `format_matrix` renders one as text. `ShaderKind` and
  `shader_for_structure` choose a shader for a vertex layout.
  `WorldObject(name, model_file_type, vertex_structure)` has these methods:
  - `update()` recomputes the matrices of the object and its children.
  - `add_child()` attaches a child and refuses to make a cycle.
  - `toggle_wireframe()` switches between the wireframe shader and the model's
    own shader.
  - `walk()` yields the object and everything below it.
- `physimos.simulation`: `position_at(transform, t)` is the closed-form
  projectile, with gravity along y. `step_bounce(transform, dt)` is one
  fixed step under gravity along z, with a damped bounce off z = 0.
  `BounceSimulation(body).update(input_state)` begins a 300-step run when
  `input_state.start_sim_click` is set. When the run ends, the body goes back
  to its start position.
- `physimos.scene`: `WorldScene(ground)` starts out holding the ground and has
  a `camera`, an `input_state`, a `clock` and an optional `simulation`.
  `add()` adds an object. `reset_objects()` restores the rigid bodies.
  `physics_step()` applies gravity, rigid-body ground bounce, named spins and
  horizontal velocity. `update()` runs one whole frame. The module also has
  `transform_point(point, matrix)` and `colliding_with_ground(ground, obj)`.

## Example

```python
from physimos.vecmath import Vec3, cross_v3
from physimos.camera import Camera
from physimos.input import InputState, Key, Action

print(cross_v3(Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0)))   # (-3.0, 6.0, -3.0)

camera = Camera(1400, 800)
state = InputState()
state.on_key(Key.W, Action.PRESS)
camera.apply_input(state)        # steps forward and rebuilds the view matrix
```

## What it does not do

- It opens no window and does no rendering: no shaders, no textures, no GPU
  buffers.
- It does not load model files. Vertex data and vertex layouts are passed in
  by the caller.
- It has no command-line program and no user interface. Your own code has to
  feed window events to `InputState` and call `WorldScene.update()` each frame.

## Tests

```
pip install -e .[test]
pytest
```