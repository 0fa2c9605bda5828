# glengine

A small OpenGL engine skeleton built on pyglet. It opens a 1024x768 window titled "Engine", centres it on the display, and clears every frame to yellow. The frame loop stops when Escape is pressed.

The package also has plain-Python helpers for 4x4 row-major matrices. They work without a display or pyglet.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the engine

```
glengine
```

This opens the window and runs the frame loop. Press Escape to stop it. The command takes no options apart from `--help`. It needs a display and an OpenGL 4 context. If either is missing, or no suitable visual format exists, it prints an error to standard error and exits with status 1.

## Matrix helpers

`glengine.matrix` builds and combines 4x4 matrices. A matrix is a flat tuple of 16 floats in row-major order. The helpers use the left-handed, row-vector convention, so the translation sits in elements 12, 13 and 14:

```python
from glengine import matrix

world = matrix.identity()
proj = matrix.perspective_fov(3.141592653589793 / 4, 1024 / 768, 0.3, 1000.0)
ortho = matrix.ortho(1024, 768, 0.3, 1000.0)

spin = matrix.multiply(matrix.rotation_y(0.5), matrix.translation(0.0, 0.0, 5.0))
for_shader = matrix.transpose(spin)
```

Available functions:

- `identity()`
- `perspective_fov(field_of_view, screen_aspect, screen_near, screen_depth)`
- `ortho(screen_width, screen_height, screen_near, screen_depth)`
- `rotation_x(angle)`, `rotation_y(angle)`, `rotation_z(angle)`, with angles in radians
- `translation(x, y, z)`
- `transpose(matrix)`
- `multiply(matrix1, matrix2)`

`transpose` and `multiply` raise `ValueError` if an argument does not have 16 elements.

## Building blocks

- `glengine.input.InputState` tracks key presses. Call `key_down(key_symbol)` and `key_up(key_symbol)` with X11 key symbols. `is_escape_pressed()` reports whether Escape (symbol 65307) is held. Every other key is ignored.
- `glengine.graphics.SceneMatrices.from_screen(screen_width, screen_height, screen_near, screen_depth)` returns the world (identity), perspective projection (field of view π/4) and orthographic matrices. It raises `ValueError` for a non-positive size, or when near equals depth.
- `glengine.graphics.Graphics` takes a surface, which must have `flip()` and `set_vsync(vsync)`, and an optional OpenGL function table. If no table is given it uses `pyglet.gl`. It provides:
  - `begin_scene` and `end_scene`
  - `turn_zbuffer_on` and `turn_zbuffer_off`
  - `enable_alpha_blending` and `disable_alpha_blending`
  - `set_back_buffer_render_target`
  - `reset_viewport`
  - `enable_clipping` and `disable_clipping`
  - `shutdown`

  Once it has been shut down, any drawing call raises `RuntimeError`.
- `glengine.application.Application.create(surface, screen_width, screen_height, gl=None)` sets up graphics with near plane 0.3, depth 1000 and vsync on. `frame(input_state)` returns `False` once Escape is held. Otherwise it renders, and `render()` clears to yellow and presents. `shutdown()` can be called more than once.
- `glengine.system.WindowSettings` holds the window's width, height, title, full-screen flag and vsync flag. `centered_position(display_width, display_height)` returns the top-left corner that centres the window.
- `glengine.system.System(settings=None, window_factory=None, gl=None)` creates the window and checks for OpenGL 4. If the check fails it raises `EngineError`. It then centres the window unless full screen is set, and starts the application. `run()` reads at most one key event per frame and processes frames until the application stops. `shutdown()` closes everything. `System` is also a context manager.

## What it does not do

The engine draws nothing except the clear colour. It has no shaders, no vertex buffers, no models and no camera. Closing the window through the window manager does not end the loop; only Escape does.