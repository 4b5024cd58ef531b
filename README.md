# glow

A small 2D sprite renderer on OpenGL, using pyglet for its OpenGL bindings. It
comes with a plain two-dimensional vector type.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vectors

`glow.vector.Vector2` is a mutable 2D vector of floats. `Vector2()` is the zero
vector. `Vector2(s)` sets both components to `s`. `Vector2(x, y)` sets each
component on its own.

```python
from glow.vector import Vector2

a = Vector2(3.0, 4.0)
b = Vector2(1.0, 2.0)

a.length()        # 5.0
b.sqr_length()    # 5.0
a + b             # Vector2(4.0, 6.0)
a - b             # Vector2(2.0, 2.0)
a * b             # 11.0, the dot product (same as a.dot(b))
a * 2.0           # Vector2(6.0, 8.0)
b / 2.0           # Vector2(0.5, 1.0)
5.0 + b           # Vector2(6.0, 7.0)
5.0 - b           # Vector2(4.0, 3.0)
5.0 * b           # Vector2(5.0, 10.0)
-a                # Vector2(-3.0, -4.0)
a.normalized()    # unit-length copy of a

a.add(b)          # in place, with a vector or a scalar
a.sub(1.0)        # in place, with a vector or a scalar
a.mul(2.0)        # in place
a.div(2.0)        # in place
a.normalize()     # in place

x, y = b          # vectors unpack into their components
```

Dividing by zero, with `/` or with `div`, raises `ZeroDivisionError`. Vectors
compare equal when both components are equal. They are mutable and so are not
hashable.

`str(v)` gives a form such as `( 3.000000 , 4.000000 )`.

The class methods `Vector2.zero()`, `one()`, `up()`, `down()`, `right()` and
`left()` return the usual unit and constant vectors.

## Rendering

Rendering needs a current OpenGL context with vertex array objects. A pyglet
window provides one.

```python
import pyglet
from pyglet import gl

from glow.renderer import Renderer2D
from glow.shader import load_shaders
from glow.vector import Vector2

window = pyglet.window.Window(1280, 720, "Render Window")

renderer = Renderer2D()
renderer.initialize()
program = load_shaders("vertexshader.glsl", "fragmentshader.glsl")

@window.event
def on_draw():
    window.clear()
    gl.glUseProgram(program)
    renderer.draw_sprite(Vector2(-0.5, -0.5), 0)
    renderer.draw_sprite(Vector2(0.5, 0.5), 0)

pyglet.app.run()
```

### `glow.renderer`

`Renderer2D.initialize()` creates the GPU buffers. `Renderer2D.shutdown()`
drops them. `Renderer2D.initialized` tells whether the renderer is ready.

`Renderer2D.draw_sprite(position, texture_id)` uploads a single unit quad
centred on `position` and draws it at once. The texture is not sampled. On
each call a warning is logged and the quad is drawn with whatever the bound
shader program produces. Drawing before `initialize()`, or after `shutdown()`,
raises `RuntimeError`.

`sprite_quad(position)` returns the four corners of that quad,
counter-clockwise from the bottom left.

`Alignment` is an enum of text anchors: `LEFT`, `TOP`, `RIGHT`, `BOTTOM`,
`CENTER`, `TOP_LEFT`, `TOP_RIGHT`, `BOTTOM_LEFT`, `BOTTOM_RIGHT`.

### `glow.vertexbuffers`

`VertexBufferManager` owns one vertex array, one vertex buffer and one element
buffer for sprite quads. Each buffer is sized for `MAX_QUADS` (16384) quads.

- `initialize()` creates the buffers. It needs a current OpenGL context.
- `fill_sprite_buffer(vertices, uvs)` uploads quads, four vertices per quad.
  More than `MAX_VERTICES` vertices raises `ValueError`. Calling it before
  `initialize()` raises `RuntimeError`.
- `draw_sprite_buffer()` draws the quads that were last uploaded.

Two pure helpers build the buffer contents:

- `interleave_vertices(vertices, uvs)` returns `[x, y, u, v, ...]`. Extra
  texture coordinates are ignored and a warning is logged. Too few texture
  coordinates raise `ValueError`.
- `quad_indices(quad_count)` returns the indices that draw each quad as two
  triangles, `0, 1, 2, 0, 2, 3`, then the same offset by 4 for each further
  quad. A negative count raises `ValueError`.

### `glow.shader`

`read_shader_source(path, kind)` returns the text of a shader file. It raises
`ShaderError` when the file cannot be opened.

`load_shaders(vertex_file_path, fragment_file_path)` reads the two files,
compiles a vertex and a fragment shader, links them, and returns the OpenGL
program id. The linked program is kept alive inside the module. It raises
`ShaderError` when a file cannot be read, when a shader fails to compile or
when linking fails.

Progress and warnings are reported through the standard `logging` module,
under the `glow.*` logger names.

## What the package does not do

- No textures: `draw_sprite` ignores its texture id and draws a plain quad.
- No batching across calls: each `draw_sprite` uploads and draws one quad.
- No lines, text, circles, triangles, rectangles or ellipses. No camera,
  layers or screen clearing. Use pyglet's window, for example
  `window.clear()`, for those.
- No window or event loop of its own. The caller provides the OpenGL context.
- No command-line program.