"""Sprite vertex and index buffers kept on the GPU."""

from __future__ import annotations

import logging
from typing import Sequence

from glow.vector import Vector2

ResourceId = int

MAX_QUADS = 16384
MAX_VERTICES = 4 * MAX_QUADS
MAX_INDICES = 6 * MAX_QUADS

_FLOAT_SIZE = 4
_UINT_SIZE = 4
_FLOATS_PER_VERTEX = 4  # x, y, u, v

logger = logging.getLogger(__name__)


def interleave_vertices(vertices: Sequence[Vector2], uvs: Sequence[Vector2]) -> list[float]:
    """Return ``[x, y, u, v, ...]`` for each vertex paired with its texture coordinate.

    Extra texture coordinates are ignored with a warning; too few raise ``ValueError``.
    """
    if len(vertices) != len(uvs):
        logger.warning(
            "Vertex list and uv list have different sizes; using the vertex list as base."
        )
        if len(uvs) < len(vertices):
            raise ValueError(
                f"{len(vertices)} vertices but only {len(uvs)} texture coordinates"
            )
    buffer: list[float] = []
    for vertex, uv in zip(vertices, uvs):
        buffer.extend((vertex.x, vertex.y, uv.x, uv.y))
    return buffer


def quad_indices(quad_count: int) -> list[int]:
    """Return element indices drawing ``quad_count`` quads as two triangles each."""
    if quad_count < 0:
        raise ValueError("quad count must not be negative")
    indices: list[int] = []
    for base in range(0, quad_count * 4, 4):
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    return indices


class VertexBufferManager:
    """Owns the vertex array, vertex buffer and element buffer for sprite quads."""

    def __init__(self) -> None:
        self.sprite_vao_id: ResourceId | None = None
        self.sprite_vbo_id: ResourceId | None = None
        self.sprite_ebo_id: ResourceId | None = None
        self.sprite_quad_count = 0

    @property
    def initialized(self) -> bool:
        return self.sprite_vao_id is not None

    def initialize(self) -> None:
        """Create the sprite buffers; needs a current OpenGL context."""
        from pyglet import gl

        vao = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao)

        vbo, ebo = self._create_buffers(gl)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo)

        stride = _FLOATS_PER_VERTEX * _FLOAT_SIZE
        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glVertexAttribPointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 2 * _FLOAT_SIZE)
        gl.glEnableVertexAttribArray(0)
        gl.glEnableVertexAttribArray(1)

        gl.glBindVertexArray(0)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

        self.sprite_vao_id = vao.value
        self.sprite_vbo_id = vbo
        self.sprite_ebo_id = ebo

    @staticmethod
    def _create_buffers(gl) -> tuple[ResourceId, ResourceId]:
        vbo = gl.GLuint()
        ebo = gl.GLuint()
        gl.glGenBuffers(1, vbo)
        gl.glGenBuffers(1, ebo)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER,
            MAX_VERTICES * _FLOATS_PER_VERTEX * _FLOAT_SIZE,
            None,
            gl.GL_DYNAMIC_DRAW,
        )
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, MAX_INDICES * _UINT_SIZE, None, gl.GL_DYNAMIC_DRAW
        )

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)
        return vbo.value, ebo.value

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise RuntimeError("vertex buffer manager is not initialized")

    def fill_sprite_buffer(self, vertices: Sequence[Vector2], uvs: Sequence[Vector2]) -> None:
        """Upload sprite quads, four vertices per quad, to the GPU."""
        if len(vertices) > MAX_VERTICES:
            raise ValueError(
                f"{len(vertices)} vertices exceed the batch limit of {MAX_VERTICES}"
            )
        buffer = interleave_vertices(vertices, uvs)
        quad_count = len(vertices) // 4
        indices = quad_indices(quad_count)
        self._require_initialized()

        from pyglet import gl

        vertex_data = (gl.GLfloat * len(buffer))(*buffer)
        index_data = (gl.GLuint * len(indices))(*indices)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.sprite_vbo_id)
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, len(buffer) * _FLOAT_SIZE, vertex_data)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.sprite_ebo_id)
        gl.glBufferSubData(
            gl.GL_ELEMENT_ARRAY_BUFFER, 0, len(indices) * _UINT_SIZE, index_data
        )
        self.sprite_quad_count = quad_count

    def draw_sprite_buffer(self) -> None:
        """Draw the quads last uploaded with :meth:`fill_sprite_buffer`."""
        self._require_initialized()
        from pyglet import gl

        gl.glBindVertexArray(self.sprite_vao_id)
        gl.glDrawElements(gl.GL_TRIANGLES, self.sprite_quad_count * 6, gl.GL_UNSIGNED_INT, 0)