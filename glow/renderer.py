"""High-level 2D renderer drawing sprites through batched vertex buffers."""

from __future__ import annotations

import logging
from enum import Enum

from glow.vector import Vector2
from glow.vertexbuffers import ResourceId, VertexBufferManager

logger = logging.getLogger(__name__)


class Alignment(Enum):
    """Anchor of drawn text relative to its position."""

    LEFT = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 3
    CENTER = 4
    TOP_LEFT = 5
    TOP_RIGHT = 6
    BOTTOM_LEFT = 7
    BOTTOM_RIGHT = 8


def sprite_quad(position: Vector2) -> list[Vector2]:
    """Return the four corners of a unit quad centred on ``position``, counter-clockwise."""
    return [
        Vector2(-0.5, -0.5) + position,
        Vector2(0.5, -0.5) + position,
        Vector2(0.5, 0.5) + position,
        Vector2(-0.5, 0.5) + position,
    ]


class Renderer2D:
    """Draws sprites into the current OpenGL context."""

    def __init__(self) -> None:
        self._buffers: VertexBufferManager | None = None

    @property
    def initialized(self) -> bool:
        return self._buffers is not None

    def initialize(self) -> None:
        """Create the GPU buffers; needs a current OpenGL context."""
        buffers = VertexBufferManager()
        buffers.initialize()
        self._buffers = buffers

    def shutdown(self) -> None:
        """Release the renderer's buffers; drawing afterwards needs a new initialize."""
        self._buffers = None

    def draw_sprite(self, position: Vector2, texture_id: ResourceId) -> None:
        """Draw a unit quad at ``position``.

        Textures are not sampled yet; the quad is drawn in a single colour.
        """
        if self._buffers is None:
            raise RuntimeError("renderer is not initialized")
        logger.warning(
            "Sprite texturing is not supported yet; texture %s drawn as a plain quad.",
            texture_id,
        )
        mesh = sprite_quad(position)
        self._buffers.fill_sprite_buffer(mesh, mesh)
        self._buffers.draw_sprite_buffer()