"""Loading, compiling and linking GLSL shader programs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Linked programs are kept here so their OpenGL objects stay alive while
# callers hold on to the plain program id.
_programs: Dict[int, object] = {}


class ShaderError(Exception):
    """Raised when a shader cannot be read, compiled or linked."""


def read_shader_source(path: PathLike, kind: str) -> str:
    """Return the text of the ``kind`` shader stored at ``path``.

    Raises :class:`ShaderError` when the file cannot be opened.
    """
    absolute = Path(path).absolute()
    try:
        return absolute.read_text()
    except OSError as exc:
        raise ShaderError(
            f"Can not open {kind} shader path: {absolute}. Are you in the right directory?"
        ) from exc


def load_shaders(vertex_file_path: PathLike, fragment_file_path: PathLike) -> int:
    """Compile a vertex and a fragment shader from files and link them into a program.

    Returns the OpenGL program id; needs a current OpenGL context.
    """
    vertex_path = Path(vertex_file_path).absolute()
    fragment_path = Path(fragment_file_path).absolute()
    vertex_code = read_shader_source(vertex_path, "vertex")
    fragment_code = read_shader_source(fragment_path, "fragment")

    from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram

    logger.info("Compiling vertex shader: %s", vertex_path)
    try:
        vertex_shader = Shader(vertex_code, "vertex")
    except ShaderException as exc:
        raise ShaderError(f"Error compiling vertex shader: {vertex_path}:\n{exc}") from exc

    logger.info("Compiling fragment shader: %s", fragment_path)
    try:
        fragment_shader = Shader(fragment_code, "fragment")
    except ShaderException as exc:
        raise ShaderError(
            f"Error compiling fragment shader: {fragment_path}:\n{exc}"
        ) from exc

    logger.info("Linking shader program.")
    try:
        program = ShaderProgram(vertex_shader, fragment_shader)
    except ShaderException as exc:
        raise ShaderError(f"Error linking program:\n{exc}") from exc

    _programs[program.id] = program
    return program.id