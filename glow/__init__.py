"""A small 2D sprite renderer on OpenGL, with shader loading and a 2D vector type."""

__version__ = "0.1.0"
__all__ = ["vector", "vertexbuffers", "shader", "renderer"]