[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glow"
version = "0.1.0"
description = "A small 2D sprite renderer on OpenGL with a plain 2D vector type"
requires-python = ">=3.10"
keywords = ["opengl", "2d", "renderer", "sprite", "vector", "shader", "graphics"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
